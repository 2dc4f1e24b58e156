"""
ColorCET colormap catalog.

Built once from a mapping of raw tables (``{"CET-C3": "r,g,b\\n..."}``) and
read-only afterwards. Besides the decoded tables the catalog carries one
synthesized entry, Cyclic 3 rotated by 50%, which has no ColorCET code and is
therefore only reachable through :meth:`Catalog.find_by_name`.
"""

from __future__ import annotations
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Iterator, Optional, Union

import numpy as np

from .identifier import (
    ColorCETIdentifier,
    ColorCETType,
    RotatedIdentifier,
    decode,
    encode_display_name,
)

logger = logging.getLogger(__name__)

# Base table of the derived half-turn rotation
HALF_SHIFT_BASE = ColorCETIdentifier(ColorCETType.CYCLIC, 3)
HALF_SHIFT = RotatedIdentifier(HALF_SHIFT_BASE, 50)

# One channel: 1-3 ASCII digits, optional blanks around
_CHANNEL_RE = re.compile(r"[ \t]*[0-9]{1,3}[ \t]*")


class CatalogError(ValueError):
    """Raised when the raw tables cannot form a complete catalog."""


@dataclass(frozen=True, eq=False)
class ColorCETMap:
    """One colormap: identifier, ramp colors (n, 3) float in [0, 1]."""

    id: Union[ColorCETIdentifier, RotatedIdentifier]
    colors: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "colors", _frozen(self.colors))

    @property
    def display_name(self) -> str:
        return encode_display_name(self.id)

    def __len__(self) -> int:
        return len(self.colors)

    def __repr__(self) -> str:
        return f"ColorCETMap({self.display_name!r}, {len(self.colors)} colors)"

# ---------------------------------------------------------------------
# Raw table parsing
# ---------------------------------------------------------------------

def code_from_key(key: str) -> str:
    """``"lib/colorcet-maps/CET-CBL1.csv"`` -> ``"CBL1"``."""
    name = re.split(r"[\\/]", key)[-1]
    if "." in name:
        name = name.rsplit(".", 1)[0]
    return name.rsplit("-", 1)[-1]


def parse_table(text: str, key: str = "<table>") -> np.ndarray:
    """Parse ``R,G,B`` lines (0..255) to a float array scaled to [0, 1]."""
    rows = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        parts = line.split(",")
        if len(parts) != 3:
            raise CatalogError(f"{key}:{lineno}: malformed row {line!r} (expected 3 channels, got {len(parts)})")
        if not all(_CHANNEL_RE.fullmatch(p) for p in parts):
            raise CatalogError(f"{key}:{lineno}: malformed row {line!r} (channels must be plain integers)")
        row = [int(p) for p in parts]
        if not all(0 <= c <= 255 for c in row):
            raise CatalogError(f"{key}:{lineno}: channel out of range 0..255 in {line!r}")
        rows.append(row)

    if not rows:
        raise CatalogError(f"{key}: table has no color rows")
    return np.asarray(rows, dtype=np.float64) / 255.0


def rotate_half(colors: np.ndarray) -> np.ndarray:
    """Second half of the rows followed by the first (split at n // 2)."""
    half = len(colors) // 2
    return np.concatenate([colors[half:], colors[:half]])


def _frozen(arr) -> np.ndarray:
    arr = np.array(arr, dtype=np.float64)
    arr.flags.writeable = False
    return arr

# ---------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------

class Catalog(Sequence):
    """Immutable, display-name-sorted sequence of :class:`ColorCETMap`."""

    def __init__(self, maps):
        self._maps = tuple(sorted(maps, key=lambda m: m.display_name))
        self._by_id = {}
        for m in self._maps:
            if not isinstance(m.id, ColorCETIdentifier):
                continue
            if m.id in self._by_id:
                raise CatalogError(f"Duplicate colormap for {m.display_name}")
            self._by_id[m.id] = m

    @classmethod
    def build(cls, raw_tables: Mapping[str, str]) -> "Catalog":
        maps = []
        for key, text in raw_tables.items():
            ident = decode(code_from_key(key))
            colors = parse_table(text, key)
            logger.debug("Loaded %s as %s (%d colors)", key, encode_display_name(ident), len(colors))
            maps.append(ColorCETMap(ident, colors))

        base = next((m for m in maps if m.id == HALF_SHIFT_BASE), None)
        if base is None:
            raise CatalogError(
                f"Base table for the 50% shift ({encode_display_name(HALF_SHIFT_BASE)}) is missing"
            )
        maps.append(ColorCETMap(HALF_SHIFT, rotate_half(base.colors)))

        catalog = cls(maps)
        logger.info("Built ColorCET catalog with %d colormaps", len(catalog))
        return catalog

    def __getitem__(self, index):
        return self._maps[index]

    def __len__(self) -> int:
        return len(self._maps)

    def __iter__(self) -> Iterator[ColorCETMap]:
        return iter(self._maps)

    def find(self, identifier: ColorCETIdentifier) -> Optional[ColorCETMap]:
        """Exact (type, id, variant) match; never returns the 50% shift."""
        return self._by_id.get(identifier)

    def find_by_name(self, display_name: str) -> Optional[ColorCETMap]:
        for m in self._maps:
            if m.display_name == display_name:
                return m
        return None

    def display_names(self) -> list[str]:
        return [m.display_name for m in self._maps]


def build(raw_tables: Mapping[str, str]) -> Catalog:
    """Build the catalog; any bad table aborts the whole build."""
    return Catalog.build(raw_tables)
