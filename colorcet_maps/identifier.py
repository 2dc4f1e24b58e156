"""
ColorCET identifiers: compact codes such as ``C3``, ``CBD1`` or ``D01A``.

Grammar::

    [CB] <C|D|I|L|R> <digits> [s|A]

The leading ``CB`` marker selects the colorblind-safe variant and wins over a
trailing suffix; ``s`` is the 25% shifted ramp and ``A`` the high-contrast one.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class InvalidIdentifier(ValueError):
    """Raised when a string is not a ColorCET code."""


class ColorCETType(Enum):
    CYCLIC = "cyclic"
    DIVERGING = "diverging"
    ISOLUMINANT = "isoluminant"
    LINEAR = "linear"
    RAINBOW = "rainbow"


class Variant(Enum):
    CB = "CB"
    SHIFTED = "s"
    HIGH_CONTRAST = "A"


@dataclass(frozen=True)
class ColorCETIdentifier:
    type: ColorCETType
    id: int
    variant: Optional[Variant] = None


@dataclass(frozen=True)
class RotatedIdentifier:
    """A ramp rotated by ``rotation`` percent; no ColorCET code exists for it."""

    base: ColorCETIdentifier
    rotation: int

# ---------------------------------------------------------------------
# Grammar tables
# ---------------------------------------------------------------------

_TYPE_LETTERS = {
    "C": ColorCETType.CYCLIC,
    "D": ColorCETType.DIVERGING,
    "I": ColorCETType.ISOLUMINANT,
    "L": ColorCETType.LINEAR,
    "R": ColorCETType.RAINBOW,
}
_LETTER_OF_TYPE = {t: letter for letter, t in _TYPE_LETTERS.items()}

_CODE_RE = re.compile(r"(?P<cb>CB)?(?P<type>[CDILR])(?P<num>[0-9]+)(?P<suffix>[sA])?")

# Variant precedence, highest first: (regex group, matched text, variant)
_VARIANT_RULES = (
    ("cb", "CB", Variant.CB),
    ("suffix", "s", Variant.SHIFTED),
    ("suffix", "A", Variant.HIGH_CONTRAST),
)

# Display decoration per variant: (prefix, suffix)
_DISPLAY_AFFIXES = {
    None: ("", ""),
    Variant.CB: ("Colorblind ", ""),
    Variant.SHIFTED: ("", " (shift 25%)"),
    Variant.HIGH_CONTRAST: ("", " (high contrast)"),
}

# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------

def decode(code: str) -> ColorCETIdentifier:
    """Parse a compact code (``"CBL1"``, ``"C3s"``) into an identifier."""
    if not isinstance(code, str):
        raise InvalidIdentifier(f"ColorCET code must be a string, got {type(code).__name__}")
    m = _CODE_RE.fullmatch(code)
    if m is None:
        raise InvalidIdentifier(f"Invalid ColorCET code '{code}'")

    variant = None
    for group, text, candidate in _VARIANT_RULES:
        if m.group(group) == text:
            variant = candidate
            break

    return ColorCETIdentifier(
        type=_TYPE_LETTERS[m.group("type")],
        id=int(m.group("num")),
        variant=variant,
    )


def encode_display_name(identifier: Union[ColorCETIdentifier, RotatedIdentifier]) -> str:
    """Human readable name, e.g. ``"Colorblind Diverging 1"``."""
    if isinstance(identifier, RotatedIdentifier):
        return f"{encode_display_name(identifier.base)} (shift {identifier.rotation}%)"
    prefix, suffix = _DISPLAY_AFFIXES[identifier.variant]
    base = f"{identifier.type.value.capitalize()} {identifier.id}"
    return f"{prefix}{base}{suffix}"


def encode_code(identifier: ColorCETIdentifier) -> str:
    """Inverse of :func:`decode` (no zero padding)."""
    marker = "CB" if identifier.variant is Variant.CB else ""
    tail = ""
    if identifier.variant in (Variant.SHIFTED, Variant.HIGH_CONTRAST):
        tail = identifier.variant.value
    return f"{marker}{_LETTER_OF_TYPE[identifier.type]}{identifier.id}{tail}"
