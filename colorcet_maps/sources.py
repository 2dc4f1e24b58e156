"""
Raw table source: ColorCET CSV files on disk.

The catalog only needs a ``{key: text}`` mapping; this is the default way to
produce one from a directory such as ``colorcet-maps/CET-C3.csv``.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def load_raw_tables(directory: Union[str, Path], pattern: str = "*.csv") -> dict[str, str]:
    """Return ``{file stem: file text}`` for every file matching *pattern*."""
    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(f"Colormap directory not found: {root}")

    paths = sorted(p for p in root.glob(pattern) if p.is_file())
    if not paths:
        raise FileNotFoundError(f"No files matching '{pattern}' in {root}")

    tables = {p.stem: p.read_text(encoding="utf-8-sig") for p in paths}
    logger.debug("Read %d raw tables from %s", len(tables), root)
    return tables
