"""
colorcet_maps package
---------------------
ColorCET colormaps for a rendering front end, plus a rolling average for
smoothing live signals such as frame times.

Typical start-up::

    tables = load_raw_tables("assets/colorcet-maps")
    catalog = build(tables)            # once; pass it to consumers
    cmap = catalog.find(decode("CBL1"))
"""

from .identifier import (
    ColorCETIdentifier,
    ColorCETType,
    InvalidIdentifier,
    RotatedIdentifier,
    Variant,
    decode,
    encode_code,
    encode_display_name,
)
from .catalog import Catalog, CatalogError, ColorCETMap, build
from .rolling import InvalidCapacity, RollingAverage
from .sources import load_raw_tables

__all__ = [
    "ColorCETIdentifier",
    "ColorCETType",
    "InvalidIdentifier",
    "RotatedIdentifier",
    "Variant",
    "decode",
    "encode_code",
    "encode_display_name",
    "Catalog",
    "CatalogError",
    "ColorCETMap",
    "build",
    "InvalidCapacity",
    "RollingAverage",
    "load_raw_tables",
]
