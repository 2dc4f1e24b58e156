#!/usr/bin/env python3
"""
ColorCET tool: inspect and export colormaps from a directory of ColorCET CSVs.

Usage:
  # List catalog entries in display order:
  python colorcet_tool.py list ./colorcet-maps

  # Export one colormap as a PNG strip:
  python colorcet_tool.py export ./colorcet-maps "Cyclic 3 (shift 50%)" --out c3_50.png

  # Position of colors along a ramp:
  python colorcet_tool.py locate ./colorcet-maps "Linear 3" 255,255,255 0,0,0
"""

from __future__ import annotations
import argparse
import logging
import re
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from colorcet_maps import Catalog, build, load_raw_tables
from colorcet_maps.lut import DEFAULT_ENTRIES, locate, render_strip, resample

logger = logging.getLogger("colorcet_tool")

# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------

def parse_rgb(text: str) -> tuple[int, int, int]:
    """``"12,34,56"`` -> (12, 34, 56); argparse type."""
    parts = text.split(",")
    if len(parts) != 3 or not all(re.fullmatch(r"\s*\d{1,3}\s*", p) for p in parts):
        raise argparse.ArgumentTypeError(f"expected R,G,B integers, got '{text}'")
    rgb = tuple(int(p) for p in parts)
    if any(c > 255 for c in rgb):
        raise argparse.ArgumentTypeError(f"channels must be 0..255, got '{text}'")
    return rgb


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")


def load_catalog(directory: str) -> Catalog:
    return build(load_raw_tables(directory))

# ---------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------

def cmd_list(catalog: Catalog, args: argparse.Namespace) -> None:
    for cmap in catalog:
        print(f"{cmap.display_name}\t{len(cmap)}")


def cmd_export(catalog: Catalog, args: argparse.Namespace) -> Path:
    cmap = catalog.find_by_name(args.name)
    colors = resample(cmap.colors, args.entries) if args.entries else cmap.colors
    out = Path(args.out) if args.out else Path(f"{slugify(cmap.display_name)}.png")
    img = render_strip(colors, width=args.width, height=args.height)
    img.save(out, optimize=True)
    logger.info("Wrote %s (%dx%d)", out, args.width, args.height)
    return out


def cmd_locate(catalog: Catalog, args: argparse.Namespace) -> None:
    cmap = catalog.find_by_name(args.name)
    positions = locate(cmap.colors, np.array(args.colors))
    for rgb, pos in zip(args.colors, positions):
        print(f"{rgb[0]},{rgb[1]},{rgb[2]}\t{pos:.4f}")

# ---------------------------------------------------------------------
# CLI: Argument parsing and main
# ---------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ColorCET tool: list, export or query colormaps."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    lst = sub.add_parser("list", help="List colormaps in display order")
    lst.add_argument("directory", help="Directory of CET-*.csv files")

    exp = sub.add_parser("export", help="Export a colormap as a PNG strip")
    exp.add_argument("directory", help="Directory of CET-*.csv files")
    exp.add_argument("name", help="Display name, e.g. 'Colorblind Linear 1'")
    exp.add_argument("--out", help="Output PNG (default: slug of the name)")
    exp.add_argument("--width", type=int, default=DEFAULT_ENTRIES, help="Strip width in pixels")
    exp.add_argument("--height", type=int, default=32, help="Strip height in pixels")
    exp.add_argument(
        "--entries",
        type=int,
        default=None,
        help="Resample the ramp to this many entries before rendering",
    )

    loc = sub.add_parser("locate", help="Ramp position of RGB colors")
    loc.add_argument("directory", help="Directory of CET-*.csv files")
    loc.add_argument("name", help="Display name")
    loc.add_argument("colors", nargs="+", type=parse_rgb, help="R,G,B triples (0..255)")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = load_catalog(args.directory)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    if getattr(args, "name", None) is not None and catalog.find_by_name(args.name) is None:
        parser.error(f"Unknown colormap '{args.name}'. Available: {catalog.display_names()}")
    if args.command == "export":
        if args.width < 2 or args.height < 1:
            parser.error("--width must be at least 2 and --height positive")
        if args.entries is not None and args.entries < 2:
            parser.error("--entries must be at least 2")

    if args.command == "list":
        cmd_list(catalog, args)
    elif args.command == "export":
        cmd_export(catalog, args)
    elif args.command == "locate":
        cmd_locate(catalog, args)


if __name__ == "__main__":
    main()
