"""
Lookup-table helpers: turn a colormap's ramp into what renderers consume.

* uint8 rows for textures
* Lab-space resampling to any number of entries
* matplotlib ``ListedColormap`` and a PIL preview strip
* inverse lookup (RGB -> ramp position) via a cached KD-tree
"""

from __future__ import annotations
import warnings
from functools import lru_cache

import numpy as np
from matplotlib.colors import ListedColormap
from PIL import Image
from scipy.spatial import cKDTree
from skimage import color

DEFAULT_ENTRIES = 256

# Euclidean 8-bit RGB distance above which a color is reported as off-ramp
OFF_RAMP_DISTANCE = 8.0


def to_uint8(colors: np.ndarray) -> np.ndarray:
    """Float [0, 1] rows -> uint8 [0, 255] rows."""
    return np.clip(np.round(np.asarray(colors) * 255), 0, 255).astype(np.uint8)


def resample(colors: np.ndarray, n: int = DEFAULT_ENTRIES) -> np.ndarray:
    """
    Resample a ramp to ``n`` entries.

    1. Convert the sRGB rows to CIE Lab.
    2. Linearly interpolate in Lab at ``n`` evenly spaced positions.
    3. Convert back to sRGB and clip to [0, 1].
    """
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    rgb = np.asarray(colors, dtype=np.float64)
    if len(rgb) == 1:
        return np.repeat(rgb, n, axis=0)

    lab_pts = color.rgb2lab(rgb.reshape(-1, 1, 3)).reshape(-1, 3)

    t = np.linspace(0.0, len(rgb) - 1, n)
    i0 = np.floor(t).astype(np.int64)
    i1 = np.clip(i0 + 1, 0, len(rgb) - 1)
    w1 = t - i0
    lab = lab_pts[i0] * (1.0 - w1)[:, None] + lab_pts[i1] * w1[:, None]

    out = color.lab2rgb(lab.reshape(-1, 1, 3)).reshape(-1, 3)
    return np.clip(out, 0.0, 1.0)


def to_matplotlib(cmap) -> ListedColormap:
    """Wrap a :class:`~colorcet_maps.catalog.ColorCETMap` for matplotlib."""
    return ListedColormap(np.array(cmap.colors), name=cmap.display_name)


def render_strip(colors: np.ndarray, width: int = DEFAULT_ENTRIES, height: int = 32) -> Image.Image:
    """Horizontal preview of a ramp, left = first color."""
    rgb = to_uint8(resample(colors, width)) if width != len(colors) else to_uint8(colors)
    strip = np.broadcast_to(rgb[None, :, :], (height, width, 3))
    return Image.fromarray(np.ascontiguousarray(strip))

# ---------------------------------------------------------------------
# Inverse lookup
# ---------------------------------------------------------------------
# Cached per table, keyed on bytes
@lru_cache(maxsize=None)
def _build_kdtree(lut_bytes: bytes) -> cKDTree:
    arr = np.frombuffer(lut_bytes, np.uint8).reshape(-1, 3).astype(np.float32)
    return cKDTree(arr)


def locate(colors: np.ndarray, rgb) -> np.ndarray:
    """
    Position in [0, 1] along the ramp of the nearest entry to each uint8 RGB
    triple. Colors further than ``OFF_RAMP_DISTANCE`` still map to their
    nearest entry, with a warning.
    """
    lut = to_uint8(colors)
    pts = np.asarray(rgb, dtype=np.float32).reshape(-1, 3)
    tree = _build_kdtree(lut.tobytes())
    dist, idxs = tree.query(pts)

    if (far := dist > OFF_RAMP_DISTANCE).any():
        warnings.warn(f"{int(far.sum())} color(s) are not on the ramp, using nearest entries.")

    if len(lut) == 1:
        return np.zeros(len(pts))
    return idxs / (len(lut) - 1)
