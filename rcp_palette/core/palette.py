"""CSS named colours and colour distance.

The named-colour table is Pillow's CSS colour map (PIL.ImageColor), resolved
once to RGB tuples. Nearest-name search is a vectorised Euclidean distance
over the whole table.
"""

from functools import lru_cache

import numpy as np
from PIL import ImageColor


@lru_cache(maxsize=1)
def named_colours() -> dict[str, tuple[int, int, int]]:
    """Return {css_name: (r, g, b)}, sorted by name."""
    table = {}
    for name in sorted(ImageColor.colormap):
        r, g, b = ImageColor.getrgb(name)[:3]
        table[name] = (r, g, b)
    return table


@lru_cache(maxsize=1)
def _name_matrix() -> tuple[list[str], np.ndarray]:
    table = named_colours()
    names = list(table)
    # int32, not uint8 — subtraction must not wrap
    matrix = np.array([table[n] for n in names], dtype=np.int32)
    return names, matrix


def lookup_name(name: str) -> tuple[int, int, int] | None:
    """Case-insensitive CSS name lookup. None if the name is unknown."""
    return named_colours().get(name.lower())


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance in RGB space."""
    return float(np.linalg.norm(np.array(a, dtype=np.int32) - np.array(b, dtype=np.int32)))


def nearest_colour(rgb: tuple[int, int, int], threshold: float | None = None) -> tuple[str | None, float]:
    """Find the nearest CSS named colour.

    Returns (name, distance). name is None when the nearest match is further
    than threshold. Ties go to the alphabetically first name (aqua before cyan).
    """
    names, matrix = _name_matrix()
    diff = matrix - np.array(rgb, dtype=np.int32)
    dists = np.sqrt((diff * diff).sum(axis=1))
    idx = int(np.argmin(dists))
    dist = float(dists[idx])
    if threshold is not None and dist > threshold:
        return None, dist
    return names[idx], dist
