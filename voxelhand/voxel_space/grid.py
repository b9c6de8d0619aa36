"""Grid snapping and lattice cell keys."""

import math

from ..hand_gestures.config import CELL_KEY_DELIMITER, GRID_CELL_SIZE
from ..hand_gestures.math_utils import clamp
from .coord_mapper import WorldPosition

__all__ = ["snap", "snap_position", "clamp", "cell_key", "parse_cell_key"]


def snap(value: float, cell_size: float = GRID_CELL_SIZE) -> float:
    """
    Snap value to the nearest multiple of cell_size.

    Exact halves round up (toward +inf): 0.5 -> 1, 2.5 -> 3, -0.5 -> 0.
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    snapped = math.floor(value / cell_size + 0.5) * cell_size
    return snapped + 0.0  # fold -0.0


def snap_position(x: float, y: float, z: float, cell_size: float = GRID_CELL_SIZE) -> WorldPosition:
    """Component-wise snap of a world position."""
    return WorldPosition(snap(x, cell_size), snap(y, cell_size), snap(z, cell_size))


def _fmt(v: float) -> str:
    v = float(v) + 0.0
    if v.is_integer():
        return str(int(v))
    return repr(v)


def cell_key(x: float, y: float, z: float) -> str:
    """Lookup key for an (already snapped) lattice cell, e.g. "1,0,-2"."""
    return CELL_KEY_DELIMITER.join((_fmt(x), _fmt(y), _fmt(z)))


def parse_cell_key(key: str) -> WorldPosition:
    """Inverse of cell_key."""
    parts = key.split(CELL_KEY_DELIMITER)
    if len(parts) != 3:
        raise ValueError(f"malformed cell key: {key!r}")
    return WorldPosition(*(float(p) for p in parts))
