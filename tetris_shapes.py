"""Shape catalog: the seven tetromino kinds and their four rotation bitmaps"""
from enum import IntEnum
from typing import Dict, Tuple

Shape = Tuple[Tuple[int, ...], ...]


class Kind(IntEnum):
    """Tetromino kind. The value doubles as the grid cell tag (1-7)."""
    I = 1
    O = 2
    T = 3
    L = 4
    J = 5
    S = 6
    Z = 7


# Spawn orientation, square bounding box
BASE_SHAPES: Dict[Kind, Shape] = {
    Kind.I: ((0,0,0,0),(1,1,1,1),(0,0,0,0),(0,0,0,0)),
    Kind.O: ((1,1),(1,1)),
    Kind.T: ((0,1,0),(1,1,1),(0,0,0)),
    Kind.L: ((0,0,1),(1,1,1),(0,0,0)),
    Kind.J: ((1,0,0),(1,1,1),(0,0,0)),
    Kind.S: ((0,1,1),(1,1,0),(0,0,0)),
    Kind.Z: ((1,1,0),(0,1,1),(0,0,0)),
}

ROTATIONS = 4


def rotate_cw(m: Shape) -> Shape:
    return tuple(tuple(r) for r in zip(*m[::-1]))


def _build_catalog() -> Dict[Kind, Tuple[Shape, ...]]:
    catalog = {}
    for kind, base in BASE_SHAPES.items():
        states = [base]
        for _ in range(ROTATIONS - 1):
            states.append(rotate_cw(states[-1]))
        catalog[kind] = tuple(states)
    return catalog


# 7 kinds x 4 rotations. O keeps four identical entries so every kind cycles the same way.
CATALOG: Dict[Kind, Tuple[Shape, ...]] = _build_catalog()


def shape_for(kind: Kind, rotation: int) -> Shape:
    """Bitmap for one (kind, rotation) pair; out-of-catalog input raises ValueError."""
    try:
        kind = Kind(kind)
    except ValueError:
        raise ValueError(f"unknown tetromino kind: {kind!r}") from None
    if not isinstance(rotation, int) or not 0 <= rotation < ROTATIONS:
        raise ValueError(f"rotation must be 0..{ROTATIONS - 1}, got {rotation!r}")
    return CATALOG[kind][rotation]


def cells(shape: Shape):
    """Yield (col, row) offsets of the occupied cells of a bitmap."""
    for y, row in enumerate(shape):
        for x, v in enumerate(row):
            if v:
                yield x, y
