from __future__ import annotations
from typing import FrozenSet, List, Sequence, Tuple

from .game import Cell

State = Tuple[Cell, ...]

# 0 | 1 | 2
# 3 | 4 | 5
# 6 | 7 | 8


def rotate_90(cells: Sequence[Cell]) -> State:
    """Quarter turn clockwise."""
    b = cells
    return (
        b[6], b[3], b[0],
        b[7], b[4], b[1],
        b[8], b[5], b[2],
    )


def reflect(cells: Sequence[Cell]) -> State:
    """Mirror left to right."""
    b = cells
    return (
        b[2], b[1], b[0],
        b[5], b[4], b[3],
        b[8], b[7], b[6],
    )


def equivalent_states(cells: Sequence[Cell]) -> List[State]:
    """The 8 images of ``cells`` under the symmetries of the square.

    Four successive rotations, then a reflection and four more rotations.
    Duplicates are kept when the position is itself symmetric.
    """
    states: List[State] = []
    current = tuple(cells)
    for _ in range(2):
        for _ in range(4):
            current = rotate_90(current)
            states.append(current)
        current = reflect(current)
    return states


def symmetry_key(cells: Sequence[Cell]) -> FrozenSet[State]:
    # equal for two positions iff one is a rotation/reflection of the other
    return frozenset(equivalent_states(cells))
