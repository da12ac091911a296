"""
Goal Set Builder.

Builds every configuration the search accepts as solved: one canonical cube
per assignment of the four side colours to the four faces (24 in total),
plus its rotation variant.
"""

from __future__ import annotations
from functools import lru_cache

from twisty.solver.models import Cube, SIDE_COLORS
from twisty.solver.bidir_solver.state import rotate_ring
from twisty.solver.utils.permutations import permutations


def canonical_cube(perm) -> Cube:
    """
    Solved cube for one face assignment.

    Args:
        perm: 4 side colours, perm[k] occupies ring positions 2k and 2k+1

    Returns:
        Cube with identical side colours on both layers
    """
    sides = [color for color in perm for _ in range(2)]
    return Cube.from_side_colors(sides, sides)


def rotation_variant(cube: Cube) -> Cube:
    """Cap ring rotated one step right and one step back left."""
    cap = rotate_ring(rotate_ring(cube.cap_layer, 1), -1)
    return Cube(cap, cube.base_layer)


@lru_cache(maxsize=1)
def goal_states() -> tuple[Cube, ...]:
    """
    Goal states in deterministic build order (duplicates removed).

    Returns:
        Tuple of Cube, permutation order, canonical cube before its variant
    """
    ordered: dict[Cube, None] = {}
    for perm in permutations(SIDE_COLORS):
        cube = canonical_cube(perm)
        ordered.setdefault(cube, None)
        ordered.setdefault(rotation_variant(cube), None)
    return tuple(ordered)


def build_goal_set() -> frozenset[Cube]:
    """
    Set of all configurations recognised as solved.

    Returns:
        frozenset of Cube, 24 <= size <= 48

    Example:
        >>> goals = build_goal_set()
        >>> all(is_goal(g) for g in goals)
        True
    """
    return frozenset(goal_states())
