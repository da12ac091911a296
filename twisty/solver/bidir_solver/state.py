"""
Move Model for the Bidirectional Search.

This module implements the transition function of the puzzle graph:
- apply: Perform one Action on a Cube (pure, returns a new Cube)
- expand: All successors of a Cube in Action declaration order
- inverse: Action sequence undoing one Action
- is_goal: Convenience "looks solved" predicate

Move definitions (cap position <-> base position):
- FRONT: 0<->2, 1<->1, 2<->0
- RIGHT: 2<->4, 3<->3, 4<->2
- BACK:  4<->6, 5<->5, 6<->4
- LEFT:  6<->0, 7<->7, 0<->6
- TWIST: cap ring rotated right by 2 (new[i] = old[i - 2]), base untouched

Swap moves are involutions, TWIST has order 4.
"""

from __future__ import annotations
from typing import Iterable, Iterator

from twisty.solver.models import Action, Cube, Cubelet, CAP_COLOR, N_CUBELETS

SWAP_PAIRS: dict[Action, tuple[tuple[int, int], ...]] = {
    Action.FRONT: ((0, 2), (1, 1), (2, 0)),
    Action.RIGHT: ((2, 4), (3, 3), (4, 2)),
    Action.BACK: ((4, 6), (5, 5), (6, 4)),
    Action.LEFT: ((6, 0), (7, 7), (0, 6)),
}

TWIST_STEP = 2

ACTIONS: tuple[Action, ...] = tuple(Action)


def rotate_ring(layer: tuple[Cubelet, ...], steps: int) -> tuple[Cubelet, ...]:
    """
    Rotate a ring right by steps (negative steps rotate left).

    Example:
        >>> rotate_ring((a, b, c, d, e, f, g, h), 2)
        (g, h, a, b, c, d, e, f)
    """
    steps %= len(layer)
    if steps == 0:
        return tuple(layer)
    return tuple(layer[-steps:]) + tuple(layer[:-steps])


def apply(state: Cube, action: Action) -> Cube:
    """
    Configuration after performing action.

    Args:
        state: Current configuration (not modified)
        action: Move to perform

    Returns:
        New Cube

    Notes:
        - Total function, no error conditions
        - Swap moves exchange cubelets between the layers as-is, the top
          colour travels with the cubelet
    """
    if action is Action.TWIST:
        return Cube(rotate_ring(state.cap_layer, TWIST_STEP), state.base_layer)

    cap = list(state.cap_layer)
    base = list(state.base_layer)
    for cap_pos, base_pos in SWAP_PAIRS[action]:
        cap[cap_pos], base[base_pos] = base[base_pos], cap[cap_pos]
    return Cube(tuple(cap), tuple(base))


def apply_sequence(state: Cube, actions: Iterable[Action]) -> Cube:
    """Replay actions in order starting from state."""
    for action in actions:
        state = apply(state, action)
    return state


def expand(state: Cube) -> Iterator[tuple[Cube, Action]]:
    """
    Successors of state.

    Yields:
        (new_state, action) for every Action in declaration order
        (LEFT, RIGHT, FRONT, BACK, TWIST)
    """
    for action in ACTIONS:
        yield apply(state, action), action


def inverse(action: Action) -> tuple[Action, ...]:
    """
    Moves undoing action.

    Returns:
        (action,) for swap moves (involutions),
        (TWIST, TWIST, TWIST) for TWIST (no reverse rotation move exists)
    """
    if action is Action.TWIST:
        return (Action.TWIST,) * 3
    return (action,)


def is_goal(state: Cube) -> bool:
    """
    Check if state looks solved.

    Returns:
        True if
        (a) every cap cubelet shows the cap colour on top,
        (b) cap and base side colours agree position by position,
        (c) every inner cap position (1..6) shares its side colour with a
            ring neighbour

    Notes:
        - Positions 0 and 7 are not checked in (c)
        - The search itself tests membership in the goal set, this predicate
          only ends the goal-side path walk and checks replayed solutions
    """
    cap = state.cap_layer
    base = state.base_layer
    for i in range(N_CUBELETS):
        if cap[i].top != CAP_COLOR:
            return False
        if cap[i].side != base[i].side:
            return False
        if (0 < i < N_CUBELETS - 1
                and cap[i].side != cap[i + 1].side
                and cap[i].side != cap[i - 1].side):
            return False
    return True
