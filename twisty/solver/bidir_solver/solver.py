"""
Bidirectional Search Main Loop.

This module implements bidirectional_search() - a breadth-first
meet-in-the-middle search between the start state and the goal set.

Key Concepts:
- Two frontiers: RIGHT grows from the start state, LEFT grows from every
  goal state at once
- A round expands RIGHT, checks for a meeting point, then expands LEFT and
  checks again
- Predecessors are recorded on first discovery only (insert-if-absent)
- Frontiers are insertion-ordered dicts, so runs are deterministic
- Exhausted round budget = NO_SOLUTION (no exception)

Path reconstruction:
- Right half: walk right_prev from the meeting state back to the start,
  then reverse
- Left half: walk left_prev from the meeting state until is_goal() holds,
  appending the inverse of every recorded action (TWIST becomes 3x TWIST)
"""

from __future__ import annotations
import logging
from typing import Callable, Optional

from twisty.solver.models import (
    Action, Cube, RoundProgress, SearchResult, SolutionStatus
)
from twisty.solver.config import SearchConfig
from twisty.solver.bidir_solver.state import expand, inverse, is_goal
from twisty.solver.bidir_solver.goal_set import goal_states
from twisty.performance import time_block, timed

logger = logging.getLogger(__name__)

# state -> (predecessor, action that produced state from predecessor)
PrevMap = dict[Cube, tuple[Cube, Action]]
RoundCallback = Callable[[RoundProgress], None]


def bidirectional_search(
    start: Cube,
    config: Optional[SearchConfig] = None,
    on_round: Optional[RoundCallback] = None
) -> SearchResult:
    """
    Meet-in-the-middle search from start towards the goal set.

    Args:
        start: Scrambled configuration
        config: SearchConfig (defaults: max_rounds=8)
        on_round: Optional callback, called with a RoundProgress after every
                  frontier expansion

    Returns:
        SearchResult
        - status OK: moves holds the start -> solved sequence
        - status NO_SOLUTION: moves is None

    Raises:
        ValueError: Invalid config

    Notes:
        - A start state that already is a goal state is NOT short-circuited,
          it is found through the regular rounds like any other state
        - Among several meeting states the greatest (Cube ordering) is used

    Example:
        >>> result = bidirectional_search(start)
        >>> if result.solved:
        ...     final = apply_sequence(start, result.moves)
    """
    config = config or SearchConfig()
    config.validate()

    with time_block("goal set"):
        left: dict[Cube, None] = dict.fromkeys(goal_states())
    right: dict[Cube, None] = {start: None}
    left_prev: PrevMap = {}
    right_prev: PrevMap = {}

    meeting: set[Cube] = set()
    rounds = 0

    for round_index in range(config.max_rounds):
        rounds = round_index + 1

        with time_block(f"round {round_index} expand right"):
            right = _expand_frontier(right, right_prev)
        meeting = _intersect(left, right)
        _report(on_round, round_index, "right", left, right, meeting)
        if meeting:
            logger.info("Solution found after %d expansion rounds", round_index)
            break

        with time_block(f"round {round_index} expand left"):
            left = _expand_frontier(left, left_prev)
        if config.log_frontier_sizes:
            logger.info("Left size: %d, Right size: %d", len(left), len(right))
        meeting = _intersect(left, right)
        _report(on_round, round_index, "left", left, right, meeting)
        if meeting:
            logger.info("Solution found after %d expansion rounds", round_index)
            break

    if not meeting:
        logger.info("No solution within %d expansion rounds", config.max_rounds)
        return SearchResult(
            status=SolutionStatus.NO_SOLUTION,
            rounds=rounds,
            left_size=len(left),
            right_size=len(right),
        )

    middle = max(meeting)
    with time_block("reconstruct"):
        moves = reconstruct_path(start, middle, right_prev, left_prev)
    logger.debug("Meeting state:\n%s", middle.describe())

    return SearchResult(
        moves=moves,
        status=SolutionStatus.OK,
        rounds=rounds,
        meeting_state=middle,
        left_size=len(left),
        right_size=len(right),
    )


@timed
def solve(
    start: Cube,
    config: Optional[SearchConfig] = None,
    on_round: Optional[RoundCallback] = None
) -> Optional[list[Action]]:
    """
    Move sequence taking start to a solved configuration.

    Returns:
        Ordered list of Action, or None if the round budget ran out
    """
    return bidirectional_search(start, config, on_round).moves


def reconstruct_path(
    start: Cube,
    middle: Cube,
    right_prev: PrevMap,
    left_prev: PrevMap
) -> list[Action]:
    """
    Join both search halves at middle.

    Args:
        start: Start state of the right frontier
        middle: State present in both frontiers
        right_prev: First-discovery predecessors of the right search
        left_prev: First-discovery predecessors of the left search

    Returns:
        Moves start -> middle followed by moves middle -> solved

    Notes:
        - Chains terminate: every recorded predecessor was discovered in an
          earlier round, round 0 holds only the start state (right) or goal
          states (left)
    """
    moves: list[Action] = []

    state = middle
    while state != start:
        state, action = right_prev[state]
        moves.append(action)
    moves.reverse()

    state = middle
    while not is_goal(state):
        state, action = left_prev[state]
        moves.extend(inverse(action))

    return moves


def _expand_frontier(frontier: dict[Cube, None], prev: PrevMap) -> dict[Cube, None]:
    """
    Expand every state of frontier by all actions.

    Args:
        frontier: Current frontier (insertion-ordered)
        prev: Predecessor map, updated in place (first write wins)

    Returns:
        New frontier with all successors (parents are not carried over)
    """
    new_frontier: dict[Cube, None] = {}
    for state in frontier:
        for new_state, action in expand(state):
            new_frontier[new_state] = None
            prev.setdefault(new_state, (state, action))
    return new_frontier


def _intersect(left: dict[Cube, None], right: dict[Cube, None]) -> set[Cube]:
    if len(left) < len(right):
        return {s for s in left if s in right}
    return {s for s in right if s in left}


def _report(
    on_round: Optional[RoundCallback],
    round_index: int,
    side: str,
    left: dict[Cube, None],
    right: dict[Cube, None],
    meeting: set[Cube]
) -> None:
    logger.debug("Round %d (%s): left=%d right=%d met=%s",
                 round_index, side, len(left), len(right), bool(meeting))
    if on_round is not None:
        on_round(RoundProgress(
            round_index=round_index,
            side=side,
            left_size=len(left),
            right_size=len(right),
            met=bool(meeting),
        ))
