"""
Two-Layer Puzzle Solver: Bidirectional Meet-in-the-Middle Search.

Main API:
    solve(start, config=None, on_round=None) -> list[Action] | None
    apply(state, action) -> Cube

The caller builds a start Cube, calls solve() and may replay the returned
moves with apply() to display the final configuration.
"""

from .config import SearchConfig
from .models import (
    Color,
    Cubelet,
    Cube,
    Action,
    SolutionStatus,
    RoundProgress,
    SearchResult,
    CAP_COLOR,
    BASE_COLOR,
    SIDE_COLORS,
)
from .bidir_solver import (
    apply,
    apply_sequence,
    expand,
    inverse,
    is_goal,
    build_goal_set,
    bidirectional_search,
    solve,
)
from .utils import permutations


__all__ = [
    # Main API
    "solve",
    "apply",
    "bidirectional_search",
    # Config
    "SearchConfig",
    # Models
    "Color",
    "Cubelet",
    "Cube",
    "Action",
    "SolutionStatus",
    "RoundProgress",
    "SearchResult",
    "CAP_COLOR",
    "BASE_COLOR",
    "SIDE_COLORS",
    # Move model / goal set
    "apply_sequence",
    "expand",
    "inverse",
    "is_goal",
    "build_goal_set",
    "permutations",
]
