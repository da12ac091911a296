"""
Solver Data Models.

This module defines all data structures used by the puzzle solver:
- Color: Facelet colour enum (totally ordered)
- Cubelet: One piece with its top and side facelet
- Cube: Full puzzle configuration (cap layer + base layer)
- Action: The five available moves
- SolutionStatus: Search outcome enum
- RoundProgress: Per-expansion progress report
- SearchResult: Final search result

Ring layout of each layer (viewed from its face), indices clockwise:

    6  5  4
    7     3
    0  1  2

NOTE: Move application lives in bidir_solver/state.py, the models only
      describe values.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Sequence

N_CUBELETS = 8


class Color(IntEnum):
    """
    Facelet colours.

    Values are ordered only to give containers a deterministic order,
    the order carries no meaning for the puzzle.
    """
    RED = 0
    GREEN = 1
    BLUE = 2
    ORANGE = 3
    YELLOW = 4
    WHITE = 5


SIDE_COLORS = (Color.RED, Color.ORANGE, Color.BLUE, Color.GREEN)
CAP_COLOR = Color.YELLOW
BASE_COLOR = Color.WHITE


@dataclass(frozen=True, order=True)
class Cubelet:
    """
    One piece of the puzzle.

    Attributes:
        top: Colour facing the cap/base face
        side: Colour facing outwards on the ring
    """
    top: Color
    side: Color


@dataclass(frozen=True, order=True)
class Cube:
    """
    Complete puzzle configuration.

    Attributes:
        cap_layer: 8 cubelets of the cap ring (positions 0..7 clockwise)
        base_layer: 8 cubelets of the base ring (same ring structure)

    Notes:
        - Equality and ordering are structural (cap layer compared first)
        - Hash is computed once on construction, states are hashed many
          times per search round
        - Physical reachability is NOT validated

    Example:
        >>> cube = Cube.from_side_colors([Color.RED] * 8, [Color.RED] * 8)
        >>> cube.cap_layer[0] == Cubelet(Color.YELLOW, Color.RED)
        True
    """
    cap_layer: tuple[Cubelet, ...]
    base_layer: tuple[Cubelet, ...]
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        cap_layer = tuple(self.cap_layer)
        base_layer = tuple(self.base_layer)
        if len(cap_layer) != N_CUBELETS or len(base_layer) != N_CUBELETS:
            raise ValueError(
                f"Both layers need {N_CUBELETS} cubelets, "
                f"got cap={len(cap_layer)} base={len(base_layer)}"
            )
        object.__setattr__(self, "cap_layer", cap_layer)
        object.__setattr__(self, "base_layer", base_layer)
        object.__setattr__(self, "_hash", hash((cap_layer, base_layer)))

    def __hash__(self) -> int:
        return self._hash

    @classmethod
    def from_side_colors(
        cls,
        cap_sides: Sequence[Color],
        base_sides: Sequence[Color],
        cap_color: Color = CAP_COLOR,
        base_color: Color = BASE_COLOR
    ) -> Cube:
        """
        Build a cube from the side colours of both rings.

        Args:
            cap_sides: 8 side colours of the cap ring in ring order
            base_sides: 8 side colours of the base ring in ring order
            cap_color: Top colour of every cap-layer cubelet
            base_color: Top colour of every base-layer cubelet

        Returns:
            New Cube
        """
        return cls(
            cap_layer=tuple(Cubelet(cap_color, side) for side in cap_sides),
            base_layer=tuple(Cubelet(base_color, side) for side in base_sides),
        )

    def side_colors(self) -> tuple[tuple[Color, ...], tuple[Color, ...]]:
        """Side colours of (cap ring, base ring) in ring order."""
        return (
            tuple(c.side for c in self.cap_layer),
            tuple(c.side for c in self.base_layer),
        )

    def describe(self) -> str:
        """Human readable two-line summary (used by the driver)."""
        def fmt(layer):
            return " ".join(f"{c.top.name[0]}/{c.side.name[0]}" for c in layer)
        return f"cap:  {fmt(self.cap_layer)}\nbase: {fmt(self.base_layer)}"


class Action(Enum):
    """
    Available moves.

    LEFT/RIGHT/FRONT/BACK swap three cap/base position pairs (quarter turn of
    an outer face). TWIST rotates the cap ring by two positions.

    Declaration order is the expansion order of the search.
    """
    LEFT = "L"
    RIGHT = "R"
    FRONT = "F"
    BACK = "B"
    TWIST = "T"


class SolutionStatus(Enum):
    """
    Status of a search run.

    Values:
        OK: Frontiers met, moves reconstructed
        NO_SOLUTION: Round budget exhausted without a meeting point
    """
    OK = "OK"
    NO_SOLUTION = "NO_SOLUTION"


@dataclass
class RoundProgress:
    """
    Progress report emitted after every frontier expansion.

    Attributes:
        round_index: 0-based round number
        side: Which frontier was just expanded ("right" or "left")
        left_size: Current size of the goal-side frontier
        right_size: Current size of the start-side frontier
        met: True if the frontiers intersect after this expansion
    """
    round_index: int
    side: str
    left_size: int
    right_size: int
    met: bool = False


@dataclass
class SearchResult:
    """
    Result of a bidirectional search.

    Attributes:
        moves: Ordered moves start -> solved, None if no solution was found
        status: SolutionStatus
        rounds: Number of rounds run (1-based, 0 if none)
        meeting_state: State where both frontiers met (None on failure)
        left_size: Final goal-side frontier size
        right_size: Final start-side frontier size
    """
    moves: Optional[list[Action]] = None
    status: SolutionStatus = SolutionStatus.NO_SOLUTION
    rounds: int = 0
    meeting_state: Optional[Cube] = None
    left_size: int = 0
    right_size: int = 0

    @property
    def solved(self) -> bool:
        return self.status == SolutionStatus.OK
