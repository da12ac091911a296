"""
Bidirectional Search Module.

Meet-in-the-middle state-space search for the two-layer puzzle.

Public exports:
- apply / expand / inverse / is_goal: Move model
- build_goal_set: Solved configurations
- bidirectional_search / solve: Main solver algorithm
"""

from twisty.solver.bidir_solver.state import apply, apply_sequence, expand, inverse, is_goal
from twisty.solver.bidir_solver.goal_set import build_goal_set, goal_states
from twisty.solver.bidir_solver.solver import bidirectional_search, solve, reconstruct_path

__all__ = [
    'apply',
    'apply_sequence',
    'expand',
    'inverse',
    'is_goal',
    'build_goal_set',
    'goal_states',
    'bidirectional_search',
    'solve',
    'reconstruct_path',
]
