"""
Solver Utility Functions.

This module provides utility functions for the puzzle solver:
- permutations: Lexicographic permutation generator
"""

from .permutations import permutations

__all__ = [
    "permutations",
]
