"""
Solver Configuration.

This module defines the configuration structure for the bidirectional search:
- SearchConfig: All search parameters

Performance logging is switched with the class-level flag
SearchConfig.enable_performance_logging (see twisty/performance.py).
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class SearchConfig:
    """
    Complete search configuration.

    Notes:
        - A round expands the start-side frontier and then the goal-side
          frontier, so a solution found after n rounds is at most 2n plain
          moves long (before TWIST inverses are expanded)
        - The search never raises on exhaustion, it reports NO_SOLUTION
    """

    max_rounds: int = 8
    """Maximum number of expansion rounds before the search gives up"""

    log_frontier_sizes: bool = True
    """Log both frontier sizes after every goal-side expansion (INFO level)"""

    def validate(self) -> None:
        """
        Validate parameter ranges.

        Raises:
            ValueError: If max_rounds < 1
        """
        if not isinstance(self.max_rounds, int) or self.max_rounds < 1:
            raise ValueError(f"max_rounds must be an int >= 1, got {self.max_rounds!r}")


# Performance monitoring global flag (outside dataclass to make it a true class variable)
SearchConfig.enable_performance_logging = False
