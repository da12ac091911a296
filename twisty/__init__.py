"""Two-layer twisty puzzle solver."""

import logging

from twisty.solver import (
    Action,
    Color,
    Cube,
    Cubelet,
    SearchConfig,
    apply,
    solve,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Action",
    "Color",
    "Cube",
    "Cubelet",
    "SearchConfig",
    "apply",
    "solve",
]
