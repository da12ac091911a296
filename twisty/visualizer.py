import os
from typing import List, Optional, Sequence

import cv2
import numpy as np

from twisty.solver.models import Action, Color, Cube, N_CUBELETS
from twisty.solver.bidir_solver.state import apply

# BGR (OpenCV channel order)
COLOR_BGR = {
    Color.RED: (40, 40, 210),
    Color.GREEN: (60, 170, 40),
    Color.BLUE: (190, 90, 20),
    Color.ORANGE: (20, 140, 250),
    Color.YELLOW: (30, 220, 240),
    Color.WHITE: (250, 250, 250),
}

BACKGROUND = (235, 235, 235)
OUTLINE = (60, 60, 60)
TEXT_COLOR = (20, 20, 20)


class CubeVisualizer:
    """Renders cube states as images: one row per layer, one cell per ring position.

    Each cell shows the cubelet's top colour as a stripe above its side colour.
    """

    def __init__(self, output_dir: str = 'output', cell_px: int = 40,
                 gap_px: int = 4, label_px: int = 22):
        if cell_px < 4:
            raise ValueError(f"cell_px must be >= 4, got {cell_px}")
        self.output_dir = output_dir
        self.cell_px = cell_px
        self.gap_px = gap_px
        self.label_px = label_px
        self.stripe_px = max(1, cell_px // 4)

    @property
    def frame_shape(self) -> tuple:
        """(height, width, 3) of a single rendered cube."""
        width = N_CUBELETS * self.cell_px + (N_CUBELETS + 1) * self.gap_px
        height = 2 * self.cell_px + 3 * self.gap_px
        return height, width, 3

    def cell_origin(self, row: int, position: int) -> tuple:
        """Top-left (x, y) pixel of a cell; row 0 = cap layer, row 1 = base layer."""
        x = self.gap_px + position * (self.cell_px + self.gap_px)
        y = self.gap_px + row * (self.cell_px + self.gap_px)
        return x, y

    def render_cube(self, cube: Cube) -> np.ndarray:
        """Render one configuration as a BGR image."""
        img = np.full(self.frame_shape, BACKGROUND, dtype=np.uint8)

        for row, layer in enumerate((cube.cap_layer, cube.base_layer)):
            for position, cubelet in enumerate(layer):
                x, y = self.cell_origin(row, position)
                x2 = x + self.cell_px - 1
                y2 = y + self.cell_px - 1
                cv2.rectangle(img, (x, y), (x2, y + self.stripe_px - 1),
                              COLOR_BGR[cubelet.top], thickness=-1)
                cv2.rectangle(img, (x, y + self.stripe_px), (x2, y2),
                              COLOR_BGR[cubelet.side], thickness=-1)
                cv2.rectangle(img, (x, y), (x2, y2), OUTLINE, thickness=1)

        return img

    def _label_band(self, text: str, width: int) -> np.ndarray:
        band = np.full((self.label_px, width, 3), BACKGROUND, dtype=np.uint8)
        cv2.putText(band, text, (self.gap_px, self.label_px - 6),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.45, TEXT_COLOR, 1, cv2.LINE_AA)
        return band

    def render_solution(self, start: Cube, moves: Optional[Sequence[Action]]) -> np.ndarray:
        """Render start, every intermediate state and the final state stacked vertically."""
        width = self.frame_shape[1]
        frames: List[np.ndarray] = [self._label_band("start", width), self.render_cube(start)]

        state = start
        for step, action in enumerate(moves or [], start=1):
            state = apply(state, action)
            frames.append(self._label_band(f"{step}: {action.name}", width))
            frames.append(self.render_cube(state))

        return np.vstack(frames)

    def save(self, img: np.ndarray, filename: str) -> str:
        """Write img below output_dir (or to filename if it is absolute); returns the path."""
        path = filename if os.path.isabs(filename) else os.path.join(self.output_dir, filename)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        if not cv2.imwrite(path, img):
            raise IOError(f"Could not write image to {path}")
        return path
