"""Shared application state: timing, window size and display toggles."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def _axis(x: float, y: float, z: float) -> np.ndarray:
    arr = np.array([x, y, z], dtype=float)
    arr.setflags(write=False)
    return arr


RIGHT = RED = _axis(1.0, 0.0, 0.0)
UP = GREEN = _axis(0.0, 1.0, 0.0)
FORWARD = BLUE = _axis(0.0, 0.0, 1.0)


@dataclass
class AppState:
    """Values shared across the simulation for one running window."""

    dt: float = 0.0
    time: float = 0.0
    window_size: tuple[int, int] = (1600, 900)
    cursor_pos: tuple[float, float] = (0.0, 0.0)
    gui_focused: bool = False
    draw_wireframe: bool = False
    draw_normals: bool = False
    draw_global_axis: bool = False
    config_collapsed: bool = True
    info_collapsed: bool = True
    fps: int = 1

    def window_center(self) -> np.ndarray:
        """Return the centre of the window in pixels."""
        return np.asarray(self.window_size, dtype=float) * 0.5

    def toggle_config(self) -> None:
        """Collapse or expand the configuration panel."""
        self.config_collapsed = not self.config_collapsed

    def toggle_info(self) -> None:
        """Collapse or expand the information panel."""
        self.info_collapsed = not self.info_collapsed