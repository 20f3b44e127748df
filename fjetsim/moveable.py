"""Entities that move and look around from keyboard and mouse input."""

from __future__ import annotations

import logging
import math

import numpy as np

from .mathutils import PI_2, normalize
from .state import AppState

logger = logging.getLogger(__name__)


class Moveable:
    """A position with a yaw/pitch view direction and a movement speed."""

    def __init__(self, state: AppState, position=None, yaw: float = PI_2, pitch: float = 0.0) -> None:
        self.state = state
        self.position = (
            np.zeros(3) if position is None else np.array(position, dtype=float)
        )
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        self.orientation = np.zeros(3)
        self.up = np.array([0.0, 1.0, 0.0])
        self.sensitivity = 1.0
        self.speed_default = 1.0
        self.speed_multiplier = 5.0
        self.speed = self.speed_default * self.speed_multiplier
        self.calc_orientation()

    def accelerate(self, boost: bool) -> None:
        """Use the boosted speed while ``boost`` is true, the default otherwise."""
        self.speed = self.speed_default * (self.speed_multiplier if boost else 1.0)

    @property
    def right(self) -> np.ndarray:
        return normalize(np.cross(self.up, -self.orientation))

    @property
    def left(self) -> np.ndarray:
        return -self.right

    @property
    def forward(self) -> np.ndarray:
        return self.orientation.copy()

    @property
    def back(self) -> np.ndarray:
        return -self.forward

    @property
    def down(self) -> np.ndarray:
        return -self.up

    def set_view(self, other: "Moveable") -> None:
        """Copy the view direction of ``other``."""
        self.up = other.up.copy()
        self.yaw = other.yaw
        self.pitch = other.pitch
        self.orientation = other.orientation.copy()

    def _move(self, direction: np.ndarray) -> None:
        self.position = self.position + direction * self.speed * self.state.dt

    def move_forward(self) -> None:
        self._move(self.orientation)

    def move_back(self) -> None:
        self._move(-self.orientation)

    def move_left(self) -> None:
        self._move(self.left)

    def move_right(self) -> None:
        self._move(self.right)

    def move_up(self) -> None:
        self._move(self.up)

    def move_down(self) -> None:
        self._move(-self.up)

    def on_mouse_move(self, mouse_pos) -> None:
        """Turn by the cursor's distance from the window centre."""
        if self.state.gui_focused:
            return
        center = self.state.window_center()
        delta = self.sensitivity * (np.asarray(mouse_pos, dtype=float) - center) / center
        self.yaw += float(delta[0])
        limit = PI_2 - 0.1
        self.pitch = min(max(self.pitch - float(delta[1]), -limit), limit)
        self.calc_orientation()

    def on_mouse_scroll(self, offset) -> None:
        logger.warning("Moveable.on_mouse_scroll: nothing to do")

    def calc_orientation(self) -> None:
        """Recompute the view direction from yaw and pitch."""
        cp = math.cos(self.pitch)
        self.orientation = normalize([
            math.cos(self.yaw) * cp,
            math.sin(self.pitch),
            math.sin(self.yaw) * cp,
        ])