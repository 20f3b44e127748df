"""Perspective cameras and the registry choosing the active one."""

from __future__ import annotations

import math
from enum import IntFlag

import numpy as np

from .mathutils import PI_2, look_at, perspective
from .moveable import Moveable
from .state import BLUE, GREEN, RED, AppState


class CameraFlags(IntFlag):
    NONE = 0
    DRAW_RIGHT = 1
    DRAW_UP = 1 << 1
    DRAW_FORWARD = 1 << 2
    DRAW_DIRECTIONS = DRAW_RIGHT | DRAW_UP | DRAW_FORWARD


class CameraRegistry:
    """Keeps every camera and which one is currently active."""

    def __init__(self) -> None:
        self.cameras: list[Camera] = []
        self.active_index = 0
        self.active: Camera | None = None

    def register(self, camera: "Camera") -> int:
        """Add ``camera``; the first one registered becomes active."""
        self.cameras.append(camera)
        if self.active is None:
            self.active = camera
        return len(self.cameras) - 1

    def next_active(self) -> "Camera":
        """Cycle to the next camera and return it."""
        if not self.cameras:
            raise LookupError("no cameras registered")
        self.active_index = (self.active_index + 1) % len(self.cameras)
        self.active = self.cameras[self.active_index]
        return self.active


class Camera(Moveable):
    """A moveable viewpoint with projection and view matrices."""

    def __init__(
        self,
        state: AppState,
        registry: CameraRegistry,
        position,
        yaw: float = PI_2,
        pitch: float = 0.0,
    ) -> None:
        super().__init__(state, position, yaw, pitch)
        self.near_plane = 0.1
        self.far_plane = 100.0
        self.fov = 45.0
        self.aspect_ratio = 1.0
        self.proj = np.eye(4)
        self.view = np.eye(4)
        self.pv = np.eye(4)
        self.flags = CameraFlags.NONE
        self.update()
        self.cam_index = registry.register(self)

    def update(self) -> None:
        """Recompute matrices and recentre the cursor unless the GUI has focus."""
        width, height = self.state.window_size
        self.aspect_ratio = width / height
        self.proj = perspective(math.radians(self.fov), self.aspect_ratio, self.near_plane, self.far_plane)
        self.view = look_at(self.position, self.position + self.orientation, self.up)
        self.pv = self.proj @ self.view
        if not self.state.gui_focused:
            center = self.state.window_center()
            self.state.cursor_pos = (float(center[0]), float(center[1]))

    def proj_view_inverse(self) -> np.ndarray:
        return np.linalg.inv(self.pv)

    def direction_lines(self, viewer: "Camera") -> list[tuple[np.ndarray, np.ndarray, np.ndarray]]:
        """Lines ``(start, end, color)`` showing this camera's axes to ``viewer``."""
        if viewer is self:
            return []
        p = self.position.copy()
        lines = []
        if self.flags & CameraFlags.DRAW_RIGHT:
            lines.append((p, p + self.right, np.array(RED)))
        if self.flags & CameraFlags.DRAW_UP:
            lines.append((p, p + self.up, np.array(GREEN)))
        if self.flags & CameraFlags.DRAW_FORWARD:
            lines.append((p, p + self.forward, np.array(BLUE)))
        return lines