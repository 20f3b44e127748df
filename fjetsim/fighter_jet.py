"""A controllable fighter jet with a chase camera."""

from __future__ import annotations

import math

import numpy as np

from .aircraft import FighterJetBody
from .camera import Camera, CameraRegistry
from .mathutils import PI_2, quat_from_axis_angle, quat_identity, quat_multiply, quat_rotate
from .model import Model
from .moveable import Moveable
from .state import AppState


class FighterJet(Moveable):
    """The aircraft body plus an orbiting camera steered by the mouse."""

    def __init__(self, state: AppState, registry: CameraRegistry, model: Model,
                 jet_mass: float) -> None:
        super().__init__(state, np.zeros(3), -PI_2, 0.0)
        self.registry = registry
        self.body = FighterJetBody(model, jet_mass)
        self.camera = Camera(state, registry, np.zeros(3))
        self.cam_distance = 10.0
        self.cam_distance_max = 20.0
        self.turn_quat = quat_identity()
        self.rotate_quat = quat_identity()

        self.camera.position = self.body.position + np.full(3, 0.577) * self.cam_distance
        self.camera.orientation = np.full(3, -0.577)
        self.camera.update()

    def move_forward(self) -> None:
        self.body.apply_thrust(1.0)

    def on_mouse_move(self, mouse_pos) -> None:
        """Orbit the camera by the cursor's offset from the window centre."""
        center = self.state.window_center()
        delta = np.radians(
            self.camera.sensitivity * (np.asarray(mouse_pos, dtype=float) - center) / center)
        orientation = self.camera.orientation.copy()

        # No vertical rotation when nearly looking straight up or down.
        cos_angle = float(np.dot(self.camera.up, orientation))
        if cos_angle * np.sign(delta[1]) > 0.99:
            delta[1] = 0.0

        orientation = quat_rotate(quat_from_axis_angle(delta[0], self.camera.up), orientation)
        orientation = quat_rotate(quat_from_axis_angle(delta[1], self.camera.right), orientation)
        self.camera.orientation = orientation

    def on_mouse_scroll(self, offset) -> None:
        self.cam_distance -= float(offset[1])
        self.cam_distance = min(max(self.cam_distance, 1.0), self.cam_distance_max)

    def is_active(self) -> bool:
        return self.registry.active is self.camera

    def set_cam_distance(self, value: float) -> None:
        self.cam_distance = value
        self.cam_distance_max = value * 2.0

    def set_cam_sensitivity(self, value: float) -> None:
        self.camera.sensitivity = value

    def set_mesh_scale(self, scale: float) -> None:
        self.body.mesh_scale = scale

    def update(self) -> None:
        self.body.update(self.state.dt)
        self.update_camera()

    def update_camera(self) -> None:
        """Place the camera behind the body at the current distance."""
        turn = quat_multiply(self.turn_quat, self.rotate_quat)
        actual_back = quat_rotate(turn, self.camera.back)
        self.camera.up = self.up.copy()
        self.camera.orientation = -actual_back
        self.camera.position = self.body.position + actual_back * self.cam_distance
        self.camera.update()


__all__ = ["FighterJet", "math"] if False else ["FighterJet"]