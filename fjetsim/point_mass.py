"""Rigid-body state integrated as a single point with rotational inertia."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .mathutils import quat_conjugate, quat_identity, quat_multiply, quat_normalize, quat_rotate

GRAVITY = 9.81


def _zeros() -> np.ndarray:
    return np.zeros(3)


@dataclass(eq=False)
class PointMass:
    """Mass, velocities, orientation and accumulated force and torque."""

    mass: float = 1.0
    moment_of_inertia: float = 1000.0
    cd_forward: float = 0.02
    cd_side: float = 0.50
    cd_vertical: float = 0.80
    position: np.ndarray = field(default_factory=_zeros)
    velocity: np.ndarray = field(default_factory=_zeros)
    last_velocity: np.ndarray = field(default_factory=_zeros)
    local_velocity: np.ndarray = field(default_factory=_zeros)
    angular_velocity: np.ndarray = field(default_factory=_zeros)
    local_angular_velocity: np.ndarray = field(default_factory=_zeros)
    local_g_force: np.ndarray = field(default_factory=lambda: np.ones(3))
    # The aircraft initially faces -Z.
    local_thrust_dir: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, -1.0]))
    orientation: np.ndarray = field(default_factory=quat_identity)
    force: np.ndarray = field(default_factory=_zeros)
    torque: np.ndarray = field(default_factory=_zeros)
    angle_of_attack: float = 0.0
    angle_of_attack_yaw: float = 0.0

    def apply_thrust(self, thrust: float) -> None:
        """Push along the body's thrust direction."""
        self.force = self.force + quat_rotate(self.orientation, self.local_thrust_dir) * thrust

    def apply_gravity(self) -> None:
        self.force = self.force + np.array([0.0, -GRAVITY * self.mass, 0.0])

    def apply_drag(self, airbrake_drag: float, flaps_drag: float) -> None:
        """Quadratic drag per body axis; extra forward drag from airbrake and flaps."""
        lv = self.local_velocity
        if float(np.dot(lv, lv)) < 0.1:
            return
        forward_cd = self.cd_forward + airbrake_drag + flaps_drag
        coeffs = np.array([self.cd_side, self.cd_vertical, forward_cd])
        drag_local = -lv * np.abs(lv) * coeffs
        self.force = self.force + quat_rotate(self.orientation, drag_local)

    def calc_state(self, dt: float) -> None:
        """Express velocities in the body frame."""
        inv = quat_conjugate(self.orientation)
        self.local_velocity = quat_rotate(inv, self.velocity)
        self.local_angular_velocity = quat_rotate(inv, self.angular_velocity)

    def calc_angle_of_attack(self) -> None:
        lv = self.local_velocity
        if float(np.dot(lv, lv)) < 0.1:
            self.angle_of_attack = 0.0
            self.angle_of_attack_yaw = 0.0
            return
        self.angle_of_attack = math.atan2(-lv[1], lv[2])
        self.angle_of_attack_yaw = math.atan2(lv[0], lv[2])

    def calc_g_force(self, dt: float) -> None:
        """Body-frame acceleration since the previous call."""
        if dt == 0:
            raise ValueError("time step must not be zero")
        acc = (self.velocity - self.last_velocity) / dt
        self.local_g_force = quat_rotate(quat_conjugate(self.orientation), acc)
        self.last_velocity = self.velocity.copy()

    def update(self, dt: float) -> None:
        """Integrate one step and clear the accumulated force and torque."""
        self.velocity = self.velocity + self.force / self.mass * dt
        self.position = self.position + self.velocity * dt

        if self.position[1] < 0.0:
            self.position[1] = 0.0
            self.velocity[1] = max(0.0, float(self.velocity[1]))

        self.angular_velocity = self.angular_velocity + self.torque / self.moment_of_inertia * dt
        rot_step = np.array([0.0, *(self.angular_velocity * dt)])
        self.orientation = quat_normalize(
            self.orientation + quat_multiply(rot_step * 0.5, self.orientation)
        )

        self.force = np.zeros(3)
        self.torque = np.zeros(3)