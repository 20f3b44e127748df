"""The aircraft body: its parts, physics core and control-surface animation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .masses import MASS_FRACTIONS
from .mathutils import (
    quat_from_axis_angle,
    quat_identity,
    quat_rotate,
    quat_to_mat4,
    scale_matrix,
    translation_matrix,
)
from .mesh import Mesh
from .meshes import circle
from .model import Model
from .point_mass import PointMass

_FLAP_MAX_ANGLE = math.radians(30.0)
_AIRBRAKE_MAX_ANGLE = math.radians(10.0)
_HINGE_AXIS = (-1.0, 0.0, 0.0)


@dataclass(eq=False)
class AircraftPart:
    """One named piece of the aircraft with its mesh, mass and placement."""

    name: str
    mass_percent: float
    mesh: Mesh = field(default_factory=Mesh)
    mass: float = 0.0
    offset: np.ndarray = field(default_factory=lambda: np.zeros(3))
    color: np.ndarray = field(default_factory=lambda: np.array([0.24377, 0.355047, 0.6226415]))
    local_rotation: np.ndarray = field(default_factory=quat_identity)
    model: np.ndarray = field(default_factory=lambda: np.eye(4))
    draw_debug: bool = False
    debug_mass_mesh: Mesh = field(default_factory=circle)


class FighterJetBody:
    """Aircraft parts built from a model, moved by a single point-mass core."""

    def __init__(self, model: Model, total_mass: float) -> None:
        meshes = model.mesh_map()
        self.parts: dict[str, AircraftPart] = {}
        for name, fraction in MASS_FRACTIONS.items():
            found = meshes.get(name)
            if found is None:
                raise KeyError(f"model has no mesh named {name!r}")
            self.parts[name] = AircraftPart(
                name=name,
                mass_percent=fraction,
                mesh=found.mesh,
                mass=total_mass * fraction,
                offset=np.array(found.average_pos, dtype=float),
            )
        self.parts["Canopy"].color = np.ones(3)

        sockets = model.socket_map()

        def socket(name: str) -> np.ndarray:
            return np.array(sockets.get(name, np.eye(4)), dtype=float)

        self.afterburner1 = socket("Afterburner1")  # left
        self.afterburner2 = socket("Afterburner2")  # right
        self.hardpoint1 = socket("Hardpoint1")  # under left wing
        self.hardpoint2 = socket("Hardpoint2")  # under right wing

        self.physics_core = PointMass(mass=total_mass)
        self.physics_core.position[1] = 20.0

        self.max_thrust = 1.0
        self.ground_height = 0.0
        self.stiffness = 100000.0
        self.damping_coeff = 5000.0
        self.airbrake_drag = 0.0
        self.flaps_drag = 0.0
        self.mesh_scale = 1.0
        self.airbrake_deployed = False
        self.flaps_deployed = False

        self._flap_angle = 0.0
        self._airbrake_angle = 0.0

    @property
    def all_parts(self) -> list[AircraftPart]:
        return list(self.parts.values())

    @property
    def position(self) -> np.ndarray:
        return self.physics_core.position

    @property
    def orientation(self) -> np.ndarray:
        return self.physics_core.orientation

    def toggle_airbrake(self) -> None:
        self.airbrake_deployed = not self.airbrake_deployed

    def toggle_flaps(self) -> None:
        self.flaps_deployed = not self.flaps_deployed

    def apply_thrust(self, value: float) -> None:
        """Apply thrust for a throttle ``value`` in [0, 1]."""
        self.physics_core.apply_thrust(value * self.max_thrust)

    def update(self, dt: float) -> None:
        core = self.physics_core
        core.calc_state(dt)
        core.calc_angle_of_attack()
        core.calc_g_force(dt)
        self.update_physics(dt)
        self.update_mesh(dt)

    def update_physics(self, dt: float) -> None:
        """Apply gravity, drag and ground contact, then integrate."""
        core = self.physics_core
        core.apply_gravity()
        core.apply_drag(
            self.airbrake_drag if self.airbrake_deployed else 0.0,
            self.flaps_drag if self.flaps_deployed else 0.0,
        )

        for part in self.parts.values():
            rotated_offset = quat_rotate(core.orientation, part.offset)
            world_y = float(core.position[1])
            if world_y < self.ground_height:
                depth = min(max(self.ground_height - world_y, 0.0), 0.5)
                spring = depth * self.stiffness
                part_vel = core.velocity + np.cross(core.angular_velocity, rotated_offset)
                damping = -float(part_vel[1]) * self.damping_coeff
                contact = np.array([0.0, spring + damping, 0.0])
                core.force = core.force + contact
                core.torque = core.torque + np.cross(rotated_offset, contact)

        core.update(dt)

    @staticmethod
    def _step_angle(angle: float, deployed: bool, max_angle: float, dt: float) -> float:
        direction = 1.0 if deployed else -1.0
        angle += max_angle * 0.5 * direction * dt
        return min(max(angle, 0.0), max_angle)

    def update_mesh(self, dt: float) -> None:
        """Animate flaps and airbrake, then place every part in the world."""
        self._flap_angle = self._step_angle(
            self._flap_angle, self.flaps_deployed, _FLAP_MAX_ANGLE, dt)
        flap_q = quat_from_axis_angle(self._flap_angle, _HINGE_AXIS)
        self.parts["LeftFlap"].local_rotation = flap_q.copy()
        self.parts["RightFlap"].local_rotation = flap_q.copy()

        self._airbrake_angle = self._step_angle(
            self._airbrake_angle, self.airbrake_deployed, _AIRBRAKE_MAX_ANGLE, dt)
        self.parts["Airbrake"].local_rotation = quat_from_axis_angle(
            self._airbrake_angle, _HINGE_AXIS)

        core = self.physics_core
        body_transform = (
            translation_matrix(core.position)
            @ quat_to_mat4(core.orientation)
            @ scale_matrix(self.mesh_scale)
        )
        for part in self.parts.values():
            part_move = translation_matrix(part.offset) @ quat_to_mat4(part.local_rotation)
            part.model = body_transform @ part_move