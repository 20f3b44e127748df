"""A point light drawn as a small billboard quad."""

from __future__ import annotations

import numpy as np

from .mesh import DrawMode, Mesh
from .meshes import grid_plane
from .state import FORWARD


class Light(Mesh):
    """A light with a position, radius and colour."""

    def __init__(self, position, radius: float = 30.0, color=(1.0, 1.0, 1.0)) -> None:
        quad = grid_plane(2, DrawMode.TRIANGLES, FORWARD)
        super().__init__(quad.vertices, quad.indices, quad.mode)
        self.position = np.array(position, dtype=float)
        self.radius = float(radius)
        self.color = np.array(color, dtype=float)

    def update(self) -> None:
        """Move the quad to the light's position."""
        self.set_translation(self.position)

    def uniforms(self) -> dict[str, object]:
        """Shader uniform values describing this light."""
        return {
            "u_lightRadius": self.radius,
            "u_lightPos": self.position.copy(),
            "u_lightColor": self.color.copy(),
        }