"""A loaded scene: named meshes with their pivots and named sockets."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .mesh import Mesh


@dataclass
class Socket:
    """A named attachment point with its world transform."""

    name: str
    transform: np.ndarray = field(default_factory=lambda: np.eye(4))


@dataclass
class ModelMesh:
    """A named mesh and the pivot its vertices are relative to."""

    name: str
    mesh: Mesh
    average_pos: np.ndarray = field(default_factory=lambda: np.zeros(3))


@dataclass
class Model:
    """Meshes and sockets making up one model."""

    meshes: list[ModelMesh] = field(default_factory=list)
    sockets: list[Socket] = field(default_factory=list)

    def mesh_map(self) -> dict[str, ModelMesh]:
        """Meshes by name; a later mesh wins over an earlier one of the same name."""
        return {m.name: m for m in self.meshes}

    def socket_map(self) -> dict[str, np.ndarray]:
        """Socket transforms by name; later sockets win."""
        return {s.name: s.transform for s in self.sockets}