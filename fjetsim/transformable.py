"""Objects carrying separate translation, rotation and scale matrices."""

from __future__ import annotations

import numpy as np

from .mathutils import (
    quat_to_mat4,
    rotation_matrix,
    scale_matrix,
    translation_matrix,
)


class Transformable:
    """Holds translation, rotation and scale as 4x4 matrices."""

    def __init__(self) -> None:
        self.mat_translation = np.eye(4)
        self.mat_rotation = np.eye(4)
        self.mat_scale = np.eye(4)

    @property
    def model(self) -> np.ndarray:
        """The model matrix: translation * rotation * scale."""
        return self.mat_translation @ self.mat_rotation @ self.mat_scale

    def translate(self, offset) -> None:
        """Append a translation to the current one."""
        self.mat_translation = self.mat_translation @ translation_matrix(offset)

    def rotate(self, angle: float, axis) -> None:
        """Append a rotation of ``angle`` radians about ``axis``."""
        self.mat_rotation = self.mat_rotation @ rotation_matrix(angle, axis)

    def rotate_quat(self, q) -> None:
        """Apply quaternion ``q`` after the current rotation."""
        self.mat_rotation = quat_to_mat4(q) @ self.mat_rotation

    def scale(self, factor) -> None:
        """Append a scale: a scalar, an (x, y) pair with z kept, or (x, y, z)."""
        arr = np.asarray(factor, dtype=float)
        if arr.shape == (2,):
            arr = np.append(arr, 1.0)
        self.mat_scale = self.mat_scale @ scale_matrix(arr)

    def set_translation(self, position) -> None:
        """Replace the translation with a 4x4 matrix or a position vector."""
        arr = np.asarray(position, dtype=float)
        if arr.shape == (4, 4):
            self.mat_translation = arr.copy()
        elif arr.shape == (3,):
            self.mat_translation = translation_matrix(arr)
        else:
            raise ValueError(f"expected a 4x4 matrix or 3-vector, got shape {arr.shape}")

    def set_rotation(self, q) -> None:
        """Replace the rotation with a 4x4 matrix or a quaternion ``[w, x, y, z]``."""
        arr = np.asarray(q, dtype=float)
        if arr.shape == (4, 4):
            self.mat_rotation = arr.copy()
        elif arr.shape == (4,):
            self.mat_rotation = quat_to_mat4(arr)
        else:
            raise ValueError(f"expected a 4x4 matrix or quaternion, got shape {arr.shape}")

    def set_scale(self, factor) -> None:
        """Replace the scale with a 4x4 matrix, a scalar or a 3-vector."""
        arr = np.asarray(factor, dtype=float)
        if arr.shape == (4, 4):
            self.mat_scale = arr.copy()
        else:
            self.mat_scale = scale_matrix(arr)