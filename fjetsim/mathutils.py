"""Vector, quaternion and matrix helpers built on numpy.

Vectors are 1-D float arrays. Quaternions are arrays ``[w, x, y, z]``.
Matrices are 4x4 (or 3x3) arrays meant to multiply column vectors
(``m @ v``).
"""

from __future__ import annotations

import math

import numpy as np

PI = 3.141592265359
PI_2 = PI / 2.0
PI_3 = PI / 3.0
PI_6 = PI / 6.0


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Return a 3-component float vector."""
    return np.array([x, y, z], dtype=float)


def normalize(v) -> np.ndarray:
    """Return ``v`` scaled to unit length."""
    arr = np.asarray(v, dtype=float)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / length


def quat_identity() -> np.ndarray:
    """Return the identity rotation."""
    return np.array([1.0, 0.0, 0.0, 0.0])


def quat_from_axis_angle(angle: float, axis) -> np.ndarray:
    """Rotation of ``angle`` radians about ``axis`` (the axis is used as given)."""
    half = angle * 0.5
    xyz = np.asarray(axis, dtype=float) * math.sin(half)
    return np.array([math.cos(half), *xyz])


def quat_multiply(a, b) -> np.ndarray:
    """Hamilton product ``a * b``: rotating by ``b`` first, then ``a``."""
    aw, ax, ay, az = np.asarray(a, dtype=float)
    bw, bx, by, bz = np.asarray(b, dtype=float)
    return np.array([
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
    ])


def quat_conjugate(q) -> np.ndarray:
    """Return the conjugate, which is the inverse of a unit quaternion."""
    w, x, y, z = np.asarray(q, dtype=float)
    return np.array([w, -x, -y, -z])


def quat_normalize(q) -> np.ndarray:
    """Return ``q`` scaled to unit length; a zero quaternion becomes identity."""
    arr = np.asarray(q, dtype=float)
    length = float(np.linalg.norm(arr))
    if length <= 0.0:
        return quat_identity()
    return arr / length


def quat_rotate(q, v) -> np.ndarray:
    """Rotate vector ``v`` by quaternion ``q``."""
    w, *xyz = np.asarray(q, dtype=float)
    qv = np.array(xyz)
    vec = np.asarray(v, dtype=float)
    uv = np.cross(qv, vec)
    uuv = np.cross(qv, uv)
    return vec + (uv * w + uuv) * 2.0


def quat_to_mat3(q) -> np.ndarray:
    """Return the 3x3 rotation matrix of a unit quaternion."""
    w, x, y, z = np.asarray(q, dtype=float)
    return np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ])


def quat_to_mat4(q) -> np.ndarray:
    """Return the 4x4 homogeneous rotation matrix of a unit quaternion."""
    m = np.eye(4)
    m[:3, :3] = quat_to_mat3(q)
    return m


def translation_matrix(offset) -> np.ndarray:
    """Return a 4x4 matrix translating by ``offset``."""
    m = np.eye(4)
    m[:3, 3] = np.asarray(offset, dtype=float)
    return m


def scale_matrix(factors) -> np.ndarray:
    """Return a 4x4 scale matrix from a scalar or a 3-vector."""
    arr = np.asarray(factors, dtype=float)
    if arr.ndim == 0:
        arr = np.full(3, float(arr))
    if arr.shape != (3,):
        raise ValueError(f"scale needs a scalar or 3 components, got shape {arr.shape}")
    return np.diag([*arr, 1.0])


def rotation_matrix(angle: float, axis) -> np.ndarray:
    """Return a 4x4 matrix rotating ``angle`` radians about ``axis`` (normalized)."""
    a = normalize(axis)
    c = math.cos(angle)
    s = math.sin(angle)
    skew = np.array([
        [0.0, -a[2], a[1]],
        [a[2], 0.0, -a[0]],
        [-a[1], a[0], 0.0],
    ])
    m = np.eye(4)
    m[:3, :3] = c * np.eye(3) + s * skew + (1.0 - c) * np.outer(a, a)
    return m


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = normalize(np.asarray(center, dtype=float) - eye)
    s = normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -np.dot(s, eye)
    m[1, 3] = -np.dot(u, eye)
    m[2, 3] = np.dot(f, eye)
    return m