"""Factories for simple meshes: lines, axes, planes and circles."""

from __future__ import annotations

import math

import numpy as np

from .mathutils import PI
from .mesh import DrawMode, Mesh, VertexP, VertexPC, VertexPCTN, VertexPT
from .state import BLUE, GREEN, RED

_PLANE_INDICES = {
    DrawMode.TRIANGLES: (0, 1, 2, 2, 3, 0),
    DrawMode.PATCHES: (0, 1, 2, 3),
}


def _grid_offsets(mode, resolution: int) -> tuple[int, ...]:
    r = resolution
    if mode == DrawMode.TRIANGLES:
        # two counter-clockwise triangles per quad
        return (r + 1, 1, 0, 0, r, r + 1)
    if mode == DrawMode.PATCHES:
        return (r + 1, 1, 0, r)
    raise ValueError(f"unexpected draw mode {mode!r}")


def line(p1, p2, color) -> Mesh:
    """A single coloured line segment."""
    return Mesh([VertexPC(p1, color), VertexPC(p2, color)], mode=DrawMode.LINES)


def axis() -> Mesh:
    """Unit X, Y and Z axes coloured red, green and blue."""
    origin = (0.0, 0.0, 0.0)
    vertices = [
        VertexPC(origin, RED), VertexPC((1.0, 0.0, 0.0), RED),
        VertexPC(origin, GREEN), VertexPC((0.0, 1.0, 0.0), GREEN),
        VertexPC(origin, BLUE), VertexPC((0.0, 0.0, 1.0), BLUE),
    ]
    return Mesh(vertices, mode=DrawMode.LINES)


def plane(color=(1.0, 1.0, 1.0), mode=DrawMode.TRIANGLES) -> Mesh:
    """A 2x2 quad in the XY plane, as triangles or as one patch."""
    try:
        indices = _PLANE_INDICES[DrawMode(mode)]
    except (KeyError, ValueError):
        raise ValueError(f"unhandled draw mode {mode!r}") from None
    normal = (1.0, 0.0, 0.0)
    vertices = [
        VertexPCTN((-1.0, -1.0, 0.0), color, (0.0, 0.0), normal),
        VertexPCTN((-1.0, 1.0, 0.0), color, (0.0, 1.0), normal),
        VertexPCTN((1.0, 1.0, 0.0), color, (1.0, 1.0), normal),
        VertexPCTN((1.0, -1.0, 0.0), color, (1.0, 0.0), normal),
    ]
    return Mesh(vertices, indices, mode)


def grid_plane(resolution: int, mode=DrawMode.TRIANGLES, up=(0.0, 1.0, 0.0)) -> Mesh:
    """A square grid of ``resolution`` x ``resolution`` vertices facing ``up``."""
    if resolution < 2:
        raise ValueError("a grid plane needs a resolution of at least 2")
    offsets = _grid_offsets(mode, resolution)
    r = resolution

    # Flipping up keeps the winding counter-clockwise as seen from ``up``.
    normal = -np.asarray(up, dtype=float)
    axis_a = np.array([normal[1], normal[2], normal[0]])
    axis_b = np.cross(normal, axis_a)

    vertices: list[VertexPT] = []
    indices: list[int] = []
    for y in range(r):
        percent_y = y / (r - 1)
        p_y = (percent_y - 0.5) * 2.0 * axis_b
        for x in range(r):
            percent_x = x / (r - 1)
            p_x = (percent_x - 0.5) * 2.0 * axis_a
            vertices.append(VertexPT(normal + p_x + p_y, (percent_x, percent_y)))
            if x != r - 1 and y != r - 1:
                idx = x + y * r
                indices.extend(idx + o for o in offsets)

    return Mesh(vertices, indices, mode)


def circle(resolution: int = 60) -> Mesh:
    """A unit circle in the XY plane drawn as a triangle fan."""
    if resolution <= 0:
        raise ValueError("a circle needs a positive resolution")
    step = (PI * 2.0) / resolution
    vertices = [
        VertexP((math.cos(i * step), math.sin(i * step), 0.0))
        for i in range(resolution)
    ]
    return Mesh(vertices, mode=DrawMode.TRIANGLE_FAN)