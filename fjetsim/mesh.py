"""Vertex layouts and meshes: vertex data, optional indices and a draw mode."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import ClassVar, Iterable, Sequence, Union

from .transformable import Transformable

logger = logging.getLogger(__name__)


class DrawMode(IntEnum):
    """Primitive types a mesh can be drawn as."""

    POINTS = 0x0000
    LINES = 0x0001
    TRIANGLES = 0x0004
    TRIANGLE_FAN = 0x0006
    PATCHES = 0x000E


def _components(values: Iterable[float], n: int, what: str) -> tuple[float, ...]:
    comps = tuple(float(v) for v in values)
    if len(comps) != n:
        raise ValueError(f"{what} needs {n} components, got {len(comps)}")
    return comps


@dataclass(frozen=True)
class VertexP:
    """A vertex with a position only."""

    position: tuple[float, float, float]

    LAYOUT: ClassVar[tuple[int, ...]] = (3,)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _components(self.position, 3, "position"))


@dataclass(frozen=True)
class VertexPC:
    """A vertex with a position and a colour."""

    position: tuple[float, float, float]
    color: tuple[float, float, float] = (0.0, 0.0, 0.0)

    LAYOUT: ClassVar[tuple[int, ...]] = (3, 3)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _components(self.position, 3, "position"))
        object.__setattr__(self, "color", _components(self.color, 3, "color"))


@dataclass(frozen=True)
class VertexPT:
    """A vertex with a position and texture coordinates."""

    position: tuple[float, float, float]
    texture: tuple[float, float] = (0.0, 0.0)

    LAYOUT: ClassVar[tuple[int, ...]] = (3, 2)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _components(self.position, 3, "position"))
        object.__setattr__(self, "texture", _components(self.texture, 2, "texture"))


@dataclass(frozen=True)
class VertexPCTN:
    """A vertex with position, colour, texture coordinates and normal."""

    position: tuple[float, float, float]
    color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    texture: tuple[float, float] = (0.0, 0.0)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)

    LAYOUT: ClassVar[tuple[int, ...]] = (3, 3, 2, 3)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _components(self.position, 3, "position"))
        object.__setattr__(self, "color", _components(self.color, 3, "color"))
        object.__setattr__(self, "texture", _components(self.texture, 2, "texture"))
        object.__setattr__(self, "normal", _components(self.normal, 3, "normal"))


Vertex = Union[VertexP, VertexPC, VertexPT, VertexPCTN]
_VERTEX_TYPES = (VertexP, VertexPC, VertexPT, VertexPCTN)


def _check_vertices(vertices: Sequence[Vertex]) -> None:
    kinds = {type(v) for v in vertices}
    if len(kinds) > 1:
        raise TypeError("all vertices of a mesh must share one layout")
    if kinds and not issubclass(kinds.pop(), _VERTEX_TYPES):
        raise TypeError("vertices must be VertexP, VertexPC, VertexPT or VertexPCTN")


def _resolve_index(raw: str, count: int, what: str) -> int:
    """Turn a 1-based (or negative, relative) OBJ index into a 0-based one."""
    if raw == "":
        return -1
    value = int(raw)
    if value == 0:
        raise ValueError(f"{what} index 0 is not valid")
    idx = value - 1 if value > 0 else count + value
    if not 0 <= idx < count:
        raise ValueError(f"{what} index {value} out of range ({count} defined)")
    return idx


class Mesh(Transformable):
    """Vertex data with optional indices, drawn as one primitive type."""

    def __init__(self, vertices: Iterable[Vertex] = (), indices: Iterable[int] = (),
                 mode: DrawMode = DrawMode.TRIANGLES) -> None:
        super().__init__()
        self.vertices: list[Vertex] = list(vertices)
        _check_vertices(self.vertices)
        self.indices: list[int] = [int(i) for i in indices]
        for i in self.indices:
            if not 0 <= i < len(self.vertices):
                raise ValueError(f"index {i} out of range for {len(self.vertices)} vertices")
        self.mode = DrawMode(mode)
        self._count = len(self.indices) or len(self.vertices)

    @property
    def count(self) -> int:
        """Number of elements drawn: indices if present, vertices otherwise."""
        return self._count

    @property
    def indexed(self) -> bool:
        """Whether the mesh is drawn through its index list."""
        return bool(self.indices)

    def update_data(self, vertices: Iterable[Vertex]) -> None:
        """Replace the vertex data; the draw count becomes the vertex count."""
        new_vertices = list(vertices)
        _check_vertices(new_vertices)
        self.vertices = new_vertices
        self._count = len(new_vertices)

    @classmethod
    def load_obj(cls, path) -> "Mesh":
        """Load a Wavefront OBJ file into an indexed triangle mesh."""
        path = Path(path)
        positions: list[tuple[float, ...]] = []
        colors: list[tuple[float, ...]] = []
        texcoords: list[tuple[float, ...]] = []
        normals: list[tuple[float, ...]] = []
        triangles: list[tuple[int, int, int]] = []
        corners: list[tuple[int, int, int]] = []

        with path.open(encoding="utf-8") as fh:
            for lineno, raw in enumerate(fh, 1):
                line = raw.split("#", 1)[0].strip()
                if not line:
                    continue
                keyword, *args = line.split()
                try:
                    if keyword == "v":
                        nums = [float(a) for a in args]
                        if len(nums) == 6:
                            positions.append(tuple(nums[:3]))
                            colors.append(tuple(nums[3:]))
                        elif len(nums) in (3, 4):
                            positions.append(tuple(nums[:3]))
                            colors.append((1.0, 1.0, 1.0))
                        else:
                            raise ValueError(f"vertex needs 3, 4 or 6 values, got {len(nums)}")
                    elif keyword == "vt":
                        nums = [float(a) for a in args]
                        if not 1 <= len(nums) <= 3:
                            raise ValueError(f"texcoord needs 1 to 3 values, got {len(nums)}")
                        texcoords.append((nums[0], nums[1] if len(nums) > 1 else 0.0))
                    elif keyword == "vn":
                        nums = [float(a) for a in args]
                        if len(nums) != 3:
                            raise ValueError(f"normal needs 3 values, got {len(nums)}")
                        normals.append(tuple(nums))
                    elif keyword == "f":
                        if len(args) < 3:
                            raise ValueError("a face needs at least 3 vertices")
                        refs = []
                        for token in args:
                            parts = token.split("/")
                            if len(parts) > 3 or parts[0] == "":
                                raise ValueError(f"malformed face vertex {token!r}")
                            parts += [""] * (3 - len(parts))
                            refs.append((
                                _resolve_index(parts[0], len(positions), "vertex"),
                                _resolve_index(parts[1], len(texcoords), "texcoord"),
                                _resolve_index(parts[2], len(normals), "normal"),
                            ))
                        start = len(corners)
                        corners.extend(refs)
                        for k in range(1, len(refs) - 1):
                            triangles.append((start, start + k, start + k + 1))
                except ValueError as exc:
                    raise ValueError(f"{path}:{lineno}: {exc}") from exc

        vertices: list[VertexPCTN] = []
        indices: list[int] = []
        unique: dict[tuple[int, int, int], int] = {}
        for tri in triangles:
            for corner in tri:
                key = corners[corner]
                if key not in unique:
                    v, vt, vn = key
                    unique[key] = len(vertices)
                    vertices.append(VertexPCTN(
                        position=positions[v],
                        color=colors[v],
                        texture=texcoords[vt] if vt >= 0 else (0.0, 0.0),
                        normal=normals[vn] if vn >= 0 else (0.0, 0.0, 0.0),
                    ))
                indices.append(unique[key])

        logger.info(
            "Loaded %s: %d positions, %d texcoords, %d normals -> %d vertices, %d indices",
            path, len(positions), len(texcoords), len(normals), len(vertices), len(indices),
        )
        return cls(vertices, indices, DrawMode.TRIANGLES)