"""Batching of coloured rectangles into vertex and index data for drawing."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .srgb import srgb_to_linear

Matrix = tuple[tuple[float, float, float, float], ...]

# Row-major; maps OpenGL clip depth [-1, 1] to [0, 1].
_OPENGL_TO_WGPU: Matrix = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 0.5, 0.5),
    (0.0, 0.0, 0.0, 1.0),
)

_INITIAL_CAPACITY = 128
_VERTEX_FORMAT = struct.Struct("<6f")
_INDEX_FORMAT = struct.Struct("<I")


@dataclass(frozen=True)
class Quad:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Vertex:
    """A vertex position with a linear-light RGBA colour."""

    x: float
    y: float
    r: float
    g: float
    b: float
    a: float


def _matmul(a: Matrix, b: Matrix) -> Matrix:
    return tuple(
        tuple(sum(a[i][k] * b[k][j] for k in range(4)) for j in range(4))
        for i in range(4)
    )


def ortho_matrix(width: float, height: float) -> Matrix:
    """Row-major projection from pixels (origin top left) to clip space."""
    if width == 0 or height == 0:
        raise ValueError("width and height must be non-zero")
    left, right, top, bottom, near, far = 0.0, float(width), 0.0, float(height), 0.0, 1.0
    ortho: Matrix = (
        (2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left)),
        (0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom)),
        (0.0, 0.0, -2.0 / (far - near), -(far + near) / (far - near)),
        (0.0, 0.0, 0.0, 1.0),
    )
    return _matmul(_OPENGL_TO_WGPU, ortho)


class QuadBatch:
    """Collects quads and prepares their vertex, index and uniform data."""

    def __init__(self, width: float, height: float) -> None:
        self.matrix = ortho_matrix(width, height)
        self.vertices: list[Vertex] = []
        self.indices: list[int] = []
        self.vertex_capacity = _INITIAL_CAPACITY
        self.index_capacity = _INITIAL_CAPACITY
        self.num_indices = 0

    def clear(self) -> None:
        self.vertices.clear()
        self.indices.clear()

    def push_quad(self, quad: Quad, color: tuple[int, ...]) -> None:
        """Add ``quad`` in an sRGB colour given as (r, g, b) or (r, g, b, a) bytes."""
        if len(color) == 3:
            red, green, blue = color
            alpha = 255
        else:
            red, green, blue, alpha = color
        base = len(self.vertices)
        self.indices.extend(base + offset for offset in (0, 1, 2, 2, 1, 3))
        r = srgb_to_linear(red / 255.0)
        g = srgb_to_linear(green / 255.0)
        b = srgb_to_linear(blue / 255.0)
        a = alpha / 255.0
        right = quad.x + quad.width
        below = quad.y + quad.height
        for x, y in ((quad.x, quad.y), (right, quad.y), (quad.x, below), (right, below)):
            self.vertices.append(Vertex(x, y, r, g, b, a))

    def resize(self, width: float, height: float) -> None:
        self.matrix = ortho_matrix(width, height)

    def prepare(self) -> tuple[bytes, bytes, bytes]:
        """Grow capacities as needed and pack the data.

        Returns the uniform matrix (16 column-major floats), the vertices and
        the indices, all little-endian.
        """
        while self.vertex_capacity < len(self.vertices):
            self.vertex_capacity *= 2
        while self.index_capacity < len(self.indices):
            self.index_capacity *= 2

        columns = [self.matrix[row][col] for col in range(4) for row in range(4)]
        uniform = struct.pack("<16f", *columns)
        vertex_data = b"".join(
            _VERTEX_FORMAT.pack(v.x, v.y, v.r, v.g, v.b, v.a) for v in self.vertices
        )
        index_data = b"".join(_INDEX_FORMAT.pack(i) for i in self.indices)
        self.num_indices = len(self.indices)
        return uniform, vertex_data, index_data