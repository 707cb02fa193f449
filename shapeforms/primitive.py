"""Drawable primitives: triangles, quads and circles with their vertex data."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import numpy as np

from shapeforms.common import Vec4
from shapeforms.transform import Transform

__all__ = [
    "PrimitiveError",
    "DrawCall",
    "Primitive",
    "Triangle",
    "Quad",
    "Circle",
]

VERTEX_FUNCTION = "vertex_main"
FRAGMENT_FUNCTION = "fragment_main"
PIPELINE_NAME = f"{VERTEX_FUNCTION}:{FRAGMENT_FUNCTION}"

POSITION_BUFFER_INDEX = 0
COLOR_BUFFER_INDEX = 1
TRANSFORM_BUFFER_INDEX = 11

TRIANGLE = "triangle"

_MAX_INDEX = np.iinfo(np.uint16).max


class PrimitiveError(RuntimeError):
    """Raised when a primitive cannot be built or encoded."""


class _Encoder(Protocol):
    def set_pipeline(self, name: str) -> Any: ...

    def set_vertex_buffer(self, data: np.ndarray, index: int) -> Any: ...

    def set_vertex_bytes(self, data: bytes, index: int) -> Any: ...

    def draw_indexed(self, primitive_type: str, index_count: int, indices: np.ndarray) -> Any: ...


@dataclass(frozen=True)
class DrawCall:
    """An indexed draw issued by a primitive."""

    primitive_type: str
    index_count: int
    indices: tuple[int, ...]


Vec4Like = Vec4 | Sequence[float]


def _as_float4_array(values: Iterable[Vec4Like] | None, what: str) -> np.ndarray:
    rows = [tuple(v) for v in values] if values is not None else []
    if not rows:
        raise PrimitiveError(f"No {what} defined")
    if any(len(row) != 4 for row in rows):
        raise PrimitiveError(f"Every {what} entry must have four components")
    array = np.asarray(rows, dtype=np.float32)
    array.flags.writeable = False
    return array


def _as_index_array(indices: Iterable[int]) -> np.ndarray:
    array = np.asarray(list(indices), dtype=np.uint16)
    array.flags.writeable = False
    return array


class Primitive(ABC):
    """A shape with vertex positions, per-vertex colours, indices and a transform."""

    pipeline: str = PIPELINE_NAME

    def __init__(
        self,
        vertices: Iterable[Vec4Like],
        colors: Iterable[Vec4Like],
        indices: Iterable[int],
    ) -> None:
        self._vertices = _as_float4_array(vertices, "vertices")
        self._colors = _as_float4_array(colors, "color")
        self._indices = _as_index_array(indices)
        self._transform = Transform()

    @property
    def vertices(self) -> np.ndarray:
        """Vertex positions as a read-only (n, 4) float32 array."""
        return self._vertices

    @property
    def colors(self) -> np.ndarray:
        """Vertex colours as a read-only (n, 4) float32 array."""
        return self._colors

    @property
    def indices(self) -> np.ndarray:
        """Triangle indices as a read-only uint16 array."""
        return self._indices

    @property
    def transform(self) -> Transform:
        """The model transform owned by this primitive."""
        return self._transform

    def encode_render_commands(self, encoder: _Encoder) -> None:
        """Bind pipeline, vertex and colour buffers and the transform matrix."""
        if encoder is None:
            raise PrimitiveError("Invalid encoder")
        encoder.set_pipeline(self.pipeline)
        encoder.set_vertex_buffer(self._vertices, POSITION_BUFFER_INDEX)
        encoder.set_vertex_buffer(self._colors, COLOR_BUFFER_INDEX)
        # The shader expects the matrix in column-major order.
        matrix_bytes = np.asarray(self._transform.matrix, dtype=np.float32).tobytes(order="F")
        encoder.set_vertex_bytes(matrix_bytes, TRANSFORM_BUFFER_INDEX)

    @property
    @abstractmethod
    def index_count(self) -> int:
        """Number of indices used by a draw."""

    def draw(self, encoder: _Encoder) -> DrawCall:
        """Issue the indexed triangle draw on ``encoder`` and describe it."""
        if encoder is None:
            raise PrimitiveError("Invalid encoder")
        count = self.index_count
        encoder.draw_indexed(TRIANGLE, count, self._indices)
        return DrawCall(TRIANGLE, count, tuple(int(i) for i in self._indices[:count]))


class Triangle(Primitive):
    """A single triangle."""

    DEFAULT_VERTICES = (
        (0.0, 0.5, 0.0, 1.0),
        (-0.5, -0.5, 0.0, 1.0),
        (0.5, -0.5, 0.0, 1.0),
    )
    DEFAULT_COLORS = ((0.5, 0.5, 0.5, 1.0),) * 3
    INDICES = (0, 1, 2)

    def __init__(
        self,
        vertices: Iterable[Vec4Like] | None = None,
        colors: Iterable[Vec4Like] | None = None,
    ) -> None:
        if vertices is None and colors is None:
            vertices, colors = self.DEFAULT_VERTICES, self.DEFAULT_COLORS
        super().__init__(vertices, colors, self.INDICES)

    @property
    def index_count(self) -> int:
        return 3


class Quad(Primitive):
    """A quadrilateral made of two triangles."""

    DEFAULT_VERTICES = (
        (-0.5, 0.5, 0.0, 1.0),
        (0.5, 0.5, 0.0, 1.0),
        (0.5, -0.5, 0.0, 1.0),
        (-0.5, -0.5, 0.0, 1.0),
    )
    DEFAULT_COLORS = ((0.0, 0.0, 1.0, 1.0),) * 4
    INDICES = (0, 2, 3, 0, 1, 2)

    def __init__(
        self,
        vertices: Iterable[Vec4Like] | None = None,
        colors: Iterable[Vec4Like] | None = None,
    ) -> None:
        if vertices is None and colors is None:
            vertices, colors = self.DEFAULT_VERTICES, self.DEFAULT_COLORS
        super().__init__(vertices, colors, self.INDICES)

    @property
    def index_count(self) -> int:
        return 6


class Circle(Primitive):
    """A filled circle drawn as a triangle fan around its centre."""

    COLOR = (0.4, 0.2, 0.3, 1.0)

    def __init__(self, radius: float = 0.5, vertex_count: int = 100) -> None:
        if vertex_count < 1:
            raise ValueError("vertex_count must be at least 1")
        if vertex_count >= _MAX_INDEX:
            raise ValueError(f"vertex_count must be below {_MAX_INDEX}")
        self.radius = float(radius)
        self.vertex_count = vertex_count

        step = 2 * math.pi / vertex_count
        positions = [(0.0, 0.0, 0.0, 1.0)]
        positions.extend(
            (self.radius * math.cos(i * step), self.radius * math.sin(i * step), 0.0, 1.0)
            for i in range(1, vertex_count + 1)
        )
        colors = [self.COLOR] * (vertex_count + 1)

        indices: list[int] = []
        for i in range(1, vertex_count + 1):
            indices.extend((0, i, 1 if i == vertex_count else i + 1))
        for i in range(1, vertex_count):
            indices.extend((0, i, i + 1))

        super().__init__(positions, colors, indices)

    @property
    def index_count(self) -> int:
        return len(self._indices)