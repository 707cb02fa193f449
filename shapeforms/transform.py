"""A 4x4 model transform built from translations, rotations and scales."""

from __future__ import annotations

import numpy as np

__all__ = ["Transform"]


class Transform:
    """Accumulates affine transformations into a single 4x4 float32 matrix.

    Each operation is applied after the ones already accumulated, that is
    the new matrix is left-multiplied onto the current one.
    """

    def __init__(self) -> None:
        self._matrix = np.identity(4, dtype=np.float32)

    def _apply(self, other: np.ndarray) -> None:
        self._matrix = (other.astype(np.float32) @ self._matrix).astype(np.float32)

    def set_translation(self, x: float, y: float, z: float) -> None:
        """Apply a translation by (x, y, z)."""
        translation = np.identity(4, dtype=np.float32)
        translation[:3, 3] = (x, y, z)
        self._apply(translation)

    def set_rotation(self, angle_radians: float, x: float, y: float, z: float) -> None:
        """Apply a rotation of ``angle_radians`` about the axis (x, y, z).

        The axis is normalised first; a zero axis is used as it is.
        """
        axis = np.array([x, y, z], dtype=np.float64)
        norm = np.linalg.norm(axis)
        if norm > 0:
            axis = axis / norm
        ax, ay, az = axis
        c = np.cos(angle_radians)
        s = np.sin(angle_radians)
        cross = np.array([[0.0, -az, ay], [az, 0.0, -ax], [-ay, ax, 0.0]])
        rotation3 = c * np.identity(3) + s * cross + (1.0 - c) * np.outer(axis, axis)
        rotation = np.identity(4, dtype=np.float64)
        rotation[:3, :3] = rotation3
        self._apply(rotation)

    def set_scale(self, x: float, y: float, z: float) -> None:
        """Apply a scale by (x, y, z)."""
        scale = np.identity(4, dtype=np.float32)
        scale[0, 0] = x
        scale[1, 1] = y
        scale[2, 2] = z
        self._apply(scale)

    def reset(self) -> None:
        """Return to the identity transform."""
        self._matrix = np.identity(4, dtype=np.float32)

    @property
    def matrix(self) -> np.ndarray:
        """The current 4x4 matrix as a read-only float32 array."""
        view = self._matrix.view()
        view.flags.writeable = False
        return view

    def __str__(self) -> str:
        cells = [[f"{float(v):g}" for v in row] for row in self._matrix]
        width = max(len(cell) for row in cells for cell in row)
        return "\n".join(" ".join(cell.rjust(width) for cell in row) for row in cells)

    def __repr__(self) -> str:
        return f"Transform({self._matrix.tolist()!r})"