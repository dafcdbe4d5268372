"""Dense matrices and affine transform builders.

Matrices are stored as read-only float64 NumPy arrays. Only 4x4 matrices take
part in multiplication; smaller ones exist so that determinants can be
expanded recursively through submatrices.

The determinant is computed by cofactor expansion along row 0 rather than by
LU decomposition, so integer-valued matrices give exact integer determinants
and a matrix is treated as singular only when its determinant is exactly 0.

Example:
    >>> from src.phongtrace.core.matrix import identity
    >>> from src.phongtrace.core.tuple import point
    >>> m = identity().scale(2.0, 2.0, 2.0).translate(1.0, 0.0, 0.0)
    >>> m @ point(1.0, 1.0, 1.0)
    Tuple(x=3.0, y=2.0, z=2.0, w=1.0)
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from src.phongtrace.core.tuple import EPSILON, Tuple


class NonInvertibleMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is exactly zero."""


class Matrix:
    """An immutable dense matrix of float64 cells.

    Attributes:
        shape: ``(rows, cols)`` of the matrix.
    """

    __slots__ = ("_cells",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.NDArray[np.float64]) -> None:
        cells = np.array(rows, dtype=np.float64)
        if cells.ndim != 2:
            raise ValueError(f"Matrix requires 2-D data, got {cells.ndim}-D")
        cells.flags.writeable = False
        self._cells = cells

    @property
    def shape(self) -> tuple[int, int]:
        return self._cells.shape  # type: ignore[return-value]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._cells[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Matrix({self._cells.tolist()!r})"

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the cells."""
        return self._cells.copy()

    def approx_eq(self, other: Matrix, epsilon: float = EPSILON) -> bool:
        """Check cell-wise equality within ``epsilon``."""
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._cells - other._cells) < epsilon))

    def __matmul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        """Multiply by another 4x4 matrix or by a tuple.

        Both products are row-by-column inner products over four elements.

        Raises:
            ValueError: If either operand is not 4x4.
        """
        if self.shape != (4, 4):
            raise ValueError(f"Multiplication requires a 4x4 matrix, got {self.shape}")
        a = self._cells
        if isinstance(other, Tuple):
            col = (other.x, other.y, other.z, other.w)
            x, y, z, w = (
                a[r, 0] * col[0] + a[r, 1] * col[1] + a[r, 2] * col[2] + a[r, 3] * col[3]
                for r in range(4)
            )
            return Tuple(float(x), float(y), float(z), float(w))
        if isinstance(other, Matrix):
            if other.shape != (4, 4):
                raise ValueError(
                    f"Multiplication requires a 4x4 matrix, got {other.shape}"
                )
            b = other._cells
            return Matrix(
                [
                    [
                        a[r, 0] * b[0, c]
                        + a[r, 1] * b[1, c]
                        + a[r, 2] * b[2, c]
                        + a[r, 3] * b[3, c]
                        for c in range(4)
                    ]
                    for r in range(4)
                ]
            )
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(self._cells.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        """Return the matrix with ``row`` and ``col`` removed."""
        rows, cols = self.shape
        return Matrix(
            [
                [self._cells[r, c] for c in range(cols) if c != col]
                for r in range(rows)
                if r != row
            ]
        )

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 == 1 else minor

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along row 0.

        Raises:
            ValueError: If the matrix is not square.
        """
        rows, cols = self.shape
        if rows != cols:
            raise ValueError(f"Determinant requires a square matrix, got {self.shape}")
        if rows == 1:
            return float(self._cells[0, 0])
        if rows == 2:
            m = self._cells
            return float(m[0, 0] * m[1, 1] - m[1, 0] * m[0, 1])
        return sum(self[0, c] * self.cofactor(0, c) for c in range(cols))

    def is_invertible(self) -> bool:
        # Exact comparison: nearly-singular matrices are still inverted.
        return self.determinant() != 0.0

    def inverse(self) -> Matrix:
        """Invert the matrix through its cofactors.

        Each cell is ``inv[c][r] = cofactor(r, c) / det``; the swapped indices
        apply the transpose of the cofactor matrix.

        Raises:
            NonInvertibleMatrixError: If the determinant is exactly zero.
        """
        det = self.determinant()
        if det == 0.0:
            raise NonInvertibleMatrixError(f"Matrix is not invertible: {self!r}")
        rows, cols = self.shape
        inv = np.zeros((cols, rows), dtype=np.float64)
        for r in range(rows):
            for c in range(cols):
                inv[c, r] = self.cofactor(r, c) / det
        return Matrix(inv)

    # Fluent chaining: each call applies its transform after the current one.

    def translate(self, x: float, y: float, z: float) -> Matrix:
        return translation(x, y, z) @ self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        return scaling(x, y, z) @ self

    def rotate_x(self, radians: float) -> Matrix:
        return rotation_x(radians) @ self

    def rotate_y(self, radians: float) -> Matrix:
        return rotation_y(radians) @ self

    def rotate_z(self, radians: float) -> Matrix:
        return rotation_z(radians) @ self

    def shear(
        self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> Matrix:
        return shearing(xy, xz, yx, yz, zx, zy) @ self


# =============================================================================
# Transform Builders
# =============================================================================


def identity() -> Matrix:
    return Matrix(np.identity(4, dtype=np.float64))


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by ``(x, y, z)``; vectors are unaffected."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale each axis independently. Negative factors reflect."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, cos, -sin, 0.0],
            [0.0, sin, cos, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [cos, 0.0, sin, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-sin, 0.0, cos, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    return Matrix(
        [
            [cos, -sin, 0.0, 0.0],
            [sin, cos, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each component in proportion to the other two.

    Args:
        xy: Amount x moves in proportion to y.
        xz: Amount x moves in proportion to z.
        yx: Amount y moves in proportion to x.
        yz: Amount y moves in proportion to z.
        zx: Amount z moves in proportion to x.
        zy: Amount z moves in proportion to y.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
