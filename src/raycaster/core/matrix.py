"""Square matrices with cofactor-expansion determinants and inversion.

A Matrix is an immutable N x N grid of float64 values backed by a read-only
NumPy array. Equality is element-wise within EPSILON. Every operation returns
a new Matrix.

The determinant uses textbook cofactor expansion along the first row, which
costs O(N!) and is only intended for the small sizes (N <= 4) used by affine
transforms. ``lu_determinant`` is the LU-factorisation alternative for larger
matrices.

Example:
    >>> from src.raycaster.core.matrix import Matrix
    >>> m = Matrix([[1.0, 5.0], [-3.0, 2.0]])
    >>> m.determinant()
    17.0
    >>> Matrix.identity(4).rotate_x(0.5).scale(2, 2, 2).translate(1, 0, 0).size
    4
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

import numpy as np
import numpy.typing as npt

from src.raycaster.core.numeric import EPSILON
from src.raycaster.core.tuples import Tuple


class Matrix:
    """An immutable N x N matrix of floats.

    Attributes:
        size: The dimension N.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: Sequence[Sequence[float]] | npt.ArrayLike) -> None:
        """Create a matrix from a square grid of numbers.

        Args:
            rows: Row-major nested sequence (or array) of shape (N, N), N >= 1.

        Raises:
            ValueError: If the input is not a non-empty square grid.
        """
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or data.shape[0] == 0:
            raise ValueError(f"Matrix must be square and non-empty, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def identity(cls, size: int = 4) -> Matrix:
        """Create the identity matrix of the given size."""
        return cls(np.eye(size, dtype=np.float64))

    @classmethod
    def zeros(cls, size: int) -> Matrix:
        """Create a matrix of the given size filled with zeros."""
        return cls(np.zeros((size, size), dtype=np.float64))

    @property
    def size(self) -> int:
        """Get the dimension N."""
        return int(self._data.shape[0])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return float(self._data[row, column])

    def rows(self) -> list[list[float]]:
        """Return the elements as a list of row lists."""
        return self._data.tolist()

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a writable copy of the underlying array."""
        return self._data.copy()

    # =========================================================================
    # Structural operations
    # =========================================================================

    def transpose(self) -> Matrix:
        """Swap rows and columns: ``result[i][j] = self[j][i]``."""
        return Matrix(self._data.T)

    def submatrix(self, row: int, column: int) -> Matrix:
        """Remove one row and one column.

        Args:
            row: Index of the row to delete.
            column: Index of the column to delete.

        Returns:
            The (N-1) x (N-1) matrix of the remaining elements, in order.

        Raises:
            IndexError: If either index is out of range.
            ValueError: If the matrix is 1 x 1.
        """
        self._check_index(row, column)
        if self.size == 1:
            raise ValueError("Cannot take a submatrix of a 1x1 matrix")
        remaining = np.delete(np.delete(self._data, row, axis=0), column, axis=1)
        return Matrix(remaining)

    def minor(self, row: int, column: int) -> float:
        """Determinant of ``submatrix(row, column)``."""
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        """Minor with sign ``(-1) ** (row + column)``."""
        minor = self.minor(row, column)
        return -minor if (row + column) % 2 else minor

    def determinant(self) -> float:
        """Compute the determinant by cofactor expansion along the first row.

        Returns:
            The determinant. 2x2 uses ``ad - bc``; larger sizes recurse.
        """
        n = self.size
        if n == 1:
            return float(self._data[0, 0])
        if n == 2:
            d = self._data
            return float(d[0, 0] * d[1, 1] - d[0, 1] * d[1, 0])
        total = 0.0
        for column in range(n):
            element = float(self._data[0, column])
            if element != 0.0:
                total += element * self.cofactor(0, column)
        return total

    def lu_determinant(self) -> float:
        """Compute the determinant with LU factorisation (O(N^3)).

        Results are subject to rounding, so singular matrices may yield tiny
        non-zero values instead of an exact 0.
        """
        return float(np.linalg.det(self._data))

    def is_invertible(self) -> bool:
        """Return True if the determinant is non-zero."""
        return self.determinant() != 0.0

    def invert(self) -> Matrix | None:
        """Compute the inverse via the adjugate.

        Returns:
            The inverse matrix, or None if the determinant is 0.
        """
        det = self.determinant()
        if det == 0.0:
            return None
        n = self.size
        if n == 1:
            return Matrix([[1.0 / det]])
        inverted = np.zeros((n, n), dtype=np.float64)
        for row in range(n):
            for column in range(n):
                # Writing to [column, row] transposes the cofactor matrix in place
                inverted[column, row] = self.cofactor(row, column) / det
        return Matrix(inverted)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __add__(self, other: Matrix) -> Matrix:
        """Element-wise sum of two matrices of the same size.

        Raises:
            ValueError: On a size mismatch.
        """
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            raise ValueError(
                f"Cannot add {self.size}x{self.size} and {other.size}x{other.size} matrices"
            )
        return Matrix(self._data + other._data)

    @overload
    def __mul__(self, other: Matrix) -> Matrix: ...

    @overload
    def __mul__(self, other: Tuple) -> Tuple: ...

    def __mul__(self, other: Matrix | Tuple) -> Matrix | Tuple:
        """Multiply by another matrix or, for 4x4 matrices, by a tuple.

        Raises:
            ValueError: On a size mismatch.
        """
        if isinstance(other, Matrix):
            if other.size != self.size:
                raise ValueError(
                    f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size} matrix"
                )
            return Matrix(self._data @ other._data)
        if isinstance(other, Tuple):
            if self.size != 4:
                raise ValueError(f"Only 4x4 matrices can multiply a tuple, got {self.size}x{self.size}")
            return Tuple.from_iterable(self._data @ other.to_numpy())
        return NotImplemented

    __matmul__ = __mul__

    # =========================================================================
    # Fluent transform composition
    # =========================================================================
    #
    # Each call left-multiplies: identity().rotate_x(a).translate(...) yields
    # Translate * Rotate, so points are rotated first.

    def translate(self, x: float, y: float, z: float) -> Matrix:
        """Apply a translation after this transform."""
        from src.raycaster.core.transforms import translation

        return translation(x, y, z) * self

    def scale(self, x: float, y: float, z: float) -> Matrix:
        """Apply a scaling after this transform."""
        from src.raycaster.core.transforms import scaling

        return scaling(x, y, z) * self

    def rotate_x(self, radians: float) -> Matrix:
        """Apply a rotation about the x axis after this transform."""
        from src.raycaster.core.transforms import rotation_x

        return rotation_x(radians) * self

    def rotate_y(self, radians: float) -> Matrix:
        """Apply a rotation about the y axis after this transform."""
        from src.raycaster.core.transforms import rotation_y

        return rotation_y(radians) * self

    def rotate_z(self, radians: float) -> Matrix:
        """Apply a rotation about the z axis after this transform."""
        from src.raycaster.core.transforms import rotation_z

        return rotation_z(radians) * self

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
        """Apply a shearing after this transform."""
        from src.raycaster.core.transforms import shearing

        return shearing(xy, xz, yx, yz, zx, zy) * self

    # =========================================================================
    # Comparison
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if other.size != self.size:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.rows()!r})"

    def _check_index(self, row: int, column: int) -> None:
        n = self.size
        if not (0 <= row < n and 0 <= column < n):
            raise IndexError(f"Index ({row}, {column}) out of range for {n}x{n} matrix")


IDENTITY = Matrix.identity(4)


def identity() -> Matrix:
    """Return the 4x4 identity, the starting point of a fluent transform chain."""
    return IDENTITY
