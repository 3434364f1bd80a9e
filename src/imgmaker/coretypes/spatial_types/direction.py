"""
This module defines the Direction class, which stores an NxN orientation
matrix (N = 1, 2 or 3) as a flattened tuple of floats in row-major order,
the same layout SimpleITK uses for ``Image.SetDirection``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple, TypeAlias

import numpy as np

FlattenedMatrix: TypeAlias = Tuple[float, ...]
Matrix: TypeAlias = Sequence[Sequence[float]]


@dataclass(frozen=True, eq=True)
class Direction:
    """Represent a directional matrix for image orientation.

    The matrix is square and stored row-major. Values are kept exactly as
    given; nothing here requires the matrix to be orthonormal.

    Attributes
    ----------
    matrix : FlattenedMatrix
        Flattened representation of an NxN matrix.
    """

    matrix: FlattenedMatrix

    def __post_init__(self) -> None:
        length = len(self.matrix)
        root = math.isqrt(length)
        if length == 0 or root * root != length:
            msg = (
                "Direction must be a square matrix of N*N values."
                f" Got {length} values."
            )
            raise ValueError(msg)
        # normalise whatever sequence we were given into a tuple of floats
        object.__setattr__(
            self, "matrix", tuple(float(v) for v in self.matrix)
        )

    @property
    def dimension(self) -> int:
        return math.isqrt(len(self.matrix))

    @classmethod
    def identity(cls, dimension: int) -> Direction:
        """Identity orientation for a `dimension`-D image."""
        return cls(
            matrix=tuple(
                1.0 if r == c else 0.0
                for r in range(dimension)
                for c in range(dimension)
            )
        )

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Direction:
        """
        Create a Direction instance from nested rows.

        Raises
        ------
        ValueError
            If the rows do not form a square matrix.
        """
        size = len(matrix)
        for row in matrix:
            if len(row) != size:
                msg = f"Matrix must be square. Got {size} rows of length {len(row)}."
                raise ValueError(msg)
        return cls(matrix=tuple(value for row in matrix for value in row))

    def to_matrix(self) -> list[list[float]]:
        """Convert the flattened row-major array back to nested rows."""
        dim = self.dimension
        return [list(self.matrix[i * dim : (i + 1) * dim]) for i in range(dim)]

    def to_numpy(self) -> np.ndarray:
        return np.asarray(self.matrix, dtype=np.float64).reshape(
            self.dimension, self.dimension
        )

    def is_normalized(self, tol: float = 1e-6) -> bool:
        """True if every row has unit length within `tol`."""
        for row in self.to_matrix():
            if not np.isclose(np.linalg.norm(row), 1.0, atol=tol):
                return False
        return True

    def __iter__(self) -> Iterator[float]:
        """Allow the Direction instance to be passed directly as a 1D array."""
        yield from self.matrix

    def __repr__(self) -> str:
        rows = self.to_matrix()
        formatted_rows = [
            "[" + ",".join(f"{value:>4.2f}" for value in row) + "]"
            for row in rows
        ]
        return f"Direction({', '.join(formatted_rows)})"
