from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .coercion import coerce_matrix


class MatrixCache:
    """A matrix together with a memoized inverse.

    The inverse is only ever written by the caller (normally
    :func:`cachematrix.resolve_inverse`) and is dropped whenever the matrix is
    replaced through :meth:`set_matrix`. Mutating the array returned by
    :meth:`get_matrix` in place bypasses that and leaves a stale inverse.
    """

    def __init__(self, initial_matrix: Any = None):
        self._matrix: np.ndarray = coerce_matrix(initial_matrix)
        self._inverse: Optional[np.ndarray] = None
        self._generation = 0

    def set_matrix(self, new_matrix: Any) -> None:
        self._matrix = coerce_matrix(new_matrix)
        self._inverse = None
        self._generation += 1

    def get_matrix(self) -> np.ndarray:
        return self._matrix

    def set_inverse(self, inv_matrix: np.ndarray) -> None:
        # Trusted: no check that this is the inverse of the current matrix.
        self._inverse = inv_matrix

    def get_inverse(self) -> Optional[np.ndarray]:
        return self._inverse

    @property
    def matrix(self) -> np.ndarray:
        return self.get_matrix()

    @matrix.setter
    def matrix(self, value: Any) -> None:
        self.set_matrix(value)

    @property
    def inverse(self) -> Optional[np.ndarray]:
        return self.get_inverse()

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def generation(self) -> int:
        """Number of times the matrix has been replaced since construction."""
        return self._generation

    def __repr__(self) -> str:
        state = "filled" if self.has_inverse else "empty"
        shape = getattr(self._matrix, "shape", None)
        dtype = getattr(self._matrix, "dtype", None)
        return f"MatrixCache(shape={shape}, dtype={dtype}, inverse={state})"


def make_cache_matrix(x: Any = None) -> MatrixCache:
    return MatrixCache(x)
