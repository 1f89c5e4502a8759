"""Memoized matrix inversion on top of NumPy."""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

from ._internal.matrix_cache import MatrixCache, make_cache_matrix
from ._internal.linalg_cache import cache_solve, resolve_inverse
from ._internal.solvers import InversionFailure, solve

__all__ = [
    "MatrixCache",
    "make_cache_matrix",
    "resolve_inverse",
    "cache_solve",
    "solve",
    "InversionFailure",
]
