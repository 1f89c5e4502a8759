from __future__ import annotations

from typing import Any

import numpy as np
import structlog

from . import solvers as _solvers
from .matrix_cache import MatrixCache

logger = structlog.get_logger(__name__)


def _shape_of(matrix: Any) -> tuple[int, ...] | None:
    shape = getattr(matrix, "shape", None)
    return tuple(shape) if shape is not None else None


def resolve_inverse(cache: MatrixCache, *args: Any, **kwargs: Any) -> np.ndarray:
    """Compute or retrieve the cached inverse of ``cache``'s matrix.

    Extra arguments are handed to :func:`cachematrix.solve` on a cache miss.
    On a hit they are ignored and the stored value is returned as is, even if
    it was computed with different arguments.
    """
    cached = cache.get_inverse()
    if cached is not None:
        logger.debug(
            "getting cached data",
            shape=_shape_of(cached),
            generation=cache.generation,
            ignored_args=bool(args or kwargs),
        )
        return cached

    data = cache.get_matrix()
    logger.debug("computing inverse", shape=_shape_of(data), generation=cache.generation)
    inv = _solvers.solve(data, *args, **kwargs)
    cache.set_inverse(inv)
    return inv


cache_solve = resolve_inverse
