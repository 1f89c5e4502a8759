"""NumPy-backed inversion primitive.

`solve` is the only place in the package that performs numerical work. Its
failures are plain `numpy.linalg.LinAlgError` instances and are never caught
by the caching layer.
"""
from __future__ import annotations

from typing import Any

import numpy as np

InversionFailure = np.linalg.LinAlgError

_DEFAULT_TOL = float(np.finfo(np.float64).eps)


def reciprocal_condition(a: np.ndarray) -> float:
    """Reciprocal condition number of `a` in the 1-norm (0.0 when singular)."""
    cond = float(np.linalg.cond(a, 1))
    if np.isnan(cond):
        return cond
    if np.isinf(cond):
        return 0.0
    return 1.0 / cond


def _require_square(a: np.ndarray) -> None:
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise InversionFailure(
            f"'a' ({'x'.join(str(d) for d in a.shape) or 'scalar'}) must be square"
        )


def solve(a: Any, b: Any = None, *, tol: float | None = None) -> np.ndarray:
    """Invert `a`, or solve ``a @ x = b`` when `b` is given.

    `tol` bounds the reciprocal condition number below which `a` is treated
    as computationally singular; it defaults to float64 machine epsilon and
    ``tol=0`` disables the check.
    """
    a = np.asarray(a)
    _require_square(a)

    limit = _DEFAULT_TOL if tol is None else float(tol)
    if limit > 0 and a.size:
        rcond = reciprocal_condition(a)
        if rcond < limit:
            raise InversionFailure(
                f"system is computationally singular: reciprocal condition number = {rcond:g}"
            )

    if b is None:
        return np.linalg.inv(a)
    return np.linalg.solve(a, np.asarray(b))
