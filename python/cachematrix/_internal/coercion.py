from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def placeholder_matrix() -> np.ndarray:
    """Default matrix for a cache created without data: 1x1, value missing."""
    return np.full((1, 1), np.nan)


def coerce_matrix(candidate: Any) -> np.ndarray:
    """Return `candidate` as an ndarray without checking its shape.

    Arrays pass through untouched so the caller keeps the same object. Nested
    sequences and objects exposing ``__array__`` go through ``np.asarray``.
    """
    if candidate is None:
        return placeholder_matrix()
    if isinstance(candidate, np.ndarray):
        return candidate
    if is_sequence_like(candidate):
        rows = [list(row) if is_sequence_like(row) else row for row in candidate]
        return np.asarray(rows)
    return np.asarray(candidate)
