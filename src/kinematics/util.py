# MIT License (see LICENSE)
"""
Array helpers shared by Vector and its numpy interop.

Inputs may be tuples, lists or numpy arrays holding three components.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """Copy an array-like into a new float64 array."""
    return np.array(x, dtype=np.float64)


def norm2(v) -> float:
    """Sum of squared components, x² + y² + z²."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v) -> float:
    """Euclidean length; inf and nan components propagate."""
    return float(np.sqrt(norm2(v)))
