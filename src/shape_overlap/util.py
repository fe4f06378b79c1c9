# MIT License (see LICENSE)
"""
Utility functions for numeric operations.

Provides the low-level helpers the overlap predicates are built on:
array conversion and point distances. `distance` takes anything with
`x` and `y` attributes (usually a `Point`).
"""
from __future__ import annotations
import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.
    
    Used by the JSON codec so tuple/list coordinates are checked and
    converted the same way everywhere.
    """
    return np.array(x, dtype=np.float64)


def distance(p, q) -> float:
    """Euclidean distance between two points."""
    return float(np.hypot(p.x - q.x, p.y - q.y))

