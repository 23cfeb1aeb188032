"""Smoothness measures for regression.

These measures estimate the smoothness of the function that must be fitted
to the data.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd
from scipy.spatial.distance import cdist

from ..core.summary import DEFAULT_SUMMARY
from ._utils import (
    binarize,
    distance_matrix,
    interpolate_sorted,
    mst_edges,
    normalize,
    resolve_measures,
    run_measures,
)

__all__ = ["MEASURES", "smoothness"]

MEASURES: tuple[str, ...] = ("S1", "S2", "S3", "S4")


def _s1(dist: np.ndarray, target: np.ndarray) -> np.ndarray:
    """Output differences across the edges of the input-space spanning tree."""
    edges = mst_edges(dist)
    return np.abs(target[edges[:, 0]] - target[edges[:, 1]])


def _s2(data: np.ndarray, target: np.ndarray) -> np.ndarray:
    ordered = data[np.argsort(target, kind="stable")]
    return np.linalg.norm(np.diff(ordered, axis=0), axis=1)


def _s3(dist: np.ndarray, target: np.ndarray) -> np.ndarray:
    d = dist.copy()
    np.fill_diagonal(d, np.inf)
    return (target[d.argmin(axis=1)] - target) ** 2


def _s4(data: np.ndarray, target: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    test_x, test_y = interpolate_sorted(data, target, rng)
    nearest = cdist(test_x, data).argmin(axis=1)
    return (target[nearest] - test_y) ** 2


def smoothness(
    x: pd.DataFrame,
    y: pd.Series,
    measures="all",
    summary=DEFAULT_SUMMARY,
    seed: Optional[int] = None,
    **kwargs,
) -> dict[str, pd.Series]:
    """Compute the smoothness measures of a regression dataset."""
    selected = resolve_measures("smoothness", measures, MEASURES)
    data = normalize(binarize(x))
    target = normalize(y.to_numpy(dtype=np.float64))
    dist = distance_matrix(data)
    rng = np.random.default_rng(seed)
    functions = {
        "S1": lambda: _s1(dist, target),
        "S2": lambda: _s2(data, target),
        "S3": lambda: _s3(dist, target),
        "S4": lambda: _s4(data, target, rng),
    }
    return run_measures(functions, selected, summary)
