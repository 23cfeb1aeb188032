"""Shared preprocessing helpers for the measure groups."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd
from scipy.sparse.csgraph import minimum_spanning_tree
from scipy.spatial.distance import pdist, squareform

from ..core.summary import resolve_summary, summarize
from ..errors import InvalidInputError

__all__ = [
    "binarize",
    "distance_matrix",
    "encode_labels",
    "interpolate_sorted",
    "mst_edges",
    "normalize",
    "resolve_measures",
    "run_measures",
]


def binarize(x: pd.DataFrame) -> np.ndarray:
    """One-hot encode categorical columns and return a float matrix."""
    categorical = [c for c in x.columns if not pd.api.types.is_numeric_dtype(x[c])]
    if categorical:
        x = pd.get_dummies(x, columns=categorical, drop_first=True, dtype=np.float64)
    return x.to_numpy(dtype=np.float64)


def normalize(values: np.ndarray) -> np.ndarray:
    """Min-max scale each column into [0, 1]; constant columns map to 0."""
    values = np.asarray(values, dtype=np.float64)
    lo = values.min(axis=0)
    span = values.max(axis=0) - lo
    span = np.where(span > 0, span, 1.0)
    return (values - lo) / span


def encode_labels(y: pd.Series) -> tuple[np.ndarray, np.ndarray]:
    """Return (classes, integer codes) for a label column."""
    codes, classes = pd.factorize(y, sort=True)
    return np.asarray(classes), codes.astype(np.int64)


def distance_matrix(x: np.ndarray, metric: str = "euclidean") -> np.ndarray:
    return squareform(pdist(x, metric=metric))


def mst_edges(dist: np.ndarray) -> np.ndarray:
    """Edges (i, j) of the minimum spanning tree over a dense distance matrix."""
    weights = np.where(dist > 0, dist, np.finfo(np.float64).tiny)
    np.fill_diagonal(weights, 0.0)
    tree = minimum_spanning_tree(weights).tocoo()
    return np.column_stack([tree.row, tree.col]).astype(np.int64)


def interpolate_sorted(
    x: np.ndarray,
    y: np.ndarray,
    rng: np.random.Generator,
) -> tuple[np.ndarray, np.ndarray]:
    """Random points between consecutive examples ordered by the output."""
    order = np.argsort(y, kind="stable")
    xs, ys = x[order], y[order]
    alpha = rng.uniform(size=len(ys) - 1)
    new_x = xs[:-1] + alpha[:, None] * (xs[1:] - xs[:-1])
    new_y = ys[:-1] + alpha * (ys[1:] - ys[:-1])
    return new_x, new_y


def resolve_measures(group: str, measures: str | Iterable[str], available: Sequence[str]) -> list[str]:
    """Validate a measure selection against the measures a group provides."""
    if isinstance(measures, str):
        measures = list(available) if measures == "all" else [measures]
    selected = list(dict.fromkeys(measures))
    unknown = [m for m in selected if m not in available]
    if unknown:
        raise InvalidInputError(f"Unknown {group} measure(s) {unknown}; available: {list(available)}")
    return selected


def run_measures(
    functions: Mapping[str, Callable[[], np.ndarray]],
    measures: Sequence[str],
    summary: str | Iterable[str] | None,
) -> dict[str, pd.Series]:
    """Evaluate the selected measure thunks and summarize each of them."""
    summary = resolve_summary(summary)
    return {name: summarize(functions[name](), summary) for name in measures}
