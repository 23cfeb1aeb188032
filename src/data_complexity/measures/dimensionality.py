"""Dimensionality measures."""

from __future__ import annotations

import numpy as np
import pandas as pd
from sklearn.decomposition import PCA
from sklearn.preprocessing import StandardScaler

from ..core.summary import DEFAULT_SUMMARY
from ._utils import binarize, resolve_measures, run_measures

__all__ = ["MEASURES", "dimensionality"]

MEASURES: tuple[str, ...] = ("T2", "T3", "T4")

_EXPLAINED_VARIANCE = 0.95


def _pca_components(data: np.ndarray) -> int:
    """Number of principal components needed to explain 95% of the variance."""
    scaled = StandardScaler().fit_transform(data)
    if not np.any(scaled):
        return 1
    ratios = PCA().fit(scaled).explained_variance_ratio_
    m = int(np.searchsorted(np.cumsum(ratios), _EXPLAINED_VARIANCE) + 1)
    return min(m, ratios.size)


def dimensionality(
    x: pd.DataFrame,
    y: pd.Series,
    measures="all",
    summary=DEFAULT_SUMMARY,
    **kwargs,
) -> dict[str, pd.Series]:
    """Compute the dimensionality measures; the labels are not used."""
    selected = resolve_measures("dimensionality", measures, MEASURES)
    data = binarize(x)
    n, p = data.shape
    components = _pca_components(data) if {"T3", "T4"} & set(selected) else 0
    functions = {
        "T2": lambda: np.array([p / n]),
        "T3": lambda: np.array([components / n]),
        "T4": lambda: np.array([components / p]),
    }
    return run_measures(functions, selected, summary)
