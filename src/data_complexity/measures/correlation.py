"""Feature correlation measures for regression.

These measures capture the relationship of the feature values with the
outputs, using Spearman rank correlations over the normalized data.
"""

from __future__ import annotations

import warnings

import numpy as np
import pandas as pd
from scipy import stats
from sklearn.linear_model import LinearRegression

from ..core.summary import DEFAULT_SUMMARY
from ._utils import binarize, normalize, resolve_measures, run_measures

__all__ = ["MEASURES", "correlation"]

MEASURES: tuple[str, ...] = ("C1", "C2", "C3", "C4")

_CORRELATION_THRESHOLD = 0.9
_RESIDUAL_THRESHOLD = 0.1


def _spearman(a: np.ndarray, b: np.ndarray) -> float:
    """Spearman correlation, 0 where undefined (constant input, < 2 points)."""
    if a.size < 2:
        return 0.0
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        rho = stats.spearmanr(a, b)[0]
    return 0.0 if np.isnan(rho) else float(rho)


def _abs_correlations(data: np.ndarray, target: np.ndarray) -> np.ndarray:
    return np.abs([_spearman(column, target) for column in data.T])


def _removals(column: np.ndarray, target: np.ndarray) -> int:
    """Examples to drop before the feature reaches |rho| above the threshold."""
    keep = np.ones(target.size, dtype=bool)
    removed = 0
    while keep.sum() > 2:
        rho = _spearman(column[keep], target[keep])
        if abs(rho) > _CORRELATION_THRESHOLD:
            break
        rank_x = stats.rankdata(column[keep])
        rank_y = stats.rankdata(target[keep])
        if rho < 0:
            rank_y = rank_y.size + 1 - rank_y
        worst = int(np.argmax(np.abs(rank_x - rank_y)))
        keep[np.flatnonzero(keep)[worst]] = False
        removed += 1
    return removed


def _c3(data: np.ndarray, target: np.ndarray) -> np.ndarray:
    return np.array([_removals(column, target) / target.size for column in data.T])


def _c4(data: np.ndarray, target: np.ndarray) -> np.ndarray:
    """Fraction of examples left unexplained after successive one-feature fits."""
    remaining = np.arange(target.size)
    features = list(range(data.shape[1]))
    while features and remaining.size:
        rho = _abs_correlations(data[np.ix_(remaining, features)], target[remaining])
        j = features.pop(int(np.argmax(rho)))
        column = data[remaining, j : j + 1]
        model = LinearRegression().fit(column, target[remaining])
        residuals = np.abs(target[remaining] - model.predict(column))
        remaining = remaining[residuals > _RESIDUAL_THRESHOLD]
    return np.array([remaining.size / target.size])


def correlation(
    x: pd.DataFrame,
    y: pd.Series,
    measures="all",
    summary=DEFAULT_SUMMARY,
    **kwargs,
) -> dict[str, pd.Series]:
    """Compute the feature correlation measures of a regression dataset."""
    selected = resolve_measures("correlation", measures, MEASURES)
    data = normalize(binarize(x))
    target = normalize(y.to_numpy(dtype=np.float64))
    abs_rho = _abs_correlations(data, target)
    functions = {
        "C1": lambda: np.array([abs_rho.max()]),
        "C2": lambda: abs_rho,
        "C3": lambda: _c3(data, target),
        "C4": lambda: _c4(data, target),
    }
    return run_measures(functions, selected, summary)
