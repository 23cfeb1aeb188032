"""Linearity measures.

For classification L1, L2 and L3 come from pymfe's ``complexity`` group,
which fits a linear SVM to every one-vs-one class pair. For regression an
ordinary least squares model is fitted to the normalized data.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression

from ..core.resolver import ProblemType, problem_type_of
from ..core.summary import DEFAULT_SUMMARY
from ._mfe import mfe_measures
from ._utils import binarize, interpolate_sorted, normalize, resolve_measures, run_measures

__all__ = ["MEASURES", "linearity"]

MEASURES: tuple[str, ...] = ("L1", "L2", "L3")

_MFE_FEATURES = {"L1": "l1", "L2": "l2", "L3": "l3"}


def _regression(x: pd.DataFrame, y: pd.Series, selected, summary, seed) -> dict[str, pd.Series]:
    data = normalize(binarize(x))
    target = normalize(y.to_numpy(dtype=np.float64))
    model = LinearRegression().fit(data, target)
    residuals = target - model.predict(data)

    def nonlinearity() -> np.ndarray:
        test_x, test_y = interpolate_sorted(data, target, np.random.default_rng(seed))
        return (model.predict(test_x) - test_y) ** 2

    functions = {
        "L1": lambda: np.abs(residuals),
        "L2": lambda: residuals**2,
        "L3": nonlinearity,
    }
    return run_measures(functions, selected, summary)


def linearity(
    x: pd.DataFrame,
    y: pd.Series,
    measures="all",
    summary=DEFAULT_SUMMARY,
    seed: Optional[int] = None,
    **kwargs,
) -> dict[str, pd.Series]:
    """Compute the linearity measures for a classification or regression dataset."""
    selected = resolve_measures("linearity", measures, MEASURES)
    if problem_type_of(y) is ProblemType.CLASSIFICATION:
        return mfe_measures(x, y, _MFE_FEATURES, selected, summary, seed)
    return _regression(x, y, selected, summary, seed)
