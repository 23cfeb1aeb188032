"""Class balance measures: C1 (class entropy) and C2 (imbalance ratio), via pymfe."""

from __future__ import annotations

import pandas as pd

from ..core.summary import DEFAULT_SUMMARY
from ._mfe import mfe_measures
from ._utils import resolve_measures

__all__ = ["MEASURES", "balance"]

MEASURES: tuple[str, ...] = ("C1", "C2")

_MFE_FEATURES = {"C1": "c1", "C2": "c2"}


def balance(
    x: pd.DataFrame,
    y: pd.Series,
    measures="all",
    summary=DEFAULT_SUMMARY,
    **kwargs,
) -> dict[str, pd.Series]:
    """Compute the class balance measures of a classification dataset."""
    selected = resolve_measures("balance", measures, MEASURES)
    return mfe_measures(x, y, _MFE_FEATURES, selected, summary)
