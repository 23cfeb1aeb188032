"""Feature overlapping measures.

These measures characterize how informative the available features are to
separate the classes. Values come from pymfe's ``complexity`` group: F1 is
reported per feature, the others per one-vs-one class pair.
"""

from __future__ import annotations

import pandas as pd

from ..core.summary import DEFAULT_SUMMARY
from ._mfe import mfe_measures
from ._utils import resolve_measures

__all__ = ["MEASURES", "overlapping"]

MEASURES: tuple[str, ...] = ("F1", "F1v", "F2", "F3", "F4")

_MFE_FEATURES = {"F1": "f1", "F1v": "f1v", "F2": "f2", "F3": "f3", "F4": "f4"}


def overlapping(
    x: pd.DataFrame,
    y: pd.Series,
    measures="all",
    summary=DEFAULT_SUMMARY,
    **kwargs,
) -> dict[str, pd.Series]:
    """Compute the feature overlapping measures of a classification dataset."""
    selected = resolve_measures("overlapping", measures, MEASURES)
    return mfe_measures(x, y, _MFE_FEATURES, selected, summary)
