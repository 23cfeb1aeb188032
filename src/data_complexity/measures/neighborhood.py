"""Neighborhood measures.

These measures characterize the presence and density of same or different
classes in local neighborhoods. They are computed by pymfe's ``complexity``
group over the binarized features; N4 interpolates random test points and
follows ``seed``.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd

from ..core.summary import DEFAULT_SUMMARY
from ._mfe import mfe_measures
from ._utils import resolve_measures

__all__ = ["MEASURES", "neighborhood"]

MEASURES: tuple[str, ...] = ("N1", "N2", "N3", "N4", "T1", "LSC")

_MFE_FEATURES = {"N1": "n1", "N2": "n2", "N3": "n3", "N4": "n4", "T1": "t1", "LSC": "lsc"}


def neighborhood(
    x: pd.DataFrame,
    y: pd.Series,
    measures="all",
    summary=DEFAULT_SUMMARY,
    seed: Optional[int] = None,
    **kwargs,
) -> dict[str, pd.Series]:
    """Compute the neighborhood measures of a classification dataset."""
    selected = resolve_measures("neighborhood", measures, MEASURES)
    return mfe_measures(x, y, _MFE_FEATURES, selected, summary, seed)
