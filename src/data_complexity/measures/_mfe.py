"""Classification measures computed by pymfe's ``complexity`` group."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

import numpy as np
import pandas as pd
from pymfe.mfe import MFE

from ._utils import binarize, encode_labels, run_measures

__all__ = ["mfe_measures"]

LOGGER = logging.getLogger(__name__)


def _raw_values(
    data: np.ndarray,
    codes: np.ndarray,
    features: Sequence[str],
    seed: Optional[int],
) -> dict[str, np.ndarray]:
    """Unsummarized pymfe values keyed by pymfe feature name."""
    mfe = MFE(groups=("complexity",), features=tuple(features), summary=(), random_state=seed)
    mfe.fit(data, codes, transform_num=False, transform_cat=None)
    names, values = mfe.extract(suppress_warnings=True)
    raw = {name: np.atleast_1d(np.asarray(value, dtype=np.float64)) for name, value in zip(names, values)}
    missing = [name for name in features if name not in raw]
    if missing:
        raise RuntimeError(f"pymfe did not return feature(s) {missing}")
    LOGGER.debug("pymfe computed %s", ", ".join(features))
    return raw


def mfe_measures(
    x: pd.DataFrame,
    y: pd.Series,
    features: Mapping[str, str],
    selected: Sequence[str],
    summary: str | Iterable[str] | None,
    seed: Optional[int] = None,
) -> dict[str, pd.Series]:
    """Compute ``selected`` measures through pymfe and summarize them.

    ``features`` maps each measure name to its pymfe feature name.
    """
    data = binarize(x)
    _, codes = encode_labels(y)
    raw = _raw_values(data, codes, [features[name] for name in selected], seed)
    functions = {name: (lambda name=name: raw[features[name]]) for name in selected}
    return run_measures(functions, selected, summary)
