"""Summary functions used to reduce multi-valued measures."""

from __future__ import annotations

import warnings
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd
from scipy import stats

from ..errors import InvalidInputError

__all__ = [
    "DEFAULT_SUMMARY",
    "IDENTITY",
    "SUMMARY_FUNCTIONS",
    "ls_summary",
    "resolve_summary",
    "summarize",
]

SummaryFunction = Callable[[np.ndarray], "float | np.ndarray"]

IDENTITY = "return"
DEFAULT_SUMMARY: tuple[str, ...] = ("mean", "sd")

_QUANTILES = (0.0, 0.25, 0.5, 0.75, 1.0)
_HISTOGRAM_BINS = 10


def _finite(values: np.ndarray) -> np.ndarray:
    return values[~np.isnan(values)]


def _mean(values: np.ndarray) -> float:
    values = _finite(values)
    return float(np.mean(values)) if values.size else np.nan


def _sd(values: np.ndarray) -> float:
    values = _finite(values)
    return float(np.std(values, ddof=1)) if values.size > 1 else np.nan


def _var(values: np.ndarray) -> float:
    values = _finite(values)
    return float(np.var(values, ddof=1)) if values.size > 1 else np.nan


def _min(values: np.ndarray) -> float:
    values = _finite(values)
    return float(np.min(values)) if values.size else np.nan


def _max(values: np.ndarray) -> float:
    values = _finite(values)
    return float(np.max(values)) if values.size else np.nan


def _median(values: np.ndarray) -> float:
    values = _finite(values)
    return float(np.median(values)) if values.size else np.nan


def _range(values: np.ndarray) -> float:
    values = _finite(values)
    return float(np.ptp(values)) if values.size else np.nan


def _iqr(values: np.ndarray) -> float:
    values = _finite(values)
    return float(stats.iqr(values)) if values.size else np.nan


def _kurtosis(values: np.ndarray) -> float:
    values = _finite(values)
    if values.size < 2 or np.ptp(values) == 0:
        return np.nan
    return float(stats.kurtosis(values))


def _skewness(values: np.ndarray) -> float:
    values = _finite(values)
    if values.size < 2 or np.ptp(values) == 0:
        return np.nan
    return float(stats.skew(values))


def _quantiles(values: np.ndarray) -> np.ndarray:
    values = _finite(values)
    if not values.size:
        return np.full(len(_QUANTILES), np.nan)
    return np.quantile(values, _QUANTILES)


def _histogram(values: np.ndarray) -> np.ndarray:
    """Relative frequencies over equal-width bins spanning the value range."""
    values = _finite(values)
    if not values.size:
        return np.full(_HISTOGRAM_BINS, np.nan)
    counts, _ = np.histogram(values, bins=_HISTOGRAM_BINS)
    return counts / values.size


def _identity(values: np.ndarray) -> np.ndarray:
    return values


SUMMARY_FUNCTIONS: Mapping[str, SummaryFunction] = MappingProxyType(
    {
        "mean": _mean,
        "sd": _sd,
        "var": _var,
        "min": _min,
        "max": _max,
        "median": _median,
        "range": _range,
        "iqr": _iqr,
        "kurtosis": _kurtosis,
        "skewness": _skewness,
        "quantiles": _quantiles,
        "histogram": _histogram,
        IDENTITY: _identity,
    }
)


def ls_summary() -> tuple[str, ...]:
    """Return the names of the available summary functions."""
    return tuple(SUMMARY_FUNCTIONS)


def resolve_summary(summary: str | Iterable[str] | None) -> tuple[str, ...]:
    """Validate summary names; an empty request selects the identity reducer."""
    if summary is None:
        return (IDENTITY,)
    if isinstance(summary, str):
        summary = (summary,)
    names = tuple(dict.fromkeys(summary))
    if not names:
        return (IDENTITY,)
    unknown = [name for name in names if name not in SUMMARY_FUNCTIONS]
    if unknown:
        raise InvalidInputError(
            f"Unknown summary function(s) {unknown}; available: {list(SUMMARY_FUNCTIONS)}"
        )
    return names


def summarize(values: Sequence[float] | np.ndarray, summary: Sequence[str]) -> pd.Series:
    """Reduce raw measure values with each requested summary function.

    The returned Series is indexed by value label: the statistic name, or
    ``"<stat>.<i>"`` when a statistic yields several numbers. Under the
    identity reducer alone the labels are ``""`` for a single raw value and
    1-based positions otherwise.
    """
    values = np.asarray(values, dtype=np.float64).ravel()

    if tuple(summary) == (IDENTITY,):
        if values.size == 1:
            return pd.Series(values, index=[""], dtype=np.float64)
        labels = [str(i) for i in range(1, values.size + 1)]
        return pd.Series(values, index=labels, dtype=np.float64)

    labels: list[str] = []
    reduced: list[float] = []
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        for name in summary:
            out = np.atleast_1d(np.asarray(SUMMARY_FUNCTIONS[name](values), dtype=np.float64))
            if out.size == 1:
                labels.append(name)
            else:
                labels.extend(f"{name}.{i}" for i in range(1, out.size + 1))
            reduced.extend(out.tolist())
    return pd.Series(reduced, index=labels, dtype=np.float64)
