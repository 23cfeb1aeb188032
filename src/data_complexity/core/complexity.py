"""Public extraction entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from ..dataio.adapter import DatasetSource, DirectInput, FormulaInput, adapt
from .aggregate import aggregate
from .dispatch import dispatch
from .resolver import resolve_problem_type
from .summary import DEFAULT_SUMMARY

__all__ = ["ExtractionRequest", "complexity", "complexity_formula", "extract"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ExtractionRequest:
    """A dataset plus the groups, summaries and options to extract from it."""

    source: DatasetSource
    groups: str | Iterable[str] = "all"
    summary: Optional[Iterable[str]] = DEFAULT_SUMMARY
    options: Mapping[str, Any] = field(default_factory=dict)


def extract(request: ExtractionRequest) -> dict[str, float]:
    """Run a full extraction and return the flat ``name -> value`` result.

    The input is normalised first, then the problem type is resolved from the
    labels, and only then are the measure groups validated and run. Any
    failure raises; no partial result is returned.
    """
    dataset = adapt(request.source)
    problem_type = resolve_problem_type(dataset.y)
    LOGGER.info(
        "Extracting complexity measures (%s, %d rows, %d features)",
        problem_type.name.lower(),
        len(dataset.x),
        dataset.x.shape[1],
    )
    outputs = dispatch(
        dataset.x,
        dataset.y,
        problem_type,
        groups=request.groups,
        summary=request.summary,
        options=request.options,
    )
    result = aggregate(outputs)
    LOGGER.info("Extracted %d meta-features from %d group(s)", len(result), len(outputs))
    return result


def complexity(
    x: pd.DataFrame,
    y: Any,
    groups: str | Iterable[str] = "all",
    summary: Optional[Iterable[str]] = DEFAULT_SUMMARY,
    **options: Any,
) -> dict[str, float]:
    """Extract complexity meta-features from a feature table and its labels.

    Categorical labels select the classification groups, numeric labels the
    regression groups. Extra keyword arguments are group options such as
    ``eps`` (network) or ``seed`` (randomised measures).
    """
    return extract(ExtractionRequest(DirectInput(x, y), groups, summary, options))


def complexity_formula(
    formula: Any,
    data: pd.DataFrame,
    groups: str | Iterable[str] = "all",
    summary: Optional[Iterable[str]] = DEFAULT_SUMMARY,
    **options: Any,
) -> dict[str, float]:
    """Same as :func:`complexity`, with ``x`` and ``y`` taken from ``data`` by a formula."""
    return extract(ExtractionRequest(FormulaInput(formula, data), groups, summary, options))
