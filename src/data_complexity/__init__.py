"""Data complexity meta-features for classification and regression datasets."""

from __future__ import annotations

from .core import (
    DEFAULT_SUMMARY,
    ExtractionRequest,
    ProblemType,
    complexity_formula,
    extract,
    ls_complexity,
    ls_measures,
    ls_summary,
)
from .core.complexity import complexity
from .dataio import DirectInput, FormulaInput
from .errors import InvalidInputError, MeasureComputationError
from .measures import (
    balance,
    correlation,
    dimensionality,
    linearity,
    neighborhood,
    network,
    overlapping,
    smoothness,
)

__all__ = [
    # Extraction entry points
    "DEFAULT_SUMMARY",
    "DirectInput",
    "ExtractionRequest",
    "FormulaInput",
    "ProblemType",
    "complexity",
    "complexity_formula",
    "extract",
    "ls_complexity",
    "ls_measures",
    "ls_summary",
    # Errors
    "InvalidInputError",
    "MeasureComputationError",
    # Measure groups
    "balance",
    "correlation",
    "dimensionality",
    "linearity",
    "neighborhood",
    "network",
    "overlapping",
    "smoothness",
]
