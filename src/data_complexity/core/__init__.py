"""Extraction engine: summaries, problem types, registry, dispatch and aggregation."""

from __future__ import annotations

from .summary import DEFAULT_SUMMARY, IDENTITY, ls_summary
from .resolver import ProblemType, resolve_problem_type
from .registry import MEASURE_GROUPS, MeasureGroup, ls_complexity, ls_measures
from .dispatch import select_groups, validate_options
from .aggregate import composite_name
from .config import ExtractionConfig, load_yaml_config
from .complexity import ExtractionRequest, complexity_formula, extract

__all__ = [
    "DEFAULT_SUMMARY",
    "ExtractionConfig",
    "ExtractionRequest",
    "IDENTITY",
    "MEASURE_GROUPS",
    "MeasureGroup",
    "ProblemType",
    "complexity_formula",
    "composite_name",
    "extract",
    "load_yaml_config",
    "ls_complexity",
    "ls_measures",
    "ls_summary",
    "resolve_problem_type",
    "select_groups",
    "validate_options",
]
