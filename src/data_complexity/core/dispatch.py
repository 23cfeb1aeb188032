"""Selection, validation and sequential invocation of measure groups."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from ..errors import InvalidInputError, MeasureComputationError
from .registry import MEASURE_GROUPS, ls_complexity
from .resolver import ProblemType
from .summary import DEFAULT_SUMMARY, resolve_summary

__all__ = ["GroupOutput", "dispatch", "select_groups", "validate_options"]

LOGGER = logging.getLogger(__name__)

GroupOutput = tuple[str, dict[str, pd.Series]]


def select_groups(problem_type: ProblemType, groups: str | Iterable[str] = "all") -> list[str]:
    """Resolve ``groups`` into an ordered list of applicable group names."""
    applicable = ls_complexity(problem_type)
    groups = [groups] if isinstance(groups, str) else list(groups)
    if groups and groups[0] == "all":
        groups = list(applicable)
    selected = list(dict.fromkeys(groups))
    if not selected:
        raise InvalidInputError("at least one measure group must be requested")
    invalid = [name for name in selected if name not in applicable]
    if invalid:
        raise InvalidInputError(
            f"Measure group(s) {invalid} not applicable to {problem_type.name.lower()} "
            f"problems; available: {list(applicable)}"
        )
    return selected


def validate_options(selected: Iterable[str], options: Mapping[str, Any]) -> dict[str, Any]:
    """Bind the extra options into each selected group's options type.

    Every key must be recognised by at least one registered group; keys that
    only unselected groups understand are ignored.
    """
    recognised = set().union(*(group.option_names for group in MEASURE_GROUPS.values()))
    unknown = sorted(set(options) - recognised)
    if unknown:
        raise InvalidInputError(f"Unrecognized option(s) {unknown}; recognised: {sorted(recognised)}")
    return {name: MEASURE_GROUPS[name].bind_options(options) for name in selected}


def dispatch(
    x: pd.DataFrame,
    y: pd.Series,
    problem_type: ProblemType,
    groups: str | Iterable[str] = "all",
    summary: Optional[Iterable[str]] = DEFAULT_SUMMARY,
    options: Optional[Mapping[str, Any]] = None,
) -> list[GroupOutput]:
    """Run each selected measure group in order and collect its summarized measures.

    All validation happens before the first group runs. A failure inside a
    group aborts the whole extraction.
    """
    selected = select_groups(problem_type, groups)
    summary = resolve_summary(summary)
    bound = validate_options(selected, options or {})

    outputs: list[GroupOutput] = []
    for name in selected:
        LOGGER.debug("Computing %s measures (summary=%s)", name, ",".join(summary))
        try:
            values = MEASURE_GROUPS[name](x, y, summary, bound[name])
        except (InvalidInputError, MeasureComputationError):
            raise
        except Exception as exc:
            raise MeasureComputationError(f"Measure group '{name}' failed: {exc}") from exc
        outputs.append((name, values))
    return outputs
