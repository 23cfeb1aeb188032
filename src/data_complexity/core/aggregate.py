"""Flattening of per-group measure outputs into one named result."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from ..errors import MeasureComputationError

__all__ = ["aggregate", "composite_name"]


def composite_name(group: str, measure: str, label: str) -> str:
    """``group.measure`` followed by the value label when there is one."""
    return ".".join(part for part in (group, measure, label) if part)


def aggregate(outputs: Iterable[tuple[str, dict[str, pd.Series]]]) -> dict[str, float]:
    """Flatten ``(group, {measure: values})`` pairs, keeping their order."""
    result: dict[str, float] = {}
    for group, measures in outputs:
        for measure, values in measures.items():
            for label, value in values.items():
                name = composite_name(group, measure, str(label))
                if name in result:
                    raise MeasureComputationError(f"Duplicate meta-feature name {name!r}")
                result[name] = float(value)
    return result
