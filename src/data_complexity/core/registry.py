"""Registry of measure groups and their applicability per problem type."""

from __future__ import annotations

import numbers
from dataclasses import asdict, dataclass, fields
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

import pandas as pd

from ..errors import InvalidInputError
from ..measures.balance import MEASURES as BALANCE_MEASURES, balance
from ..measures.correlation import MEASURES as CORRELATION_MEASURES, correlation
from ..measures.dimensionality import MEASURES as DIMENSIONALITY_MEASURES, dimensionality
from ..measures.linearity import MEASURES as LINEARITY_MEASURES, linearity
from ..measures.neighborhood import MEASURES as NEIGHBORHOOD_MEASURES, neighborhood
from ..measures.network import DEFAULT_EPS, MEASURES as NETWORK_MEASURES, network
from ..measures.overlapping import MEASURES as OVERLAPPING_MEASURES, overlapping
from ..measures.smoothness import MEASURES as SMOOTHNESS_MEASURES, smoothness
from .resolver import ProblemType

__all__ = [
    "GROUPS_BY_TYPE",
    "MEASURE_GROUPS",
    "MeasureGroup",
    "NetworkOptions",
    "NoOptions",
    "SamplingOptions",
    "get_group",
    "ls_complexity",
    "ls_measures",
]


@dataclass(frozen=True)
class NoOptions:
    """Groups without tunable parameters."""


@dataclass(frozen=True)
class NetworkOptions:
    eps: float = DEFAULT_EPS

    def __post_init__(self) -> None:
        valid = isinstance(self.eps, numbers.Real) and not isinstance(self.eps, bool)
        if not valid or not 0.0 < float(self.eps) <= 1.0:
            raise InvalidInputError(f"eps must be a number in (0, 1], got {self.eps!r}")


@dataclass(frozen=True)
class SamplingOptions:
    """Seed for the measures that interpolate random test points."""

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.seed is None:
            return
        if not isinstance(self.seed, numbers.Integral) or isinstance(self.seed, bool) or self.seed < 0:
            raise InvalidInputError(f"seed must be a non-negative integer, got {self.seed!r}")


@dataclass(frozen=True)
class MeasureGroup:
    """A named family of measures computed together under one contract."""

    name: str
    compute: Callable[..., dict[str, pd.Series]]
    measures: tuple[str, ...]
    options_type: type = NoOptions
    description: str = ""

    @property
    def option_names(self) -> frozenset[str]:
        return frozenset(f.name for f in fields(self.options_type))

    def bind_options(self, options: Mapping[str, Any]):
        """Build this group's options from the keys it recognises."""
        return self.options_type(**{k: v for k, v in options.items() if k in self.option_names})

    def __call__(self, x: pd.DataFrame, y: pd.Series, summary, options=None) -> dict[str, pd.Series]:
        bound = options if options is not None else self.options_type()
        return self.compute(x, y, summary=summary, **asdict(bound))


MEASURE_GROUPS: Mapping[str, MeasureGroup] = MappingProxyType(
    {
        group.name: group
        for group in (
            MeasureGroup(
                "overlapping",
                overlapping,
                OVERLAPPING_MEASURES,
                description="How informative the features are to separate the classes.",
            ),
            MeasureGroup(
                "neighborhood",
                neighborhood,
                NEIGHBORHOOD_MEASURES,
                SamplingOptions,
                "Presence and density of same or different classes in local neighborhoods.",
            ),
            MeasureGroup(
                "linearity",
                linearity,
                LINEARITY_MEASURES,
                SamplingOptions,
                "Whether the labels can be explained by a linear model.",
            ),
            MeasureGroup(
                "dimensionality",
                dimensionality,
                DIMENSIONALITY_MEASURES,
                description="How sparse the examples are with respect to the feature space.",
            ),
            MeasureGroup(
                "balance",
                balance,
                BALANCE_MEASURES,
                description="Differences in the number of examples per class.",
            ),
            MeasureGroup(
                "network",
                network,
                NETWORK_MEASURES,
                NetworkOptions,
                "Structure of the epsilon-neighborhood graph of the examples.",
            ),
            MeasureGroup(
                "correlation",
                correlation,
                CORRELATION_MEASURES,
                description="Relationship between the feature values and the outputs.",
            ),
            MeasureGroup(
                "smoothness",
                smoothness,
                SMOOTHNESS_MEASURES,
                SamplingOptions,
                "Smoothness of the function that must be fitted to the data.",
            ),
        )
    }
)


GROUPS_BY_TYPE: Mapping[ProblemType, tuple[str, ...]] = MappingProxyType(
    {
        ProblemType.CLASSIFICATION: (
            "overlapping",
            "neighborhood",
            "linearity",
            "dimensionality",
            "balance",
            "network",
        ),
        ProblemType.REGRESSION: ("correlation", "linearity", "smoothness", "dimensionality"),
    }
)


def ls_complexity(problem_type: ProblemType | str) -> tuple[str, ...]:
    """Return the measure groups applicable to ``problem_type``, in output order."""
    try:
        return GROUPS_BY_TYPE[ProblemType(problem_type)]
    except ValueError as exc:
        raise InvalidInputError(f"Unknown problem type {problem_type!r}") from exc


def get_group(name: str) -> MeasureGroup:
    try:
        return MEASURE_GROUPS[name]
    except KeyError as exc:
        raise InvalidInputError(f"Unknown measure group {name!r}; available: {list(MEASURE_GROUPS)}") from exc


def ls_measures(group: str) -> tuple[str, ...]:
    """Return the measure names reported by ``group``."""
    return get_group(group).measures
