"""Problem type resolution from the label column."""

from __future__ import annotations

from enum import Enum

import pandas as pd

from ..errors import InvalidInputError

__all__ = ["MIN_CLASS_SIZE", "ProblemType", "is_categorical", "problem_type_of", "resolve_problem_type"]

MIN_CLASS_SIZE = 2


class ProblemType(str, Enum):
    """Learning task implied by the label column."""

    CLASSIFICATION = "class"
    REGRESSION = "regr"


def is_categorical(y: pd.Series) -> bool:
    """Return True when the labels hold categories rather than numbers."""
    dtype = y.dtype
    if isinstance(dtype, pd.CategoricalDtype):
        return True
    if pd.api.types.is_bool_dtype(dtype):
        return True
    return pd.api.types.is_object_dtype(dtype) or pd.api.types.is_string_dtype(dtype)


def problem_type_of(y: pd.Series) -> ProblemType:
    """Classify the task by label kind only."""
    return ProblemType.CLASSIFICATION if is_categorical(y) else ProblemType.REGRESSION


def resolve_problem_type(y: pd.Series) -> ProblemType:
    """Return the problem type, enforcing the minority class size for classification."""
    problem_type = problem_type_of(y)
    if problem_type is ProblemType.CLASSIFICATION:
        counts = y.value_counts(dropna=True)
        counts = counts[counts > 0]
        if counts.empty or int(counts.min()) < MIN_CLASS_SIZE:
            raise InvalidInputError(
                f"number of examples in the minority class should be >= {MIN_CLASS_SIZE}"
            )
    return problem_type
