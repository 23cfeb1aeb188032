"""Normalisation of direct and formula inputs into a canonical dataset."""

from __future__ import annotations

import keyword
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Union

import numpy as np
import pandas as pd
from patsy import EvalEnvironment, ModelDesc, PatsyError
from patsy.builtins import C, I, Q
from patsy.eval import ast_names

from ..errors import InvalidInputError

__all__ = [
    "Dataset",
    "DatasetSource",
    "DirectInput",
    "FormulaInput",
    "adapt",
    "make_names",
]

LOGGER = logging.getLogger(__name__)

_NON_WORD = re.compile(r"\W")
_QUOTED = re.compile(r"""^Q\((['"])(.*)\1\)$""")
_QUOTED_ANY = re.compile(r"""Q\(\s*(['"])(.*?)\1\s*\)""")
_FORMULA_NAMESPACE = {"np": np, "C": C, "I": I, "Q": Q}


@dataclass(frozen=True, eq=False)
class Dataset:
    """Feature table and aligned label column."""

    x: pd.DataFrame
    y: pd.Series


@dataclass(frozen=True, eq=False)
class DirectInput:
    """Features and labels supplied separately."""

    x: Any
    y: Any


@dataclass(frozen=True, eq=False)
class FormulaInput:
    """A formula such as ``"Species ~ ."`` evaluated against one combined table."""

    formula: Any
    data: Any


DatasetSource = Union[DirectInput, FormulaInput]


def make_names(names: Iterable[object]) -> list[str]:
    """Return unique, valid Python identifiers for ``names``, preserving order."""
    cleaned: list[str] = []
    for raw in names:
        name = _NON_WORD.sub("_", str(raw))
        if not name.isidentifier():
            name = "X" + name
        if keyword.iskeyword(name):
            name += "_"
        cleaned.append(name)

    reserved = set(cleaned)
    used: set[str] = set()
    suffixes: dict[str, int] = {}
    unique: list[str] = []
    for name in cleaned:
        if name not in used:
            used.add(name)
            unique.append(name)
            continue
        k = suffixes.get(name, 0)
        while True:
            k += 1
            candidate = f"{name}_{k}"
            if candidate not in used and candidate not in reserved:
                break
        suffixes[name] = k
        used.add(candidate)
        unique.append(candidate)
    return unique


def adapt(source: DatasetSource) -> Dataset:
    """Resolve either input variant into a sanitised :class:`Dataset`."""
    if isinstance(source, FormulaInput):
        return _adapt_formula(source.formula, source.data)
    if isinstance(source, DirectInput):
        return _adapt_direct(source.x, source.y)
    raise InvalidInputError(f"Unsupported dataset source: {type(source).__name__}")


def _adapt_direct(x: Any, y: Any) -> Dataset:
    if not isinstance(x, pd.DataFrame):
        raise InvalidInputError("x must be a pandas DataFrame")

    if isinstance(y, pd.DataFrame):
        if y.shape[1] == 0:
            raise InvalidInputError("y must hold at least one column")
        y = y.iloc[:, 0]
    if not isinstance(y, pd.Series):
        array = np.asarray(y)
        if array.ndim == 2 and array.shape[1] == 1:
            array = array.ravel()
        if array.ndim != 1:
            raise InvalidInputError(f"y must be one-dimensional, got shape {array.shape}")
        y = pd.Series(array)

    if len(x) != len(y):
        raise InvalidInputError(f"x and y must have same number of rows ({len(x)} != {len(y)})")
    missing = [str(c) for c in x.columns if x[c].isna().any()]
    if missing:
        raise InvalidInputError(f"x has missing values in column(s) {missing}")
    if y.isna().any():
        raise InvalidInputError("y has missing values")

    x = x.reset_index(drop=True)
    x.columns = make_names(x.columns)
    y = y.reset_index(drop=True)
    if isinstance(y.dtype, pd.CategoricalDtype):
        y = y.cat.remove_unused_categories()
    return Dataset(x=x, y=y)


def _column_code(name: str) -> str:
    if name.isidentifier() and not keyword.iskeyword(name):
        return name
    return f"Q({name!r})"


def _factor_codes(terms) -> list[str]:
    codes: list[str] = []
    for term in terms:
        for factor in term.factors:
            if factor.code not in codes:
                codes.append(factor.code)
    return codes


def _referenced_columns(codes: Iterable[str], columns: list[str]) -> set[str]:
    """Data columns used anywhere in the given factor codes."""
    names: set[str] = set()
    for code in codes:
        names.update(ast_names(code))
        names.update(match.group(2) for match in _QUOTED_ANY.finditer(code))
    return names & set(columns)


def _parse_formula(formula: Any, columns: list[str]) -> ModelDesc:
    if isinstance(formula, ModelDesc):
        return formula
    if not isinstance(formula, str) or "~" not in formula:
        raise InvalidInputError("formula must be a patsy.ModelDesc or a string containing '~'")

    lhs, rhs = formula.split("~", 1)
    try:
        if rhs.strip() == ".":
            response = _referenced_columns(_factor_codes(ModelDesc.from_formula(lhs).rhs_termlist), columns)
            inputs = [c for c in columns if c not in response]
            rhs = " + ".join(_column_code(c) for c in inputs) or "1"
        return ModelDesc.from_formula(f"{lhs} ~ {rhs}")
    except PatsyError as exc:
        raise InvalidInputError(f"Malformed formula {formula!r}: {exc}") from exc


def _evaluate(code: str, data: pd.DataFrame, env: EvalEnvironment) -> pd.Series:
    try:
        value = env.eval(code, inner_namespace=data)
    except Exception as exc:
        raise InvalidInputError(f"Cannot evaluate formula term {code!r}: {exc}") from exc

    if hasattr(value, "contrast") and hasattr(value, "levels"):
        # C(...) boxes its argument together with the requested levels
        value = pd.Series(pd.Categorical(value.data, categories=value.levels))
    if isinstance(value, pd.Series):
        column = value.reset_index(drop=True)
    else:
        array = np.asarray(value)
        if array.ndim != 1:
            raise InvalidInputError(f"Formula term {code!r} must evaluate to a single column")
        column = pd.Series(array)
    if len(column) != len(data):
        raise InvalidInputError(f"Formula term {code!r} yields {len(column)} rows, expected {len(data)}")

    quoted = _QUOTED.match(code)
    return column.rename(quoted.group(2) if quoted else code)


def _adapt_formula(formula: Any, data: Any) -> Dataset:
    if not isinstance(data, pd.DataFrame):
        raise InvalidInputError("data argument must be a pandas DataFrame")

    data = data.reset_index(drop=True)
    data.columns = [str(c) for c in data.columns]
    desc = _parse_formula(formula, list(data.columns))

    response = _factor_codes(desc.lhs_termlist)
    inputs = [code for code in _factor_codes(desc.rhs_termlist) if code not in response]
    if len(response) != 1:
        raise InvalidInputError(f"formula must name exactly one response, got {response}")
    if not inputs:
        raise InvalidInputError("formula must select at least one input column")

    env = EvalEnvironment([_FORMULA_NAMESPACE])
    columns = [_evaluate(code, data, env) for code in [*response, *inputs]]
    frame = pd.concat(columns, axis=1)
    n_rows = len(frame)
    frame = frame.dropna().reset_index(drop=True)
    if len(frame) < n_rows:
        LOGGER.debug("Dropped %d rows with missing values from the model frame", n_rows - len(frame))

    return _adapt_direct(frame.iloc[:, 1:], frame.iloc[:, 0])
