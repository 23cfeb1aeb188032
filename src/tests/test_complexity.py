import numpy as np
import pandas as pd
import pytest

from data_complexity import (
    DirectInput,
    ExtractionRequest,
    FormulaInput,
    complexity,
    complexity_formula,
    extract,
    ls_complexity,
    ls_measures,
)
from data_complexity.core import complexity as complexity_module
from data_complexity.errors import InvalidInputError

CLASSIFICATION_GROUPS = ls_complexity("class")


def _expected_names(groups, stats):
    return {f"{group}.{measure}.{stat}" for group in groups for measure in ls_measures(group) for stat in stats}


def test_iris_mean_and_sd_per_measure(iris):
    x, y = iris
    result = complexity(x, y, summary=["mean", "sd"], seed=0)
    assert set(result) == _expected_names(CLASSIFICATION_GROUPS, ["mean", "sd"])
    assert len(result) == 2 * sum(len(ls_measures(group)) for group in CLASSIFICATION_GROUPS)
    assert all(np.isfinite(value) for name, value in result.items() if name.endswith(".mean"))


def test_result_follows_group_order(iris):
    x, y = iris
    result = complexity(x, y, groups=["network", "balance"], summary=["mean"])
    assert list(result) == [
        "network.Density.mean",
        "network.ClsCoef.mean",
        "network.Hubs.mean",
        "balance.C1.mean",
        "balance.C2.mean",
    ]


def test_singleton_class_fails_before_any_group(monkeypatch, iris):
    def unexpected(*args, **kwargs):
        raise AssertionError("no group should run")

    monkeypatch.setattr(complexity_module, "dispatch", unexpected)
    x, y = iris
    labels = y.astype(str).to_numpy()
    labels[0] = "rare"
    with pytest.raises(InvalidInputError, match="minority class"):
        complexity(x, pd.Series(labels, dtype="category"))


def test_minority_class_of_two_is_accepted():
    x = pd.DataFrame({"a": [0.0, 0.1, 0.2, 0.9, 1.0], "b": [1.0, 0.8, 0.9, 0.1, 0.0]})
    y = pd.Series(["u", "u", "u", "v", "v"], dtype="category")
    result = complexity(x, y, groups="balance", summary=["mean"])
    assert set(result) == {"balance.C1.mean", "balance.C2.mean"}


@pytest.mark.parametrize("groups", ["all", ["balance"], ["overlapping", "network"]])
def test_row_mismatch_is_rejected(groups):
    x = pd.DataFrame({"a": np.arange(10.0)})
    y = pd.Series(["u", "v", "w"] * 3, dtype="category")
    with pytest.raises(InvalidInputError):
        complexity(x, y, groups=groups)


def test_balance_is_not_a_regression_group(regression_data):
    x, y = regression_data
    with pytest.raises(InvalidInputError, match="balance"):
        complexity(x, y, groups=["balance"])


def test_regression_groups(regression_data):
    x, y = regression_data
    result = complexity(x, y, summary=["mean"], seed=1)
    assert set(result) == _expected_names(ls_complexity("regr"), ["mean"])
    assert all(np.isfinite(value) for value in result.values())


def test_empty_summary_keeps_raw_values(iris):
    x, y = iris
    result = complexity(x, y, summary=[], seed=0)
    for group in CLASSIFICATION_GROUPS:
        for measure in ls_measures(group):
            prefix = f"{group}.{measure}"
            assert any(name == prefix or name.startswith(prefix + ".") for name in result)
    assert "balance.C1" in result
    assert "network.Hubs.150" in result


def test_quantiles_are_numbered(iris):
    x, y = iris
    result = complexity(x, y, groups="overlapping", summary=["quantiles"])
    assert "overlapping.F1.quantiles.1" in result
    assert "overlapping.F1.quantiles.5" in result


def test_unknown_option_is_rejected(iris):
    x, y = iris
    with pytest.raises(InvalidInputError):
        complexity(x, y, groups="balance", k=5)


def test_formula_matches_direct(iris):
    x, y = iris
    data = x.copy()
    data.columns = ["sl", "sw", "pl", "pw"]
    data["species"] = y
    direct = complexity(data[["sl", "sw", "pl", "pw"]], data["species"], seed=3)
    via_formula = complexity_formula("species ~ .", data, seed=3)
    explicit = complexity_formula("species ~ sl + sw + pl + pw", data, seed=3)
    assert via_formula == pytest.approx(direct, nan_ok=True)
    assert explicit == pytest.approx(direct, nan_ok=True)


def test_extract_request(regression_data):
    x, y = regression_data
    data = x.assign(target=y)
    request = ExtractionRequest(FormulaInput("target ~ a + b", data), groups=["correlation"], summary=["max"])
    result = extract(request)
    assert list(result) == [
        "correlation.C1.max",
        "correlation.C2.max",
        "correlation.C3.max",
        "correlation.C4.max",
    ]
    direct = extract(ExtractionRequest(DirectInput(x[["a", "b"]], y), groups=["correlation"], summary=["max"]))
    assert result == pytest.approx(direct)
