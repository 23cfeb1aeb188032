import numpy as np
import pandas as pd
import pytest

from data_complexity.errors import InvalidInputError
from data_complexity.measures import (
    balance,
    correlation,
    dimensionality,
    linearity,
    neighborhood,
    network,
    overlapping,
    smoothness,
)


@pytest.fixture
def separable():
    rng = np.random.default_rng(0)
    low = rng.uniform(0.0, 0.2, size=(20, 2))
    high = rng.uniform(0.8, 1.0, size=(20, 2))
    x = pd.DataFrame(np.vstack([low, high]), columns=["a", "b"])
    y = pd.Series(["neg"] * 20 + ["pos"] * 20, dtype="category")
    return x, y


def test_balanced_classes(iris, separable):
    x, y = iris
    out = balance(x, y, summary=["mean"])
    assert out["C2"]["mean"] == pytest.approx(0.0, abs=1e-9)
    assert 0.0 <= out["C1"]["mean"] <= 1.0 + 1e-9
    other = balance(*separable, summary=["mean"])
    assert other["C1"]["mean"] == pytest.approx(out["C1"]["mean"], abs=1e-9)


def test_imbalanced_classes_score_higher(iris):
    x, y = iris
    keep = np.r_[np.arange(100), np.arange(100, 105)]
    balanced = balance(x, y, summary=["mean"])
    out = balance(x.iloc[keep], y.iloc[keep], summary=["mean"])
    assert out["C2"]["mean"] > 0.0
    assert out["C1"]["mean"] != pytest.approx(balanced["C1"]["mean"], abs=1e-6)


def test_separable_data_is_linear(separable):
    x, y = separable
    out = linearity(x, y, summary=["mean"], seed=0)
    assert out["L2"]["mean"] == pytest.approx(0.0, abs=1e-9)
    assert out["L1"]["mean"] == pytest.approx(0.0, abs=1e-9)


def test_separable_data_has_no_overlap(separable):
    x, y = separable
    out = overlapping(x, y, measures=["F2", "F3", "F4"], summary=["mean"])
    assert out["F2"]["mean"] == pytest.approx(0.0, abs=1e-9)
    assert out["F3"]["mean"] == pytest.approx(0.0, abs=1e-9)
    assert out["F4"]["mean"] == pytest.approx(0.0, abs=1e-9)


def test_separable_data_neighborhood(separable):
    x, y = separable
    out = neighborhood(x, y, measures=["N1", "N3"], summary=["mean"])
    assert out["N1"]["mean"] == pytest.approx(2 / 40)
    assert out["N3"]["mean"] == pytest.approx(0.0, abs=1e-9)


def test_dimensionality_ratios(iris):
    x, y = iris
    out = dimensionality(x, y, summary=["mean"])
    assert out["T2"]["mean"] == pytest.approx(4 / 150)
    m = out["T3"]["mean"] * 150
    assert m == pytest.approx(round(m))
    assert 1 <= round(m) <= 4
    assert out["T4"]["mean"] == pytest.approx(m / 4)


def test_monotone_target_is_fully_correlated():
    x = pd.DataFrame({"a": np.arange(30.0), "b": np.sin(np.arange(30.0))})
    y = pd.Series(np.exp(np.arange(30.0) / 10))
    out = correlation(x, y, summary=["mean"])
    assert out["C1"]["mean"] == pytest.approx(1.0)
    assert out["C3"]["mean"] <= 0.5


def test_linear_regression_has_small_residuals(regression_data):
    x, y = regression_data
    out = linearity(x, y, summary=["mean"], seed=0)
    assert set(out) == {"L1", "L2", "L3"}
    assert out["L2"]["mean"] < 0.01


def test_smoothness_values_are_finite(regression_data):
    x, y = regression_data
    out = smoothness(x, y, summary=["mean", "sd"], seed=0)
    assert set(out) == {"S1", "S2", "S3", "S4"}
    assert all(np.isfinite(series).all() for series in out.values())


def test_network_eps_controls_density(iris):
    x, y = iris
    sparse = network(x, y, measures="Density", summary=["mean"], eps=0.05)
    dense = network(x, y, measures="Density", summary=["mean"], eps=0.5)
    assert sparse["Density"]["mean"] > dense["Density"]["mean"]


def test_seeded_measures_are_reproducible(iris):
    x, y = iris
    first = neighborhood(x, y, measures="N4", summary=["mean"], seed=7)
    second = neighborhood(x, y, measures="N4", summary=["mean"], seed=7)
    assert first["N4"]["mean"] == second["N4"]["mean"]


def test_categorical_features_are_binarized(iris):
    x, y = iris
    x = x.assign(size=pd.Categorical(np.where(x.iloc[:, 2] > 4.0, "big", "small")))
    out = dimensionality(x, y, measures="T2", summary=["mean"])
    assert out["T2"]["mean"] == pytest.approx(5 / 150)


def test_unknown_measure_is_rejected(iris):
    x, y = iris
    with pytest.raises(InvalidInputError, match="F9"):
        overlapping(x, y, measures=["F1", "F9"])


def test_iris_measures_stay_in_unit_interval(iris):
    x, y = iris
    out = {
        **overlapping(x, y, measures=["F1", "F1v"], summary=["return"]),
        **neighborhood(x, y, measures=["N2", "T1", "LSC"], summary=["return"]),
    }
    for name, values in out.items():
        assert np.isfinite(values).all(), name
        assert ((values >= -1e-9) & (values <= 1.0 + 1e-9)).all(), name


def test_separable_data_has_small_directional_overlap(separable):
    x, y = separable
    out = overlapping(x, y, measures="F1v", summary=["return"])
    assert 0.0 < out["F1v"].iloc[0] < 0.1


def test_separable_local_sets_stay_within_class(separable):
    x, y = separable
    out = neighborhood(x, y, measures=["N2", "LSC"], summary=["mean"])
    assert out["N2"]["mean"] < 0.5
    assert out["LSC"]["mean"] == pytest.approx(0.5, abs=0.03)


def test_shuffled_labels_raise_neighborhood_complexity(separable):
    x, y = separable
    shuffled = pd.Series(
        pd.Categorical(np.random.default_rng(1).permutation(y.to_numpy()), categories=y.cat.categories)
    )
    clean = neighborhood(x, y, measures=["N1", "N3"], summary=["mean"])
    noisy = neighborhood(x, shuffled, measures=["N1", "N3"], summary=["mean"])
    assert noisy["N1"]["mean"] > clean["N1"]["mean"]
    assert noisy["N3"]["mean"] > clean["N3"]["mean"]


def test_network_measures_on_known_graph():
    # a same-class triangle and one same-class edge under the default eps
    x = pd.DataFrame({"a": [0.0, 0.05, 0.0, 1.0, 0.95], "b": [0.0, 0.0, 0.05, 1.0, 1.0]})
    y = pd.Series(["u", "u", "u", "v", "v"], dtype="category")
    out = network(x, y, summary=["return"])
    assert out["Density"].iloc[0] == pytest.approx(0.6)
    assert out["ClsCoef"].iloc[0] == pytest.approx(0.4)
    np.testing.assert_allclose(out["Hubs"].to_numpy(), [0.0, 0.0, 0.0, 1.0, 1.0], atol=1e-6)
