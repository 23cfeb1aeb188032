import pandas as pd
import pytest

from data_complexity.core.aggregate import aggregate, composite_name
from data_complexity.errors import MeasureComputationError


def test_composite_name():
    assert composite_name("balance", "C1", "mean") == "balance.C1.mean"
    assert composite_name("balance", "C1", "") == "balance.C1"


def test_aggregate_flattens_in_order():
    outputs = [
        ("network", {"Hubs": pd.Series([0.1, 0.2], index=["1", "2"])}),
        ("balance", {"C1": pd.Series([0.0], index=[""]), "C2": pd.Series([0.5, 0.1], index=["mean", "sd"])}),
    ]
    result = aggregate(outputs)
    assert list(result) == [
        "network.Hubs.1",
        "network.Hubs.2",
        "balance.C1",
        "balance.C2.mean",
        "balance.C2.sd",
    ]
    assert result["balance.C2.mean"] == 0.5
    assert all(isinstance(value, float) for value in result.values())


def test_aggregate_rejects_duplicate_names():
    outputs = [
        ("balance", {"C1": pd.Series([0.0], index=["mean"])}),
        ("balance", {"C1": pd.Series([1.0], index=["mean"])}),
    ]
    with pytest.raises(MeasureComputationError, match="balance.C1.mean"):
        aggregate(outputs)
