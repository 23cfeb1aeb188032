import numpy as np
import pandas as pd
import pytest
from sklearn.datasets import load_iris


@pytest.fixture
def iris():
    bunch = load_iris(as_frame=True)
    x = bunch.data.copy()
    y = pd.Series(pd.Categorical.from_codes(bunch.target, bunch.target_names), name="species")
    return x, y


@pytest.fixture
def regression_data():
    rng = np.random.default_rng(0)
    x = pd.DataFrame(rng.normal(size=(60, 3)), columns=["a", "b", "c"])
    y = pd.Series(2.0 * x["a"] - x["b"] + 0.1 * rng.normal(size=60), name="target")
    return x, y
