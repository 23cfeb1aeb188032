"""Dataset loaders for the command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import openml
import pandas as pd

from ..errors import InvalidInputError

__all__ = ["as_classification", "load_openml_frame", "read_table", "split_target"]

LOGGER = logging.getLogger(__name__)

_READERS = {
    ".csv": pd.read_csv,
    ".tsv": lambda path: pd.read_csv(path, sep="\t"),
    ".parquet": pd.read_parquet,
    ".pq": pd.read_parquet,
}


def read_table(path: str | Path) -> pd.DataFrame:
    """Read a CSV, TSV or Parquet file into a DataFrame."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise InvalidInputError(f"Unsupported file type {path.suffix!r}; expected one of {sorted(_READERS)}")
    frame = reader(path)
    LOGGER.debug("Read %s with shape %s", path, frame.shape)
    return frame


def as_classification(frame: pd.DataFrame, target: str) -> pd.DataFrame:
    """Return a copy of ``frame`` whose ``target`` column is categorical."""
    if target not in frame.columns:
        raise InvalidInputError(f"Target column {target!r} not found; columns: {list(frame.columns)}")
    frame = frame.copy()
    frame[target] = frame[target].astype("category")
    return frame


def split_target(frame: pd.DataFrame, target: str) -> tuple[pd.DataFrame, pd.Series]:
    """Split ``frame`` into the feature table and the ``target`` column."""
    if target not in frame.columns:
        raise InvalidInputError(f"Target column {target!r} not found; columns: {list(frame.columns)}")
    return frame.drop(columns=[target]), frame[target]


def load_openml_frame(dataset_id: int, target: Optional[str] = None) -> tuple[pd.DataFrame, str]:
    """Download an OpenML dataset and return it with its target column name.

    Without an explicit ``target`` the dataset's default target attribute is
    used.
    """
    dataset = openml.datasets.get_dataset(int(dataset_id))
    target_name = target or (dataset.default_target_attribute or "").strip() or None
    if not target_name:
        raise InvalidInputError(f"OpenML dataset {dataset_id} has no default target; pass --target")
    if "," in target_name:
        raise InvalidInputError(f"OpenML dataset {dataset_id} has several targets ({target_name}); pass --target")
    X, y, _categorical, _names = dataset.get_data(dataset_format="dataframe", target=target_name)
    frame = X.copy()
    frame[target_name] = y
    LOGGER.info("Loaded OpenML dataset %s (%s) with shape %s", dataset_id, dataset.name, frame.shape)
    return frame, target_name
