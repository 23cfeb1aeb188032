"""Input normalisation and dataset loading."""

from __future__ import annotations

from .adapter import Dataset, DirectInput, FormulaInput, adapt, make_names

__all__ = ["Dataset", "DirectInput", "FormulaInput", "adapt", "make_names"]
