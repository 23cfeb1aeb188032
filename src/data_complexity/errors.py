"""Exception types raised during complexity extraction."""

from __future__ import annotations

__all__ = ["InvalidInputError", "MeasureComputationError"]


class InvalidInputError(ValueError):
    """Raised when the request violates a precondition of the extraction."""


class MeasureComputationError(RuntimeError):
    """Raised when a measure group fails while computing its values."""
