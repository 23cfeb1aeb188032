"""Complexity measure groups."""

from __future__ import annotations

from .balance import balance
from .correlation import correlation
from .dimensionality import dimensionality
from .linearity import linearity
from .neighborhood import neighborhood
from .network import network
from .overlapping import overlapping
from .smoothness import smoothness

__all__ = [
    "balance",
    "correlation",
    "dimensionality",
    "linearity",
    "neighborhood",
    "network",
    "overlapping",
    "smoothness",
]
