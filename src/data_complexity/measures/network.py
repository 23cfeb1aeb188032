"""Network measures.

The dataset is represented as an epsilon-neighborhood graph: examples are
vertices, examples closer than ``eps`` are connected, and edges between
different classes are pruned.
"""

from __future__ import annotations

import networkx as nx
import numpy as np
import pandas as pd

from ..core.summary import DEFAULT_SUMMARY
from ._utils import binarize, distance_matrix, encode_labels, normalize, resolve_measures, run_measures

__all__ = ["DEFAULT_EPS", "MEASURES", "build_graph", "network"]

MEASURES: tuple[str, ...] = ("Density", "ClsCoef", "Hubs")

DEFAULT_EPS = 0.15


def build_graph(data: np.ndarray, codes: np.ndarray, eps: float = DEFAULT_EPS) -> nx.Graph:
    """Connect same-class examples whose mean absolute difference is below ``eps``."""
    dist = distance_matrix(data, metric="cityblock") / max(data.shape[1], 1)
    adjacency = (dist < eps) & (codes[:, None] == codes[None, :])
    np.fill_diagonal(adjacency, False)
    return nx.from_numpy_array(adjacency.astype(np.int64))


def _hub_scores(graph: nx.Graph) -> np.ndarray:
    if graph.number_of_edges() == 0:
        return np.zeros(graph.number_of_nodes())
    hubs, _ = nx.hits(graph, max_iter=1000, normalized=False)
    scores = np.abs(np.array([hubs[node] for node in range(graph.number_of_nodes())]))
    top = scores.max()
    return scores / top if top > 0 else scores


def network(
    x: pd.DataFrame,
    y: pd.Series,
    measures="all",
    summary=DEFAULT_SUMMARY,
    eps: float = DEFAULT_EPS,
    **kwargs,
) -> dict[str, pd.Series]:
    """Compute the network measures of a classification dataset."""
    selected = resolve_measures("network", measures, MEASURES)
    _, codes = encode_labels(y)
    graph = build_graph(normalize(binarize(x)), codes, eps)
    functions = {
        "Density": lambda: np.array([1.0 - nx.density(graph)]),
        "ClsCoef": lambda: np.array([1.0 - nx.average_clustering(graph)]),
        "Hubs": lambda: 1.0 - _hub_scores(graph),
    }
    return run_measures(functions, selected, summary)
