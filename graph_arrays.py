"""
numpy exports of a graph snapshot.
"""

import numpy as np

from graph import Graph


def values_array(graph: Graph) -> np.ndarray:
    """Node values as a float64 vector indexed by node."""
    return np.array([graph.value(i) for i in range(graph.node_count())], dtype=np.float64)


def adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    N x N edge-multiplicity matrix.

    Entry [s, t] counts how many times t appears in s's outgoing list, so
    parallel edges show up as values above 1.
    """
    n = graph.node_count()
    matrix = np.zeros((n, n), dtype=np.int64)
    for source in range(n):
        targets = graph.outgoing(source)
        if targets:
            np.add.at(matrix[source], targets, 1)
    return matrix
