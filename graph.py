"""
Directed graph abstraction for indexgraph.

Nodes are addressed by dense integer indices in [0, N).
Edges are directed: source -> target, unweighted, duplicates allowed.
"""

from abc import ABC, abstractmethod
from typing import List

from nodes import NodeRecord


class Graph(ABC):
    """Read-only view of a directed graph over dense node indices."""

    @abstractmethod
    def node_count(self) -> int:
        """Return N, the number of nodes currently in the graph."""
        raise NotImplementedError

    @abstractmethod
    def value(self, index: int) -> float:
        """
        Value stored on the node at index.

        Raises IndexError when index is not in [0, N).
        """
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, index: int) -> List[int]:
        """
        Outgoing neighbor indices of a node, in insertion order.

        Returns: list[int], possibly with repeats for parallel edges.
        """
        raise NotImplementedError

    def nodes(self) -> List[NodeRecord]:
        """Return a snapshot of all nodes in index order."""
        return [NodeRecord(i, self.value(i)) for i in range(self.node_count())]

    def __len__(self) -> int:
        return self.node_count()
