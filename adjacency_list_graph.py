"""
Concrete directed graph implementation for indexgraph.

Implements the Graph interface with two parallel lists: node values and
per-node outgoing neighbor lists. Indices stay dense; removing a node
renumbers everything above it.
"""

import logging
from typing import List, Optional

from graph import Graph
from status import AddNodeResult, GraphStatus

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph):
    """
    Directed graph backed by index -> [neighbor index, ...] lists.

    Outgoing lists keep duplicates and insertion order, so parallel edges
    and self-loops are both representable.
    """

    def __init__(self) -> None:
        self._values: List[float] = []
        self._adj: List[List[int]] = []

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._values)

    # --- Mutation API --------------------------------------------------------

    def add_node(self, value: float, parent: Optional[int] = None) -> AddNodeResult:
        """
        Append a node and optionally draw an edge parent -> new node.

        The append always happens. A parent that does not already exist
        (parent >= new index, or negative) yields INVALID_PARENT and no edge,
        but the new node is kept.
        """
        new_index = len(self._values)
        self._values.append(float(value))
        self._adj.append([])

        if parent is None:
            logger.debug(f"Added node {new_index} with no parent")
            return AddNodeResult(new_index, GraphStatus.SUCCESS)

        if 0 <= parent < new_index:
            self._adj[parent].append(new_index)
            logger.debug(f"Added node {new_index} with parent edge {parent} -> {new_index}")
            return AddNodeResult(new_index, GraphStatus.SUCCESS)

        logger.debug(f"Added node {new_index} but rejected parent {parent}")
        return AddNodeResult(new_index, GraphStatus.INVALID_PARENT)

    def add_edge(self, source: int, target: int) -> GraphStatus:
        """Append target to source's outgoing list. Both must exist."""
        if not (self._in_range(source) and self._in_range(target)):
            logger.debug(f"Rejected edge {source} -> {target}: endpoint out of range")
            return GraphStatus.INVALID_EDGE
        self._adj[source].append(target)
        return GraphStatus.SUCCESS

    def remove_edge(self, source: int, target: int) -> GraphStatus:
        """
        Remove the first occurrence of target from source's outgoing list.

        Only source is range-checked; a target that is not present, in range
        or not, is reported as INVALID_EDGE.
        """
        if not self._in_range(source):
            logger.debug(f"Rejected edge removal {source} -> {target}: source out of range")
            return GraphStatus.INVALID_EDGE
        neighbors = self._adj[source]
        try:
            neighbors.remove(target)
        except ValueError:
            logger.debug(f"Rejected edge removal {source} -> {target}: no such edge")
            return GraphStatus.INVALID_EDGE
        return GraphStatus.SUCCESS

    def remove_node(self, node: int) -> GraphStatus:
        """
        Remove a node, every edge into it, and renumber the survivors.

        The node's value and outgoing list are deleted first, which shifts
        every later node down one slot. Then each remaining outgoing list
        drops all references to the removed index and decrements references
        above it, so stored indices match the compacted positions. Self-loops
        and parallel edges into the removed node vanish with it.
        """
        if not self._in_range(node):
            logger.debug(f"Rejected removal of node {node}: out of range")
            return GraphStatus.INVALID_NODE

        del self._values[node]
        del self._adj[node]

        for i, neighbors in enumerate(self._adj):
            self._adj[i] = [n - 1 if n > node else n for n in neighbors if n != node]

        logger.debug(f"Removed node {node}; {len(self._values)} nodes remain")
        return GraphStatus.SUCCESS

    # --- Graph interface -----------------------------------------------------

    def node_count(self) -> int:
        return len(self._values)

    def value(self, index: int) -> float:
        if not self._in_range(index):
            raise IndexError(f"node index {index} out of range")
        return self._values[index]

    def outgoing(self, index: int) -> List[int]:
        if not self._in_range(index):
            raise IndexError(f"node index {index} out of range")
        return list(self._adj[index])  # defensive copy

    # --- Convenience queries -------------------------------------------------

    def edge_count(self) -> int:
        """Total number of edges, counting parallel edges separately."""
        return sum(len(neighbors) for neighbors in self._adj)

    def has_edge(self, source: int, target: int) -> bool:
        return self._in_range(source) and target in self._adj[source]
