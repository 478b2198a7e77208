"""
Human-readable dump of a graph's nodes and adjacency lists.

Reads the graph only through the Graph interface.
"""

import sys
from typing import List, Optional, TextIO

from graph import Graph

HEADER = "Graph Nodes and Adjacency Lists:"

# Format spec applied to node values; adjustable for reports/comparisons.
VALUE_FORMAT: str = "g"


def set_value_format(spec: str) -> None:
    """Set the format spec used for node values in every dump."""
    global VALUE_FORMAT
    try:
        format(1.5, spec)
    except (ValueError, TypeError) as exc:
        raise ValueError(f"unusable value format spec: {spec!r}") from exc
    VALUE_FORMAT = spec


def format_graph(graph: Graph) -> str:
    """
    Render one header line, then `Node <i> (<value>) -> <targets...>` per node.
    """
    lines: List[str] = [HEADER]
    for i in range(graph.node_count()):
        line = f"Node {i} ({format(graph.value(i), VALUE_FORMAT)}) ->"
        targets = graph.outgoing(i)
        if targets:
            line += " " + " ".join(str(t) for t in targets)
        lines.append(line)
    return "\n".join(lines)


def print_graph(graph: Graph, file: Optional[TextIO] = None) -> None:
    print(format_graph(graph), file=file if file is not None else sys.stdout)
