"""
Node records for indexgraph.

A node has no identity beyond its position, so records are snapshots and go
stale as soon as a node is removed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NodeRecord:
    """Index/value pair captured at read time."""

    index: int
    value: float
