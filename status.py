"""
Outcome reporting for graph mutations.

Every mutating call returns exactly one GraphStatus. Invalid indices are
ordinary outcomes, not exceptions; callers that would rather fail loudly can
pass the outcome through ensure_success().
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union


class GraphStatus(Enum):
    """
    Result of a single mutation.

    SUCCESS: the operation completed as requested.
    INVALID_PARENT: add_node was given a parent that does not precede the new node.
    INVALID_NODE: remove_node was given an index outside [0, N).
    INVALID_EDGE: an edge endpoint is out of range, or the edge to remove is absent.
    """

    SUCCESS = "success"
    INVALID_PARENT = "invalid_parent"
    INVALID_NODE = "invalid_node"
    INVALID_EDGE = "invalid_edge"

    @property
    def ok(self) -> bool:
        return self is GraphStatus.SUCCESS


@dataclass(frozen=True)
class AddNodeResult:
    """
    Outcome of add_node.

    The node is appended even when status is INVALID_PARENT, so index is
    always meaningful.
    """
    index: int
    status: GraphStatus

    @property
    def ok(self) -> bool:
        return self.status.ok

    def __iter__(self) -> Iterator[Union[int, GraphStatus]]:
        # Allows `index, status = graph.add_node(...)`
        yield self.index
        yield self.status


class GraphOperationError(Exception):
    """Raised by ensure_success() for any outcome other than SUCCESS."""

    def __init__(self, status: GraphStatus) -> None:
        super().__init__(f"graph operation failed: {status.value}")
        self.status = status


def ensure_success(outcome: Union[GraphStatus, AddNodeResult]) -> Union[GraphStatus, AddNodeResult]:
    """Return outcome unchanged if it succeeded, otherwise raise GraphOperationError."""
    status = outcome.status if isinstance(outcome, AddNodeResult) else outcome
    if not status.ok:
        raise GraphOperationError(status)
    return outcome
