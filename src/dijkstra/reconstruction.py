from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from .labels import SearchNode

if TYPE_CHECKING:
    from .alg import SailingRecord


def reconstruct_path(node: SearchNode) -> List[SailingRecord]:
    """
    Reconstruct the sailings taken to reach a terminal node.

    Returns:
        Ordered list of sailings from origin to node (empty for the origin).
    """
    sailings: List[SailingRecord] = []

    curr: Optional[SearchNode] = node
    while curr is not None:
        if curr.sailing is not None:
            sailings.append(curr.sailing)
        curr = curr.prev

    sailings.reverse()
    return sailings
