from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .alg import SailingRecord


@dataclass(frozen=True, eq=False)
class SearchNode:
    """
    Represents a state in the route search space.

    Each SearchNode tracks:
    - Current port
    - Accumulated objective metric (cost in minor units or elapsed days)
    - Secondary metric used for tie-breaking (arrival day for fastest)
    - Arrival day of the leg that produced this node
    - Start day of the itinerary
    - Number of legs taken so far
    - Whether the node has been deferred behind shallower branches
    - Chain back to the previous node and the sailing that led here

    Note: eq=False keeps identity semantics, so two nodes with equal
    fields are still distinct search states.
    """

    port: str
    metric: int
    secondary: int = 0
    arrival_day: Optional[int] = None
    start_day: Optional[int] = None
    legs: int = 0
    deferred: bool = False
    prev: Optional["SearchNode"] = None
    sailing: Optional["SailingRecord"] = None

    @property
    def is_initial(self) -> bool:
        """True for the origin node, which has no predecessor."""
        return self.prev is None

    def as_deferred(self) -> "SearchNode":
        """Return a copy scheduled in the deferred tier."""
        return replace(self, deferred=True)
