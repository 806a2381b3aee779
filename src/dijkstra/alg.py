"""
Single-objective Dijkstra search over time-respecting sailings.

Performance optimizations:
- SailingRecord dataclass replaces pd.Series rows inside the hot loop
- PortConnections keeps departure days in a sorted numpy array, so the
  "departs strictly after" query is a binary search instead of a scan
- Deferred tiering keeps short itineraries ahead of long ones in the heap
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Callable,
    Dict,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

import numpy as np
import pandas as pd

from .labels import SearchNode
from .reconstruction import reconstruct_path

if TYPE_CHECKING:
    from src.sailing_router.ports.route_strategy import RouteStrategy

DEFAULT_MAX_PATH_LEGS = 10


@dataclass(frozen=True, slots=True)
class SailingRecord:
    """
    Lightweight sailing record for algorithm iteration.

    Carries the raw feed fields for output plus the parsed day numbers
    (days since 1970-01-01) and the normalized cost in minor units.
    """

    origin_port: str
    destination_port: str
    departure_date: str
    arrival_date: str
    sailing_code: str
    rate: str
    rate_currency: str
    departure_day: int
    arrival_day: int
    cost: int

    @property
    def duration_days(self) -> int:
        """Sailing duration in calendar days."""
        return self.arrival_day - self.departure_day


class PortConnections:
    """
    Outbound sailings of a single port, sorted by departure day.

    Pre-extracted numpy arrays enable vectorized destination filtering
    and O(log n) departure-day range queries.
    """

    __slots__ = ("port", "records", "destinations", "departure_days", "n")

    def __init__(self, port: str, records: Sequence[SailingRecord]) -> None:
        self.port = port
        self.records: Tuple[SailingRecord, ...] = tuple(records)
        self.n = len(self.records)
        self.destinations = np.array(
            [r.destination_port for r in self.records], dtype=object
        )
        self.departure_days = np.array(
            [r.departure_day for r in self.records], dtype=np.int64
        )

        if self.n > 1 and np.any(np.diff(self.departure_days) < 0):
            raise ValueError(f"Sailings from {port} must be sorted by departure day")

    @classmethod
    def from_frame(cls, port: str, df: pd.DataFrame) -> "PortConnections":
        """Build from an index slice holding one origin port's sailings."""
        records = [
            SailingRecord(
                origin_port=row.origin_port,
                destination_port=row.destination_port,
                departure_date=row.departure_date,
                arrival_date=row.arrival_date,
                sailing_code=row.sailing_code,
                rate=str(row.rate),
                rate_currency=row.rate_currency,
                departure_day=int(row.departure_day),
                arrival_day=int(row.arrival_day),
                cost=int(row.cost),
            )
            for row in df.itertuples(index=False)
        ]
        return cls(port, records)

    def departing_after(self, day: Optional[int]) -> Tuple[SailingRecord, ...]:
        """Return sailings departing strictly after day (all when day is None)."""
        if day is None:
            return self.records
        start = int(np.searchsorted(self.departure_days, day, side="right"))
        return self.records[start:]

    def sailings_to(self, destination: str) -> List[SailingRecord]:
        """Return sailings landing at destination, in departure order."""
        if self.n == 0:
            return []
        indices = np.nonzero(self.destinations == destination)[0]
        return [self.records[i] for i in indices]


def find_best_direct(
    connections: Mapping[str, PortConnections],
    origin: str,
    destination: str,
    objective: Callable[[SailingRecord], Optional[int]],
) -> Optional[Tuple[SailingRecord, int]]:
    """
    Find the single sailing from origin to destination minimising objective.

    Only origin's outbound sailings are scanned. Ties keep the first
    candidate in departure order; candidates whose objective is None
    (unconvertible) are skipped.

    Returns:
        (sailing, metric) for the best candidate, or None.
    """
    arrays = connections.get(origin)
    if arrays is None:
        return None

    best: Optional[SailingRecord] = None
    best_metric: Optional[int] = None

    for sailing in arrays.sailings_to(destination):
        metric = objective(sailing)
        if metric is None:
            continue
        if best_metric is None or metric < best_metric:
            best = sailing
            best_metric = metric

    if best is None or best_metric is None:
        return None
    return best, best_metric


def search_route(
    connections: Mapping[str, PortConnections],
    origin: str,
    destination: str,
    strategy: RouteStrategy,
    max_path_legs: int = DEFAULT_MAX_PATH_LEGS,
) -> List[SailingRecord]:
    """
    Dijkstra search for the best itinerary under a pluggable objective.

    The best direct sailing seeds the pruning bound. Nodes that reach
    max_path_legs are re-queued once in the deferred tier, so every
    itinerary within the leg budget is explored first; longer
    itineraries are still considered afterwards.

    Args:
        connections: Origin port -> outbound sailings sorted by departure.
        origin: Starting port code.
        destination: Target port code.
        strategy: Objective strategy (cheapest, fastest).
        max_path_legs: Leg count at which nodes move to the deferred tier.

    Returns:
        Ordered list of sailings (empty if destination is unreachable).
    """
    if max_path_legs < 1:
        raise ValueError(f"max_path_legs must be >= 1, got {max_path_legs}")

    # An initial node is never a solution, so a round trip is not a route.
    if origin == destination:
        return []

    direct = find_best_direct(
        connections, origin, destination, strategy.direct_objective
    )
    best_path: List[SailingRecord] = [direct[0]] if direct is not None else []
    best_metric = strategy.solution_metric(best_path)
    best_node: Optional[SearchNode] = None

    # Heap entries: (tier, priority, insertion order, node)
    pq: List[tuple] = []
    counter = itertools.count()

    def push(node: SearchNode) -> None:
        heapq.heappush(
            pq, (int(node.deferred), strategy.priority(node), next(counter), node)
        )

    push(strategy.create_initial_node(origin))

    visited: Dict[str, tuple] = {}

    while pq:
        node: SearchNode = heapq.heappop(pq)[-1]

        if strategy.prune(node, best_metric):
            continue

        if node.port == destination:
            if not node.is_initial and strategy.is_better_solution(node, best_metric):
                best_metric = strategy.node_metric(node)
                best_node = node
            continue

        if node.legs >= max_path_legs and not node.deferred:
            push(node.as_deferred())
            continue

        arrays = connections.get(node.port)
        if arrays is None:
            continue

        for sailing in arrays.departing_after(node.arrival_day):
            next_node = strategy.create_next_node(node, sailing)
            if next_node is None:
                continue

            metric = strategy.node_metric(next_node)
            known = visited.get(next_node.port)
            if known is not None and metric >= known:
                continue

            visited[next_node.port] = metric
            push(next_node)

    if best_node is not None:
        return reconstruct_path(best_node)

    return best_path
