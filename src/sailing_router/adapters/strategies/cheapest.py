"""
Cheapest-route objective.

The accumulated metric is the sum of per-leg normalized costs in
base-currency minor units. Ties between equal-cost itineraries fall to
queue insertion order.
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

from src.dijkstra.alg import SailingRecord
from src.dijkstra.labels import SearchNode
from src.sailing_router.ports.route_strategy import Metric, RouteStrategy

CostLookup = Callable[[SailingRecord], Optional[int]]


class CheapestRouteStrategy(RouteStrategy):
    """
    Strategy for finding the CHEAPEST route.

    Attributes:
        _cost_of: Returns a sailing's cost in minor units, or None when
            the sailing cannot be converted to the base currency.
    """

    def __init__(self, cost_lookup: CostLookup) -> None:
        self._cost_of = cost_lookup

    @property
    def name(self) -> str:
        return "cheapest"

    def direct_objective(self, sailing: SailingRecord) -> Optional[int]:
        return self._cost_of(sailing)

    def create_next_node(
        self, node: SearchNode, sailing: SailingRecord
    ) -> Optional[SearchNode]:
        sailing_cost = self._cost_of(sailing)
        if sailing_cost is None:
            return None

        return SearchNode(
            port=sailing.destination_port,
            metric=node.metric + sailing_cost,
            arrival_day=sailing.arrival_day,
            start_day=(
                node.start_day if node.start_day is not None else sailing.departure_day
            ),
            legs=node.legs + 1,
            deferred=node.deferred,
            prev=node,
            sailing=sailing,
        )

    def solution_metric(self, path: Sequence[SailingRecord]) -> Metric:
        if not path:
            return (math.inf,)

        total = 0
        for sailing in path:
            cost = self._cost_of(sailing)
            if cost is None:
                return (math.inf,)
            total += cost
        return (total,)

    def node_metric(self, node: SearchNode) -> Metric:
        return (node.metric,)
