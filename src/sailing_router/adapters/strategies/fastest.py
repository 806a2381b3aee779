"""
Fastest-route objective.

The accumulated metric is the number of calendar days from the
itinerary's first departure to the current leg's arrival. Itineraries
with equal duration are ordered by arrival day, earliest first.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

from src.dijkstra.alg import SailingRecord
from src.dijkstra.labels import SearchNode
from src.sailing_router.ports.route_strategy import Metric, RouteStrategy


class FastestRouteStrategy(RouteStrategy):
    """Strategy for finding the FASTEST route."""

    @property
    def name(self) -> str:
        return "fastest"

    def direct_objective(self, sailing: SailingRecord) -> Optional[int]:
        return sailing.duration_days

    def create_next_node(
        self, node: SearchNode, sailing: SailingRecord
    ) -> Optional[SearchNode]:
        start_day = (
            node.start_day if node.start_day is not None else sailing.departure_day
        )

        return SearchNode(
            port=sailing.destination_port,
            metric=sailing.arrival_day - start_day,
            secondary=sailing.arrival_day,
            arrival_day=sailing.arrival_day,
            start_day=start_day,
            legs=node.legs + 1,
            deferred=node.deferred,
            prev=node,
            sailing=sailing,
        )

    def solution_metric(self, path: Sequence[SailingRecord]) -> Metric:
        if not path:
            return (math.inf, math.inf)

        start_day = path[0].departure_day
        end_day = path[-1].arrival_day
        return (end_day - start_day, end_day)

    def node_metric(self, node: SearchNode) -> Metric:
        return (node.metric, node.secondary)
