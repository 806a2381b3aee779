"""
Dijkstra Algorithm Adapter - Bridge between architecture and algorithm.

Wraps the dijkstra module and converts SailingRecord output to RouteLeg
schema objects. Per-port sailings come straight from the
ConnectionIndex, so nothing is regrouped per request.
"""

import logging
from typing import List

from src.dijkstra.alg import (
    DEFAULT_MAX_PATH_LEGS,
    SailingRecord,
    find_best_direct,
    search_route,
)
from src.sailing_router.adapters.repositories.connection_index import (
    ConnectionIndex,
)
from src.sailing_router.ports.route_finder import RouteFinder
from src.sailing_router.ports.route_strategy import RouteStrategy
from src.sailing_router.schemas.route import RouteLeg

logger = logging.getLogger(__name__)


def to_route_leg(sailing: SailingRecord) -> RouteLeg:
    """Convert an internal SailingRecord into the public RouteLeg."""
    return RouteLeg(
        origin_port=sailing.origin_port,
        destination_port=sailing.destination_port,
        departure_date=sailing.departure_date,
        arrival_date=sailing.arrival_date,
        sailing_code=sailing.sailing_code,
        rate=sailing.rate,
        rate_currency=sailing.rate_currency,
        cost_in_cents=sailing.cost,
    )


class DijkstraRouteFinder(RouteFinder):
    """
    Adapter for the dijkstra module.

    Attributes:
        _max_path_legs: Leg count at which search branches are deferred.
    """

    def __init__(self, max_path_legs: int = DEFAULT_MAX_PATH_LEGS) -> None:
        if max_path_legs < 1:
            raise ValueError(f"max_path_legs must be >= 1, got {max_path_legs}")
        self._max_path_legs = max_path_legs

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Time-Respecting Dijkstra"

    @property
    def max_path_legs(self) -> int:
        return self._max_path_legs

    def find_direct(
        self,
        index: ConnectionIndex,
        origin: str,
        destination: str,
        strategy: RouteStrategy,
    ) -> List[RouteLeg]:
        best = find_best_direct(
            index.connections, origin, destination, strategy.direct_objective
        )
        if best is None:
            logger.debug("No direct %s sailing %s -> %s", strategy.name, origin, destination)
            return []

        sailing, metric = best
        logger.debug(
            "Best direct %s sailing %s -> %s: %s (metric=%s)",
            strategy.name,
            origin,
            destination,
            sailing.sailing_code,
            metric,
        )
        return [to_route_leg(sailing)]

    def find_route(
        self,
        index: ConnectionIndex,
        origin: str,
        destination: str,
        strategy: RouteStrategy,
    ) -> List[RouteLeg]:
        sailings = search_route(
            index.connections,
            origin,
            destination,
            strategy,
            max_path_legs=self._max_path_legs,
        )

        logger.debug(
            "Dijkstra found %d-leg %s route for %s -> %s",
            len(sailings),
            strategy.name,
            origin,
            destination,
        )

        return [to_route_leg(sailing) for sailing in sailings]
