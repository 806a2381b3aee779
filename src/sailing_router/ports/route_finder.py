"""
Route Finder port interface.

Defines the abstract contract for routing algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from src.sailing_router.adapters.repositories.connection_index import (
        ConnectionIndex,
    )
    from src.sailing_router.ports.route_strategy import RouteStrategy
    from src.sailing_router.schemas.route import RouteLeg


class RouteFinder(ABC):
    """
    Abstract interface for route finding algorithms.

    Algorithm adapters receive the full ConnectionIndex and read the
    per-port sailings through it; they never mutate it.

    Implementations:
    - DijkstraRouteFinder: single-objective Dijkstra with deferred tiering
    """

    @abstractmethod
    def find_direct(
        self,
        index: ConnectionIndex,
        origin: str,
        destination: str,
        strategy: RouteStrategy,
    ) -> List[RouteLeg]:
        """
        Find the best single sailing between two ports.

        Returns:
            One-leg itinerary, or an empty list if no direct sailing exists.
        """
        ...

    @abstractmethod
    def find_route(
        self,
        index: ConnectionIndex,
        origin: str,
        destination: str,
        strategy: RouteStrategy,
    ) -> List[RouteLeg]:
        """
        Find the best itinerary of any length between two ports.

        Args:
            index: Pre-built ConnectionIndex.
            origin: Origin port code.
            destination: Destination port code.
            strategy: Objective to minimise.

        Returns:
            Ordered legs, or an empty list if destination is unreachable.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable algorithm name."""
        ...
