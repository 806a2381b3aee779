"""
SailingRouter Use Case - Public API for sailing route queries.

This module provides the main entry point for the sailing route engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, FrozenSet, List, Optional, Union

from src.dijkstra.exceptions import ValidationError
from src.sailing_router.adapters.data_providers.json_provider import (
    JsonSailingDataProvider,
)
from src.sailing_router.config import DEFAULT_DATA_FILE, RouterConfig
from src.sailing_router.ports.route_finder import RouteFinder
from src.sailing_router.ports.sailing_data_provider import SailingDataProvider
from src.sailing_router.schemas.route import RouteLeg
from src.sailing_router.services.route_finder_service import RouteFinderService

logger = logging.getLogger(__name__)

CHEAPEST_DIRECT = "cheapest-direct"
FASTEST_DIRECT = "fastest-direct"
CHEAPEST = "cheapest"
FASTEST = "fastest"

SEARCH_CRITERIA = (CHEAPEST_DIRECT, FASTEST_DIRECT, CHEAPEST, FASTEST)


class SailingRouter:
    """
    Public API for finding sailing routes.

    Example usage:
        >>> router = SailingRouter(data_file="response.json")
        >>> legs = router.search("CNSHA", "NLRTM", "cheapest")
        >>> for leg in legs:
        ...     print(leg.sailing_code, leg.rate, leg.rate_currency)

    Attributes:
        _data_provider: Source of the raw feed.
        _service: Underlying RouteFinderService.
    """

    def __init__(
        self,
        data_file: Optional[Union[str, Path]] = None,
        data_provider: Optional[SailingDataProvider] = None,
        config: Optional[RouterConfig] = None,
        route_finder: Optional[RouteFinder] = None,
    ) -> None:
        """
        Load the feed and build the engine.

        Args:
            data_file: JSON feed path. Defaults to SAILING_ROUTER_DATA_FILE.
            data_provider: Custom data provider. If None, uses
                JsonSailingDataProvider on data_file.
            config: Engine configuration. If None, read from the environment.
            route_finder: Custom algorithm. If None, uses DijkstraRouteFinder.

        Raises:
            DataLoadError: If the feed cannot be read.
            ValidationError: If the feed content is malformed.
        """
        if data_provider is not None:
            self._data_provider = data_provider
        else:
            self._data_provider = JsonSailingDataProvider(data_file or DEFAULT_DATA_FILE)

        dataset = self._data_provider.load()

        self._service = RouteFinderService(
            sailings=dataset.sailings,
            rates=dataset.rates,
            exchange_rates=dataset.exchange_rates,
            config=config or RouterConfig.from_env(),
            route_finder=route_finder,
        )

        self._queries: Dict[str, Callable[[str, str], List[RouteLeg]]] = {
            CHEAPEST_DIRECT: self._service.find_cheapest_direct,
            FASTEST_DIRECT: self._service.find_fastest_direct,
            CHEAPEST: self._service.find_cheapest_route,
            FASTEST: self._service.find_fastest_route,
        }

        logger.info(
            "SailingRouter initialized from %s (%d sailings)",
            self._data_provider.name,
            self._service.sailing_count,
        )

    def search(self, origin: str, destination: str, criteria: str) -> List[RouteLeg]:
        """
        Run the query named by criteria.

        Args:
            origin: Origin port code (e.g., 'CNSHA').
            destination: Destination port code.
            criteria: One of SEARCH_CRITERIA.

        Returns:
            Ordered legs; empty if no itinerary exists.

        Raises:
            ValidationError: If criteria is unknown or a port code is malformed.
            InvalidRouteError: If origin has no outbound sailings.
        """
        query = self._queries.get(criteria.strip().lower() if criteria else "")
        if query is None:
            raise ValidationError(
                f"Invalid criteria: {criteria!r}. "
                f"Must be one of: {', '.join(SEARCH_CRITERIA)}"
            )
        return query(origin, destination)

    def find_cheapest_direct(self, origin: str, destination: str) -> List[RouteLeg]:
        return self._service.find_cheapest_direct(origin, destination)

    def find_fastest_direct(self, origin: str, destination: str) -> List[RouteLeg]:
        return self._service.find_fastest_direct(origin, destination)

    def find_cheapest_route(self, origin: str, destination: str) -> List[RouteLeg]:
        return self._service.find_cheapest_route(origin, destination)

    def find_fastest_route(self, origin: str, destination: str) -> List[RouteLeg]:
        return self._service.find_fastest_route(origin, destination)

    def get_available_ports(self) -> FrozenSet[str]:
        """All port codes appearing in the loaded sailings."""
        return self._service.ports

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct sailing exists between two ports."""
        return self._service.has_route(origin, destination)

    @property
    def service(self) -> RouteFinderService:
        """Underlying service, for advanced use."""
        return self._service
