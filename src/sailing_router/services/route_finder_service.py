"""
Route Finder Service - Domain orchestrator for sailing routes.

Coordinates the interaction between:
- Raw feed validation (shape checks + pandera schemas)
- CurrencyNormalizer (exact base-currency costs)
- ConnectionIndex (read-only graph, built once)
- RouteFinder (algorithm adapter) parameterised by a RouteStrategy
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, FrozenSet, List, Mapping, Optional, Sequence

import pandera as pa

from src.dijkstra.exceptions import (
    ApplicationError,
    InvalidRouteError,
    RouteSearchError,
    ValidationError,
)
from src.dijkstra.validation import validate_engine_inputs, validate_port_code
from src.sailing_router.adapters.algorithms.dijkstra_adapter import (
    DijkstraRouteFinder,
)
from src.sailing_router.adapters.repositories.connection_index import (
    ConnectionIndex,
)
from src.sailing_router.adapters.strategies import (
    CheapestRouteStrategy,
    FastestRouteStrategy,
)
from src.sailing_router.config import RouterConfig
from src.sailing_router.ports.route_finder import RouteFinder
from src.sailing_router.ports.route_strategy import RouteStrategy
from src.sailing_router.schemas.route import RouteLeg
from src.sailing_router.schemas.sailing import (
    RATE_COLUMNS,
    SAILING_COLUMNS,
    RateSchema,
    SailingSchema,
    records_to_frame,
)
from src.sailing_router.services.currency_normalizer import CurrencyNormalizer

logger = logging.getLogger(__name__)


class RouteFinderService:
    """
    Public API of the sailing route engine.

    All preprocessing (validation, currency normalisation, indexing)
    happens once in the constructor. Queries only read shared state,
    so repeated queries return identical results.

    Attributes:
        _config: Engine configuration.
        _normalizer: Cached sailing costs in base minor units.
        _index: Read-only connection graph.
        _route_finder: Algorithm adapter.
        _cheapest: Cheapest objective bound to the normalizer's costs.
        _fastest: Fastest objective.
    """

    def __init__(
        self,
        sailings: Sequence[Mapping[str, Any]],
        rates: Sequence[Mapping[str, Any]],
        exchange_rates: Mapping[str, Mapping[str, Any]],
        config: Optional[RouterConfig] = None,
        route_finder: Optional[RouteFinder] = None,
    ) -> None:
        """
        Validate the feed and build the connection index.

        Args:
            sailings: Sailing records.
            rates: Rate records.
            exchange_rates: {iso_date: {currency: multiplier}}.
            config: Engine configuration. Defaults to RouterConfig().
            route_finder: Algorithm adapter. Defaults to DijkstraRouteFinder.

        Raises:
            ValidationError: If any collection or record is malformed.
        """
        build_start = time.perf_counter()

        self._config = config or RouterConfig()
        validate_engine_inputs(sailings, rates, exchange_rates)

        try:
            sailings_df = SailingSchema.validate(
                records_to_frame(sailings, SAILING_COLUMNS)
            )
            rates_df = RateSchema.validate(records_to_frame(rates, RATE_COLUMNS))
            self._normalizer = CurrencyNormalizer(exchange_rates, self._config)
        except (pa.errors.SchemaError, pa.errors.SchemaErrors) as e:
            raise ValidationError(f"Invalid sailing data: {e}") from e

        self._index = ConnectionIndex.build(sailings_df, rates_df, self._normalizer)
        self._route_finder = route_finder or DijkstraRouteFinder(
            self._config.max_path_legs
        )

        self._cheapest = CheapestRouteStrategy(lambda sailing: sailing.cost)
        self._fastest = FastestRouteStrategy()

        logger.debug(
            "RouteFinderService ready in %.3fms (%d ports, %d sailings, %d priced)",
            (time.perf_counter() - build_start) * 1000,
            len(self._index.ports),
            self._index.row_count,
            self._normalizer.cache_size,
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    def find_cheapest_direct(self, origin: str, destination: str) -> List[RouteLeg]:
        """
        Cheapest single sailing from origin to destination.

        Returns:
            A one-leg itinerary, or [] if no direct sailing exists.

        Raises:
            InvalidPortCodeError: If a port code is malformed.
            InvalidRouteError: If origin has no outbound sailings.
            RouteSearchError: On an unexpected internal fault.
        """
        return self._run_query(
            origin, destination, self._cheapest, self._route_finder.find_direct
        )

    def find_fastest_direct(self, origin: str, destination: str) -> List[RouteLeg]:
        """Shortest single sailing from origin to destination (0 or 1 legs)."""
        return self._run_query(
            origin, destination, self._fastest, self._route_finder.find_direct
        )

    def find_cheapest_route(self, origin: str, destination: str) -> List[RouteLeg]:
        """
        Cheapest itinerary of any length from origin to destination.

        Each leg departs strictly after the previous leg arrives.
        """
        return self._run_query(
            origin, destination, self._cheapest, self._route_finder.find_route
        )

    def find_fastest_route(self, origin: str, destination: str) -> List[RouteLeg]:
        """
        Fastest itinerary from origin to destination.

        Duration runs from the first departure to the last arrival; equal
        durations are resolved by the earlier arrival.
        """
        return self._run_query(
            origin, destination, self._fastest, self._route_finder.find_route
        )

    def _run_query(
        self,
        origin: str,
        destination: str,
        strategy: RouteStrategy,
        finder: Callable[..., List[RouteLeg]],
    ) -> List[RouteLeg]:
        """Validate ports, run one search, and wrap unexpected faults."""
        validate_port_code(origin, "origin")
        validate_port_code(destination, "destination")

        if not self._index.has_port(origin):
            raise InvalidRouteError(origin)

        if origin == destination:
            return []

        start_time = time.perf_counter()
        try:
            legs = finder(self._index, origin, destination, strategy)
        except ApplicationError:
            raise
        except Exception as e:
            raise RouteSearchError(
                f"Route search failed for {origin} -> {destination}: {e}"
            ) from e

        logger.info(
            "%s search %s -> %s completed: %d legs in %.3fms",
            strategy.name,
            origin,
            destination,
            len(legs),
            (time.perf_counter() - start_time) * 1000,
        )
        return legs

    # =========================================================================
    # READ-ONLY HELPERS
    # =========================================================================

    @property
    def ports(self) -> FrozenSet[str]:
        """All ports appearing in admitted sailings."""
        return self._index.ports

    @property
    def sailing_count(self) -> int:
        """Number of sailings admitted into the index."""
        return self._index.row_count

    @property
    def config(self) -> RouterConfig:
        return self._config

    def has_port(self, port: str) -> bool:
        """True if port has at least one outbound sailing."""
        return self._index.has_port(port)

    def has_route(self, origin: str, destination: str) -> bool:
        """True if at least one direct sailing links the two ports."""
        return self._index.has_route(origin, destination)
