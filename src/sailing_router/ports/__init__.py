"""
Port interfaces for the Sailing Router.

Ports define the abstract interfaces (ABCs) that the domain layer uses
to communicate with data sources and algorithms. This follows the
Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.sailing_router.ports.route_finder import RouteFinder
from src.sailing_router.ports.route_strategy import Metric, RouteStrategy
from src.sailing_router.ports.sailing_data_provider import (
    SailingDataProvider,
    SailingDataset,
)

__all__ = [
    "Metric",
    "RouteFinder",
    "RouteStrategy",
    "SailingDataProvider",
    "SailingDataset",
]
