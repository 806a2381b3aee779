"""
Algorithm adapters for sailing routing.
"""

from src.sailing_router.adapters.algorithms.dijkstra_adapter import (
    DijkstraRouteFinder,
    to_route_leg,
)

__all__ = [
    "DijkstraRouteFinder",
    "to_route_leg",
]
