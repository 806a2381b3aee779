"""
Objective strategies for the route search engine.
"""

from src.sailing_router.adapters.strategies.cheapest import CheapestRouteStrategy
from src.sailing_router.adapters.strategies.fastest import FastestRouteStrategy

__all__ = [
    "CheapestRouteStrategy",
    "FastestRouteStrategy",
]
