"""
Domain services for the Sailing Router.

Services orchestrate the interaction between ports (repositories, algorithms)
and domain logic (currency normalisation, input validation).
"""

from src.sailing_router.services.currency_normalizer import CurrencyNormalizer
from src.sailing_router.services.route_finder_service import RouteFinderService

__all__ = ["CurrencyNormalizer", "RouteFinderService"]
