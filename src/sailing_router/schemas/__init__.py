"""
Schema definitions for the Sailing Router.

Pandera-validated DataFrames as the input contracts, frozen
dataclasses as the output contract.
"""

from .route import RouteLeg, itinerary_cost, itinerary_days
from .sailing import (
    ExchangeRateDataFrame,
    ExchangeRateSchema,
    RateDataFrame,
    RateSchema,
    SailingDataFrame,
    SailingSchema,
)

__all__ = [
    # Input schemas
    "SailingSchema",
    "RateSchema",
    "ExchangeRateSchema",
    "SailingDataFrame",
    "RateDataFrame",
    "ExchangeRateDataFrame",
    # Route schemas
    "RouteLeg",
    "itinerary_cost",
    "itinerary_days",
]
