"""
Data provider adapters for the sailing feed.
"""

from src.sailing_router.adapters.data_providers.json_provider import (
    JsonSailingDataProvider,
    parse_payload,
)

__all__ = [
    "JsonSailingDataProvider",
    "parse_payload",
]
