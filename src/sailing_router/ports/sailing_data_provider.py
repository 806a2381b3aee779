"""
Sailing Data Provider port interface.

Defines the abstract contract for data sources that provide the raw
sailing, rate and exchange-rate collections. Implementations handle
the specifics of the backend (JSON file, in-memory, etc.).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class SailingDataset:
    """
    Raw feed collections, exactly as the source provided them.

    Attributes:
        sailings: Sailing records (dicts with the feed's field names).
        rates: Rate records keyed by sailing_code.
        exchange_rates: {iso_date: {currency: multiplier}}.
    """

    sailings: List[Dict[str, Any]]
    rates: List[Dict[str, Any]]
    exchange_rates: Dict[str, Dict[str, Any]]


class SailingDataProvider(ABC):
    """
    Abstract interface for sailing data providers.

    Providers only check the top-level shape of the feed. Record-level
    validation happens at the engine boundary.

    Implementations:
    - JsonSailingDataProvider: JSON document on disk
    """

    @abstractmethod
    def load(self) -> SailingDataset:
        """
        Load the full dataset.

        Raises:
            DataFileNotFoundError: If the source does not exist.
            InvalidDataError: If the source is not a well-formed feed.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable provider name."""
        ...
