"""
Configuration module for the Sailing Router.

This module loads environment variables (optionally from a .env file)
and provides the immutable engine configuration passed into the route
finder at construction time.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from src.dijkstra.alg import DEFAULT_MAX_PATH_LEGS
from src.dijkstra.exceptions import ValidationError

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATA_FILE: str = os.getenv("SAILING_ROUTER_DATA_FILE", "response.json")
DEFAULT_RATE_SCALE = 10_000
DEFAULT_BASE_CURRENCY = "eur"
DEFAULT_MINOR_UNITS = 100


@dataclass(frozen=True)
class RouterConfig:
    """
    Immutable engine configuration.

    Attributes:
        max_path_legs: Leg count after which search branches are deferred
            behind shallower ones. A scheduling hint, not a hard cap.
        rate_scale: Fixed-point scale applied to exchange-rate multipliers.
        base_currency: Currency that needs no exchange-rate lookup.
        minor_units: Minor units per major unit of currency (cents per euro).
    """

    max_path_legs: int = DEFAULT_MAX_PATH_LEGS
    rate_scale: int = DEFAULT_RATE_SCALE
    base_currency: str = DEFAULT_BASE_CURRENCY
    minor_units: int = DEFAULT_MINOR_UNITS

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not isinstance(self.max_path_legs, int) or self.max_path_legs < 1:
            raise ValidationError(
                f"max_path_legs must be an integer >= 1, got {self.max_path_legs!r}"
            )
        if self.rate_scale < 1:
            raise ValidationError(f"rate_scale must be >= 1, got {self.rate_scale}")
        if self.minor_units < 1:
            raise ValidationError(f"minor_units must be >= 1, got {self.minor_units}")
        if not self.base_currency:
            raise ValidationError("base_currency cannot be empty")

        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "base_currency", self.base_currency.lower())

    @classmethod
    def from_env(cls, max_path_legs: Optional[int] = None) -> "RouterConfig":
        """
        Build configuration from environment variables.

        Reads SAILING_ROUTER_MAX_PATH_LEGS unless max_path_legs is given.

        Raises:
            ValidationError: If the environment value is not an integer.
        """
        if max_path_legs is None:
            raw = os.getenv("SAILING_ROUTER_MAX_PATH_LEGS")
            if raw is None:
                max_path_legs = DEFAULT_MAX_PATH_LEGS
            else:
                try:
                    max_path_legs = int(raw)
                except ValueError as e:
                    raise ValidationError(
                        f"SAILING_ROUTER_MAX_PATH_LEGS must be an integer, got {raw!r}"
                    ) from e

        return cls(max_path_legs=max_path_legs)
