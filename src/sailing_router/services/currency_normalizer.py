"""
Currency Normalizer - exact integer costs in base-currency minor units.

Every rate is converted once into an integer number of base-currency
minor units (cents). Exchange-rate multipliers are scaled to fixed-point
integers when the table is loaded, so no floating-point arithmetic is
involved in cost comparisons and results are identical across runs.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional, Tuple

import pandas as pd

from src.dijkstra.exceptions import CalculationError
from src.sailing_router.config import RouterConfig
from src.sailing_router.schemas.sailing import (
    ExchangeRateDataFrame,
    ExchangeRateSchema,
    exchange_rates_to_frame,
    parse_iso_days,
)

logger = logging.getLogger(__name__)


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def parse_decimal(value: Any) -> Optional[Decimal]:
    """Parse a rate or multiplier exactly; None for non-finite or garbage."""
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not parsed.is_finite():
        return None
    return parsed


def scale_exchange_rates(
    exchange_rates: ExchangeRateDataFrame, scale: int
) -> Dict[Tuple[int, str], int]:
    """
    Scale multipliers to fixed-point integers keyed by (day, currency).

    Rows with an unparseable date or a missing/non-positive multiplier
    are discarded.

    Args:
        exchange_rates: Long-form table validated by ExchangeRateSchema.
        scale: Fixed-point scale factor (e.g., 10_000).

    Returns:
        Dict mapping (day number, lowercase currency) to scaled multiplier.
    """
    days = parse_iso_days(exchange_rates["date"])
    scaled: Dict[Tuple[int, str], int] = {}

    for day, currency, multiplier in zip(
        days, exchange_rates["currency"], exchange_rates["multiplier"]
    ):
        if pd.isna(day) or pd.isna(multiplier) or multiplier <= 0:
            continue

        decimal_multiplier = parse_decimal(repr(float(multiplier)))
        if decimal_multiplier is None:
            continue

        value = round_half_up(decimal_multiplier * scale)
        if value > 0:
            scaled[(int(day), currency)] = value

    return scaled


class CurrencyNormalizer:
    """
    Converts sailing rates into base-currency minor units.

    Results, including "unconvertible" (None), are cached per sailing
    code for the lifetime of the instance since a sailing's cost never
    changes.

    Attributes:
        _config: Base currency, minor units and fixed-point scale.
        _multipliers: (day, currency) -> scaled integer multiplier.
        _cache: sailing_code -> cost in minor units, or None.
    """

    def __init__(
        self,
        exchange_rates: Mapping[str, Mapping[str, Any]],
        config: Optional[RouterConfig] = None,
    ) -> None:
        """
        Initialize the normalizer and scale the exchange-rate table.

        Args:
            exchange_rates: {iso_date: {currency: multiplier}}.
            config: Router configuration. Defaults to RouterConfig().

        Raises:
            pandera.errors.SchemaError: If the flattened table fails validation.
        """
        self._config = config or RouterConfig()
        table = ExchangeRateSchema.validate(exchange_rates_to_frame(exchange_rates))
        self._multipliers = scale_exchange_rates(table, self._config.rate_scale)
        self._cache: Dict[str, Optional[int]] = {}

        logger.debug(
            "Scaled %d of %d exchange-rate entries (scale=%d)",
            len(self._multipliers),
            len(table),
            self._config.rate_scale,
        )

    @property
    def base_currency(self) -> str:
        """Lowercase base currency code."""
        return self._config.base_currency

    def is_base_currency(self, currency: str) -> bool:
        return currency.lower() == self._config.base_currency

    def to_minor_units(self, rate: Any) -> Optional[int]:
        """
        Convert a rate to integer minor units of its own currency.

        Returns:
            round_half_up(rate * minor_units), or None for an unusable rate.
        """
        amount = parse_decimal(rate)
        if amount is None or amount < 0:
            return None
        return round_half_up(amount * self._config.minor_units)

    def scaled_multiplier(self, day: int, currency: str) -> Optional[int]:
        """Fixed-point multiplier for currency on day, or None if unknown."""
        return self._multipliers.get((day, currency.lower()))

    def convert(self, rate: Any, currency: str, day: int) -> Optional[int]:
        """
        Convert a rate to base-currency minor units without caching.

        Args:
            rate: Decimal string or number.
            currency: Rate currency, any case.
            day: Departure day number used for the exchange-rate lookup.

        Returns:
            Cost in base minor units, or None if unconvertible.
        """
        rate_minor = self.to_minor_units(rate)
        if rate_minor is None:
            return None

        if self.is_base_currency(currency):
            return rate_minor

        multiplier = self.scaled_multiplier(day, currency)
        if multiplier is None:
            return None

        return (rate_minor * self._config.rate_scale) // multiplier

    def cost_for(
        self, sailing_code: str, rate: Any, currency: str, day: int
    ) -> Optional[int]:
        """
        Cached conversion for one sailing.

        Raises:
            CalculationError: On any unexpected fault during conversion.
        """
        if sailing_code in self._cache:
            return self._cache[sailing_code]

        try:
            cost = self.convert(rate, currency, day)
        except Exception as e:
            raise CalculationError(sailing_code, str(e)) from e

        self._cache[sailing_code] = cost
        return cost

    @property
    def cache_size(self) -> int:
        return len(self._cache)
