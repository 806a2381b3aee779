"""
Sailing feed schemas using Pandera.

Defines the structural contract for the raw sailing, rate and
exchange-rate collections handed to the engine. Schema validation
happens once at the engine boundary, not per query.

Text columns are declared as object dtype and checked value by value,
so an empty collection validates the same way a populated one does.

Structural problems (missing or null required fields) are validation
failures. Data-quality gaps (unknown rate, missing exchange rate,
unparseable dates) pass the schema and are filtered out later when the
connection index is built.
"""

from typing import Any, List, Mapping, Sequence

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series

SAILING_COLUMNS: List[str] = [
    "origin_port",
    "destination_port",
    "departure_date",
    "arrival_date",
    "sailing_code",
]

RATE_COLUMNS: List[str] = [
    "sailing_code",
    "rate",
    "rate_currency",
]

# Day numbers count calendar days from this date.
EPOCH_REFERENCE = pd.Timestamp("1970-01-01")

ISO_DATE_PATTERN = r"\d{4}-\d{2}-\d{2}"


class SailingSchema(pa.DataFrameModel):
    """
    One directed edge of the shipping network.

    Dates are kept as raw strings here; parsing happens in the
    connection index so a malformed date drops only its own sailing.
    """

    origin_port: Series[object] = pa.Field(
        nullable=False,
        description="Origin port code (e.g., 'CNSHA')",
    )
    destination_port: Series[object] = pa.Field(
        nullable=False,
        description="Destination port code",
    )
    departure_date: Series[object] = pa.Field(
        nullable=False,
        description="Departure date, ISO 'YYYY-MM-DD'",
    )
    arrival_date: Series[object] = pa.Field(
        nullable=False,
        description="Arrival date, ISO 'YYYY-MM-DD'",
    )
    sailing_code: Series[object] = pa.Field(
        nullable=False,
        description="Unique sailing identifier",
    )

    @pa.check(*SAILING_COLUMNS, name="string_values")
    def string_values(cls, series: Series[object]) -> Series[bool]:
        """Reject numbers, lists and other non-text values."""
        return series.map(lambda value: isinstance(value, str)).astype(bool)

    class Config:
        strict = False
        name = "SailingSchema"
        description = "Raw sailings feed"


class RateSchema(pa.DataFrameModel):
    """
    Price of one sailing in its own currency.

    The rate is usually a decimal string ('589.30') but numeric feeds
    are accepted; it is parsed exactly by the currency normalizer.
    """

    sailing_code: Series[object] = pa.Field(
        nullable=False,
        description="Sailing this rate applies to",
    )
    rate: Series[object] = pa.Field(
        nullable=False,
        coerce=True,
        description="Rate as a decimal string or number",
    )
    rate_currency: Series[object] = pa.Field(
        nullable=False,
        description="Three-letter currency code, case-insensitive",
    )

    @pa.check("sailing_code", "rate_currency", name="string_values")
    def string_values(cls, series: Series[object]) -> Series[bool]:
        return series.map(lambda value: isinstance(value, str)).astype(bool)

    class Config:
        strict = False
        name = "RateSchema"
        description = "Raw rates feed"


class ExchangeRateSchema(pa.DataFrameModel):
    """
    Long-form exchange-rate table: one row per (date, currency).

    Multipliers that are missing or not numeric become NaN and are
    discarded by the currency normalizer, as are non-positive ones.
    """

    date: Series[object] = pa.Field(
        nullable=False,
        description="ISO date the multiplier applies to",
    )
    currency: Series[object] = pa.Field(
        nullable=False,
        description="Lowercase currency code",
    )
    multiplier: Series[float] = pa.Field(
        nullable=True,
        coerce=True,
        description="Units of currency per one unit of base currency",
    )

    @pa.check("date", "currency", name="string_values")
    def string_values(cls, series: Series[object]) -> Series[bool]:
        return series.map(lambda value: isinstance(value, str)).astype(bool)

    class Config:
        strict = False
        name = "ExchangeRateSchema"
        description = "Daily exchange rates against the base currency"


SailingDataFrame = DataFrame[SailingSchema]
RateDataFrame = DataFrame[RateSchema]
ExchangeRateDataFrame = DataFrame[ExchangeRateSchema]


def records_to_frame(records: Sequence[Mapping[str, Any]], columns: List[str]) -> pd.DataFrame:
    """
    Build a DataFrame with exactly the given columns from raw records.

    Keys missing from a record become nulls, so the schema reports them.
    """
    rows = [[record.get(column) for column in columns] for record in records]
    return pd.DataFrame(rows, columns=columns, dtype=object)


def _as_float(value: Any) -> float:
    """Best-effort numeric conversion; anything unusable becomes NaN."""
    if value is None or isinstance(value, bool):
        return float("nan")
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def exchange_rates_to_frame(exchange_rates: Mapping[str, Mapping[str, Any]]) -> pd.DataFrame:
    """Flatten {date: {currency: multiplier}} into long form."""
    rows = [
        [str(day), str(currency).lower(), _as_float(multiplier)]
        for day, rates in exchange_rates.items()
        for currency, multiplier in rates.items()
    ]
    return pd.DataFrame(rows, columns=["date", "currency", "multiplier"], dtype=object)


def parse_iso_days(values: pd.Series) -> pd.Series:
    """
    Vectorized ISO date parsing to day numbers since EPOCH_REFERENCE.

    Anything that is not a valid 'YYYY-MM-DD' string becomes NaN, so the
    caller can drop it instead of failing.

    Examples:
        >>> parse_iso_days(pd.Series(['1970-01-02', '2022-02-30', None]))
        0    1.0
        1    NaN
        2    NaN
    """
    is_text = values.map(lambda v: isinstance(v, str)).astype(bool)
    as_text = values.astype(object).where(is_text)
    is_iso = as_text.str.fullmatch(ISO_DATE_PATTERN, na=False).astype(bool)
    parsed = pd.to_datetime(as_text.where(is_iso), format="%Y-%m-%d", errors="coerce")
    return (parsed - EPOCH_REFERENCE).dt.days
