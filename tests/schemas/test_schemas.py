"""
Tests for sailing_router schema definitions.

Validates that:
1. strict=False lets extra feed columns pass through
2. Missing, null or non-text required fields raise SchemaError
3. The exchange-rate table flattens and coerces as expected
4. RouteLeg serialization and itinerary helpers work
"""

import math

import pandas as pd
import pandera as pa
import pytest

from src.sailing_router.schemas.route import RouteLeg, itinerary_cost, itinerary_days
from src.sailing_router.schemas.sailing import (
    RATE_COLUMNS,
    SAILING_COLUMNS,
    ExchangeRateSchema,
    RateSchema,
    SailingSchema,
    exchange_rates_to_frame,
    records_to_frame,
)


# -------------------------
# Fixtures
# -------------------------


@pytest.fixture
def valid_sailing_records():
    return [
        {
            "origin_port": "CNSHA",
            "destination_port": "NLRTM",
            "departure_date": "2022-02-01",
            "arrival_date": "2022-03-01",
            "sailing_code": "ABCD",
        },
        {
            "origin_port": "ESBCN",
            "destination_port": "NLRTM",
            "departure_date": "2022-02-16",
            "arrival_date": "2022-02-20",
            "sailing_code": "ETRG",
            "vessel": "extra field",
        },
    ]


@pytest.fixture
def valid_rate_records():
    return [
        {"sailing_code": "ABCD", "rate": "589.30", "rate_currency": "USD"},
        {"sailing_code": "ETRG", "rate": 69.96, "rate_currency": "usd"},
    ]


@pytest.fixture
def first_leg():
    return RouteLeg(
        origin_port="CNSHA",
        destination_port="ESBCN",
        departure_date="2022-01-29",
        arrival_date="2022-02-06",
        sailing_code="ERXQ",
        rate="261.96",
        rate_currency="EUR",
        cost_in_cents=26196,
    )


@pytest.fixture
def second_leg():
    return RouteLeg(
        origin_port="ESBCN",
        destination_port="NLRTM",
        departure_date="2022-02-16",
        arrival_date="2022-02-20",
        sailing_code="ETRG",
        rate="69.96",
        rate_currency="USD",
        cost_in_cents=6191,
    )


# -------------------------
# records_to_frame
# -------------------------


class TestRecordsToFrame:

    def test_keeps_only_requested_columns(self, valid_sailing_records):
        df = records_to_frame(valid_sailing_records, SAILING_COLUMNS)
        assert list(df.columns) == SAILING_COLUMNS
        assert len(df) == 2

    def test_missing_key_becomes_null(self):
        df = records_to_frame([{"sailing_code": "ABCD", "rate": "1.00"}], RATE_COLUMNS)
        assert df.loc[0, "rate_currency"] is None

    def test_empty_records(self):
        df = records_to_frame([], SAILING_COLUMNS)
        assert df.empty
        assert list(df.columns) == SAILING_COLUMNS


# -------------------------
# SailingSchema
# -------------------------


class TestSailingSchema:

    def test_valid_records_pass(self, valid_sailing_records):
        df = records_to_frame(valid_sailing_records, SAILING_COLUMNS)
        validated = SailingSchema.validate(df)
        assert len(validated) == 2

    def test_extra_columns_allowed(self, valid_sailing_records):
        df = pd.DataFrame(valid_sailing_records, dtype=object)
        validated = SailingSchema.validate(df)
        assert "vessel" in validated.columns

    def test_empty_frame_passes(self):
        validated = SailingSchema.validate(records_to_frame([], SAILING_COLUMNS))
        assert validated.empty

    @pytest.mark.parametrize("field", SAILING_COLUMNS)
    def test_missing_field_fails(self, valid_sailing_records, field):
        del valid_sailing_records[0][field]
        df = records_to_frame(valid_sailing_records, SAILING_COLUMNS)
        with pytest.raises(pa.errors.SchemaError):
            SailingSchema.validate(df)

    @pytest.mark.parametrize("value", [123, 4.5, ["CNSHA"]])
    def test_non_text_field_fails(self, valid_sailing_records, value):
        valid_sailing_records[1]["origin_port"] = value
        df = records_to_frame(valid_sailing_records, SAILING_COLUMNS)
        with pytest.raises(pa.errors.SchemaError):
            SailingSchema.validate(df)

    def test_malformed_date_passes_schema(self, valid_sailing_records):
        """Unparseable dates are a data-quality gap handled later."""
        valid_sailing_records[0]["departure_date"] = "not-a-date"
        df = records_to_frame(valid_sailing_records, SAILING_COLUMNS)
        SailingSchema.validate(df)


# -------------------------
# RateSchema
# -------------------------


class TestRateSchema:

    def test_string_and_numeric_rates_pass(self, valid_rate_records):
        validated = RateSchema.validate(records_to_frame(valid_rate_records, RATE_COLUMNS))
        assert list(validated["rate"]) == ["589.30", 69.96]

    def test_null_rate_fails(self, valid_rate_records):
        valid_rate_records[0]["rate"] = None
        with pytest.raises(pa.errors.SchemaError):
            RateSchema.validate(records_to_frame(valid_rate_records, RATE_COLUMNS))

    def test_non_text_currency_fails(self, valid_rate_records):
        valid_rate_records[1]["rate_currency"] = 840
        with pytest.raises(pa.errors.SchemaError):
            RateSchema.validate(records_to_frame(valid_rate_records, RATE_COLUMNS))

    def test_empty_frame_passes(self):
        validated = RateSchema.validate(records_to_frame([], RATE_COLUMNS))
        assert validated.empty


# -------------------------
# ExchangeRateSchema
# -------------------------


class TestExchangeRateSchema:

    def test_flattens_to_long_form(self):
        df = exchange_rates_to_frame({
            "2022-01-29": {"USD": 1.11, "jpy": 128.5},
            "2022-01-30": {"usd": 1.1138},
        })
        validated = ExchangeRateSchema.validate(df)
        assert len(validated) == 3
        assert set(validated["currency"]) == {"usd", "jpy"}
        assert validated["multiplier"].dtype == float

    @pytest.mark.parametrize("raw", [None, "abc", True, [1.1]])
    def test_unusable_multiplier_becomes_nan(self, raw):
        df = ExchangeRateSchema.validate(exchange_rates_to_frame({"2022-01-29": {"usd": raw}}))
        assert math.isnan(df["multiplier"].iloc[0])

    def test_numeric_string_multiplier(self):
        df = ExchangeRateSchema.validate(exchange_rates_to_frame({"2022-01-29": {"usd": "1.25"}}))
        assert df["multiplier"].iloc[0] == pytest.approx(1.25)

    def test_empty_table(self):
        df = ExchangeRateSchema.validate(exchange_rates_to_frame({}))
        assert df.empty

    @pytest.mark.parametrize("column,value", [("date", 20220129), ("currency", None)])
    def test_non_text_key_fails(self, column, value):
        row = {"date": "2022-01-29", "currency": "usd", "multiplier": 1.1}
        row[column] = value
        df = pd.DataFrame([row], columns=["date", "currency", "multiplier"], dtype=object)
        with pytest.raises(pa.errors.SchemaError):
            ExchangeRateSchema.validate(df)


# -------------------------
# RouteLeg
# -------------------------


class TestRouteLeg:

    def test_to_dict_uses_feed_fields(self, first_leg):
        assert first_leg.to_dict() == {
            "origin_port": "CNSHA",
            "destination_port": "ESBCN",
            "departure_date": "2022-01-29",
            "arrival_date": "2022-02-06",
            "sailing_code": "ERXQ",
            "rate": "261.96",
            "rate_currency": "EUR",
        }

    def test_to_dict_with_cost(self, first_leg):
        assert first_leg.to_dict(include_cost=True)["cost_in_cents"] == 26196

    def test_duration_days(self, first_leg, second_leg):
        assert first_leg.duration_days == 8
        assert second_leg.duration_days == 4

    def test_frozen(self, first_leg):
        with pytest.raises(AttributeError):
            first_leg.rate = "0.00"

    def test_itinerary_helpers(self, first_leg, second_leg):
        legs = [first_leg, second_leg]
        assert itinerary_cost(legs) == 32387
        assert itinerary_days(legs) == 22

    def test_empty_itinerary(self):
        assert itinerary_cost([]) == 0
        assert itinerary_days([]) == 0
