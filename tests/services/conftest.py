"""Pytest configuration for service tests."""

import pytest

from src.sailing_router.services.route_finder_service import RouteFinderService


def _sailing(origin, destination, departure, arrival, code):
    return {
        "origin_port": origin,
        "destination_port": destination,
        "departure_date": departure,
        "arrival_date": arrival,
        "sailing_code": code,
    }


def _rate(code, amount, currency):
    return {"sailing_code": code, "rate": amount, "rate_currency": currency}


@pytest.fixture
def make_sailing():
    return _sailing


@pytest.fixture
def make_rate():
    return _rate


@pytest.fixture
def sailings():
    """Three direct CNSHA->NLRTM sailings plus two indirect routes."""
    return [
        _sailing("CNSHA", "NLRTM", "2022-02-01", "2022-03-01", "ABCD"),
        _sailing("CNSHA", "NLRTM", "2022-01-30", "2022-03-05", "MNOP"),
        _sailing("CNSHA", "NLRTM", "2022-02-10", "2022-03-10", "IJKL"),
        _sailing("CNSHA", "ESBCN", "2022-01-29", "2022-02-06", "ERXQ"),
        _sailing("ESBCN", "NLRTM", "2022-02-16", "2022-02-20", "ETRG"),
        _sailing("CNSHA", "BRSSZ", "2022-01-25", "2022-02-15", "XYZK"),
        _sailing("BRSSZ", "NLRTM", "2022-02-20", "2022-03-05", "LMNO"),
    ]


@pytest.fixture
def rates():
    return [
        _rate("ABCD", "589.30", "USD"),
        _rate("MNOP", "456.78", "USD"),
        _rate("IJKL", "97453", "JPY"),
        _rate("ERXQ", "261.96", "EUR"),
        _rate("ETRG", "69.96", "USD"),
        _rate("XYZK", "350.00", "USD"),
        _rate("LMNO", "220.50", "USD"),
    ]


@pytest.fixture
def exchange_rates():
    return {
        "2022-01-25": {"usd": 1.10, "jpy": 127.8},
        "2022-01-29": {"usd": 1.11, "jpy": 128.5},
        "2022-01-30": {"usd": 1.1138, "jpy": 128.7},
        "2022-02-01": {"usd": 1.126, "jpy": 129.5},
        "2022-02-10": {"usd": 1.13, "jpy": 130.0},
        "2022-02-16": {"usd": 1.13, "jpy": 130.2},
        "2022-02-20": {"usd": 1.14, "jpy": 131.0},
    }


@pytest.fixture
def service(sailings, rates, exchange_rates):
    return RouteFinderService(sailings, rates, exchange_rates)
