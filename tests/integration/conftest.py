"""Shared feed for application and CLI tests."""

import json

import pytest


@pytest.fixture
def feed():
    return {
        "sailings": [
            {
                "origin_port": "CNSHA",
                "destination_port": "NLRTM",
                "departure_date": "2022-02-01",
                "arrival_date": "2022-03-01",
                "sailing_code": "ABCD",
            },
            {
                "origin_port": "CNSHA",
                "destination_port": "NLRTM",
                "departure_date": "2022-01-30",
                "arrival_date": "2022-03-05",
                "sailing_code": "MNOP",
            },
            {
                "origin_port": "CNSHA",
                "destination_port": "ESBCN",
                "departure_date": "2022-01-29",
                "arrival_date": "2022-02-06",
                "sailing_code": "ERXQ",
            },
            {
                "origin_port": "ESBCN",
                "destination_port": "NLRTM",
                "departure_date": "2022-02-16",
                "arrival_date": "2022-02-20",
                "sailing_code": "ETRG",
            },
        ],
        "rates": [
            {"sailing_code": "ABCD", "rate": "589.30", "rate_currency": "USD"},
            {"sailing_code": "MNOP", "rate": "456.78", "rate_currency": "USD"},
            {"sailing_code": "ERXQ", "rate": "261.96", "rate_currency": "EUR"},
            {"sailing_code": "ETRG", "rate": "69.96", "rate_currency": "USD"},
        ],
        "exchange_rates": {
            "2022-01-29": {"usd": 1.11},
            "2022-01-30": {"usd": 1.1138},
            "2022-02-01": {"usd": 1.126},
            "2022-02-16": {"usd": 1.13},
        },
    }


@pytest.fixture
def data_file(tmp_path, feed):
    path = tmp_path / "response.json"
    path.write_text(json.dumps(feed), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("SAILING_ROUTER_MAX_PATH_LEGS", raising=False)
