"""
End-to-End Integration Tests for Sailing Router.

These tests validate the complete stack from a JSON feed on disk:
- JsonSailingDataProvider (file to raw records)
- RouteFinderService (validation, normalisation, indexing)
- DijkstraRouteFinder (algorithm adapter)
- SailingRouter (public API)
"""

import pytest

from src.dijkstra.exceptions import (
    DataFileNotFoundError,
    InvalidRouteError,
    ValidationError,
)
from src.sailing_router.application.sailing_router import SEARCH_CRITERIA, SailingRouter
from src.sailing_router.config import RouterConfig
from src.sailing_router.ports.sailing_data_provider import (
    SailingDataProvider,
    SailingDataset,
)


class InMemoryProvider(SailingDataProvider):
    """Provider returning a fixed dataset."""

    def __init__(self, feed):
        self._dataset = SailingDataset(**feed)

    @property
    def name(self) -> str:
        return "in-memory"

    def load(self) -> SailingDataset:
        return self._dataset


@pytest.fixture
def router(data_file) -> SailingRouter:
    return SailingRouter(data_file=data_file)


class TestSearch:

    @pytest.mark.parametrize(
        "criteria,expected",
        [
            ("cheapest-direct", ["MNOP"]),
            ("fastest-direct", ["ABCD"]),
            ("cheapest", ["ERXQ", "ETRG"]),
            ("fastest", ["ERXQ", "ETRG"]),
        ],
    )
    def test_all_criteria(self, router, criteria, expected):
        legs = router.search("CNSHA", "NLRTM", criteria)
        assert [leg.sailing_code for leg in legs] == expected

    def test_criteria_case_and_whitespace(self, router):
        assert router.search("CNSHA", "NLRTM", " Cheapest ") == router.find_cheapest_route(
            "CNSHA", "NLRTM"
        )

    @pytest.mark.parametrize("criteria", ["", None, "shortest", "cheapest_direct"])
    def test_invalid_criteria(self, router, criteria):
        with pytest.raises(ValidationError, match="Invalid criteria"):
            router.search("CNSHA", "NLRTM", criteria)

    def test_pass_through_queries(self, router):
        assert len(router.find_cheapest_direct("CNSHA", "NLRTM")) == 1
        assert len(router.find_fastest_direct("CNSHA", "NLRTM")) == 1
        assert len(router.find_cheapest_route("CNSHA", "NLRTM")) == 2
        assert len(router.find_fastest_route("CNSHA", "NLRTM")) == 2

    def test_errors_propagate(self, router):
        with pytest.raises(InvalidRouteError):
            router.search("NLRTM", "CNSHA", "cheapest")

    def test_criteria_list(self):
        assert SEARCH_CRITERIA == ("cheapest-direct", "fastest-direct", "cheapest", "fastest")


class TestConstruction:

    def test_custom_provider(self, feed):
        router = SailingRouter(data_provider=InMemoryProvider(feed), config=RouterConfig())
        assert router.get_available_ports() == frozenset({"CNSHA", "NLRTM", "ESBCN"})
        assert router.has_route("CNSHA", "ESBCN")
        assert not router.has_route("NLRTM", "CNSHA")

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataFileNotFoundError):
            SailingRouter(data_file=tmp_path / "missing.json")

    def test_config_from_env(self, data_file, monkeypatch):
        monkeypatch.setenv("SAILING_ROUTER_MAX_PATH_LEGS", "2")
        router = SailingRouter(data_file=data_file)
        assert router.service.config.max_path_legs == 2

    def test_malformed_records(self, feed):
        feed["sailings"][0]["origin_port"] = None
        with pytest.raises(ValidationError):
            SailingRouter(data_provider=InMemoryProvider(feed))
