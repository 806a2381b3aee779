"""
JSON Data Provider - reads the sailing feed from a JSON document.

Expected top-level layout:

    {
        "sailings": [...],
        "rates": [...],
        "exchange_rates": {"2022-01-29": {"usd": 1.1138}, ...}
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from src.dijkstra.exceptions import DataFileNotFoundError, InvalidDataError
from src.sailing_router.ports.sailing_data_provider import (
    SailingDataProvider,
    SailingDataset,
)

logger = logging.getLogger(__name__)

REQUIRED_KEYS = {
    "sailings": list,
    "rates": list,
    "exchange_rates": dict,
}


class JsonSailingDataProvider(SailingDataProvider):
    """
    Loads a SailingDataset from a JSON file.

    Attributes:
        _path: Location of the JSON document.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def name(self) -> str:
        return f"JSON file ({self._path})"

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> SailingDataset:
        if not self._path.is_file():
            raise DataFileNotFoundError(str(self._path))

        try:
            with self._path.open(encoding="utf-8") as fh:
                payload = json.load(fh)
        except json.JSONDecodeError as e:
            raise InvalidDataError(f"Invalid JSON in {self._path}: {e}") from e
        except UnicodeDecodeError as e:
            raise InvalidDataError(f"{self._path} is not UTF-8 text: {e}") from e

        dataset = parse_payload(payload)

        logger.info(
            "Loaded %d sailings, %d rates, %d exchange-rate days from %s",
            len(dataset.sailings),
            len(dataset.rates),
            len(dataset.exchange_rates),
            self._path,
        )
        return dataset


def parse_payload(payload: Any) -> SailingDataset:
    """
    Check the top-level shape of a decoded feed.

    Raises:
        InvalidDataError: If a section is missing or has the wrong type.
    """
    if not isinstance(payload, dict):
        raise InvalidDataError("Data must be a JSON object")

    sections: Dict[str, Any] = {}
    for key, expected in REQUIRED_KEYS.items():
        if key not in payload:
            raise InvalidDataError(f"Missing required key: {key}")
        value = payload[key]
        if not isinstance(value, expected):
            raise InvalidDataError(
                f"'{key}' must be a JSON {'array' if expected is list else 'object'}"
            )
        sections[key] = value

    return SailingDataset(**sections)
