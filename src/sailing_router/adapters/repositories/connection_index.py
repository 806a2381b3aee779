"""
Connection Index - origin port to outbound sailings, built once.

Implements the read-only graph the route engine searches:
- Inner join of sailings and rates, with exact integer costs attached
- Collect-and-skip filtering: a malformed sailing drops only itself
- Frame sorted by (origin_port, departure_day) for range queries
- Numpy-vectorized port index over the sorted frame
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, FrozenSet, Tuple

import numpy as np
import pandas as pd

from src.dijkstra.alg import PortConnections
from src.sailing_router.schemas.sailing import (
    RateDataFrame,
    SailingDataFrame,
    parse_iso_days,
)

if TYPE_CHECKING:
    from src.sailing_router.services.currency_normalizer import CurrencyNormalizer

logger = logging.getLogger(__name__)

INDEX_COLUMNS = [
    "origin_port",
    "destination_port",
    "departure_date",
    "arrival_date",
    "sailing_code",
    "rate",
    "rate_currency",
    "departure_day",
    "arrival_day",
    "cost",
]


# =============================================================================
# PORT INDEX: contiguous row range per origin port
# =============================================================================


@dataclass(frozen=True)
class PortIndex:
    """
    Row range of one origin port in the sorted connection frame.

    Attributes:
        start: Start index in sorted DataFrame (inclusive).
        end: End index in sorted DataFrame (exclusive).
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate index bounds."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")


def build_port_index(df: pd.DataFrame) -> Dict[str, PortIndex]:
    """
    Build index from a frame pre-sorted by 'origin_port'.

    Boundaries are found with a vectorized comparison of each row's
    origin with its predecessor, so the Python loop is O(num_ports).

    Args:
        df: DataFrame sorted by 'origin_port', index reset (0, 1, 2, ...).

    Returns:
        Dict mapping port code to PortIndex with (start, end) range.

    Example:
        >>> df = pd.DataFrame({'origin_port': ['CNSHA', 'CNSHA', 'NLRTM']})
        >>> build_port_index(df)['NLRTM']
        PortIndex(start=2, end=3)
    """
    if df.empty:
        return {}

    ports = df["origin_port"].values
    n = len(ports)

    change_mask = np.concatenate([[True], ports[1:] != ports[:-1]])
    change_indices = np.where(change_mask)[0]

    index: Dict[str, PortIndex] = {}
    num_boundaries = len(change_indices)

    for i in range(num_boundaries):
        start = int(change_indices[i])
        end = int(change_indices[i + 1]) if i + 1 < num_boundaries else n
        index[str(ports[start])] = PortIndex(start=start, end=end)

    return index


# =============================================================================
# FRAME BUILDING: join, parse, price, filter, sort
# =============================================================================


def build_connection_frame(
    sailings: SailingDataFrame,
    rates: RateDataFrame,
    normalizer: CurrencyNormalizer,
) -> pd.DataFrame:
    """
    Join sailings with rates and keep only fully usable sailings.

    Steps:
    1. Attach each sailing's rate (last rate wins for repeated codes)
    2. Parse departure/arrival dates into day numbers
    3. Drop unparseable dates and arrivals before departures
    4. Compute normalized costs, dropping unconvertible sailings
    5. Sort by (origin_port, departure_day), keeping feed order on ties

    Returns:
        Frame with INDEX_COLUMNS, sorted, index reset.
    """
    rate_columns = rates[["sailing_code", "rate", "rate_currency"]].drop_duplicates(
        subset="sailing_code", keep="last"
    )

    df = sailings.reset_index(drop=True)
    df["feed_order"] = np.arange(len(df))
    df = df.merge(rate_columns, on="sailing_code", how="inner")

    df["departure_day"] = parse_iso_days(df["departure_date"])
    df["arrival_day"] = parse_iso_days(df["arrival_date"])
    df = df[
        df["departure_day"].notna()
        & df["arrival_day"].notna()
        & (df["arrival_day"] >= df["departure_day"])
    ].copy()

    costs = [
        normalizer.cost_for(code, rate, currency, int(day))
        for code, rate, currency, day in zip(
            df["sailing_code"], df["rate"], df["rate_currency"], df["departure_day"]
        )
    ]
    # object dtype keeps costs as exact Python ints
    df["cost"] = pd.Series(costs, index=df.index, dtype=object)
    df = df[df["cost"].notna()]

    df = df.astype({"departure_day": np.int64, "arrival_day": np.int64})
    df = df.sort_values(["origin_port", "departure_day", "feed_order"])

    return df[INDEX_COLUMNS].reset_index(drop=True)


# =============================================================================
# CONNECTION INDEX
# =============================================================================


@dataclass(frozen=True)
class ConnectionIndex:
    """
    Read-only graph of admitted sailings.

    Attributes:
        connections: Port code -> PortConnections for the search engine.
        ports: All port codes seen as origin or destination.
        routes: All (origin, destination) pairs with a direct sailing.
        row_count: Number of admitted sailings.
        dropped_count: Sailings excluded for missing data.
    """

    connections: Dict[str, PortConnections]
    ports: FrozenSet[str]
    routes: FrozenSet[Tuple[str, str]]
    row_count: int
    dropped_count: int

    @classmethod
    def build(
        cls,
        sailings: SailingDataFrame,
        rates: RateDataFrame,
        normalizer: CurrencyNormalizer,
    ) -> "ConnectionIndex":
        """
        Build the index from validated sailings and rates.

        Args:
            sailings: Frame validated by SailingSchema.
            rates: Frame validated by RateSchema.
            normalizer: Converts rates to base-currency minor units.

        Returns:
            Newly built ConnectionIndex.
        """
        build_start = time.perf_counter()

        frame = build_connection_frame(sailings, rates, normalizer)
        port_index = build_port_index(frame)

        connections = {
            port: PortConnections.from_frame(port, frame.iloc[idx.start : idx.end])
            for port, idx in port_index.items()
        }

        ports = frozenset(
            set(frame["origin_port"].unique()) | set(frame["destination_port"].unique())
        )
        routes = frozenset(zip(frame["origin_port"], frame["destination_port"]))

        index = cls(
            connections=connections,
            ports=ports,
            routes=routes,
            row_count=len(frame),
            dropped_count=len(sailings) - len(frame),
        )

        logger.info(
            "Connection index built in %.3fms: %d sailings admitted, %d dropped, "
            "%d origin ports",
            (time.perf_counter() - build_start) * 1000,
            index.row_count,
            index.dropped_count,
            len(connections),
        )

        return index

    def has_port(self, port: str) -> bool:
        """Check if port has any outbound sailings."""
        return port in self.connections

    def has_route(self, origin: str, destination: str) -> bool:
        """Check if a direct sailing exists."""
        return (origin, destination) in self.routes
