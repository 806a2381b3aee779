"""
Route result schemas.

Defines the output contract of the engine: an itinerary is an ordered
list of RouteLeg objects, each carrying its own normalized cost.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Sequence


@dataclass(frozen=True)
class RouteLeg:
    """
    Immutable representation of one sailing within an itinerary.

    Raw feed fields are preserved verbatim for display; cost_in_cents is
    the sailing's price converted to base-currency minor units.
    """

    origin_port: str
    destination_port: str
    departure_date: str
    arrival_date: str
    sailing_code: str
    rate: str
    rate_currency: str
    cost_in_cents: int

    @property
    def duration_days(self) -> int:
        """Sailing duration in calendar days."""
        return (
            date.fromisoformat(self.arrival_date) - date.fromisoformat(self.departure_date)
        ).days

    def to_dict(self, include_cost: bool = False) -> Dict[str, Any]:
        """
        Serialize using the feed's field names.

        Args:
            include_cost: Also emit the normalized 'cost_in_cents'.
        """
        data: Dict[str, Any] = {
            "origin_port": self.origin_port,
            "destination_port": self.destination_port,
            "departure_date": self.departure_date,
            "arrival_date": self.arrival_date,
            "sailing_code": self.sailing_code,
            "rate": self.rate,
            "rate_currency": self.rate_currency,
        }
        if include_cost:
            data["cost_in_cents"] = self.cost_in_cents
        return data


def itinerary_cost(legs: Sequence[RouteLeg]) -> int:
    """Total normalized cost of an itinerary in minor units."""
    return sum(leg.cost_in_cents for leg in legs)


def itinerary_days(legs: Sequence[RouteLeg]) -> int:
    """Elapsed days from the first departure to the last arrival."""
    if not legs:
        return 0
    return (
        date.fromisoformat(legs[-1].arrival_date) - date.fromisoformat(legs[0].departure_date)
    ).days
