"""
Input validation for the dijkstra module.

Provides validation functions that check inputs before any search runs,
ensuring fail-fast behavior with clear error messages.
"""

import re
from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidPortCodeError, ValidationError

# Two uppercase letters, then three uppercase letters or digits 2-9.
# 0 and 1 are excluded to avoid confusion with O and I.
PORT_CODE_PATTERN = re.compile(r"^[A-Z]{2}[A-Z2-9]{3}$")


def is_valid_port_code(port_code: Any) -> bool:
    """Return True if port_code is a well-formed 5-character port code."""
    if not isinstance(port_code, str) or not port_code:
        return False
    return PORT_CODE_PATTERN.fullmatch(port_code) is not None


def validate_port_code(port_code: Any, role: str = "port") -> None:
    """
    Validate a single port code.

    Args:
        port_code: Code to validate (e.g., 'CNSHA').
        role: Used in the error message ('origin', 'destination').

    Raises:
        InvalidPortCodeError: If the code is empty or malformed.
    """
    if not is_valid_port_code(port_code):
        raise InvalidPortCodeError(port_code, role)


def validate_record_list(records: Any, name: str) -> None:
    """
    Validate that a raw collection is a list of mappings.

    Raises:
        ValidationError: If records is None, not a list, or holds non-mappings.
    """
    if records is None:
        raise ValidationError(f"{name.capitalize()} data cannot be None")
    if not isinstance(records, (list, tuple)):
        raise ValidationError(f"{name.capitalize()} must be a list of records")

    for position, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise ValidationError(
                f"{name.capitalize()} record at position {position} is not an object"
            )


def validate_exchange_rates(exchange_rates: Any) -> None:
    """
    Validate the shape of the exchange-rate table.

    The table maps an ISO date string to a mapping of currency -> multiplier.

    Raises:
        ValidationError: If the table or any per-date entry is not a mapping.
    """
    if exchange_rates is None:
        raise ValidationError("Exchange rates data cannot be None")
    if not isinstance(exchange_rates, Mapping):
        raise ValidationError("Exchange rates must be a mapping of date to rates")

    for day, rates in exchange_rates.items():
        if not isinstance(rates, Mapping):
            raise ValidationError(
                f"Exchange rates for {day!r} must be a mapping of currency to rate"
            )


def validate_engine_inputs(sailings: Any, rates: Any, exchange_rates: Any) -> None:
    """
    Validate all construction inputs for the route engine.

    This is the main validation entry point; checks run in the same
    order the collections are passed.

    Raises:
        ValidationError: If any collection has the wrong shape.
    """
    validate_record_list(sailings, "sailings")
    validate_record_list(rates, "rates")
    validate_exchange_rates(exchange_rates)
