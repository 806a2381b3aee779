"""
Custom exceptions for the sailing route engine.

Provides a single hierarchy rooted at ApplicationError so callers can
catch one exception surface for everything the engine raises.
"""

from typing import Optional


class ApplicationError(Exception):
    """Base exception for all sailing router errors."""

    pass


class ValidationError(ApplicationError):
    """Raised when construction input or query arguments are malformed."""

    pass


class InvalidPortCodeError(ValidationError):
    """Raised when a port code does not match the expected format."""

    def __init__(self, port_code: Optional[str], role: str = "port") -> None:
        self.port_code = port_code
        self.role = role
        if not port_code:
            message = f"{role.capitalize()} port code cannot be empty"
        else:
            message = (
                f"Invalid {role.lower()} port code format: {port_code}. "
                "Expected 2 uppercase letters followed by 3 uppercase letters "
                "or digits 2-9 (e.g., CNSHA)."
            )
        super().__init__(message)


class InvalidRouteError(ApplicationError):
    """Raised when a query cannot be answered for the given ports."""

    def __init__(self, origin: str) -> None:
        self.origin = origin
        super().__init__(f"No sailings found from origin port: {origin}")


class CalculationError(ApplicationError):
    """Raised when a sailing cost cannot be computed due to an internal fault."""

    def __init__(self, sailing_code: str, reason: str) -> None:
        self.sailing_code = sailing_code
        super().__init__(
            f"Error calculating cost for sailing {sailing_code}: {reason}"
        )


class RouteSearchError(ApplicationError):
    """Wraps any unexpected fault raised while answering a query."""

    pass


class DataLoadError(ApplicationError):
    """Base exception for failures reading a sailing data source."""

    pass


class DataFileNotFoundError(DataLoadError):
    """Raised when the sailing data file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class InvalidDataError(DataLoadError):
    """Raised when the sailing data file cannot be parsed or has the wrong shape."""

    pass
