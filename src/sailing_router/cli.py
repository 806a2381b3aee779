"""
Sailing Router command-line entry point.

Reads three lines from standard input (origin port, destination port,
criteria) and prints the matching itinerary as formatted JSON.

Usage:
    printf 'CNSHA\\nNLRTM\\ncheapest\\n' | sailing-router --data-file response.json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from src.dijkstra.exceptions import (
    ApplicationError,
    DataFileNotFoundError,
    InvalidDataError,
    ValidationError,
)
from src.dijkstra.validation import validate_port_code
from src.sailing_router.application.sailing_router import SEARCH_CRITERIA, SailingRouter
from src.sailing_router.config import DEFAULT_DATA_FILE, RouterConfig

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> None:
    """Configure root logging for console output (stderr by default)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream or sys.stderr,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sailing-router",
        description=(
            "Find sailing routes. Reads origin port, destination port and "
            "criteria from stdin, one per line."
        ),
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=DEFAULT_DATA_FILE,
        help=f"JSON feed with sailings, rates and exchange rates (default: {DEFAULT_DATA_FILE})",
    )
    parser.add_argument(
        "--max-path-legs",
        type=int,
        default=None,
        help="Leg count after which longer itineraries are explored last",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    return parser


def read_query(stdin: TextIO) -> List[str]:
    """Read origin, destination and criteria lines; missing lines become ''."""
    lines = [stdin.readline().strip() for _ in range(3)]
    return lines


def validate_criteria(criteria: str) -> str:
    if not criteria:
        raise ValidationError("Missing criteria.")
    if criteria not in SEARCH_CRITERIA:
        raise ValidationError(
            f"Invalid criteria '{criteria}'. "
            f"Valid options are: {', '.join(SEARCH_CRITERIA)}"
        )
    return criteria


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """
    Run one query.

    Returns:
        Process exit code: 0 on success (including "no routes"), 1 on error.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, stderr)

    origin, destination, criteria = read_query(stdin)

    try:
        validate_port_code(origin, "origin")
        validate_port_code(destination, "destination")
        validate_criteria(criteria)
    except ValidationError as e:
        print(f"Error: {e}", file=stderr)
        return 1

    if origin == destination:
        print("Error: Origin and destination ports cannot be the same.", file=stderr)
        return 1

    try:
        config = RouterConfig.from_env(max_path_legs=args.max_path_legs)
        router = SailingRouter(data_file=args.data_file, config=config)
        legs = router.search(origin, destination, criteria)
    except DataFileNotFoundError as e:
        print(f"Error loading data: {e}", file=stderr)
        return 1
    except InvalidDataError as e:
        print(f"Invalid data format: {e}", file=stderr)
        return 1
    except ApplicationError as e:
        print(f"Application error: {e}", file=stderr)
        return 1
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {e}", file=stderr)
        return 1

    if not legs:
        print(
            f"No routes found from {origin} to {destination} with criteria '{criteria}'.",
            file=stderr,
        )
        return 0

    print(json.dumps([leg.to_dict() for leg in legs], indent=2), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
