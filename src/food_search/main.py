"""Command-line entry point for the food search tool."""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from food_search.app_logging import configure_logging
from food_search.config import Settings, load_settings
from food_search.containers import AppContainer, build_container
from food_search.domain.errors import FoodSearchError

EXIT_OK = 0
EXIT_FAILURE = 1

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the foodsearch command."""
    parser = argparse.ArgumentParser(
        prog="foodsearch",
        description="Search fast food menu items",
    )
    parser.add_argument(
        "-q",
        "--query",
        required=True,
        help="Food item to search (required)",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    container_factory: Callable[[Settings], AppContainer] = build_container,
) -> int:
    """Run one interactive search session and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        settings = load_settings()
        configure_logging(settings.log_level)
        container = container_factory(settings)
        try:
            outcome = container.session.run(args.query)
        finally:
            container.close_resources()
    except FoodSearchError as exc:
        _logger.debug("Fatal error", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    _logger.info("Session finished: %s", outcome.value)
    return EXIT_OK


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())
