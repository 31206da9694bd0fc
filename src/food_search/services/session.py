"""Interactive terminal session: search, select, show detail."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from food_search.domain.menu import MenuItem
from food_search.formatting import (
    format_detail,
    format_instructions,
    format_listing,
)
from food_search.services.menu import MenuService

SELECTION_PROMPT = "\nPlease enter the ID of the item you want to know more about: "
CONFIRM_PROMPT = "\nDo you want the recipe? (yes/no): "
INVALID_ID_MESSAGE = "❌ Invalid ID. Please enter a valid number."
NOT_FOUND_MESSAGE = "❌ No matching item found with the specified ID."
DECLINED_MESSAGE = "No recipe requested."

_logger = logging.getLogger(__name__)


class SessionOutcome(Enum):
    """How a session ended; every outcome is a normal completion."""

    INVALID_SELECTION = "invalid_selection"
    NOT_FOUND = "not_found"
    DECLINED = "declined"
    INSTRUCTIONS_SHOWN = "instructions_shown"


def read_stdin_line(prompt: str) -> str:
    """Read one line from the terminal, treating end of input as empty."""
    try:
        return input(prompt)
    except EOFError:
        return ""


def parse_selection(raw: str) -> int | None:
    """Parse a selected identifier, or None if it is not an integer."""
    try:
        return int(raw.strip())
    except ValueError:
        return None


def wants_instructions(raw: str) -> bool:
    return raw.strip().casefold() == "yes"


@dataclass
class InteractiveSession:
    """Drive one search-select-detail session over line-based I/O."""

    menu_service: MenuService
    read_line: Callable[[str], str] = read_stdin_line
    write: Callable[[str], None] = print

    def run(self, query: str) -> SessionOutcome:
        """Run the session for a query; API errors propagate to the caller."""
        result = self.menu_service.search(query)
        self._write_lines(format_listing(result))

        selected_id = parse_selection(self.read_line(SELECTION_PROMPT))
        if selected_id is None:
            self.write(INVALID_ID_MESSAGE)
            return SessionOutcome.INVALID_SELECTION

        item = result.find(selected_id)
        if item is None:
            _logger.info("Selection %s not in %s results", selected_id, len(result))
            self.write(NOT_FOUND_MESSAGE)
            return SessionOutcome.NOT_FOUND

        return self._show_detail(item)

    def _show_detail(self, item: MenuItem) -> SessionOutcome:
        recipe = self.menu_service.fetch_recipe(item.id)
        self._write_lines(format_detail(item, recipe))

        if wants_instructions(self.read_line(CONFIRM_PROMPT)):
            self._write_lines(format_instructions(recipe))
            return SessionOutcome.INSTRUCTIONS_SHOWN
        self.write(DECLINED_MESSAGE)
        return SessionOutcome.DECLINED

    def _write_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.write(line)
