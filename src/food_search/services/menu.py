"""Menu search service on top of the food API client."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import ValidationError

from food_search.adapters.spoonacular_client import MenuClient
from food_search.domain.errors import DecodeError, TransportError
from food_search.domain.menu import RecipeDetail, SearchResult

_logger = logging.getLogger(__name__)


@dataclass
class MenuService:
    """Service for menu item search and recipe lookups."""

    client: MenuClient
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    sleep: Callable[[float], None] = time.sleep

    def search(self, query: str) -> SearchResult:
        """Search menu items matching a free-text query."""
        payload = self._call_with_retry(
            lambda: self.client.search_menu_items(query),
            action="search",
        )
        try:
            result = SearchResult.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"malformed search response: {exc}") from exc
        _logger.info("Menu search: query=%r results=%s", query, len(result))
        return result

    def fetch_recipe(self, item_id: int) -> RecipeDetail:
        """Retrieve recipe information for a menu item id."""
        payload = self._call_with_retry(
            lambda: self.client.get_recipe_information(item_id),
            action=f"fetch_recipe:{item_id}",
        )
        try:
            return RecipeDetail.model_validate(payload)
        except ValidationError as exc:
            raise DecodeError(f"malformed recipe response: {exc}") from exc

    def _call_with_retry(
        self, func: Callable[[], dict[str, object]], *, action: str
    ) -> dict[str, object]:
        """Call func, retrying transport failures a bounded number of times."""
        attempt = 0
        while True:
            try:
                return func()
            except TransportError as exc:
                attempt += 1
                _logger.warning(
                    "Menu %s failed (attempt %s/%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                self.sleep(self.retry_delay_seconds)
