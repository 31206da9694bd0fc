"""Spoonacular (apilayer) food API client."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from food_search.domain.errors import (
    AuthorizationError,
    DecodeError,
    TransportError,
    UpstreamStatusError,
)

_UNAUTHORIZED_STATUSES = {401, 403}

_logger = logging.getLogger(__name__)


class MenuClient(Protocol):
    """Interface for menu item and recipe API interactions."""

    def search_menu_items(self, query: str) -> dict[str, object]:
        """Search menu items by free text and return raw API data."""

    def get_recipe_information(self, item_id: int) -> dict[str, object]:
        """Fetch recipe information by id and return raw API data."""


@dataclass
class HttpxSpoonacularClient(MenuClient):
    """HTTPX-backed Spoonacular client."""

    api_key: str
    search_url: str
    recipe_url: str
    http_client: httpx.Client
    timeout: float = 15.0

    @classmethod
    def create(
        cls, api_key: str, search_url: str, recipe_url: str, timeout: float = 15.0
    ) -> "HttpxSpoonacularClient":
        """Create a client with a managed httpx session."""
        return cls(
            api_key=api_key,
            search_url=search_url,
            recipe_url=recipe_url,
            http_client=httpx.Client(),
            timeout=timeout,
        )

    def search_menu_items(self, query: str) -> dict[str, object]:
        """Search menu items, including nutrition information."""
        return self._get(
            self.search_url,
            params={"query": query, "addMenuItemInformation": "true"},
        )

    def get_recipe_information(self, item_id: int) -> dict[str, object]:
        """Fetch recipe information for a menu item id."""
        url = f"{self.recipe_url.rstrip('/')}/{item_id}/information"
        return self._get(url)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()

    def _get(
        self, url: str, params: dict[str, str] | None = None
    ) -> dict[str, object]:
        """Issue an authenticated GET and return the decoded JSON object."""
        headers = {
            "apikey": self.api_key,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        try:
            response = self.http_client.get(
                url, params=params, headers=headers, timeout=self.timeout
            )
        except httpx.TransportError as exc:
            raise TransportError(f"request to {url} failed: {exc}") from exc

        _logger.debug("GET %s -> %s", response.request.url, response.status_code)
        if response.status_code in _UNAUTHORIZED_STATUSES:
            raise AuthorizationError(response.status_code)
        if not response.is_success:
            raise UpstreamStatusError(response.status_code, url)

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"response from {url} is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise DecodeError(f"response from {url} is not a JSON object")
        return payload
