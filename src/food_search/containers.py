"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from food_search.adapters.spoonacular_client import HttpxSpoonacularClient
from food_search.config import Settings, load_settings
from food_search.services.menu import MenuService
from food_search.services.session import InteractiveSession


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    menu_service: MenuService
    session: InteractiveSession
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or load_settings()
    menu_client = HttpxSpoonacularClient.create(
        api_key=resolved_settings.api_key,
        search_url=resolved_settings.search_url,
        recipe_url=resolved_settings.recipe_url,
        timeout=resolved_settings.request_timeout_seconds,
    )
    menu_service = MenuService(
        client=menu_client,
        retry_attempts=resolved_settings.retry_attempts,
        retry_delay_seconds=resolved_settings.retry_delay_seconds,
    )
    session = InteractiveSession(menu_service=menu_service)

    def close_resources() -> None:
        menu_client.close()

    return AppContainer(
        settings=resolved_settings,
        menu_service=menu_service,
        session=session,
        close_resources=close_resources,
    )
