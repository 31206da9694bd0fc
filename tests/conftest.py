"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field

import pytest

from food_search.adapters.spoonacular_client import MenuClient
from food_search.config import Settings
from food_search.domain.errors import ApiError


def _search_payload() -> dict[str, object]:
    return {
        "menuItems": [
            {
                "id": 42,
                "title": "Double Cheeseburger",
                "restaurantChain": "Burger Barn",
                "image": "https://images.test/42.jpg",
                "nutrition": {
                    "calories": 449.6,
                    "fat": "24g",
                    "protein": "25g",
                    "carbs": "34g",
                },
            },
            {
                "id": 7,
                "title": "Veggie Wrap",
                "restaurantChain": "Wrap Shack",
                "image": "https://images.test/7.jpg",
                "nutrition": {
                    "calories": 310,
                    "fat": "9g",
                    "protein": "11g",
                    "carbs": "45g",
                },
            },
            {
                "id": 1003,
                "title": "Chicken Nuggets (10 pc)",
                "restaurantChain": "Cluck House",
                "image": "",
                "nutrition": {
                    "calories": 420,
                    "fat": "26g",
                    "protein": "23g",
                    "carbs": "25g",
                },
            },
        ]
    }


def _recipe_payload() -> dict[str, object]:
    return {
        "instructions": "Grill the patties. Melt the cheese. Assemble.",
        "glutenFree": False,
        "readyInMinutes": 25,
        "servings": 2,
        "vegan": True,
    }


@dataclass
class FakeMenuClient(MenuClient):
    """Fake menu client that records calls and returns canned payloads."""

    search_payload: dict[str, object] = field(default_factory=_search_payload)
    recipe_payload: dict[str, object] = field(default_factory=_recipe_payload)
    search_error: ApiError | None = None
    recipe_error: ApiError | None = None
    search_queries: list[str] = field(default_factory=list)
    recipe_ids: list[int] = field(default_factory=list)

    def search_menu_items(self, query: str) -> dict[str, object]:
        self.search_queries.append(query)
        if self.search_error is not None:
            raise self.search_error
        return self.search_payload

    def get_recipe_information(self, item_id: int) -> dict[str, object]:
        self.recipe_ids.append(item_id)
        if self.recipe_error is not None:
            raise self.recipe_error
        return self.recipe_payload


@dataclass
class ScriptedConsole:
    """Line-based console that replays answers and records output."""

    answers: list[str] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            return ""
        return self.answers.pop(0)

    def write(self, text: str) -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def search_payload() -> dict[str, object]:
    return _search_payload()


@pytest.fixture
def recipe_payload() -> dict[str, object]:
    return _recipe_payload()


@pytest.fixture
def menu_client() -> FakeMenuClient:
    return FakeMenuClient()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key="test-key",
        search_url="https://api.test/spoonacular/food/menuItems/search",
        recipe_url="https://api.test/spoonacular/recipes",
        retry_attempts=0,
        _env_file=None,
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run without API_KEY in the environment or a .env file on disk."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("API_KEY", raising=False)
    return monkeypatch


@pytest.fixture
def console() -> ScriptedConsole:
    return ScriptedConsole()


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("food_search")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
