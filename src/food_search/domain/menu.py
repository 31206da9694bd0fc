"""Menu item and recipe models decoded from the food API."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _WireModel(BaseModel):
    """Immutable model that decodes camelCase wire names.

    A JSON ``null`` falls back to the field default, so a missing value and
    an explicit null decode the same way.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: object) -> object:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Nutrition(_WireModel):
    """Nutrition summary embedded in a menu item.

    Fat, protein and carbs are unit-bearing strings such as ``"12g"``.
    """

    calories: float = 0.0
    fat: str = ""
    protein: str = ""
    carbs: str = ""


class MenuItem(_WireModel):
    """A purchasable item at a restaurant chain."""

    id: int
    title: str = ""
    restaurant_chain: str = Field(default="", alias="restaurantChain")
    image: str = ""
    nutrition: Nutrition = Field(default_factory=Nutrition)


class RecipeDetail(_WireModel):
    """Preparation metadata for a menu item identifier."""

    instructions: str = ""
    gluten_free: bool = Field(default=False, alias="glutenFree")
    vegan: bool = False
    ready_in_minutes: int = Field(default=0, alias="readyInMinutes")
    servings: int = 0


class SearchResult(_WireModel):
    """Ordered menu items returned by a single search."""

    items: tuple[MenuItem, ...] = Field(default=(), alias="menuItems")

    def find(self, item_id: int) -> MenuItem | None:
        """Return the first item with the given id, if present."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def __len__(self) -> int:
        return len(self.items)
