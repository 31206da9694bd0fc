"""Text rendering for menu listings and recipe details."""

from food_search.domain.menu import MenuItem, RecipeDetail, SearchResult

SEPARATOR = "-" * 50
LISTING_HEADER = (
    "\n🍔✨ Browse for more information on the Menu Items Found "
    "in the restaurants near you..:✨🍔"
)

_CYAN = "\033[1;36m"
_GREEN = "\033[1;32m"
_RESET = "\033[0m"


def format_listing(result: SearchResult) -> list[str]:
    """Render the search result as printable lines, in response order."""
    lines = [LISTING_HEADER, SEPARATOR]
    if not result:
        lines.append("No menu items found.")
        return lines
    for item in result.items:
        lines.extend(format_listing_entry(item))
    return lines


def format_listing_entry(item: MenuItem) -> list[str]:
    """Render one listing entry: identifier, title and chain."""
    return [
        f"{_CYAN}{item.id:3d} - {item.title}{_RESET}",
        f"{_GREEN}   Restaurant: {_RESET}{item.restaurant_chain}",
        SEPARATOR,
    ]


def format_detail(item: MenuItem, recipe: RecipeDetail) -> list[str]:
    """Render nutrition for the item and the recipe's dietary facts."""
    nutrition = item.nutrition
    return [
        f"\n🍔 Found: {item.title} at {item.restaurant_chain}",
        f"🖼️ Image: {item.image}",
        f"🔥 Calories in {item.title}: {nutrition.calories:.0f} kcal",
        f"🔥 Carbs in {item.title}: {nutrition.carbs}",
        f"🔥 Protein in {item.title}: {nutrition.protein}",
        f"🔥 Fats in {item.title}: {nutrition.fat}",
        f"\n🌱 Is it Vegan? {yes_no(recipe.vegan)}",
        f"🍞 Is it Gluten-Free? {yes_no(recipe.gluten_free)}",
        f"⏳ Ready in: {recipe.ready_in_minutes} minutes",
        f"🍽️ Servings: {recipe.servings}",
    ]


def format_instructions(recipe: RecipeDetail) -> list[str]:
    """Render the recipe instructions block."""
    text = recipe.instructions.strip() or "No instructions provided for this item."
    return ["\n🥗 Recipe Instructions:", text]


def yes_no(flag: bool) -> str:
    return "Yes ✅" if flag else "No ❌"
