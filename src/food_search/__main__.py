"""Allow running the CLI with ``python -m food_search``."""

from food_search.main import run

run()
