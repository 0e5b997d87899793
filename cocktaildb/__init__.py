"""
TheCocktailDB async client.

    import asyncio, cocktaildb
    drinks = asyncio.run(cocktaildb.search("Margarita"))

Every query returns the upstream value or None; see ``CocktailDBClient``.
"""
from cocktaildb.api_clients import CocktailDBClient
from cocktaildb.core.config import ClientSettings
from cocktaildb.core.logging_config import configure_logging
from cocktaildb.queries import (
    search,
    search_by_letter,
    search_ingredient,
    search_by_id,
    search_ingredient_by_id,
    random,
    filter_by_ingredient,
    filter_by_alcoholic,
    filter_by_category,
    filter_by_glass,
    categories_filter,
    glasses_filter,
    ingredients_filter,
    alcoholic_filter,
)

__version__ = "1.0.0"

__all__ = [
    "CocktailDBClient",
    "ClientSettings",
    "configure_logging",
    "search",
    "search_by_letter",
    "search_ingredient",
    "search_by_id",
    "search_ingredient_by_id",
    "random",
    "filter_by_ingredient",
    "filter_by_alcoholic",
    "filter_by_category",
    "filter_by_glass",
    "categories_filter",
    "glasses_filter",
    "ingredients_filter",
    "alcoholic_filter",
]
