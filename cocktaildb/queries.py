"""
Module-level query functions.

Each call opens its own short-lived ``CocktailDBClient`` and closes it when
done, so concurrent calls share no state.
"""
from typing import Any, List, Optional, Union

from cocktaildb.api_clients.cocktaildb import CocktailDBClient
from cocktaildb.dtos import Record


async def _call(method: str, *args: Union[str, int]) -> Any:
    async with CocktailDBClient() as client:
        return await getattr(client, method)(*args)


async def search(name: str) -> Optional[List[Record]]:
    return await _call("search", name)


async def search_by_letter(letter: str) -> Optional[List[Record]]:
    return await _call("search_by_letter", letter)


async def search_ingredient(name: str) -> Optional[Record]:
    return await _call("search_ingredient", name)


async def search_by_id(drink_id: Union[int, str]) -> Optional[Record]:
    return await _call("search_by_id", drink_id)


async def search_ingredient_by_id(ingredient_id: Union[int, str]) -> Optional[Record]:
    return await _call("search_ingredient_by_id", ingredient_id)


async def random() -> Optional[Record]:
    return await _call("random")


async def filter_by_ingredient(name: str) -> Optional[List[Record]]:
    return await _call("filter_by_ingredient", name)


async def filter_by_alcoholic(value: str) -> Optional[List[Record]]:
    return await _call("filter_by_alcoholic", value)


async def filter_by_category(name: str) -> Optional[List[Record]]:
    return await _call("filter_by_category", name)


async def filter_by_glass(name: str) -> Optional[List[Record]]:
    return await _call("filter_by_glass", name)


async def categories_filter() -> Optional[List[str]]:
    return await _call("categories_filter")


async def glasses_filter() -> Optional[List[str]]:
    return await _call("glasses_filter")


async def ingredients_filter() -> Optional[List[str]]:
    return await _call("ingredients_filter")


async def alcoholic_filter() -> Optional[List[str]]:
    return await _call("alcoholic_filter")
