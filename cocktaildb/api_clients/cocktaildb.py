"""
TheCocktailDB 客户端

所有查询共用同一流程：构建路径 -> GET -> 解析信封 -> 取出字段。
任何失败（网络、空响应、JSON 非法、信封键缺失/为空）都统一返回 None，
调用方无法区分“没有结果”和“请求失败”，这是刻意保留的兼容行为。
"""
from dataclasses import dataclass
from operator import itemgetter
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import quote

from cocktaildb.api_clients.base import BaseAPIClient
from cocktaildb.core.logging_config import get_logger
from cocktaildb.dtos import EnvelopeKey, Record, decode_envelope

logger = get_logger(__name__)

Projector = Callable[[List[Record]], Any]


def _all(items: List[Record]) -> List[Record]:
    return items


def _pluck(field: str) -> Projector:
    """逐条取出同一字段，保持上游顺序；缺失字段的位置为 None"""
    def project(items: List[Record]) -> List[Optional[str]]:
        return [item.get(field) for item in items]
    return project


_first = itemgetter(0)


@dataclass(frozen=True)
class Endpoint:
    """一个查询端点：路径模板、信封键、结果投影"""
    template: str
    key: EnvelopeKey
    project: Projector
    # 自由文本参数需要百分号编码；数值 ID 原样拼接
    free_text: bool = True

    def path(self, *args: Union[str, int]) -> str:
        return self.template.format(*(self._encode(arg) for arg in args))

    def _encode(self, arg: Union[str, int]) -> str:
        if self.free_text:
            return quote(str(arg), safe="")
        return str(arg)


ENDPOINTS: Dict[str, Endpoint] = {
    "search": Endpoint("search.php?s={}", "drinks", _all),
    "search_by_letter": Endpoint("search.php?f={}", "drinks", _all),
    "search_ingredient": Endpoint("search.php?i={}", "ingredients", _first),
    "search_by_id": Endpoint("lookup.php?i={}", "drinks", _first, free_text=False),
    "search_ingredient_by_id": Endpoint("lookup.php?iid={}", "ingredients", _first, free_text=False),
    "random": Endpoint("random.php", "drinks", _first),
    "filter_by_ingredient": Endpoint("filter.php?i={}", "drinks", _all),
    "filter_by_alcoholic": Endpoint("filter.php?a={}", "drinks", _all),
    "filter_by_category": Endpoint("filter.php?c={}", "drinks", _all),
    "filter_by_glass": Endpoint("filter.php?g={}", "drinks", _all),
    "categories_filter": Endpoint("list.php?c=list", "drinks", _pluck("strCategory")),
    "glasses_filter": Endpoint("list.php?g=list", "drinks", _pluck("strGlass")),
    "ingredients_filter": Endpoint("list.php?i=list", "drinks", _pluck("strIngredient1")),
    "alcoholic_filter": Endpoint("list.php?a=list", "drinks", _pluck("strAlcoholic")),
}


class CocktailDBClient(BaseAPIClient):
    """TheCocktailDB API 客户端，每个方法发出一个请求，失败时返回 None"""

    async def _query(self, endpoint: Endpoint, *args: Union[str, int]) -> Any:
        path = endpoint.path(*args)
        result = await self.fetch_endpoint(path)
        if not result.ok:
            logger.debug("cocktaildb query failed", endpoint=path, reason=str(result.error))
            return None
        if not result.body:
            logger.debug("cocktaildb query returned empty body", endpoint=path)
            return None

        envelope = decode_envelope(result.body)
        if envelope is None:
            logger.debug("cocktaildb response is not a valid envelope", endpoint=path)
            return None

        items = envelope.collection(endpoint.key)
        if items is None:
            logger.debug("cocktaildb response has no results", endpoint=path, key=endpoint.key)
            return None
        return endpoint.project(items)

    async def search(self, name: str) -> Optional[List[Record]]:
        """按名称搜索鸡尾酒"""
        return await self._query(ENDPOINTS["search"], name)

    async def search_by_letter(self, letter: str) -> Optional[List[Record]]:
        """按首字母列出鸡尾酒"""
        return await self._query(ENDPOINTS["search_by_letter"], letter)

    async def search_ingredient(self, name: str) -> Optional[Record]:
        """按名称搜索配料，返回第一条"""
        return await self._query(ENDPOINTS["search_ingredient"], name)

    async def search_by_id(self, drink_id: Union[int, str]) -> Optional[Record]:
        """按 ID 查询鸡尾酒详情"""
        return await self._query(ENDPOINTS["search_by_id"], drink_id)

    async def search_ingredient_by_id(self, ingredient_id: Union[int, str]) -> Optional[Record]:
        return await self._query(ENDPOINTS["search_ingredient_by_id"], ingredient_id)

    async def random(self) -> Optional[Record]:
        """随机一款鸡尾酒"""
        return await self._query(ENDPOINTS["random"])

    async def filter_by_ingredient(self, name: str) -> Optional[List[Record]]:
        return await self._query(ENDPOINTS["filter_by_ingredient"], name)

    async def filter_by_alcoholic(self, value: str) -> Optional[List[Record]]:
        """按是否含酒精过滤，例如 "Alcoholic" / "Non_Alcoholic" """
        return await self._query(ENDPOINTS["filter_by_alcoholic"], value)

    async def filter_by_category(self, name: str) -> Optional[List[Record]]:
        return await self._query(ENDPOINTS["filter_by_category"], name)

    async def filter_by_glass(self, name: str) -> Optional[List[Record]]:
        return await self._query(ENDPOINTS["filter_by_glass"], name)

    async def categories_filter(self) -> Optional[List[str]]:
        """列出所有分类名"""
        return await self._query(ENDPOINTS["categories_filter"])

    async def glasses_filter(self) -> Optional[List[str]]:
        """列出所有杯型"""
        return await self._query(ENDPOINTS["glasses_filter"])

    async def ingredients_filter(self) -> Optional[List[str]]:
        """列出所有配料名"""
        return await self._query(ENDPOINTS["ingredients_filter"])

    async def alcoholic_filter(self) -> Optional[List[str]]:
        """列出酒精类别过滤值"""
        return await self._query(ENDPOINTS["alcoholic_filter"])
