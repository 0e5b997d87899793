"""
API客户端模块

提供与 TheCocktailDB REST API 集成的客户端实现
"""
from .base import BaseAPIClient, APIResponse, FetchResult
from .cocktaildb import CocktailDBClient, Endpoint, ENDPOINTS

__all__ = [
    "BaseAPIClient",
    "APIResponse",
    "FetchResult",
    "CocktailDBClient",
    "Endpoint",
    "ENDPOINTS",
]
