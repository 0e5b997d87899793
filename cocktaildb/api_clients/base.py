"""
REST API客户端基类

提供通用的HTTP GET功能，包括：
- 错误处理（httpx 异常映射为传输层异常）
- 请求/响应日志
- 超时控制

不做重试、不做缓存，每次调用只发出一个请求。
"""
from dataclasses import dataclass
from typing import Optional
from datetime import datetime

import httpx

from cocktaildb.core.config import ClientSettings, default_settings
from cocktaildb.core.exceptions import (
    TransportError,
    RequestTimeoutError,
    NetworkError,
    HTTPStatusError,
    DecodeError,
    InvalidRequestError,
)
from cocktaildb.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class APIResponse:
    """API响应封装"""
    status_code: int
    raw_content: bytes
    elapsed_ms: float

    @property
    def is_success(self) -> bool:
        """判断请求是否成功"""
        return 200 <= self.status_code < 300

    def text(self) -> str:
        """获取文本响应"""
        return self.raw_content.decode('utf-8')


@dataclass(frozen=True)
class FetchResult:
    """传输结果：body 与 error 恰有一个非空"""
    body: Optional[str] = None
    error: Optional[TransportError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, body: str) -> "FetchResult":
        return cls(body=body)

    @classmethod
    def failure(cls, error: TransportError) -> "FetchResult":
        return cls(error=error)


class BaseAPIClient:
    """
    REST API客户端基类

    提供通用的HTTP请求功能，子类可以继承并实现具体的API调用
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        初始化API客户端

        Args:
            settings: 客户端配置，缺省使用默认配置
            transport: 自定义 httpx 传输层（测试时注入 MockTransport）
        """
        self.settings = settings or default_settings
        self.base_url = self.settings.base_url
        self.debug = self.settings.debug
        self._transport = transport

        self.default_headers = {
            "Accept": "application/json",
            "User-Agent": self.settings.user_agent,
        }

        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        """获取或创建HTTP客户端"""
        if self._client is None:
            kwargs = {
                "verify": self.settings.verify_ssl,
                "headers": self.default_headers,
                "transport": self._transport,
            }
            # 未配置时沿用 httpx 默认超时
            if self.settings.timeout is not None:
                kwargs["timeout"] = httpx.Timeout(self.settings.timeout)
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def close(self):
        """关闭HTTP客户端"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器出口"""
        await self.close()

    def _build_url(self, endpoint: str) -> str:
        """构建完整URL"""
        return f"{self.base_url}{endpoint.lstrip('/')}"

    def _log_request(self, url: str):
        if self.debug:
            logger.debug("API Request", method="GET", url=url)

    def _log_response(self, url: str, response: APIResponse):
        if self.debug:
            logger.debug(
                "API Response",
                url=url,
                status_code=response.status_code,
                elapsed_ms=round(response.elapsed_ms, 2),
                size=len(response.raw_content),
            )

    async def get(self, endpoint: str) -> APIResponse:
        """
        发送GET请求

        Args:
            endpoint: 相对于 base_url 的路径（含查询串，已完成编码）

        Returns:
            APIResponse: 2xx 响应

        Raises:
            TransportError: URL 非法、超时、网络错误或非 2xx 状态
        """
        url = self._build_url(endpoint)
        self._log_request(url)

        start_time = datetime.now()
        try:
            response = await self.client.get(url)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(f"Request timeout: {exc!r}", url=url) from exc
        except (httpx.RequestError, httpx.StreamError) as exc:
            raise NetworkError(f"Network error: {exc!r}", url=url) from exc
        # InvalidURL 不属于 RequestError
        except httpx.InvalidURL as exc:
            raise InvalidRequestError(f"Invalid request URL: {exc}", url=url[:200]) from exc

        elapsed = (datetime.now() - start_time).total_seconds() * 1000
        api_response = APIResponse(
            status_code=response.status_code,
            raw_content=response.content,
            elapsed_ms=elapsed,
        )
        self._log_response(url, api_response)

        if not api_response.is_success:
            raise HTTPStatusError(
                f"API request failed with status {api_response.status_code}",
                status_code=api_response.status_code,
                url=url,
            )
        return api_response

    async def fetch_endpoint(self, endpoint: str) -> FetchResult:
        """GET 并把整个响应体解码为 UTF-8 文本；失败时返回带 error 的结果而不是抛出"""
        try:
            response = await self.get(endpoint)
            body = response.text()
        except UnicodeDecodeError as exc:
            return FetchResult.failure(
                DecodeError(f"Response body is not UTF-8: {exc}", url=self._build_url(endpoint))
            )
        except TransportError as exc:
            return FetchResult.failure(exc)
        return FetchResult.success(body)
