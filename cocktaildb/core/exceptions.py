"""
传输层异常定义

这些异常只在客户端内部流转，查询接口在边界处统一折叠为 None。
"""
from typing import Optional


class TransportError(Exception):
    """传输错误基类"""

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(self.message)

    def __str__(self):
        parts = [self.message]
        if self.url:
            parts.append(f"URL: {self.url}")
        return " | ".join(parts)


class RequestTimeoutError(TransportError):
    """请求超时"""
    pass


class NetworkError(TransportError):
    """DNS/连接/TLS/连接重置等网络错误"""
    pass


class HTTPStatusError(TransportError):
    """非 2xx 响应"""

    def __init__(self, message: str, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message, url=url)

    def __str__(self):
        return f"{super().__str__()} | Status: {self.status_code}"


class DecodeError(TransportError):
    """响应体不是合法的 UTF-8 文本"""
    pass


class InvalidRequestError(TransportError):
    """请求无法构建（URL 过长、含非法字符等），未发出任何网络请求"""
    pass
