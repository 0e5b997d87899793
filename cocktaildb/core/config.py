"""
配置文件 - 客户端配置管理

仅通过构造函数传入，不读取环境变量或配置文件。
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_BASE_URL = "https://thecocktaildb.com/api/json/v1/1/"


class ClientSettings(BaseModel):
    """客户端配置"""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API基础URL")
    # None 表示沿用 httpx 的默认超时
    timeout: Optional[float] = Field(default=None, gt=0, description="请求超时时间（秒）")
    verify_ssl: bool = True
    user_agent: str = "cocktaildb-client/1.0"
    debug: bool = Field(default=False, description="是否记录请求/响应调试日志")

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return v if v.endswith("/") else v + "/"


default_settings = ClientSettings()
