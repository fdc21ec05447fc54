"""
Media Tools 配置
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # 基础配置
    ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # 服务配置
    HOST: str = "0.0.0.0"
    PORT: int = 8002

    # 服务间调用校验（为空时不校验）
    INTERNAL_API_KEY: str = ""

    # fal.ai 配置
    FAL_KEY: str = ""
    FAL_BASE_URL: str = "https://fal.run"
    # 为空表示不设超时（单次请求，等待 fal 返回）
    FAL_TIMEOUT_SECONDS: Optional[float] = None

    # CORS 配置
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
