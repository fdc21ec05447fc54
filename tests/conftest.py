"""
测试配置和 fixtures
"""

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from media_tools.core.config import get_settings
from media_tools.tools import FalInvoker

TEST_FAL_KEY = "test-fal-key"
TEST_FAL_BASE_URL = "https://fal.test"


class FalStub:
    """模拟 fal.ai 端点，记录收到的请求"""

    def __init__(
        self,
        json_body: Any = None,
        status_code: int = 200,
        text: Optional[str] = None,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
    ):
        self.json_body = json_body if json_body is not None else {}
        self.status_code = status_code
        self.text = text
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_payload(self) -> Any:
        return json.loads(self.requests[-1].content)

    def invoker(self, api_key: Optional[str] = TEST_FAL_KEY) -> FalInvoker:
        return FalInvoker(
            api_key=api_key,
            base_url=TEST_FAL_BASE_URL,
            transport=self.transport,
        )


@pytest.fixture
def fal_stub() -> Callable[..., FalStub]:
    """创建 fal 模拟端点"""
    return FalStub


@pytest.fixture
def clean_settings():
    """每个测试前后清空配置缓存"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
