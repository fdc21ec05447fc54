"""
fal.ai 请求调用器

单次 POST，不重试、不缓存、不限流：
- 凭证缺失时直接抛出 ConfigurationError，不发起网络请求
- 非 2xx 状态抛出 TransportError（携带状态码与响应文本）
- 响应体不是合法 JSON 同样视为 TransportError
"""

import time
from typing import Any, Dict, Optional

import httpx
import structlog

from media_tools.core.config import get_settings
from media_tools.tools.errors import ConfigurationError, TransportError

logger = structlog.get_logger(__name__)

# 错误响应体无法解码时的占位文本
UNKNOWN_ERROR_TEXT = "Unknown error"


def read_error_text(response: httpx.Response) -> str:
    """尽力读取错误响应文本，解码失败时返回占位文本"""
    try:
        return response.text
    except Exception:  # noqa: BLE001
        return UNKNOWN_ERROR_TEXT


class FalInvoker:
    """fal.ai 调用器"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        # api_key 为 None 时每次调用从配置读取
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    def resolve_credential(self, tool_name: Optional[str] = None) -> str:
        """获取 FAL_KEY"""
        api_key = self._api_key if self._api_key is not None else get_settings().FAL_KEY
        if not api_key:
            raise ConfigurationError(message="FAL_KEY is not configured", tool_name=tool_name)
        return api_key

    def endpoint_url(self, route: str) -> str:
        """拼接 fal 端点地址，route 形如 fal-ai/bria/background/remove"""
        base_url = self._base_url or get_settings().FAL_BASE_URL
        return f"{base_url.rstrip('/')}/{route.lstrip('/')}"

    async def post(
        self,
        route: str,
        payload: Dict[str, Any],
        api_key: str,
        tool_name: Optional[str] = None,
    ) -> Any:
        """发送请求并返回解码后的 JSON"""
        url = self.endpoint_url(route)
        timeout = self._timeout if self._timeout is not None else get_settings().FAL_TIMEOUT_SECONDS
        log = logger.bind(tool_name=tool_name, endpoint=route)
        log.info("fal_request_start", payload_keys=sorted(payload))

        start_time = time.time()

        try:
            async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
                response = await client.post(
                    url,
                    json=payload,
                    headers={
                        "Authorization": f"Key {api_key}",
                        "Content-Type": "application/json",
                        "Cache-Control": "no-store",
                    },
                )
        except httpx.RequestError as e:
            log.warning("fal_request_network_error", error=str(e))
            raise TransportError(
                message=f"Network error: {str(e)}",
                tool_name=tool_name,
            ) from e

        latency_ms = int((time.time() - start_time) * 1000)

        if not response.is_success:
            error_text = read_error_text(response)
            log.warning(
                "fal_request_failed",
                status_code=response.status_code,
                latency_ms=latency_ms,
            )
            raise TransportError(
                message=error_text,
                tool_name=tool_name,
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            log.warning("fal_response_malformed", status_code=response.status_code)
            raise TransportError(
                message=f"FAL response body is not valid JSON: {str(e)}",
                tool_name=tool_name,
                status_code=response.status_code,
                malformed_body=True,
            ) from e

        log.info("fal_request_success", status_code=response.status_code, latency_ms=latency_ms)
        return data
