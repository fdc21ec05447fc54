"""
Tool Adapter 统一抽象

每个 fal 工具对应一个 adapter，调用流程：
1. 按输入 Schema 校验参数
2. 解析 FAL_KEY
3. 构建请求 payload（可选字段仅在调用方提供时写入）
4. 调用 fal 端点
5. 将响应归一化为统一结果
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from media_tools.tools.errors import (
    FieldError,
    ResponseShapeError,
    ToolError,
    ValidationError,
)
from media_tools.tools.invoker import FalInvoker
from media_tools.tools.results import ToolResult
from media_tools.tools.schemas import ToolInput

logger = structlog.get_logger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


def _format_loc(loc: Tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


class ToolAdapter(ABC):
    """
    Tool Adapter 抽象基类

    子类声明 name / description / route / input_model / optional_fields，
    并实现 build_required 与 normalize
    """

    name: str
    description: str
    category: str = "media"
    # fal 路由，同时作为结果的 source 标识
    route: str
    input_model: Type[ToolInput]
    # 可选字段清单，逐个按“是否提供”写入 payload
    optional_fields: Tuple[str, ...] = ()
    # 为 False 时不解析凭证、不发请求，直接归一化
    requires_network: bool = True

    def __init__(self, invoker: Optional[FalInvoker] = None):
        self.invoker = invoker or FalInvoker()

    @property
    def source(self) -> str:
        return self.route

    def input_schema(self) -> Dict[str, Any]:
        """输入 JSON Schema（供编排层注册工具）"""
        return self.input_model.model_json_schema()

    def validate(self, raw_args: Any) -> ToolInput:
        """校验原始参数"""
        try:
            return self.input_model.model_validate(raw_args)
        except PydanticValidationError as e:
            errors = [
                FieldError(field=_format_loc(err["loc"]), message=err["msg"])
                for err in e.errors()
            ]
            raise ValidationError(
                message=f"Invalid input for {self.name}",
                tool_name=self.name,
                errors=errors,
            ) from e

    @abstractmethod
    def build_required(self, tool_input: ToolInput) -> Dict[str, Any]:
        """必填字段（及固定参数）部分的 payload"""

    def build_payload(self, tool_input: ToolInput) -> Dict[str, Any]:
        """构建请求 payload"""
        payload = self.build_required(tool_input)
        for field_name in self.optional_fields:
            if tool_input.is_present(field_name):
                payload[field_name] = tool_input.model_dump(
                    mode="json", include={field_name}
                )[field_name]
        return payload

    def parse_response(self, model: Type[ResponseModel], data: Any) -> ResponseModel:
        """按宽松模型解析 fal 响应，结构不符视为 ResponseShapeError"""
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            details = "; ".join(
                str(FieldError(field=_format_loc(err["loc"]), message=err["msg"]))
                for err in e.errors()
            )
            raise ResponseShapeError(
                message=f"FAL response has an unexpected shape: {details}",
                tool_name=self.name,
            ) from e

    @abstractmethod
    def normalize(self, data: Any, tool_input: ToolInput) -> ToolResult:
        """将 fal 响应归一化为统一结果"""

    async def invoke(self, raw_args: Any) -> ToolResult:
        """执行一次工具调用"""
        log = logger.bind(tool_name=self.name)
        log.info("tool_invoke_start")

        try:
            tool_input = self.validate(raw_args)
            data = None
            if self.requires_network:
                api_key = self.invoker.resolve_credential(self.name)
                payload = self.build_payload(tool_input)
                data = await self.invoker.post(self.route, payload, api_key, tool_name=self.name)
            result = self.normalize(data, tool_input)
        except ToolError as e:
            log.warning("tool_invoke_error", error_type=e.error_type.value, error=e.message)
            raise

        log.info("tool_invoke_success", kind=result.kind)
        return result
