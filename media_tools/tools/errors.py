"""
工具调用错误分类

所有错误由 adapter.invoke 同步抛出，原样传递给编排层：
- ConfigurationError: 凭证缺失，未发起网络请求
- ValidationError: 输入不符合 schema，未发起网络请求
- TransportError: 非 2xx 状态、响应体非 JSON、网络异常
- ResponseShapeError: HTTP 成功但缺少必需字段
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, Optional


class ToolErrorType(str, Enum):
    """工具错误类型"""

    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    TRANSPORT = "transport"
    RESPONSE_SHAPE = "response_shape"


@dataclass
class FieldError:
    """单个字段的校验错误"""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass
class ToolError(Exception):
    """工具错误基类"""

    message: str
    tool_name: Optional[str] = None

    error_type: ClassVar[ToolErrorType]

    def __str__(self) -> str:
        return f"[{self.error_type.value}] {self.message}"


@dataclass
class ConfigurationError(ToolError):
    """配置错误（FAL_KEY 缺失）"""

    error_type: ClassVar[ToolErrorType] = ToolErrorType.CONFIGURATION


@dataclass
class ValidationError(ToolError):
    """输入校验错误"""

    errors: List[FieldError] = field(default_factory=list)

    error_type: ClassVar[ToolErrorType] = ToolErrorType.VALIDATION

    @property
    def fields(self) -> List[str]:
        return [e.field for e in self.errors]

    def __str__(self) -> str:
        if not self.errors:
            return super().__str__()
        details = "; ".join(str(e) for e in self.errors)
        return f"[{self.error_type.value}] {self.message}: {details}"


@dataclass
class TransportError(ToolError):
    """传输错误"""

    status_code: Optional[int] = None
    malformed_body: bool = False

    error_type: ClassVar[ToolErrorType] = ToolErrorType.TRANSPORT

    def __str__(self) -> str:
        if self.status_code is not None and not self.malformed_body:
            return f"[{self.error_type.value}] FAL request failed: {self.status_code} {self.message}"
        return super().__str__()


@dataclass
class ResponseShapeError(ToolError):
    """响应结构错误（HTTP 成功但缺少必需字段）"""

    error_type: ClassVar[ToolErrorType] = ToolErrorType.RESPONSE_SHAPE
