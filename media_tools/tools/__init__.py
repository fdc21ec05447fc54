"""
Tools 模块

fal.ai 媒体工具 adapter、注册表与统一结果
"""

from media_tools.tools.base import ToolAdapter
from media_tools.tools.errors import (
    ConfigurationError,
    FieldError,
    ResponseShapeError,
    ToolError,
    ToolErrorType,
    TransportError,
    ValidationError,
)
from media_tools.tools.invoker import FalInvoker
from media_tools.tools.registry import (
    ToolRegistry,
    ToolRegistryEntry,
    extract_tool_names,
    get_tool_registry,
)
from media_tools.tools.results import (
    AudioResult,
    ImageItem,
    ImageResult,
    ImageSetResult,
    NormalizedResult,
    PlaceholderResult,
    ToolResult,
    VideoResult,
)
from media_tools.tools.schemas import ToolBadge, ToolMetadata

__all__ = [
    # Adapter
    "ToolAdapter",
    "FalInvoker",
    # 注册表
    "ToolRegistry",
    "ToolRegistryEntry",
    "extract_tool_names",
    "get_tool_registry",
    # 错误
    "ToolError",
    "ToolErrorType",
    "FieldError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "ResponseShapeError",
    # 结果
    "NormalizedResult",
    "ToolResult",
    "ImageResult",
    "ImageItem",
    "ImageSetResult",
    "VideoResult",
    "AudioResult",
    "PlaceholderResult",
    # Schemas
    "ToolMetadata",
    "ToolBadge",
]
