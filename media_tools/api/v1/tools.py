"""
工具服务 API

提供类 MCP 的 HTTP Tool Server 接口：
- POST /tools/list: 返回工具元数据
- POST /tools/call: 执行工具调用
- POST /tools/badges: 根据消息 parts 生成工具徽标
"""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import APIRouter, Depends, Header, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from media_tools.core.config import get_settings
from media_tools.tools import (
    ConfigurationError,
    ToolBadge,
    ToolError,
    ToolMetadata,
    ToolRegistry,
    ValidationError,
    get_tool_registry,
)

router = APIRouter()
logger = structlog.get_logger(__name__)

# 错误类型 -> HTTP 状态码
ERROR_STATUS = {
    ValidationError: 422,
    ConfigurationError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class ToolListRequest(BaseModel):
    """工具列表请求"""

    category: Optional[str] = Field(None, description="按分类过滤")


class ToolListResponse(BaseModel):
    """工具列表响应"""

    tools: List[ToolMetadata]
    total: int


class ToolCallRequest(BaseModel):
    """工具调用请求"""

    tool_name: str = Field(..., description="工具名称")
    input: Dict[str, Any] = Field(default_factory=dict, description="工具输入参数")


class ToolCallResponse(BaseModel):
    """工具调用响应"""

    success: bool
    output: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    error_type: Optional[str] = None


class ToolBadgesRequest(BaseModel):
    """徽标请求"""

    parts: List[Any] = Field(default_factory=list, description="消息 parts")


class ToolBadgesResponse(BaseModel):
    """徽标响应"""

    badges: List[ToolBadge]


def verify_internal_key(
    x_internal_api_key: Optional[str] = Header(None, alias="X-Internal-API-Key"),
) -> None:
    """校验内部 API Key（未配置时跳过）"""
    expected = get_settings().INTERNAL_API_KEY
    if expected and x_internal_api_key != expected:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid internal API key",
        )


@router.post("/list", response_model=ToolListResponse, dependencies=[Depends(verify_internal_key)])
async def list_tools(
    request: ToolListRequest,
    registry: ToolRegistry = Depends(get_tool_registry),
) -> ToolListResponse:
    """获取可调用工具列表"""
    tools = registry.list_metadata()

    if request.category:
        tools = [t for t in tools if t.category == request.category]

    return ToolListResponse(tools=tools, total=len(tools))


@router.post("/call", response_model=ToolCallResponse, dependencies=[Depends(verify_internal_key)])
async def call_tool(
    request: ToolCallRequest,
    registry: ToolRegistry = Depends(get_tool_registry),
):
    """
    执行工具调用

    输出：
    - success: 是否成功
    - output: 统一结果（成功时，camelCase）
    - error / error_type: 错误信息（失败时）
    """
    log = logger.bind(tool_name=request.tool_name)
    log.info("tool_call_request")

    try:
        adapter = registry.get_adapter(request.tool_name)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown tool: {request.tool_name}",
        )

    try:
        result = await adapter.invoke(request.input)
    except ToolError as e:
        status_code = ERROR_STATUS.get(type(e), status.HTTP_502_BAD_GATEWAY)
        body = ToolCallResponse(success=False, error=str(e), error_type=e.error_type.value)
        return JSONResponse(status_code=status_code, content=body.model_dump())

    return ToolCallResponse(success=True, output=result.to_output())


@router.post("/badges", response_model=ToolBadgesResponse)
async def tool_badges(
    request: ToolBadgesRequest,
    registry: ToolRegistry = Depends(get_tool_registry),
) -> ToolBadgesResponse:
    """根据消息 parts 生成工具徽标（展示名 + emoji）"""
    return ToolBadgesResponse(badges=registry.tool_badges(request.parts))
