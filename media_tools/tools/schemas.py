"""
工具输入 Schema 定义

所有工具输入通过 Pydantic v2 校验：
- 必填字段：存在且类型正确
- 可选字段：缺省或类型正确，不接受显式 null
"""

from typing import Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)


class ToolInput(BaseModel):
    """工具输入基类"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # 可选字段只能缺省，不能以 null 占位
        if value is None:
            raise ValueError("must be omitted rather than null")
        return value

    def is_present(self, name: str) -> bool:
        """字段是否由调用方显式提供"""
        return name in self.model_fields_set


class BriaBackgroundRemoveInput(ToolInput):
    """Bria 背景移除输入"""

    image_url: StrictStr = Field(..., description="待处理图片 URL")
    sync_mode: Optional[StrictBool] = Field(None, description="是否同步返回（data URI）")


class FastLightningSDXLInput(ToolInput):
    """Fast Lightning SDXL 输入"""

    prompt: StrictStr = Field(..., description="生成提示词")
    seed: Optional[StrictInt] = Field(None, description="随机种子")


class FastSvdLcmInput(ToolInput):
    """Fast SVD LCM 图生视频输入"""

    image_url: StrictStr = Field(..., description="起始帧图片 URL")
    motion_bucket_id: Optional[StrictInt] = Field(None, description="运动幅度")
    cond_aug: Optional[Union[StrictInt, StrictFloat]] = Field(None, description="条件噪声强度")
    seed: Optional[StrictInt] = Field(None, description="随机种子")
    steps: Optional[StrictInt] = Field(None, description="推理步数")
    fps: Optional[StrictInt] = Field(None, description="输出帧率")


class NanoBananaEditInput(ToolInput):
    """Nano Banana 多图编辑输入"""

    prompt: StrictStr = Field(..., description="编辑指令")
    image_urls: List[StrictStr] = Field(..., min_length=1, description="输入图片 URL 列表")
    num_images: Optional[StrictInt] = Field(None, ge=1, le=4, description="输出图片数量")
    output_format: Optional[Literal["jpeg", "png"]] = Field(None, description="输出格式")
    sync_mode: Optional[StrictBool] = Field(None, description="是否同步返回")


class VoiceInput(BaseModel):
    """对话发言人配置"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    voice: StrictStr = Field(..., description="音色名称")
    turn_prefix: StrictStr = Field(..., description="发言前缀，如 'Speaker 1: '")


class PlayAITtsDialogInput(ToolInput):
    """PlayAI 多人对话语音输入"""

    input: StrictStr = Field(..., description="带发言前缀的对话文本")
    voices: Optional[List[VoiceInput]] = Field(None, min_length=1, max_length=2, description="发言人列表")
    response_format: Optional[Literal["url", "bytes"]] = Field(None, description="返回格式")
    seed: Optional[StrictInt] = Field(None, description="随机种子")


class RecraftV3TextToImageInput(ToolInput):
    """Recraft V3 文生图输入"""

    prompt: StrictStr = Field(..., description="生成提示词")
    image_size: Optional[StrictStr] = Field(None, description="图片尺寸预设")
    style: Optional[StrictStr] = Field(None, description="风格")
    colors: Optional[List[Tuple[StrictInt, StrictInt, StrictInt]]] = Field(None, description="RGB 色板")
    style_id: Optional[StrictStr] = Field(None, description="自定义风格 ID")
    enable_safety_checker: Optional[StrictBool] = Field(None, description="是否启用安全检查")


class FalPlaceholderInput(ToolInput):
    """占位工具输入"""

    prompt: StrictStr = Field(..., description="生成提示词")


class ToolMetadata(BaseModel):
    """工具元数据"""

    name: str = Field(..., description="工具名称")
    display_name: str = Field(..., description="展示名称")
    emoji: str = Field(..., description="展示图标")
    description: str = Field(..., description="工具描述（供模型选择工具）")
    category: str = Field(..., description="工具分类")
    input_schema: Dict[str, Any] = Field(..., description="输入 JSON Schema")


class ToolBadge(BaseModel):
    """消息中工具调用的展示徽标"""

    name: str
    display_name: str
    emoji: str
