"""
统一结果与 fal 响应 Schema

fal 响应在归一化之前视为不可信数据，先按宽松模型解析，
再由各 adapter 的归一化函数映射到以下结果类型之一：
image / image_set / video / audio / placeholder
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidatorFunctionWrapHandler, WrapValidator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel


# ============================================================
# fal 响应（宽松解析）
# ============================================================


def _none_on_error(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    # 元数据类型不符时丢弃该字段，不影响 URL
    try:
        return handler(value)
    except PydanticValidationError:
        return None


LenientStr = Annotated[Optional[str], WrapValidator(_none_on_error)]
LenientInt = Annotated[Optional[int], WrapValidator(_none_on_error)]
LenientFloat = Annotated[Optional[float], WrapValidator(_none_on_error)]


class FalFile(BaseModel):
    """
    fal 返回的文件对象（图片/视频/音频）

    只有 url 按类型严格校验，其余元数据无法解析时置为 None
    """

    model_config = ConfigDict(extra="ignore")

    url: Optional[str] = None
    content_type: LenientStr = None
    file_name: LenientStr = None
    file_size: LenientInt = None
    width: LenientInt = None
    height: LenientInt = None
    duration: LenientFloat = None


class FalSingleImageResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    image: Optional[FalFile] = None


class FalImagesResponse(BaseModel):
    """多图响应，images 条目在归一化时逐个过滤"""

    model_config = ConfigDict(extra="ignore")

    images: Optional[List[Any]] = None
    prompt: LenientStr = None
    seed: LenientInt = None
    description: LenientStr = None


class FalVideoResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    video: Optional[FalFile] = None
    seed: LenientInt = None


class FalAudioResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    audio: Optional[FalFile] = None


def files_with_url(entries: Optional[List[Any]]) -> List[FalFile]:
    """保留带 URL 的对象条目（保持顺序），其余条目视为缺失"""
    files = []
    for entry in entries or []:
        if not isinstance(entry, dict):
            continue
        try:
            fal_file = FalFile.model_validate(entry)
        except PydanticValidationError:
            continue
        if fal_file.url:
            files.append(fal_file)
    return files


# ============================================================
# 统一结果
# ============================================================


class NormalizedResult(BaseModel):
    """统一结果基类，source 为 fal 路由标识"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    source: str

    def to_output(self) -> Dict[str, Any]:
        """序列化为编排层使用的 camelCase 字典，省略缺失的元数据"""
        return self.model_dump(by_alias=True, exclude_none=True)


class ImageResult(NormalizedResult):
    """单图结果"""

    kind: Literal["image"] = "image"
    url: str
    content_type: str
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    prompt: Optional[str] = None
    seed: Optional[int] = None


class ImageItem(BaseModel):
    """多图结果中的单张图片"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    url: str
    content_type: Optional[str] = None
    file_name: Optional[str] = None


class ImageSetResult(NormalizedResult):
    """多图结果"""

    kind: Literal["image_set"] = "image_set"
    images: List[ImageItem] = Field(..., min_length=1)
    description: Optional[str] = None
    # 因缺少 URL 被过滤掉的条目数
    dropped_count: int = 0


class VideoResult(NormalizedResult):
    """视频结果"""

    kind: Literal["video"] = "video"
    url: str
    content_type: str
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    seed: Optional[int] = None


class AudioResult(NormalizedResult):
    """音频结果"""

    kind: Literal["audio"] = "audio"
    url: str
    content_type: str
    duration: Optional[float] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None


class PlaceholderResult(NormalizedResult):
    """占位结果（不发起请求）"""

    kind: Literal["placeholder"] = "placeholder"
    url: str
    content_type: str
    alt: str


ToolResult = Union[ImageResult, ImageSetResult, VideoResult, AudioResult, PlaceholderResult]
