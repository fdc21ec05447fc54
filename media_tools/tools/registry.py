"""
工具注册表

静态表：工具 ID -> {adapter, 展示名, emoji}
展示信息查询是全函数，未知 ID 回退为 (ID 本身, 🛠️)
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from media_tools.tools.adapters import (
    BriaBackgroundRemoveAdapter,
    FalPlaceholderAdapter,
    FastLightningSDXLAdapter,
    FastSvdLcmAdapter,
    NanoBananaEditAdapter,
    PlayAITtsDialogAdapter,
    RecraftV3TextToImageAdapter,
)
from media_tools.tools.base import ToolAdapter
from media_tools.tools.invoker import FalInvoker
from media_tools.tools.schemas import ToolBadge, ToolMetadata

FALLBACK_EMOJI = "🛠️"
TOOL_PART_PREFIX = "tool-"
EXPLICIT_NAME_PART_TYPES = ("tool-call", "tool-result")


@dataclass(frozen=True)
class ToolRegistryEntry:
    """注册表条目，adapter 为空表示仅用于展示（由编排层实现的工具）"""

    name: str
    display_name: str
    emoji: str
    adapter: Optional[ToolAdapter] = None


# 展示信息（包含编排层自带的非 fal 工具）
TOOL_DISPLAY: Mapping[str, tuple] = MappingProxyType({
    "getWeather": ("Get Weather", "🌤️"),
    "fastLightningSDXL": ("Fast Lightning SDXL", "⚡️🖼️"),
    "fastSvdLcm": ("Fast SVD LCM", "⚙️🖼️"),
    "nanoBananaEdit": ("Nano Banana Edit", "🍌✏️"),
    "briaBackgroundRemove": ("Bria Background Remove", "🪄"),
    "playaiTtsDialog": ("PlayAI TTS Dialog", "🔊"),
    "recraftV3TextToImage": ("Recraft V3 Text to Image", "🎨"),
    "createDocument": ("Create Document", "📝"),
    "updateDocument": ("Update Document", "✏️"),
    "requestSuggestions": ("Request Suggestions", "💡"),
    "falAI": ("Fal AI", "🖼️"),
})

ADAPTER_CLASSES = (
    FastLightningSDXLAdapter,
    FastSvdLcmAdapter,
    NanoBananaEditAdapter,
    BriaBackgroundRemoveAdapter,
    PlayAITtsDialogAdapter,
    RecraftV3TextToImageAdapter,
    FalPlaceholderAdapter,
)


class ToolRegistry:
    """工具注册表（初始化后只读）"""

    def __init__(self, invoker: Optional[FalInvoker] = None):
        invoker = invoker or FalInvoker()
        adapters = {cls.name: cls(invoker=invoker) for cls in ADAPTER_CLASSES}

        entries: Dict[str, ToolRegistryEntry] = {}
        for name, (display_name, emoji) in TOOL_DISPLAY.items():
            entries[name] = ToolRegistryEntry(
                name=name,
                display_name=display_name,
                emoji=emoji,
                adapter=adapters.get(name),
            )
        self._entries: Mapping[str, ToolRegistryEntry] = MappingProxyType(entries)

    def lookup(self, name: str) -> ToolRegistryEntry:
        """查询条目，未知 ID 回退为默认展示信息"""
        entry = self._entries.get(name)
        if entry is None:
            return ToolRegistryEntry(name=name, display_name=name, emoji=FALLBACK_EMOJI)
        return entry

    def display_name(self, name: str) -> str:
        return self.lookup(name).display_name

    def emoji(self, name: str) -> str:
        return self.lookup(name).emoji

    def get_adapter(self, name: str) -> ToolAdapter:
        """获取可调用的 adapter，仅展示用或未知的 ID 抛出 KeyError"""
        adapter = self.lookup(name).adapter
        if adapter is None:
            raise KeyError(f"Tool not found: {name}")
        return adapter

    def list_adapters(self) -> List[ToolAdapter]:
        return [entry.adapter for entry in self._entries.values() if entry.adapter is not None]

    def list_metadata(self) -> List[ToolMetadata]:
        """列出所有可调用工具的元数据"""
        return [
            ToolMetadata(
                name=adapter.name,
                display_name=self.display_name(adapter.name),
                emoji=self.emoji(adapter.name),
                description=adapter.description,
                category=adapter.category,
                input_schema=adapter.input_schema(),
            )
            for adapter in self.list_adapters()
        ]

    def tool_badges(self, parts: Iterable[Any]) -> List[ToolBadge]:
        """消息中出现的工具调用 -> 展示徽标"""
        badges = []
        for name in extract_tool_names(parts):
            entry = self.lookup(name)
            badges.append(ToolBadge(name=name, display_name=entry.display_name, emoji=entry.emoji))
        return badges


def _part_tool_name(part: Any) -> Optional[str]:
    if not isinstance(part, dict):
        return None
    part_type = part.get("type")
    if not isinstance(part_type, str):
        return None
    tool_name = part.get("toolName")
    if part_type in EXPLICIT_NAME_PART_TYPES and isinstance(tool_name, str):
        return tool_name
    if part_type.startswith(TOOL_PART_PREFIX):
        return part_type[len(TOOL_PART_PREFIX):]
    return None


def extract_tool_names(parts: Iterable[Any]) -> List[str]:
    """
    从消息 parts 中提取工具 ID（按首次出现顺序去重）

    - type 为 tool-call / tool-result 且带 toolName：取 toolName
    - type 以 tool- 开头：去掉前缀
    """
    names: Dict[str, None] = {}
    for part in parts or []:
        name = _part_tool_name(part)
        if name:
            names.setdefault(name, None)
    return list(names)


@lru_cache
def get_tool_registry() -> ToolRegistry:
    """获取工具注册表单例"""
    return ToolRegistry()
