"""
Fal AI 占位工具

不发起请求，固定返回演示缩略图
"""

from typing import Any, Dict

from media_tools.tools.base import ToolAdapter
from media_tools.tools.results import PlaceholderResult
from media_tools.tools.schemas import FalPlaceholderInput

PLACEHOLDER_IMAGE_URL = "/images/demo-thumbnail.png"


class FalPlaceholderAdapter(ToolAdapter):
    """占位 adapter"""

    name = "falAI"
    description = (
        "Use Fal AI to generate content. You would have to render it using markdown syntax."
    )
    category = "placeholder"
    route = "hardcoded"
    input_model = FalPlaceholderInput
    requires_network = False

    def build_required(self, tool_input: FalPlaceholderInput) -> Dict[str, Any]:
        """不发请求，payload 为空"""
        return {}

    def normalize(self, data: Any, tool_input: FalPlaceholderInput) -> PlaceholderResult:
        return PlaceholderResult(
            url=PLACEHOLDER_IMAGE_URL,
            content_type="image/png",
            alt="Placeholder image",
            source=self.source,
        )
