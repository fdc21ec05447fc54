"""
Recraft V3 文生图（支持风格与色板）

fal 路由: fal-ai/recraft/v3/text-to-image
"""

from typing import Any, Dict

import structlog

from media_tools.tools.base import ToolAdapter
from media_tools.tools.errors import ResponseShapeError
from media_tools.tools.results import (
    FalImagesResponse,
    ImageItem,
    ImageSetResult,
    files_with_url,
)
from media_tools.tools.schemas import RecraftV3TextToImageInput

logger = structlog.get_logger(__name__)


class RecraftV3TextToImageAdapter(ToolAdapter):
    """Recraft V3 文生图"""

    name = "recraftV3TextToImage"
    description = (
        "Generate images from text using Recraft V3. "
        "Optionally control size, style, colors, and safety checker."
    )
    category = "image_generation"
    route = "fal-ai/recraft/v3/text-to-image"
    input_model = RecraftV3TextToImageInput
    optional_fields = ("image_size", "style", "colors", "style_id", "enable_safety_checker")

    def build_required(self, tool_input: RecraftV3TextToImageInput) -> Dict[str, Any]:
        return {"prompt": tool_input.prompt}

    def normalize(self, data: Any, tool_input: RecraftV3TextToImageInput) -> ImageSetResult:
        response = self.parse_response(FalImagesResponse, data)
        entries = response.images or []
        images = files_with_url(entries)
        if not images:
            raise ResponseShapeError(
                message="FAL response did not include any image URLs",
                tool_name=self.name,
            )

        dropped = len(entries) - len(images)
        if dropped:
            logger.warning("fal_images_without_url", tool_name=self.name, dropped=dropped)

        # 该接口不返回 content_type，只保留 URL
        return ImageSetResult(
            images=[ImageItem(url=img.url) for img in images],
            dropped_count=dropped,
            source=self.source,
        )
