"""
Google Nano Banana 多图编辑

fal 路由: fal-ai/nano-banana/edit
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
from media_tools.tools.schemas import NanoBananaEditInput

logger = structlog.get_logger(__name__)


class NanoBananaEditAdapter(ToolAdapter):
    """Nano Banana 编辑"""

    name = "nanoBananaEdit"
    description = (
        "Edit images with Google Nano Banana. Accepts multiple input image URLs and a "
        "text prompt. Returns one or more edited image URLs plus a descriptive text. "
        "Render resulting images using markdown."
    )
    category = "image_edit"
    route = "fal-ai/nano-banana/edit"
    input_model = NanoBananaEditInput
    optional_fields = ("num_images", "output_format", "sync_mode")

    def build_required(self, tool_input: NanoBananaEditInput) -> Dict[str, Any]:
        return {
            "prompt": tool_input.prompt,
            "image_urls": list(tool_input.image_urls),
        }

    def normalize(self, data: Any, tool_input: NanoBananaEditInput) -> ImageSetResult:
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

        fallback_type = "image/png" if tool_input.output_format == "png" else "image/jpeg"
        return ImageSetResult(
            images=[
                ImageItem(
                    url=img.url,
                    content_type=img.content_type or fallback_type,
                    file_name=img.file_name,
                )
                for img in images
            ],
            description=response.description,
            dropped_count=dropped,
            source=self.source,
        )
