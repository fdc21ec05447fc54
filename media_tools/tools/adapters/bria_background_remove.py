"""
Bria RMBG 2.0 背景移除

fal 路由: fal-ai/bria/background/remove
"""

from typing import Any, Dict

from media_tools.tools.base import ToolAdapter
from media_tools.tools.errors import ResponseShapeError
from media_tools.tools.results import FalSingleImageResponse, ImageResult
from media_tools.tools.schemas import BriaBackgroundRemoveInput


class BriaBackgroundRemoveAdapter(ToolAdapter):
    """Bria 背景移除"""

    name = "briaBackgroundRemove"
    description = (
        "Remove background from an image using Bria RMBG 2.0. "
        "Returns a PNG with transparent background."
    )
    category = "image_edit"
    route = "fal-ai/bria/background/remove"
    input_model = BriaBackgroundRemoveInput
    optional_fields = ("sync_mode",)

    def build_required(self, tool_input: BriaBackgroundRemoveInput) -> Dict[str, Any]:
        return {"image_url": tool_input.image_url}

    def normalize(self, data: Any, tool_input: BriaBackgroundRemoveInput) -> ImageResult:
        response = self.parse_response(FalSingleImageResponse, data)
        image = response.image
        if image is None or not image.url:
            raise ResponseShapeError(
                message="FAL response did not include an image URL",
                tool_name=self.name,
            )

        return ImageResult(
            url=image.url,
            content_type=image.content_type or "image/png",
            file_name=image.file_name,
            width=image.width,
            height=image.height,
            file_size=image.file_size,
            source=self.source,
        )
