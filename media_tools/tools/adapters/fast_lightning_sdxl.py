"""
Fast Lightning SDXL 文生图

fal 路由: fal-ai/fast-lightning-sdxl
"""

from typing import Any, Dict

from media_tools.tools.base import ToolAdapter
from media_tools.tools.errors import ResponseShapeError
from media_tools.tools.results import FalFile, FalImagesResponse, ImageResult
from media_tools.tools.schemas import FastLightningSDXLInput

# 固定生成参数
DEFAULT_IMAGE_SIZE = "square_hd"
DEFAULT_INFERENCE_STEPS = 4
DEFAULT_FORMAT = "jpeg"


class FastLightningSDXLAdapter(ToolAdapter):
    """Fast Lightning SDXL"""

    name = "fastLightningSDXL"
    description = (
        "Generate an image from a text prompt using Fast Lightning SDXL. "
        "Render the resulting image URL using markdown."
    )
    category = "image_generation"
    route = "fal-ai/fast-lightning-sdxl"
    input_model = FastLightningSDXLInput
    optional_fields = ("seed",)

    def build_required(self, tool_input: FastLightningSDXLInput) -> Dict[str, Any]:
        return {
            "prompt": tool_input.prompt,
            "image_size": DEFAULT_IMAGE_SIZE,
            "num_inference_steps": DEFAULT_INFERENCE_STEPS,
            "enable_safety_checker": True,
            "format": DEFAULT_FORMAT,
        }

    def normalize(self, data: Any, tool_input: FastLightningSDXLInput) -> ImageResult:
        response = self.parse_response(FalImagesResponse, data)
        # 只取第一张
        entry = response.images[0] if response.images else None
        first = self.parse_response(FalFile, entry) if isinstance(entry, dict) else None
        if first is None or not first.url:
            raise ResponseShapeError(
                message="FAL response did not include an image URL",
                tool_name=self.name,
            )

        return ImageResult(
            url=first.url,
            content_type=first.content_type or "image/jpeg",
            prompt=response.prompt or tool_input.prompt,
            seed=response.seed,
            source=self.source,
        )
