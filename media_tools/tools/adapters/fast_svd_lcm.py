"""
Stable Video Diffusion Turbo（fast-svd-lcm）图生视频

fal 路由: fal-ai/fast-svd-lcm
"""

from typing import Any, Dict

from media_tools.tools.base import ToolAdapter
from media_tools.tools.errors import ResponseShapeError
from media_tools.tools.results import FalVideoResponse, VideoResult
from media_tools.tools.schemas import FastSvdLcmInput


class FastSvdLcmAdapter(ToolAdapter):
    """Fast SVD LCM"""

    name = "fastSvdLcm"
    description = (
        "Use Stable Video Diffusion Turbo (fast-svd-lcm) to generate a short video "
        "from an image URL. Render the resulting video URL using markdown."
    )
    category = "video_generation"
    route = "fal-ai/fast-svd-lcm"
    input_model = FastSvdLcmInput
    optional_fields = ("motion_bucket_id", "cond_aug", "seed", "steps", "fps")

    def build_required(self, tool_input: FastSvdLcmInput) -> Dict[str, Any]:
        return {"image_url": tool_input.image_url}

    def normalize(self, data: Any, tool_input: FastSvdLcmInput) -> VideoResult:
        response = self.parse_response(FalVideoResponse, data)
        video = response.video
        if video is None or not video.url:
            raise ResponseShapeError(
                message="FAL response did not include a video URL",
                tool_name=self.name,
            )

        return VideoResult(
            url=video.url,
            content_type=video.content_type or "video/mp4",
            file_name=video.file_name,
            file_size=video.file_size,
            seed=response.seed,
            source=self.source,
        )
