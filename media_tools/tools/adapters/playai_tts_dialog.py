"""
PlayAI TTS Dialog 多人对话语音合成

fal 路由: fal-ai/playai/tts/dialog
"""

from typing import Any, Dict

from media_tools.tools.base import ToolAdapter
from media_tools.tools.errors import ResponseShapeError
from media_tools.tools.results import AudioResult, FalAudioResponse
from media_tools.tools.schemas import PlayAITtsDialogInput


class PlayAITtsDialogAdapter(ToolAdapter):
    """PlayAI 对话语音"""

    name = "playaiTtsDialog"
    description = (
        "Generate a multi-speaker dialogue audio using PlayAI TTS Dialog. "
        "Provide dialogue text with speaker turn prefixes."
    )
    category = "audio_generation"
    route = "fal-ai/playai/tts/dialog"
    input_model = PlayAITtsDialogInput
    optional_fields = ("voices", "response_format", "seed")

    def build_required(self, tool_input: PlayAITtsDialogInput) -> Dict[str, Any]:
        return {"input": tool_input.input}

    def normalize(self, data: Any, tool_input: PlayAITtsDialogInput) -> AudioResult:
        response = self.parse_response(FalAudioResponse, data)
        audio = response.audio
        if audio is None or not audio.url:
            raise ResponseShapeError(
                message="FAL response did not include an audio URL",
                tool_name=self.name,
            )

        return AudioResult(
            url=audio.url,
            content_type=audio.content_type or "audio/mpeg",
            duration=audio.duration,
            file_name=audio.file_name,
            file_size=audio.file_size,
            source=self.source,
        )
