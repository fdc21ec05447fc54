"""fal 工具 adapter"""

from media_tools.tools.adapters.bria_background_remove import BriaBackgroundRemoveAdapter
from media_tools.tools.adapters.fal_placeholder import FalPlaceholderAdapter
from media_tools.tools.adapters.fast_lightning_sdxl import FastLightningSDXLAdapter
from media_tools.tools.adapters.fast_svd_lcm import FastSvdLcmAdapter
from media_tools.tools.adapters.nano_banana_edit import NanoBananaEditAdapter
from media_tools.tools.adapters.playai_tts_dialog import PlayAITtsDialogAdapter
from media_tools.tools.adapters.recraft_v3_text_to_image import RecraftV3TextToImageAdapter

__all__ = [
    "BriaBackgroundRemoveAdapter",
    "FalPlaceholderAdapter",
    "FastLightningSDXLAdapter",
    "FastSvdLcmAdapter",
    "NanoBananaEditAdapter",
    "PlayAITtsDialogAdapter",
    "RecraftV3TextToImageAdapter",
]
