"""fal.ai 媒体工具服务"""

__version__ = "0.1.0"
