"""API 路由模块"""

from fastapi import APIRouter

from media_tools.api.v1 import tools

router = APIRouter()

router.include_router(tools.router, prefix="/v1/tools", tags=["工具"])
