"""健康检查与模型列表路由"""

from datetime import datetime, timezone

from fastapi import APIRouter

from nihongo_proxy.config.models import DEFAULT_MODEL, list_models

SERVICE_NAME = "nihongo-proxy"

router = APIRouter()


@router.get("/health")
async def health_check():
    """基础健康检查，不访问上游服务"""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/api/models")
async def models_endpoint():
    """返回可选模型列表及默认模型"""
    return {
        "default": DEFAULT_MODEL,
        "models": [model.model_dump() for model in list_models()],
    }
