"""
API模块

提供FastAPI应用的路由、处理器和中间件。

子模块:
- handlers: 分析与翻译请求处理器
- routes: 健康检查与模型列表
- middleware: 中间件实现
"""

from .handlers import AssistHandler, analyze_endpoint, translate_endpoint
from .handlers import router as handlers_router
from .middleware import RequestTimingMiddleware, setup_middlewares
from .routes import health_check, models_endpoint
from .routes import router as routes_router

__all__ = [
    # 路由
    "routes_router",
    "handlers_router",
    "health_check",
    "models_endpoint",
    # 处理器
    "AssistHandler",
    "analyze_endpoint",
    "translate_endpoint",
    # 中间件
    "RequestTimingMiddleware",
    "setup_middlewares",
]
