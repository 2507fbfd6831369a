"""
中间件模块

主要功能:
- 请求ID追踪
- 请求计时

使用示例:
    from nihongo_proxy.api.middleware import setup_middlewares

    setup_middlewares(app)
"""

from .timing import RequestTimingMiddleware, setup_middlewares

__all__ = [
    "RequestTimingMiddleware",
    "setup_middlewares",
]
