"""请求ID与计时中间件"""

import time
from collections.abc import Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from nihongo_proxy.common.logging import (
    REQUEST_ID_HEADER,
    generate_request_id,
    get_logger_with_request_id,
)
from nihongo_proxy.models.errors import get_error_response


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """为每个请求分配请求ID，并记录处理耗时"""

    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        request_id = generate_request_id()
        request.state.request_id = request_id
        bound_logger = get_logger_with_request_id(request_id)

        bound_logger.info(f"收到请求 - {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as exc:
            bound_logger.exception(
                f"请求处理错误 - Type: {type(exc).__name__}, Message: {exc}, "
                f"Method: {request.method}, URL: {request.url}"
            )
            error_response = get_error_response(str(exc))
            response = JSONResponse(status_code=500, content=error_response.model_dump())

        # 流式响应在此时只完成了响应头，耗时不包含响应体转发
        response_time = time.time() - start_time
        bound_logger.info(
            f"请求完成 - Status: {response.status_code}, "
            f"Time: {round(response_time * 1000, 2)}ms"
        )

        response.headers["X-Process-Time"] = f"{response_time:.3f}s"
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def setup_middlewares(app: FastAPI) -> None:
    """设置所有中间件"""
    app.add_middleware(RequestTimingMiddleware)
