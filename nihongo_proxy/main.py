from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from nihongo_proxy.api.handlers import router as assist_router
from nihongo_proxy.api.middleware.timing import setup_middlewares
from nihongo_proxy.api.routes import router as health_router
from nihongo_proxy.common.logging import (
    configure_logging,
    get_logger_with_request_id,
    get_request_id_from_request,
)
from nihongo_proxy.config.settings import Config
from nihongo_proxy.models.errors import ProxyError, UpstreamError, get_error_response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    config = Config.from_env()

    configure_logging(config.logging)

    # 所有请求共享一个上游HTTP客户端
    app.state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.request_timeout),
        follow_redirects=True,
    )

    logger.info(
        f"启动 Nihongo Proxy 服务器 - Host: {config.server.host}, Port: {config.server.port}, "
        f"LogLevel: {config.logging.level}, DefaultApiUrl: {config.api_url}"
    )

    yield

    await app.state.http_client.aclose()
    logger.info("服务器已停止")


app = FastAPI(
    title="Nihongo Proxy",
    version="0.1.0",
    description="Japanese text analysis and translation gateway for OpenAI-compatible APIs.",
    lifespan=lifespan,
)

# 设置CORS中间件
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 允许所有来源，生产环境建议指定具体域名
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_middlewares(app)

app.include_router(health_router)
app.include_router(assist_router)


@app.get("/")
async def root():
    return {"message": "Welcome to the Nihongo Proxy Server"}


@app.exception_handler(ProxyError)
async def proxy_error_handler(request: Request, exc: ProxyError):
    """将代理错误转换为统一的错误响应"""
    bound_logger = get_logger_with_request_id(get_request_id_from_request(request))

    if isinstance(exc, UpstreamError) and exc.raw is not None:
        bound_logger.warning(
            f"{type(exc).__name__} - Status: {exc.status_code}, Message: {exc.message}, Raw: {exc.raw}"
        )
    else:
        bound_logger.warning(
            f"{type(exc).__name__} - Status: {exc.status_code}, Message: {exc.message}"
        )

    return JSONResponse(
        status_code=exc.status_code, content=exc.to_response().model_dump()
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """请求体验证失败按客户端输入错误处理"""
    bound_logger = get_logger_with_request_id(get_request_id_from_request(request))

    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"请求参数验证失败: {location} - {first.get('msg', '')}"
    else:
        message = "请求参数验证失败"

    bound_logger.warning(message)
    return JSONResponse(status_code=400, content=get_error_response(message).model_dump())


@app.exception_handler(404)
async def not_found_handler(request: Request, exc):
    """处理404错误"""
    return JSONResponse(
        status_code=404, content=get_error_response("请求的资源不存在").model_dump()
    )
