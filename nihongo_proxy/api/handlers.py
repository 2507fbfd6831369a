"""分析与翻译请求处理器"""

from collections.abc import Callable
from typing import Any

import httpx
from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.responses import Response

from nihongo_proxy.common.logging import (
    get_logger_with_request_id,
    get_request_id_from_request,
    preview_secret,
)
from nihongo_proxy.config.settings import Config, get_config
from nihongo_proxy.core.credentials import Credentials, resolve_credentials
from nihongo_proxy.core.prompts import build_translation_prompt
from nihongo_proxy.core.proxy import (
    ProxyFailure,
    ProxyRequest,
    has_readable_body,
    proxy_openai_compatible_request,
    read_json,
    relay_stream,
)
from nihongo_proxy.models.errors import (
    ClientInputError,
    ConfigurationError,
    StreamUnavailableError,
)
from nihongo_proxy.models.openai import ChatCompletionPayload
from nihongo_proxy.models.requests import (
    AnalyzeRequest,
    AssistRequest,
    TranslateRequest,
)

MISSING_PROMPT_MESSAGE = "缺少必要的prompt参数"
MISSING_TEXT_MESSAGE = "缺少必要的文本内容"

STREAM_HEADERS = {
    "Content-Type": "text/event-stream",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}

router = APIRouter(prefix="/api", tags=["assist"])


def get_http_client(request: Request) -> httpx.AsyncClient:
    """FastAPI 依赖：获取应用生命周期内共享的HTTP客户端"""
    return request.app.state.http_client


class AssistHandler:
    """将分析/翻译请求转发到 OpenAI 兼容接口的处理器"""

    def __init__(
        self,
        config: Config,
        client: httpx.AsyncClient,
        request_id: str | None = None,
    ):
        self.config = config
        self.client = client
        self.logger = get_logger_with_request_id(request_id)

    def resolve(self, body: AssistRequest, authorization: str | None, label: str) -> Credentials:
        credentials = resolve_credentials(self.config, authorization, body.api_url)

        self.logger.info(
            f"{label} API debug - provider: {credentials.provider.value}, "
            f"hasUserApiKey: {credentials.has_user_key}, "
            f"hasDefaultApiKey: {credentials.has_fallback_key}, "
            f"effectiveApiKeyPrefix: {preview_secret(credentials.api_key)}, "
            f"effectiveApiUrl: {credentials.api_url}"
        )
        return credentials

    async def handle(
        self,
        body: AssistRequest,
        text: str | None,
        *,
        authorization: str | None,
        label: str,
        missing_message: str,
        build_prompt: Callable[[str], str] | None = None,
    ) -> Response:
        """解析密钥、构建请求体并转发到上游

        Args:
            body: 入站请求体
            text: 必填的文本字段（prompt 或 text）
            authorization: 原始 Authorization 请求头
            label: 日志中使用的处理器名称
            missing_message: 缺少文本字段时的错误消息
            build_prompt: 将文本包装为最终提示词，为空时原样发送
        """
        credentials = self.resolve(body, authorization, label)

        if not credentials.api_key:
            raise ConfigurationError()
        if not text:
            raise ClientInputError(missing_message)

        content = build_prompt(text) if build_prompt else text
        payload = ChatCompletionPayload.for_user_prompt(
            content,
            model=body.model or self.config.default_model,
            stream=body.stream,
        )

        result = await proxy_openai_compatible_request(
            self.client,
            ProxyRequest(
                url=credentials.api_url,
                api_key=credentials.api_key,
                payload=payload.to_json(),
            ),
        )

        if isinstance(result, ProxyFailure):
            self.logger.error(
                f"AI API error ({label}) - Status: {result.status}, "
                f"Error: {result.raw if result.raw is not None else result.message}"
            )
            raise result.to_exception()

        response = result.response

        if body.stream:
            if not has_readable_body(response):
                await response.aclose()
                raise StreamUnavailableError()
            return StreamingResponse(relay_stream(response), headers=STREAM_HEADERS)

        data: Any = await read_json(response)
        return JSONResponse(content=data)


@router.post("/analyze")
async def analyze_endpoint(
    body: AnalyzeRequest,
    request: Request,
    authorization: str | None = Header(None),
    config: Config = Depends(get_config),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Response:
    """文本分析：将 prompt 原样转发给模型"""
    handler = AssistHandler(config, client, get_request_id_from_request(request))
    return await handler.handle(
        body,
        body.prompt,
        authorization=authorization,
        label="Analysis",
        missing_message=MISSING_PROMPT_MESSAGE,
    )


@router.post("/translate")
async def translate_endpoint(
    body: TranslateRequest,
    request: Request,
    authorization: str | None = Header(None),
    config: Config = Depends(get_config),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Response:
    """日译中：将 text 包装进翻译指令模板后转发给模型"""
    handler = AssistHandler(config, client, get_request_id_from_request(request))
    handler.logger.info(
        f"Translate route: hasText: {bool(body.text)}, model: {body.model}, "
        f"apiUrl: {body.api_url}, stream: {body.stream}"
    )
    return await handler.handle(
        body,
        body.text,
        authorization=authorization,
        label="Translation",
        missing_message=MISSING_TEXT_MESSAGE,
        build_prompt=build_translation_prompt,
    )
