"""OpenAI 兼容接口代理

向上游发起一次 Chat Completion 请求并对结果分类：
成功时返回未消费的 ``httpx.Response``，由调用方决定流式转发或整体读取；
失败时返回标准化的错误消息与需要透传的状态码。不做重试。
"""

import json
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any, ClassVar

import httpx
from loguru import logger

from nihongo_proxy.models.errors import (
    TRANSPORT_FAILURE_MESSAGE,
    ProxyError,
    TransportError,
    UpstreamError,
)


@dataclass(frozen=True)
class ProxyRequest:
    """一次上游调用的参数"""

    url: str
    api_key: str
    payload: dict[str, Any]


@dataclass
class ProxySuccess:
    response: httpx.Response
    ok: ClassVar[bool] = True


@dataclass
class ProxyFailure:
    message: str
    status: int
    raw: Any = None
    cause: Exception | None = None
    ok: ClassVar[bool] = False

    def to_exception(self) -> ProxyError:
        """转换为可在处理器边界抛出的异常"""
        if self.cause is not None:
            return TransportError(self.message, self.status)
        return UpstreamError(self.message, self.status, raw=self.raw)


ProxyResult = ProxySuccess | ProxyFailure


def extract_error_message(body: Any) -> str | None:
    """从上游错误响应体中尽量提取可读的错误消息

    支持 ``{"error": {"message": ...}}``、``{"error": "..."}`` 和 ``{"message": ...}``。
    """
    if not isinstance(body, dict):
        return None

    error = body.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    if isinstance(error, str):
        return error
    if isinstance(body.get("message"), str):
        return body["message"]
    return None


async def _read_failure(response: httpx.Response) -> ProxyFailure:
    try:
        await response.aread()
    finally:
        await response.aclose()

    text = response.text
    raw: Any = text or None
    message = None

    try:
        raw = response.json()
        message = extract_error_message(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        pass

    if not message:
        message = text.strip() or f"AI服务请求失败 (HTTP {response.status_code})"

    return ProxyFailure(message=message, status=response.status_code, raw=raw)


async def proxy_openai_compatible_request(
    client: httpx.AsyncClient, request: ProxyRequest
) -> ProxyResult:
    """向 OpenAI 兼容接口转发请求

    Args:
        client: 共享的HTTP客户端
        request: 上游地址、密钥与请求体

    Returns:
        ProxySuccess: 2xx 响应，响应体尚未读取
        ProxyFailure: 上游非2xx或网络错误
    """
    headers = {
        "Authorization": f"Bearer {request.api_key}",
        "Content-Type": "application/json",
    }

    try:
        outbound = client.build_request(
            "POST", request.url, headers=headers, json=request.payload
        )
        response = await client.send(outbound, stream=True, follow_redirects=True)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        message = str(exc) or TRANSPORT_FAILURE_MESSAGE
        logger.error(f"上游请求失败 - Type: {type(exc).__name__}, Message: {message}")
        return ProxyFailure(message=message, status=500, cause=exc)

    if response.is_success:
        return ProxySuccess(response=response)

    try:
        return await _read_failure(response)
    except httpx.HTTPError as exc:
        message = str(exc) or TRANSPORT_FAILURE_MESSAGE
        logger.error(f"读取上游错误响应失败 - Status: {response.status_code}, Message: {message}")
        return ProxyFailure(message=message, status=response.status_code, cause=exc)


def has_readable_body(response: httpx.Response) -> bool:
    """判断响应体是否仍可读取"""
    # send(stream=True) 返回的响应总是可读；这里拦截响应体已被其他调用方消费的情况
    if not response.is_stream_consumed:
        return True
    try:
        response.content
    except httpx.ResponseNotRead:
        return False
    return True


async def relay_stream(response: httpx.Response) -> AsyncIterator[bytes]:
    """逐块转发上游响应体，结束或客户端断开时关闭上游连接"""
    try:
        async for chunk in response.aiter_bytes():
            yield chunk
    finally:
        await response.aclose()


async def read_json(response: httpx.Response) -> Any:
    """整体读取上游响应体并解析为JSON"""
    try:
        await response.aread()
    except httpx.HTTPError as exc:
        raise TransportError(str(exc) or None) from exc
    finally:
        await response.aclose()

    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise UpstreamError("AI服务返回了无效的JSON响应", raw=response.text) from exc
