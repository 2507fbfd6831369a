"""
数据模型模块

- errors: 错误类型与统一错误响应
- requests: 入站请求体
- openai: 上游 Chat Completion 请求体
"""

from .errors import (
    ClientInputError,
    ConfigurationError,
    ErrorResponse,
    ProxyError,
    StreamUnavailableError,
    TransportError,
    UpstreamError,
    get_error_response,
)
from .openai import ChatCompletionPayload, ChatMessage
from .requests import AnalyzeRequest, AssistRequest, TranslateRequest

__all__ = [
    "ProxyError",
    "ClientInputError",
    "ConfigurationError",
    "UpstreamError",
    "TransportError",
    "StreamUnavailableError",
    "ErrorResponse",
    "get_error_response",
    "ChatCompletionPayload",
    "ChatMessage",
    "AnalyzeRequest",
    "AssistRequest",
    "TranslateRequest",
]
