"""错误类型与标准化错误响应模型

所有面向调用方的错误都使用统一的 ``{"error": {"message": ...}}`` 结构，
只有 message 字段对用户可见，其余上下文仅写入服务端日志。
"""

from typing import Any

from pydantic import BaseModel, Field

MISSING_API_KEY_MESSAGE = "未提供API密钥，请在设置中配置API密钥或联系管理员配置服务器密钥"
STREAM_UNAVAILABLE_MESSAGE = "流式响应创建失败"
TRANSPORT_FAILURE_MESSAGE = "网络请求失败"
SERVER_ERROR_MESSAGE = "服务器错误"


class ErrorDetail(BaseModel):
    """错误详细信息"""

    message: str = Field(description="错误消息")


class ErrorResponse(BaseModel):
    """标准化错误响应模型"""

    error: ErrorDetail = Field(description="错误详情")


def get_error_response(message: str) -> ErrorResponse:
    """构建标准错误响应"""
    return ErrorResponse(error=ErrorDetail(message=message or SERVER_ERROR_MESSAGE))


class ProxyError(Exception):
    """代理错误基类，携带需要返回给调用方的HTTP状态码"""

    status_code: int = 500
    default_message: str = SERVER_ERROR_MESSAGE

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> ErrorResponse:
        return get_error_response(self.message)


class ClientInputError(ProxyError):
    """请求缺少必要参数或参数无效"""

    status_code = 400
    default_message = "请求格式错误或参数无效"


class ConfigurationError(ProxyError):
    """没有可用的API密钥"""

    status_code = 500
    default_message = MISSING_API_KEY_MESSAGE


class UpstreamError(ProxyError):
    """上游服务返回非2xx状态"""

    status_code = 500
    default_message = "AI服务请求失败"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        raw: Any = None,
    ):
        super().__init__(message, status_code)
        self.raw = raw


class TransportError(ProxyError):
    """无法连接到上游服务（DNS、连接拒绝、超时等）"""

    status_code = 500
    default_message = TRANSPORT_FAILURE_MESSAGE


class StreamUnavailableError(ProxyError):
    """上游成功响应但没有可读取的响应体"""

    status_code = 500
    default_message = STREAM_UNAVAILABLE_MESSAGE
