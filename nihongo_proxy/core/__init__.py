"""
核心功能模块

提供代理服务的核心功能，包括：
- 密钥与上游地址解析
- 提示词模板
- OpenAI 兼容接口代理与流式转发

子模块:
- credentials: 提供商识别与密钥优先级
- prompts: 翻译指令模板
- proxy: 上游请求与结果分类
"""

from .credentials import (
    Credentials,
    Provider,
    classify_provider,
    extract_bearer_token,
    resolve_credentials,
)
from .prompts import TRANSLATION_PROMPT_TEMPLATE, build_translation_prompt
from .proxy import (
    ProxyFailure,
    ProxyRequest,
    ProxyResult,
    ProxySuccess,
    has_readable_body,
    proxy_openai_compatible_request,
    read_json,
    relay_stream,
)

__all__ = [
    # 密钥解析
    "Credentials",
    "Provider",
    "classify_provider",
    "extract_bearer_token",
    "resolve_credentials",
    # 提示词
    "TRANSLATION_PROMPT_TEMPLATE",
    "build_translation_prompt",
    # 代理
    "ProxyRequest",
    "ProxyResult",
    "ProxySuccess",
    "ProxyFailure",
    "proxy_openai_compatible_request",
    "has_readable_body",
    "relay_stream",
    "read_json",
]
