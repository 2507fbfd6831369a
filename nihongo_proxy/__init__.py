"""
Nihongo Proxy

日语阅读助手的 API 网关：把文本分析与日译中请求转发到 OpenAI 兼容的
Chat Completion 接口，并以流式或整体方式返回上游响应。

主要功能:
- 按请求头与请求体解析有效的 API 密钥和上游地址
- 智谱(bigmodel)与通用服务端密钥的自动选择
- 流式响应原样透传
- 统一的错误响应格式
- 请求ID追踪和日志记录

使用示例:
    from nihongo_proxy import app
"""

__version__ = "0.1.0"
__description__ = "Japanese text analysis and translation gateway for OpenAI-compatible APIs"

from .common import configure_logging
from .config import get_config, get_model_config
from .main import app

__all__ = [
    "app",
    "get_config",
    "get_model_config",
    "configure_logging",
    "__version__",
    "__description__",
]
