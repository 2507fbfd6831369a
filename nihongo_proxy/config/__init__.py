"""
配置管理模块

提供应用程序配置的加载和静态模型注册表。

主要功能:
- 环境变量配置加载和验证
- 配置模型定义
- 模型注册表查询

使用示例:
    from nihongo_proxy.config import get_config, get_model_config

    config = get_config()
    print(config.api_url)
"""

from .models import (
    AI_MODELS,
    DEFAULT_MODEL,
    ModelConfig,
    get_model_api_url,
    get_model_config,
    get_model_icon,
    get_model_name,
    list_models,
)
from .settings import (
    DEFAULT_API_URL,
    DEFAULT_MODEL_NAME,
    Config,
    LoggingConfig,
    ServerConfig,
    get_config,
)

__all__ = [
    # 配置管理函数
    "get_config",
    # 配置模型
    "Config",
    "ServerConfig",
    "LoggingConfig",
    "DEFAULT_API_URL",
    "DEFAULT_MODEL_NAME",
    # 模型注册表
    "ModelConfig",
    "AI_MODELS",
    "DEFAULT_MODEL",
    "get_model_config",
    "get_model_api_url",
    "get_model_name",
    "get_model_icon",
    "list_models",
]
