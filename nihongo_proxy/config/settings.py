"""配置模型定义与加载

所有配置项都来自进程环境变量，在进程生命周期内视为不可变。
处理器通过 FastAPI 依赖 ``get_config`` 显式获取配置，而不是在代码中随处读取环境变量。
"""

import os

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions"
)
DEFAULT_MODEL_NAME = "gemini-3-flash-preview"


class ServerConfig(BaseModel):
    """服务器监听配置"""

    host: str = Field("0.0.0.0", description="监听地址")
    port: int = Field(8000, ge=1, le=65535, description="监听端口")


class LoggingConfig(BaseModel):
    """日志配置"""

    level: str = Field("INFO", description="日志级别")
    file: str | None = Field("logs/app.log", description="日志文件路径，为空则不写文件")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"不支持的日志级别: {value}")
        return level


class Config(BaseModel):
    """应用配置"""

    model_config = {"frozen": True}

    api_key: str = Field("", description="通用服务端API密钥")
    glm_api_key: str = Field("", description="智谱(bigmodel)服务端API密钥")
    api_url: str = Field(DEFAULT_API_URL, description="默认上游API地址")
    default_model: str = Field(DEFAULT_MODEL_NAME, description="请求未指定时使用的模型")
    request_timeout: float | None = Field(
        None, gt=0, description="上游请求超时时间（秒），为空表示不限制"
    )
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Config":
        """从环境变量构建配置

        空字符串视为未设置，URL 与模型名回退到内置默认值。
        """
        env = os.environ if environ is None else environ

        timeout = env.get("REQUEST_TIMEOUT") or None
        server = {
            key: value
            for key, value in (("host", env.get("HOST")), ("port", env.get("PORT")))
            if value
        }
        logging = {
            key: value
            for key, value in (
                ("level", env.get("LOG_LEVEL")),
                ("file", env.get("LOG_FILE")),
            )
            if value
        }

        return cls(
            api_key=env.get("API_KEY", ""),
            glm_api_key=env.get("GLM_API_KEY", ""),
            api_url=env.get("API_URL") or DEFAULT_API_URL,
            default_model=env.get("DEFAULT_MODEL") or DEFAULT_MODEL_NAME,
            request_timeout=timeout,
            server=ServerConfig(**server),
            logging=LoggingConfig(**logging),
        )


def get_config() -> Config:
    """FastAPI 依赖：按请求读取当前进程配置"""
    return Config.from_env()
