"""AI 模型注册表

所有可选模型集中在此定义，新增模型只需在 ``AI_MODELS`` 中追加一项。
"""

from loguru import logger
from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """单个模型的静态配置"""

    model_config = {"frozen": True, "protected_namespaces": ()}

    id: str = Field(description="模型唯一标识符")
    label: str = Field(description="显示名称")
    provider: str = Field(description="提供商标识")
    description: str = Field(description="描述")
    api_url: str = Field(description="API 地址")
    model_name: str = Field(description="实际调用的模型名称")
    icon: str = Field(description="图标类名 (FontAwesome)")


AI_MODELS: tuple[ModelConfig, ...] = (
    ModelConfig(
        id="gemini-3-flash-preview",
        label="Gemini 3 Flash",
        provider="gemini",
        description="速度快、对日语优化",
        api_url="https://generativelanguage.googleapis.com/v1beta/openai/chat/completions",
        model_name="gemini-3-flash-preview",
        icon="fa-robot",
    ),
    ModelConfig(
        id="glm-4-flash",
        label="GLM",
        provider="zhipu",
        description="智谱AI、响应快",
        api_url="https://open.bigmodel.cn/api/paas/v4/chat/completions",
        model_name="glm-4-flash",
        icon="fa-cube",
    ),
    ModelConfig(
        id="qwen-plus",
        label="Qwen",
        provider="qwen",
        description="阿里云、多语言支持好",
        api_url="https://dashscope.aliyuncs.com/compatible-mode/v1/chat/completions",
        model_name="qwen-plus",
        icon="fa-bolt",
    ),
)

DEFAULT_MODEL = AI_MODELS[0].id

_MODELS_BY_ID = {model.id: model for model in AI_MODELS}


def get_model_config(model_id: str | None) -> ModelConfig:
    """根据模型ID获取配置，未找到时返回默认模型"""
    model = _MODELS_BY_ID.get(model_id) if model_id else None
    if model is None:
        logger.warning(f"未找到模型配置: {model_id}，使用默认模型")
        return AI_MODELS[0]
    return model


def get_model_api_url(model_id: str | None) -> str:
    return get_model_config(model_id).api_url


def get_model_name(model_id: str | None) -> str:
    return get_model_config(model_id).model_name


def get_model_icon(model_id: str | None) -> str:
    return get_model_config(model_id).icon


def list_models() -> list[ModelConfig]:
    return list(AI_MODELS)
