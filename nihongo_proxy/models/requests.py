"""入站请求数据模型"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AssistRequest(BaseModel):
    """分析与翻译请求的公共字段"""

    model_config = ConfigDict(populate_by_name=True)

    model: str | None = Field(None, description="模型ID，未指定时使用默认模型")
    api_url: str | None = Field(None, alias="apiUrl", description="自定义上游API地址")
    stream: bool = Field(False, description="是否使用流式输出")

    @field_validator("stream", mode="before")
    @classmethod
    def null_stream_is_false(cls, value):
        return False if value is None else value


class AnalyzeRequest(AssistRequest):
    """/api/analyze 请求体"""

    prompt: str | None = Field(None, description="要发送给模型的分析提示词")


class TranslateRequest(AssistRequest):
    """/api/translate 请求体"""

    text: str | None = Field(None, description="要翻译的日文文本")
