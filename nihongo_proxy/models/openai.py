"""OpenAI 兼容 Chat Completion 请求数据模型"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """OpenAI消息格式"""

    role: Literal["system", "user", "assistant"] = Field(description="消息角色")
    content: str = Field(description="消息内容")


class ChatCompletionPayload(BaseModel):
    """发送到上游的 Chat Completion 请求体"""

    model: str = Field(description="模型名称")
    # OpenAI 兼容接口使用 reasoning_effort（会映射到 Gemini 3 thinking level）
    reasoning_effort: Literal["none", "low", "medium", "high"] = Field(
        "none", description="推理强度"
    )
    messages: list[ChatMessage] = Field(description="对话消息列表")
    stream: bool = Field(False, description="是否流式返回")

    @classmethod
    def for_user_prompt(
        cls, content: str, model: str, stream: bool = False
    ) -> "ChatCompletionPayload":
        return cls(
            model=model,
            messages=[ChatMessage(role="user", content=content)],
            stream=stream,
        )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump()
