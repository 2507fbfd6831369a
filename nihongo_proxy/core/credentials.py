"""API密钥与上游地址解析"""

from dataclasses import dataclass
from enum import Enum

from nihongo_proxy.config.settings import Config

BIGMODEL_URL_MARKER = "bigmodel.cn"


class Provider(str, Enum):
    """上游提供商类别"""

    BIGMODEL = "bigmodel"
    DEFAULT = "default"


def classify_provider(url: str | None) -> Provider:
    """根据URL判断提供商类别，无法识别时归入 DEFAULT"""
    if url and BIGMODEL_URL_MARKER in url:
        return Provider.BIGMODEL
    return Provider.DEFAULT


def extract_bearer_token(authorization: str | None) -> str:
    """从 ``Authorization: Bearer <token>`` 头中取出令牌，格式不符时返回空字符串"""
    if not authorization:
        return ""
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


@dataclass(frozen=True)
class Credentials:
    """一次上游调用实际使用的密钥与地址"""

    provider: Provider
    user_key: str
    fallback_key: str
    api_key: str
    api_url: str

    @property
    def has_user_key(self) -> bool:
        return bool(self.user_key)

    @property
    def has_fallback_key(self) -> bool:
        return bool(self.fallback_key)


def resolve_credentials(
    config: Config, authorization: str | None, api_url: str | None
) -> Credentials:
    """按优先级解析有效密钥和有效URL

    用户在请求头中提供的密钥优先；否则按请求中 apiUrl 的提供商类别选择服务端密钥。
    请求未指定 apiUrl 时使用配置中的默认地址。
    """
    user_key = extract_bearer_token(authorization)
    provider = classify_provider(api_url)
    fallback_key = config.glm_api_key if provider is Provider.BIGMODEL else config.api_key

    return Credentials(
        provider=provider,
        user_key=user_key,
        fallback_key=fallback_key,
        api_key=user_key or fallback_key,
        api_url=api_url or config.api_url,
    )
