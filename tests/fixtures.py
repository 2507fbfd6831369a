"""Mock OpenAI-compatible upstream for end-to-end testing."""

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx

__all__ = [
    "MockUpstream",
    "chat_completion",
    "stream_chunks",
    "SERVER_KEY",
    "GLM_SERVER_KEY",
]

SERVER_KEY = "server-key-0123456789"
GLM_SERVER_KEY = "glm-server-key-0123456789"


def chat_completion(content: str = "hello") -> dict[str, Any]:
    """Minimal chat-completion body as returned by an OpenAI-compatible API."""
    return {"choices": [{"message": {"content": content}}]}


async def stream_chunks(*chunks: bytes) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk


class MockUpstream:
    """Records outbound requests and answers them with a configurable responder."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None):
        self.requests: list[httpx.Request] = []
        self.responder = responder or (lambda request: httpx.Response(200, json=chat_completion()))
        self.client = httpx.AsyncClient(transport=httpx.MockTransport(self._handle))

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def respond_with(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.responder = responder

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no outbound request was made"
        return self.requests[-1]

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.last_request.content)

    @property
    def last_authorization(self) -> str | None:
        return self.last_request.headers.get("Authorization")
