"""Streaming passthrough tests."""

import httpx
import pytest

from nihongo_proxy.api import handlers

from ..fixtures import stream_chunks

SSE_CHUNKS = (
    b'data: {"choices":[{"delta":{"content":"\xe4\xbd\xa0"}}]}\n\n',
    b'data: {"choices":[{"delta":{"content":"\xe5\xa5\xbd"}}]}\n\n',
    b"data: [DONE]\n\n",
)


@pytest.mark.usefixtures("server_keys")
class TestStreamingPassthrough:
    """Upstream byte streams are relayed unmodified."""

    def test_chunks_are_relayed_in_order(self, client, upstream):
        upstream.respond_with(
            lambda request: httpx.Response(
                200,
                headers={"Content-Type": "text/event-stream"},
                content=stream_chunks(b"C1", b"C2", b"C3"),
            )
        )

        with client.stream("POST", "/api/analyze", json={"prompt": "x", "stream": True}) as response:
            assert response.status_code == 200
            body = b"".join(response.iter_bytes())

        assert body == b"C1C2C3"

    def test_stream_headers(self, client, upstream):
        upstream.respond_with(
            lambda request: httpx.Response(200, content=stream_chunks(*SSE_CHUNKS))
        )

        with client.stream("POST", "/api/translate", json={"text": "猫", "stream": True}) as response:
            body = response.read()

        assert response.headers["content-type"] == "text/event-stream"
        assert response.headers["cache-control"] == "no-cache"
        assert body == b"".join(SSE_CHUNKS)

    def test_stream_flag_is_forwarded(self, client, upstream):
        upstream.respond_with(
            lambda request: httpx.Response(200, content=stream_chunks(b"data: [DONE]\n\n"))
        )

        with client.stream("POST", "/api/analyze", json={"prompt": "x", "stream": True}) as response:
            response.read()

        assert upstream.last_payload["stream"] is True

    def test_upstream_error_is_not_streamed(self, client, upstream):
        upstream.respond_with(
            lambda request: httpx.Response(401, json={"error": {"message": "invalid api key"}})
        )

        response = client.post("/api/analyze", json={"prompt": "x", "stream": True})

        assert response.status_code == 401
        assert response.json() == {"error": {"message": "invalid api key"}}

    def test_unreadable_body_returns_500(self, client, upstream, monkeypatch):
        monkeypatch.setattr(handlers, "has_readable_body", lambda response: False)

        response = client.post("/api/analyze", json={"prompt": "x", "stream": True})

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "流式响应创建失败"}}
