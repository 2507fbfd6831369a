"""Error normalization at the handler boundary."""

import httpx
import pytest


@pytest.mark.usefixtures("server_keys")
class TestErrorHandlingIntegration:
    """Upstream, transport and input failures map to {"error": {"message"}}."""

    def test_rate_limit_status_and_message_are_mirrored(self, client, upstream):
        upstream.respond_with(
            lambda request: httpx.Response(429, json={"error": {"message": "rate limited"}})
        )

        response = client.post("/api/analyze", json={"prompt": "x"})

        assert response.status_code == 429
        assert response.json() == {"error": {"message": "rate limited"}}

    def test_upstream_raw_payload_is_not_exposed(self, client, upstream):
        upstream.respond_with(
            lambda request: httpx.Response(
                400,
                json={"error": {"message": "bad model", "code": "model_not_found", "param": "model"}},
            )
        )

        response = client.post("/api/translate", json={"text": "猫"})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "bad model"}}

    def test_plain_text_upstream_error(self, client, upstream):
        upstream.respond_with(lambda request: httpx.Response(502, text="Bad Gateway"))

        response = client.post("/api/analyze", json={"prompt": "x"})

        assert response.status_code == 502
        assert response.json() == {"error": {"message": "Bad Gateway"}}

    def test_connection_refused(self, client, upstream):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        upstream.respond_with(refuse)

        response = client.post("/api/analyze", json={"prompt": "x"})

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Connection refused"}}

    def test_malformed_upstream_success_body(self, client, upstream):
        upstream.respond_with(lambda request: httpx.Response(200, text="not json"))

        response = client.post("/api/analyze", json={"prompt": "x"})

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "AI服务返回了无效的JSON响应"}}

    def test_malformed_request_json_is_a_client_error(self, client, upstream):
        response = client.post(
            "/api/analyze",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert "error" in response.json()
        assert upstream.requests == []

    def test_wrong_field_type_is_a_client_error(self, client, upstream):
        response = client.post("/api/analyze", json={"prompt": "x", "stream": "sometimes"})

        assert response.status_code == 400
        assert response.json()["error"]["message"].startswith("请求参数验证失败")
        assert upstream.requests == []

    def test_unexpected_exception_is_converted(self, client, upstream):
        def explode(request):
            raise RuntimeError("unexpected failure")

        upstream.respond_with(explode)

        response = client.post("/api/analyze", json={"prompt": "x"})

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "unexpected failure"}}

    def test_unknown_route(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "请求的资源不存在"}}
