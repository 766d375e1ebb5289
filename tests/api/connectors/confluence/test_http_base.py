"""Testes do transporte HTTP Confluence (URL, retry, timeout, classificação)."""

from __future__ import annotations

import asyncio
import base64
import json

import httpx
import pytest

from api.connectors.confluence import (
    ConfluenceHttpClientV1,
    ConfluenceHttpClientV2,
    HttpClientConfig,
    TransportRequest,
    backoff_delay,
    build_api_url,
    is_absolute_url,
    retry_transient,
)
from api.connectors.confluence.http_base import normalize_params
from utils.errors import (
    AuthenticationError,
    HttpStatusError,
    NetworkError,
    ResponseParseError,
    TransportTimeoutError,
)

HOST = "https://acme.atlassian.net"


class SleepRecorder:
    """Substitui asyncio.sleep registrando os delays pedidos."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def _client(
    handler,
    *,
    client_class=ConfluenceHttpClientV2,
    sleep: SleepRecorder | None = None,
    **config_kwargs,
):
    return client_class(
        HOST,
        "bot@acme.com",
        "secret-token",
        HttpClientConfig(**config_kwargs),
        transport=httpx.MockTransport(handler),
        sleep=sleep or SleepRecorder(),
    )


class TestUrlHelpers:
    def test_build_api_url_joins_with_single_slash(self) -> None:
        assert build_api_url(f"{HOST}/api/v2/", "/pages") == f"{HOST}/api/v2/pages"
        assert build_api_url(f"{HOST}/api/v2", "pages") == f"{HOST}/api/v2/pages"

    def test_build_api_url_keeps_absolute_endpoint(self) -> None:
        absolute = "https://other.example.com/rest/api/search?cql=x"
        assert build_api_url(f"{HOST}/api/v2", absolute) == absolute

    def test_is_absolute_url(self) -> None:
        assert is_absolute_url("https://acme.atlassian.net/wiki") is True
        assert is_absolute_url("/wiki/rest/api") is False
        assert is_absolute_url("pages") is False

    def test_normalize_params_lowercases_booleans_and_drops_none(self) -> None:
        params = normalize_params({"limit": 10, "archived": True, "draft": False, "cursor": None})
        assert params == {"limit": "10", "archived": "true", "draft": "false"}

    def test_backoff_delay_doubles(self) -> None:
        assert [backoff_delay(n, 0.5) for n in (1, 2, 3)] == [0.5, 1.0, 2.0]


class TestBaseUrl:
    def test_default_base_paths(self) -> None:
        v1 = _client(lambda r: httpx.Response(200), client_class=ConfluenceHttpClientV1)
        v2 = _client(lambda r: httpx.Response(200))
        assert v1.base_url == f"{HOST}/wiki/rest/api"
        assert v2.base_url == f"{HOST}/api/v2"

    def test_relative_custom_base_path_is_joined_to_host(self) -> None:
        client = _client(lambda r: httpx.Response(200), custom_base_path="/gateway/confluence/")
        assert client.base_url == f"{HOST}/gateway/confluence"

    def test_absolute_custom_base_path_is_used_verbatim(self) -> None:
        client = _client(
            lambda r: httpx.Response(200),
            custom_base_path="https://proxy.internal/confluence/api",
        )
        assert client.base_url == "https://proxy.internal/confluence/api"

    def test_web_base_url_adds_wiki_once(self) -> None:
        client = _client(lambda r: httpx.Response(200))
        assert client.web_base_url == f"{HOST}/wiki"

        wiki_host = ConfluenceHttpClientV2(f"{HOST}/wiki/", "a@b.co", "t")
        assert wiki_host.web_base_url == f"{HOST}/wiki"


class TestSendRequest:
    @pytest.mark.asyncio
    async def test_sends_auth_headers_and_params(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"id": "42"})

        client = _client(handler)
        body = await client.send_request(
            TransportRequest("GET", "/pages/42", params={"body-format": "storage", "draft": False})
        )

        assert body == {"id": "42"}
        request = captured[0]
        assert request.url.host == "acme.atlassian.net"
        assert request.url.path == "/api/v2/pages/42"
        assert request.url.params["body-format"] == "storage"
        assert request.url.params["draft"] == "false"
        expected = base64.b64encode(b"bot@acme.com:secret-token").decode("ascii")
        assert request.headers["Authorization"] == f"Basic {expected}"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_sends_json_body(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"id": "7"})

        client = _client(handler)
        await client.send_request(TransportRequest("POST", "/pages", data={"title": "Runbook"}))

        assert captured[0].method == "POST"
        assert json.loads(captured[0].content) == {"title": "Runbook"}

    @pytest.mark.asyncio
    async def test_no_content_returns_empty_dict(self) -> None:
        client = _client(lambda r: httpx.Response(204))
        assert await client.send_request(TransportRequest("DELETE", "/pages/1")) == {}

    @pytest.mark.asyncio
    async def test_empty_body_returns_empty_dict(self) -> None:
        client = _client(lambda r: httpx.Response(200, content=b""))
        assert await client.send_request(TransportRequest("GET", "/pages")) == {}

    @pytest.mark.asyncio
    async def test_invalid_json_raises_parse_error(self) -> None:
        client = _client(lambda r: httpx.Response(200, content=b"<html>oops</html>"))
        with pytest.raises(ResponseParseError, match="Failed to parse response"):
            await client.send_request(TransportRequest("GET", "/pages"))

    @pytest.mark.asyncio
    async def test_unauthorized_maps_to_authentication_error(self) -> None:
        client = _client(
            lambda r: httpx.Response(401, json={"message": "Bad credentials"}),
            max_attempts=1,
        )
        with pytest.raises(AuthenticationError) as exc_info:
            await client.send_request(TransportRequest("GET", "/spaces"))

        assert exc_info.value.status_code == 401
        assert str(exc_info.value) == "Bad credentials"

    @pytest.mark.asyncio
    async def test_error_message_falls_back_to_status_line(self) -> None:
        client = _client(lambda r: httpx.Response(404, content=b"not json"), max_attempts=1)
        with pytest.raises(HttpStatusError) as exc_info:
            await client.send_request(TransportRequest("GET", "/pages/9"))

        assert exc_info.value.is_not_found
        assert str(exc_info.value) == "HTTP 404: Not Found"

    @pytest.mark.asyncio
    async def test_network_error_is_classified(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(handler, max_attempts=1)
        with pytest.raises(NetworkError):
            await client.send_request(TransportRequest("GET", "/spaces"))

    @pytest.mark.asyncio
    async def test_invalid_url_is_classified_as_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.InvalidURL("Invalid non-printable ASCII character in URL")

        client = _client(handler, max_attempts=1)
        with pytest.raises(NetworkError, match="Invalid non-printable") as exc_info:
            await client.send_request(TransportRequest("GET", "/spaces"))
        assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)

    @pytest.mark.asyncio
    async def test_attempt_timeout_raises_timeout_error(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.sleep(1)
            return httpx.Response(200, json={})

        client = _client(handler, max_attempts=1, timeout_seconds=0.01)
        with pytest.raises(TransportTimeoutError):
            await client.send_request(TransportRequest("GET", "/spaces"))


class TestRetry:
    @pytest.mark.asyncio
    async def test_retries_with_exponential_backoff_and_surfaces_last_error(self) -> None:
        calls = {"count": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["count"] += 1
            return httpx.Response(500, json={"message": f"boom {calls['count']}"})

        sleep = SleepRecorder()
        client = _client(handler, sleep=sleep, max_attempts=3, backoff_base_seconds=1.0)

        with pytest.raises(HttpStatusError, match="boom 3"):
            await client.send_request(TransportRequest("GET", "/pages"))

        assert calls["count"] == 3
        assert sleep.delays == [1.0, 2.0]

    @pytest.mark.asyncio
    async def test_succeeds_after_transient_failure(self) -> None:
        responses = iter([httpx.Response(503), httpx.Response(200, json={"ok": True})])
        sleep = SleepRecorder()
        client = _client(lambda r: next(responses), sleep=sleep, backoff_base_seconds=0.25)

        assert await client.send_request(TransportRequest("GET", "/pages")) == {"ok": True}
        assert sleep.delays == [0.25]

    @pytest.mark.asyncio
    async def test_default_policy_retries_client_errors(self) -> None:
        calls = {"count": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["count"] += 1
            return httpx.Response(400, json={"message": "bad"})

        client = _client(handler, max_attempts=2)
        with pytest.raises(HttpStatusError):
            await client.send_request(TransportRequest("GET", "/pages"))
        assert calls["count"] == 2

    @pytest.mark.asyncio
    async def test_transient_policy_does_not_retry_client_errors(self) -> None:
        calls = {"count": 0}

        def handler(request: httpx.Request) -> httpx.Response:
            calls["count"] += 1
            return httpx.Response(400, json={"message": "bad"})

        sleep = SleepRecorder()
        client = _client(handler, sleep=sleep, max_attempts=3, retry_predicate=retry_transient)
        with pytest.raises(HttpStatusError):
            await client.send_request(TransportRequest("GET", "/pages"))

        assert calls["count"] == 1
        assert sleep.delays == []

    def test_retry_transient_classification(self) -> None:
        assert retry_transient(NetworkError("x"), 1) is True
        assert retry_transient(TransportTimeoutError("x"), 1) is True
        assert retry_transient(HttpStatusError("x", 429), 1) is True
        assert retry_transient(HttpStatusError("x", 502), 1) is True
        assert retry_transient(HttpStatusError("x", 404), 1) is False
