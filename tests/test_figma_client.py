"""Figma REST 客户端测试（httpx.MockTransport，不访问网络）"""
import httpx
import pytest

from tools.figma_client import fetch_layout, resolve_token
from utils.errors import MissingCredential, ServiceError


def make_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestResolveToken:
    def test_explicit_token_wins(self, monkeypatch):
        monkeypatch.setenv("FIGMA_TOKEN", "env-token")
        assert resolve_token("given") == "given"

    def test_env_token(self, monkeypatch):
        monkeypatch.setenv("FIGMA_TOKEN", "env-token")
        assert resolve_token() == "env-token"

    def test_missing_token(self, monkeypatch):
        monkeypatch.delenv("FIGMA_TOKEN", raising=False)
        with pytest.raises(MissingCredential) as exc_info:
            resolve_token()
        assert exc_info.value.setting == "FIGMA_TOKEN"


class TestFetchLayout:
    @pytest.mark.asyncio
    async def test_node_request(self, nodes_response):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=nodes_response)

        async with make_client(handler) as client:
            data = await fetch_layout("AbC123", "1:2", token="tok", http_client=client)

        assert data == nodes_response
        request = seen[0]
        assert request.url.path == "/v1/files/AbC123/nodes"
        assert request.url.params["ids"] == "1-2"
        assert request.headers["X-Figma-Token"] == "tok"

    @pytest.mark.asyncio
    async def test_whole_file_request(self, file_response):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=file_response)

        async with make_client(handler) as client:
            data = await fetch_layout("AbC123", token="tok", http_client=client)

        assert data["name"] == "Landing Page"
        assert seen[0].url.path == "/v1/files/AbC123"
        assert "ids" not in seen[0].url.params

    @pytest.mark.asyncio
    async def test_missing_token_makes_no_request(self, monkeypatch):
        monkeypatch.delenv("FIGMA_TOKEN", raising=False)
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        async with make_client(handler) as client:
            with pytest.raises(MissingCredential):
                await fetch_layout("AbC123", "1:2", http_client=client)
        assert calls == []

    @pytest.mark.asyncio
    async def test_error_status_carries_upstream_message(self):
        def handler(request):
            return httpx.Response(403, json={"status": 403, "err": "Invalid token"})

        async with make_client(handler) as client:
            with pytest.raises(ServiceError) as exc_info:
                await fetch_layout("AbC123", token="bad", http_client=client)

        error = exc_info.value
        assert error.service == "Figma"
        assert error.status == 403
        assert error.upstream_message == "Invalid token"
        assert "403" in str(error)

    @pytest.mark.asyncio
    async def test_error_status_without_body_uses_reason(self):
        def handler(request):
            return httpx.Response(404, content=b"")

        async with make_client(handler) as client:
            with pytest.raises(ServiceError) as exc_info:
                await fetch_layout("AbC123", token="tok", http_client=client)
        assert exc_info.value.status == 404
        assert exc_info.value.upstream_message == "Not Found"

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(ServiceError) as exc_info:
                await fetch_layout("AbC123", token="tok", http_client=client)
        assert exc_info.value.status is None
        assert "ConnectError" in exc_info.value.upstream_message

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>oops</html>")

        async with make_client(handler) as client:
            with pytest.raises(ServiceError):
                await fetch_layout("AbC123", token="tok", http_client=client)
