"""TokenAuthMiddlewareのユニットテスト。"""

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from edgelint.middleware import TokenAuthMiddleware


async def _ok(request: Request) -> PlainTextResponse:
    return PlainTextResponse("ok")


def _make_client(url_token: str) -> TestClient:
    app = Starlette(
        routes=[Route("/mcp", _ok), Route("/health", _ok)],
        middleware=[Middleware(TokenAuthMiddleware, url_token=url_token)],
    )
    return TestClient(app)


class TestTokenAuthMiddleware:
    def test_no_token_configured_allows_all(self) -> None:
        client = _make_client("")
        assert client.get("/mcp").status_code == 200

    def test_missing_token_rejected(self) -> None:
        client = _make_client("secret")
        response = client.get("/mcp")
        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_query_token_accepted(self) -> None:
        client = _make_client("secret")
        assert client.get("/mcp", params={"token": "secret"}).status_code == 200

    def test_bearer_token_accepted(self) -> None:
        client = _make_client("secret")
        assert client.get("/mcp", headers={"Authorization": "Bearer secret"}).status_code == 200

    def test_wrong_token_rejected(self) -> None:
        client = _make_client("secret")
        assert client.get("/mcp", params={"token": "wrong"}).status_code == 401
        assert client.get("/mcp", headers={"Authorization": "Bearer wrong"}).status_code == 401

    def test_health_skips_auth(self) -> None:
        client = _make_client("secret")
        assert client.get("/health").status_code == 200
