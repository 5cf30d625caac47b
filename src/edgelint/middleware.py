"""トークン認証ミドルウェア。"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp


class TokenAuthMiddleware(BaseHTTPMiddleware):
    """tokenクエリパラメータまたはBearerトークンを検証するミドルウェア。

    EDGELINT_URL_TOKEN が設定されている場合、/mcp へのリクエストに
    ?token= または Authorization: Bearer のいずれかの一致を要求する。
    /health は検証をスキップする。
    """

    SKIP_PATHS = {"/health"}

    def __init__(self, app: ASGIApp, url_token: str = "") -> None:
        super().__init__(app)
        self.url_token = url_token

    @staticmethod
    def _extract_token(request: Request) -> str:
        authorization = request.headers.get("authorization", "")
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
        return request.query_params.get("token", "")

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.url_token or request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        if self._extract_token(request) != self.url_token:
            return JSONResponse(
                {"error": "Unauthorized", "message": "Invalid or missing token"},
                status_code=401,
            )

        return await call_next(request)
