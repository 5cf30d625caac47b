"""FastMCPベースのMCPサーバーエントリポイント。"""

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from edgelint.config import ServerConfig
from edgelint.prompts.review import register_review_prompts
from edgelint.resources.rules import register_rule_resources
from edgelint.services.concepts import ConceptService
from edgelint.services.review import ReviewService
from edgelint.tools.concepts import register_concept_tools
from edgelint.tools.review import register_review_tools
from edgelint.validators.worker import WorkerCodeAnalyzer


def create_server(config: ServerConfig | None = None) -> FastMCP:
    """EdgeLint MCPサーバーを作成し、ツール・リソース・プロンプトを登録する。

    Args:
        config: サーバー設定。Noneの場合はデフォルト設定を使用。

    Returns:
        設定済みのFastMCPインスタンス。
    """
    if config is None:
        config = ServerConfig()

    mcp = FastMCP("edgelint")

    # サービス層
    review_service = ReviewService(analyzer=WorkerCodeAnalyzer())
    concept_service = ConceptService(config_dir=config.config_dir)

    # MCPインターフェース登録 — ツール
    register_review_tools(mcp, review_service)
    register_concept_tools(mcp, concept_service)

    # MCPインターフェース登録 — リソース
    register_rule_resources(mcp, review_service, concept_service)

    # MCPインターフェース登録 — プロンプト
    register_review_prompts(mcp)

    # ヘルスチェックエンドポイント
    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return mcp
