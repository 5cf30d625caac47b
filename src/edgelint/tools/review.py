"""コードレビューのMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP

from edgelint.services.review import ReviewService


def register_review_tools(mcp: FastMCP, review_service: ReviewService) -> None:
    """コードレビュー関連のMCPツールを登録する。"""

    @mcp.tool()
    async def analyze_worker_code(code: str, filename: str | None = None) -> str:
        """コードをCloudflare Workers互換性の観点で解析する。

        Node.js専用モジュール、同期ブロッキング呼び出し、タイマー、
        エラーハンドリング不足、必須エクスポート・ハンドラの欠落などを検出し、
        重大度別のレポートを返します。利用者がコードのレビューを求めたときに使用します。

        Args:
            code: 解析対象のコード。
            filename: ファイル名（任意）。
        """
        return review_service.review(code, filename)

    @mcp.tool()
    async def list_rules() -> dict[str, Any]:
        """検出ルールの一覧を取得する。

        analyze_worker_code が適用するルールのID、重大度、タイトル、説明を
        評価順に返します。
        """
        rules = review_service.describe_rules()
        return {"rules": rules, "count": len(rules)}
