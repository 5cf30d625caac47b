"""Workers概念説明のMCPツール定義。"""

from typing import Any

from fastmcp import FastMCP

from edgelint.models.errors import EdgeLintError
from edgelint.services.concepts import ConceptService


def register_concept_tools(mcp: FastMCP, concept_service: ConceptService) -> None:
    """概念説明関連のMCPツールを登録する。"""

    @mcp.tool()
    async def explain_workers_concept(concept: str) -> dict[str, Any]:
        """Cloudflare Workersの概念・制約・ベストプラクティスを説明する。

        ナレッジベースに登録済みの概念は要約と推奨事項、関連ルールを返します。
        未登録の概念は found=false を返すので、その場合は自身の知識で説明してください。

        Args:
            concept: 説明する概念（例: "CPU time limits", "V8 isolates", "KV vs R2"）。
        """
        try:
            return await concept_service.explain(concept)
        except EdgeLintError as e:
            return {"error": type(e).__name__, "message": str(e)}

    @mcp.tool()
    async def list_workers_concepts() -> dict[str, Any]:
        """ナレッジベースに登録済みの概念一覧を取得する。"""
        try:
            concepts = await concept_service.list_concepts()
            return {"concepts": concepts}
        except EdgeLintError as e:
            return {"error": type(e).__name__, "message": str(e)}
