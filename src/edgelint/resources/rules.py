"""検出ルール・概念のMCPリソース定義。"""

import yaml
from fastmcp import FastMCP

from edgelint.services.concepts import ConceptService
from edgelint.services.review import ReviewService


def register_rule_resources(mcp: FastMCP, review_service: ReviewService, concept_service: ConceptService) -> None:
    """ルールカタログ・概念ナレッジベースのMCPリソースを登録する。"""

    @mcp.resource("edgelint://rules")
    async def rule_catalog() -> str:
        """検出ルールカタログを取得する。

        analyze_worker_code が評価順に適用するルールの一覧を返します。
        """
        data = {"rules": review_service.describe_rules()}
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)

    @mcp.resource("edgelint://concepts")
    async def workers_concepts() -> str:
        """Workers概念ナレッジベースを取得する。"""
        data = await concept_service.knowledge_base()
        return yaml.dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)
