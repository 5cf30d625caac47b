"""Workers概念ナレッジベースを扱うサービス。"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from edgelint.models.concept import ConceptEntry
from edgelint.models.errors import InvalidConceptError, KnowledgeBaseError

logger = logging.getLogger(__name__)

CONCEPTS_FILE = "workers-concepts.yaml"

# これより短いクエリは名前の一部としての一致を許可しない
MIN_PARTIAL_QUERY_LENGTH = 3


def _partial_match(query: str, name: str) -> bool:
    """クエリが名前の一部である、または名前がクエリ中の単語として現れるかを判定する。"""
    if len(query) >= MIN_PARTIAL_QUERY_LENGTH and query in name:
        return True
    return re.search(r"(?<!\w)" + re.escape(name) + r"(?!\w)", query) is not None


class ConceptService:
    """Cloudflare Workersの概念・制約の説明を提供する。"""

    def __init__(self, config_dir: Path) -> None:
        self._config_dir = config_dir
        self._concepts: list[ConceptEntry] | None = None

    def _load_concepts(self) -> list[ConceptEntry]:
        """概念定義をYAMLファイルから読み込む。"""
        if self._concepts is not None:
            return self._concepts

        concepts_file = self._config_dir / CONCEPTS_FILE
        try:
            with open(concepts_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise KnowledgeBaseError(f"Concept knowledge base not found: {concepts_file}") from None
        except yaml.YAMLError as e:
            raise KnowledgeBaseError(f"Malformed concept knowledge base {concepts_file}: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("concepts"), list):
            raise KnowledgeBaseError(f"No concepts defined in {concepts_file}")

        try:
            concepts = [ConceptEntry.model_validate(item) for item in data["concepts"]]
        except ValidationError as e:
            raise KnowledgeBaseError(f"Invalid concept definition in {concepts_file}: {e}") from e

        logger.debug("Loaded %d concepts from %s", len(concepts), concepts_file)
        self._concepts = concepts
        return concepts

    def _find(self, concept: str) -> ConceptEntry | None:
        query = concept.strip().lower()
        concepts = self._load_concepts()

        for entry in concepts:
            if query in entry.names():
                return entry

        # 部分一致は一致した名前が最も長いエントリを採用する（同長なら定義順）
        best: ConceptEntry | None = None
        best_length = 0
        for entry in concepts:
            for name in entry.names():
                if _partial_match(query, name) and len(name) > best_length:
                    best, best_length = entry, len(name)
        return best

    async def knowledge_base(self) -> dict[str, Any]:
        """検証済みのナレッジベース全体を返す。

        Raises:
            KnowledgeBaseError: ナレッジベースが読み込めない場合。
        """
        return {"concepts": [c.model_dump() for c in self._load_concepts()]}

    async def explain(self, concept: str) -> dict[str, Any]:
        """概念の説明を返す。

        ナレッジベースにない概念はLLM側で説明するよう依頼メッセージを返す。

        Args:
            concept: 概念名（例: "CPU time limits", "V8 isolates", "KV vs R2"）。

        Returns:
            見つかった場合はエントリ内容とfound=True、
            見つからない場合はfound=Falseと依頼メッセージ。

        Raises:
            InvalidConceptError: conceptが空の場合。
            KnowledgeBaseError: ナレッジベースが読み込めない場合。
        """
        if not concept or not concept.strip():
            raise InvalidConceptError(concept)

        logger.info("Explaining concept: %s", concept)
        entry = self._find(concept)
        if entry is None:
            return {
                "concept": concept,
                "found": False,
                "message": f"Requesting explanation for: {concept}",
            }
        return {"found": True, **entry.model_dump()}

    async def list_concepts(self) -> list[dict[str, str]]:
        """登録済みの概念ID・タイトルの一覧を返す。"""
        return [{"id": c.id, "title": c.title} for c in self._load_concepts()]
