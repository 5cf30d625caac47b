"""EdgeLintのカスタム例外クラス。"""


class EdgeLintError(Exception):
    """EdgeLintの基底例外クラス。"""


class InvalidSourceError(EdgeLintError, TypeError):
    """解析対象のソースがテキストでない場合の例外。"""

    def __init__(self, value: object) -> None:
        super().__init__(f"Source code must be a string, got {type(value).__name__}")
        self.value_type = type(value).__name__


class InvalidConceptError(EdgeLintError):
    """説明対象の概念名が空の場合の例外。"""

    def __init__(self, concept: str) -> None:
        super().__init__(f"Concept must be a non-empty string: {concept!r}")
        self.concept = concept


class KnowledgeBaseError(EdgeLintError):
    """Workers概念ナレッジベースの読み込みエラー。"""
