"""コードレビュー（解析＋レポート生成）を行うサービス。"""

from typing import Any

from edgelint.reports.markdown import format_report
from edgelint.validators.worker import WorkerCodeAnalyzer


class ReviewService:
    """Workersコードの解析とレポート生成を束ねる。"""

    def __init__(self, analyzer: WorkerCodeAnalyzer | None = None) -> None:
        self._analyzer = analyzer or WorkerCodeAnalyzer()

    def review(self, code: str, filename: str | None = None) -> str:
        """コードを解析し、レポート文字列を返す。

        Args:
            code: 解析対象のソーステキスト。
            filename: ファイル名（任意）。

        Returns:
            レポート文字列。

        Raises:
            InvalidSourceError: codeが文字列でない場合。
        """
        findings = self._analyzer.analyze(code, filename)
        return format_report(findings)

    def describe_rules(self) -> list[dict[str, Any]]:
        """ルールカタログの内容を宣言順で返す。"""
        return [
            {
                "id": rule.id,
                "severity": rule.severity.value,
                "title": rule.title,
                "description": rule.description,
            }
            for rule in self._analyzer.rules
        ]
