"""Workersコードの解析ロジック。"""

import logging
from collections.abc import Sequence

from edgelint.models.analysis import Finding, Rule
from edgelint.models.errors import InvalidSourceError
from edgelint.validators.rules import DEFAULT_RULES

logger = logging.getLogger(__name__)


class WorkerCodeAnalyzer:
    """ルールカタログに基づくWorkersコードの検証を行う。

    ルールカタログは構築後に変更されないため、同一インスタンスを
    並行するリクエスト間で共有してよい。
    """

    def __init__(self, rules: Sequence[Rule] = DEFAULT_RULES) -> None:
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def analyze(self, code: str, filename: str | None = None) -> list[Finding]:
        """ソーステキストに全ルールを適用する。

        Args:
            code: 解析対象のソーステキスト。空文字列も可。
            filename: ログ出力用のファイル名（任意）。

        Returns:
            検出結果のリスト。カタログの宣言順。問題がない場合は空リスト。

        Raises:
            InvalidSourceError: codeが文字列でない場合。
        """
        if not isinstance(code, str):
            raise InvalidSourceError(code)

        if filename:
            logger.info("Analyzing code from %s (%d chars)", filename, len(code))
        else:
            logger.info("Analyzing code (%d chars)", len(code))

        findings = [Finding.from_rule(rule) for rule in self._rules if rule.matches(code)]

        logger.debug("Rules matched: %s", [f.rule_id for f in findings])
        return findings


_default_analyzer = WorkerCodeAnalyzer()


def analyze(code: str, filename: str | None = None) -> list[Finding]:
    """既定のルールカタログでソーステキストを解析する。"""
    return _default_analyzer.analyze(code, filename)
