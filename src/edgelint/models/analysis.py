"""コード解析関連のデータモデル。"""

from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """検出結果の重大度。

    宣言順がそのまま緊急度の全順序（CRITICAL > ERROR > WARNING > INFO）となる。
    レポートのグループ順はこの順序に従う。
    """

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """緊急度の順位。0が最も緊急。"""
        return list(Severity).index(self)

    @property
    def label(self) -> str:
        """レポート表示用のラベル。"""
        return f"{_SEVERITY_ICONS[self]} {self.name}"


_SEVERITY_ICONS: dict[Severity, str] = {
    Severity.CRITICAL: "❌",
    Severity.ERROR: "🚫",
    Severity.WARNING: "⚠️",
    Severity.INFO: "ℹ️",
}


class Rule(BaseModel):
    """ソーステキストに対する検出ルール。

    triggerはテキストを受け取りTrueで検出とする純粋関数。
    """

    model_config = ConfigDict(frozen=True)

    id: str
    severity: Severity
    title: str
    description: str
    trigger: Callable[[str], bool] = Field(exclude=True, repr=False)

    def matches(self, code: str) -> bool:
        return self.trigger(code)


class Finding(BaseModel):
    """1つのルールが1つのテキストに一致した結果。"""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    severity: Severity
    title: str
    description: str
    # 行番号の帰属は未実装。テキスト単位の検出のため常にNone
    line: int | None = None

    @classmethod
    def from_rule(cls, rule: Rule) -> "Finding":
        return cls(
            rule_id=rule.id,
            severity=rule.severity,
            title=rule.title,
            description=rule.description,
        )
