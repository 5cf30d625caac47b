"""解析モデルのユニットテスト。"""

import pytest
from pydantic import ValidationError

from edgelint.models.analysis import Finding, Rule, Severity


def _always(code: str) -> bool:
    return True


class TestSeverity:
    def test_declaration_order_is_urgency_order(self) -> None:
        assert list(Severity) == [Severity.CRITICAL, Severity.ERROR, Severity.WARNING, Severity.INFO]

    def test_rank(self) -> None:
        assert Severity.CRITICAL.rank == 0
        assert Severity.INFO.rank == 3
        assert sorted([Severity.INFO, Severity.CRITICAL, Severity.WARNING], key=lambda s: s.rank) == [
            Severity.CRITICAL,
            Severity.WARNING,
            Severity.INFO,
        ]

    def test_label(self) -> None:
        assert Severity.CRITICAL.label == "❌ CRITICAL"
        assert Severity.WARNING.label.endswith("WARNING")

    def test_value_is_lowercase_string(self) -> None:
        assert Severity("error") is Severity.ERROR
        assert Severity.ERROR == "error"


class TestRule:
    def test_matches_uses_trigger(self) -> None:
        rule = Rule(id="r1", severity=Severity.INFO, title="t", description="d", trigger=lambda c: "x" in c)
        assert rule.matches("xyz")
        assert not rule.matches("abc")

    def test_rule_is_frozen(self) -> None:
        rule = Rule(id="r1", severity=Severity.INFO, title="t", description="d", trigger=_always)
        with pytest.raises(ValidationError):
            rule.title = "changed"  # type: ignore[misc]

    def test_trigger_excluded_from_dump(self) -> None:
        rule = Rule(id="r1", severity=Severity.INFO, title="t", description="d", trigger=_always)
        assert "trigger" not in rule.model_dump()

    def test_trigger_must_be_callable(self) -> None:
        with pytest.raises(ValidationError):
            Rule(id="r1", severity=Severity.INFO, title="t", description="d", trigger="not callable")  # type: ignore[arg-type]


class TestFinding:
    def test_from_rule_copies_metadata(self) -> None:
        rule = Rule(id="r1", severity=Severity.ERROR, title="Title", description="Desc", trigger=_always)
        finding = Finding.from_rule(rule)
        assert finding.rule_id == "r1"
        assert finding.severity is Severity.ERROR
        assert finding.title == "Title"
        assert finding.description == "Desc"

    def test_line_is_reserved_and_unset(self) -> None:
        rule = Rule(id="r1", severity=Severity.ERROR, title="Title", description="Desc", trigger=_always)
        assert Finding.from_rule(rule).line is None

    def test_findings_compare_by_value(self) -> None:
        a = Finding(rule_id="r1", severity=Severity.INFO, title="t", description="d")
        b = Finding(rule_id="r1", severity=Severity.INFO, title="t", description="d")
        assert a == b
