"""検出結果のMarkdownレポート生成。"""

from collections.abc import Sequence

from edgelint.models.analysis import Finding, Severity

ALL_CLEAR_MESSAGE = (
    "✅ Code looks good! No major issues detected.\n"
    "\n"
    "This code appears to be Workers-compatible. Great job!\n"
    "\n"
    "Optional best practices:\n"
    "- Cache repeated upstream fetches with the Cache API.\n"
    "- Keep CPU-heavy work small; Workers have CPU time limits.\n"
    "- Use KV, R2, D1 or Durable Objects for anything that must persist.\n"
    "- Return explicit status codes and headers on error Responses."
)

_DESCRIPTION_INDENT = "   "


def format_report(findings: Sequence[Finding]) -> str:
    """検出結果を重大度ごとにグループ化してレポートを生成する。

    グループはCRITICAL, ERROR, WARNING, INFOの順に並び、該当のない
    グループは出力しない。グループ内は入力順のまま番号付けする。

    Args:
        findings: 解析結果。

    Returns:
        Markdown形式のレポート。検出なしの場合は固定の完了メッセージ。
    """
    if not findings:
        return ALL_CLEAR_MESSAGE

    lines: list[str] = []
    lines.append(f"Found {len(findings)} issue(s) that may affect Workers compatibility:")
    lines.append("")

    for severity in Severity:
        group = [f for f in findings if f.severity == severity]
        if not group:
            continue

        lines.append(f"## {severity.label} ({len(group)})")
        lines.append("")
        for number, finding in enumerate(group, start=1):
            lines.append(f"{number}. {finding.title}")
            lines.append(f"{_DESCRIPTION_INDENT}{finding.description}")
        lines.append("")

    return "\n".join(lines).rstrip("\n")
