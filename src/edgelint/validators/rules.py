"""Cloudflare Workers非互換パターンの検出ルールカタログ。

各ルールは名前付きの述語関数でテキストを判定する。構文解析は行わず、
部分文字列・正規表現の有無のみで判定する。
"""

import re
from collections.abc import Callable

from edgelint.models.analysis import Rule, Severity

# Workersランタイムに存在しないNode.js組み込みモジュール
NODE_ONLY_MODULES: tuple[str, ...] = (
    "fs",
    "path",
    "crypto",
    "os",
    "process",
    "child_process",
    "cluster",
    "dns",
    "http",
    "https",
    "net",
    "tls",
    "stream",
    "buffer",
    "events",
    "url",
    "querystring",
    "zlib",
)

BLOCKING_CALLS: tuple[str, ...] = (
    "readFileSync",
    "writeFileSync",
    "appendFileSync",
    "existsSync",
    "readdirSync",
    "mkdirSync",
    "statSync",
    "unlinkSync",
    "execSync",
    "execFileSync",
    "spawnSync",
)

TIMER_CALLS: tuple[str, ...] = ("setTimeout", "setInterval")

_DEFAULT_EXPORT_MARKER = "export default"

_BLOCKING_CALL_RE = re.compile(r"\b(?:" + "|".join(BLOCKING_CALLS) + r")\b")
_TIMER_RE = re.compile(r"\b(?:" + "|".join(TIMER_CALLS) + r")\b")
_TOP_LEVEL_DECLARATION_RE = re.compile(r"^(?:let|var)\s+[A-Za-z_$]", re.MULTILINE)
_ASYNC_RE = re.compile(r"\basync\b")
_TRY_RE = re.compile(r"\btry\b")
_CATCH_RE = re.compile(r"\bcatch\b")
_FETCH_CALL_RE = re.compile(r"\bfetch\s*\(")
_SINGLE_PARAM = r"[A-Za-z_$][\w$]*(?:\s*:\s*[\w$.<>\[\]]+)?"
# fetch(request) { / async fetch(req: Request): Promise<Response> { のように引数が1つだけのメソッド定義
_SINGLE_ARG_METHOD_RE = re.compile(
    r"(?:\basync\s+)?\bfetch\s*\(\s*" + _SINGLE_PARAM + r"\s*\)\s*(?::\s*[^{;=]+?)?\s*\{"
)
# fetch: async (request) => / fetch: request => のアロー関数形式
_SINGLE_ARG_ARROW_RE = re.compile(
    r"\bfetch\s*:\s*(?:async\s*)?(?:\(\s*" + _SINGLE_PARAM + r"\s*\)|[A-Za-z_$][\w$]*)\s*(?::\s*[^=;]+?)?\s*=>"
)
_RETURN_RE = re.compile(r"\breturn\b")
_RESPONSE_RE = re.compile(r"\bnew\s+Response\s*\(|\bResponse\.(?:json|redirect|error)\s*\(")
_AWAIT_RE = re.compile(r"\bawait\b")


def _module_reference_pattern(module: str) -> re.Pattern[str]:
    # from 'x' / import 'x' / import('x') / require('x')、node: プレフィックスと引用符の種類は問わない
    return re.compile(r"(?:\bfrom|\bimport|\brequire)\s*\(?\s*(['\"])(?:node:)?" + re.escape(module) + r"\1")


def references_module(module: str) -> Callable[[str], bool]:
    """指定モジュールのimport/requireを検出する述語を返す。"""
    pattern = _module_reference_pattern(module)

    def _references(code: str) -> bool:
        return pattern.search(code) is not None

    _references.__name__ = f"references_{module}"
    return _references


def has_blocking_call(code: str) -> bool:
    return _BLOCKING_CALL_RE.search(code) is not None


def has_timer_call(code: str) -> bool:
    return _TIMER_RE.search(code) is not None


def has_default_export(code: str) -> bool:
    return _DEFAULT_EXPORT_MARKER in code


def has_module_level_state(code: str) -> bool:
    """トップレベルのlet/var宣言とdefault exportが共存するかを判定する。

    ハンドラ内外の宣言は区別しない（ヒューリスティック）。
    """
    return _TOP_LEVEL_DECLARATION_RE.search(code) is not None and has_default_export(code)


def lacks_error_handling(code: str) -> bool:
    return _ASYNC_RE.search(code) is not None and not _TRY_RE.search(code) and not _CATCH_RE.search(code)


def lacks_default_export(code: str) -> bool:
    return not has_default_export(code)


def lacks_fetch_handler(code: str) -> bool:
    return _FETCH_CALL_RE.search(code) is None


def lacks_context_params(code: str) -> bool:
    # await fetch(url); のようなネットワーク呼び出しは { や => が続かないため一致しない
    return _SINGLE_ARG_METHOD_RE.search(code) is not None or _SINGLE_ARG_ARROW_RE.search(code) is not None


def lacks_response_object(code: str) -> bool:
    return _RETURN_RE.search(code) is not None and _RESPONSE_RE.search(code) is None


def lacks_wait_until(code: str) -> bool:
    # awaitの有無のみで判定する。ネットワーク呼び出しの形は見ない
    return _AWAIT_RE.search(code) is not None and "waitUntil" not in code


def _node_module_rules() -> list[Rule]:
    return [
        Rule(
            id=f"node-module-{module}",
            severity=Severity.CRITICAL,
            title=f"Node.js '{module}' module detected",
            description=(
                f"The '{module}' module is not available in the Workers runtime. "
                "Use Web standard APIs, or KV/R2/D1 bindings for storage."
            ),
            trigger=references_module(module),
        )
        for module in NODE_ONLY_MODULES
    ]


def build_default_rules() -> tuple[Rule, ...]:
    """既定のルールカタログを宣言順で構築する。"""
    return (
        *_node_module_rules(),
        Rule(
            id="blocking-sync-call",
            severity=Severity.CRITICAL,
            title="Synchronous blocking operation detected",
            description=(
                "Synchronous file and process calls block the isolate and do not exist in Workers. "
                "Use async operations, or KV/R2 for storage."
            ),
            trigger=has_blocking_call,
        ),
        Rule(
            id="timer-usage",
            severity=Severity.WARNING,
            title="setTimeout/setInterval detected",
            description=(
                "Timers do not outlive the request. "
                "Consider Durable Objects Alarms or Cron Triggers for delayed or repeating work."
            ),
            trigger=has_timer_call,
        ),
        Rule(
            id="module-level-state",
            severity=Severity.WARNING,
            title="Mutable state declared outside the handler",
            description=(
                "Module-level let/var is shared across requests served by the same isolate "
                "and is lost when the isolate is evicted. Keep per-request state inside the handler, "
                "and persistent state in KV or Durable Objects."
            ),
            trigger=has_module_level_state,
        ),
        Rule(
            id="missing-error-handling",
            severity=Severity.WARNING,
            title="Async operations without try-catch",
            description=(
                "An unhandled rejection surfaces as an opaque 500 error. "
                "Wrap awaited work in try/catch and return an explicit error Response."
            ),
            trigger=lacks_error_handling,
        ),
        Rule(
            id="missing-default-export",
            severity=Severity.ERROR,
            title="Missing 'export default'",
            description="Workers need a default export object that exposes the handlers.",
            trigger=lacks_default_export,
        ),
        Rule(
            id="missing-fetch-handler",
            severity=Severity.ERROR,
            title="No fetch handler detected",
            description="Workers need a fetch(request, env, ctx) handler to serve HTTP requests.",
            trigger=lacks_fetch_handler,
        ),
        Rule(
            id="missing-context-params",
            severity=Severity.INFO,
            title="fetch handler only takes the request",
            description=(
                "Declare fetch(request, env, ctx) to reach bindings through env "
                "and ctx.waitUntil for work that continues after the response."
            ),
            trigger=lacks_context_params,
        ),
        Rule(
            id="missing-response-object",
            severity=Severity.INFO,
            title="No Response object constructed",
            description="Handlers must return a Response. Use new Response(...) or Response.json(...).",
            trigger=lacks_response_object,
        ),
        Rule(
            id="missing-wait-until",
            severity=Severity.INFO,
            title="Awaited work without ctx.waitUntil",
            description=(
                "Logging, analytics and cache writes that do not affect the response "
                "can be deferred with ctx.waitUntil() to return sooner."
            ),
            trigger=lacks_wait_until,
        ),
    )


DEFAULT_RULES: tuple[Rule, ...] = build_default_rules()
