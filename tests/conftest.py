"""テスト共通フィクスチャ。"""

from pathlib import Path

import pytest

from edgelint.config import ServerConfig
from edgelint.services.concepts import ConceptService
from edgelint.services.review import ReviewService
from edgelint.validators.worker import WorkerCodeAnalyzer

VALID_WORKER = """\
export default {
  async fetch(request, env, ctx) {
    try {
      const cached = await env.CACHE.get(new URL(request.url).pathname);
      ctx.waitUntil(env.ANALYTICS.writeDataPoint({ blobs: [request.url] }));
      return new Response(cached ?? "miss");
    } catch (err) {
      return new Response("Internal Error", { status: 500 });
    }
  },
};
"""


@pytest.fixture
def config_dir() -> Path:
    """設定ファイルディレクトリ。"""
    return Path(__file__).parent.parent / "config"


@pytest.fixture
def valid_worker() -> str:
    """問題のないWorkerコード。"""
    return VALID_WORKER


@pytest.fixture
def analyzer() -> WorkerCodeAnalyzer:
    """既定ルールのWorkerCodeAnalyzer。"""
    return WorkerCodeAnalyzer()


@pytest.fixture
def review_service(analyzer: WorkerCodeAnalyzer) -> ReviewService:
    """テスト用ReviewService。"""
    return ReviewService(analyzer=analyzer)


@pytest.fixture
def concept_service(config_dir: Path) -> ConceptService:
    """テスト用ConceptService。"""
    return ConceptService(config_dir=config_dir)


@pytest.fixture
def server_config(config_dir: Path) -> ServerConfig:
    """テスト用ServerConfig。"""
    return ServerConfig(config_dir=config_dir)
