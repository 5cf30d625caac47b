"""Workers概念ナレッジベースのデータモデル。"""

from pydantic import BaseModel, Field


class ConceptEntry(BaseModel):
    """Cloudflare Workersの概念・制約の説明エントリ（YAMLから読み込み）。"""

    id: str
    title: str
    aliases: list[str] = Field(default_factory=list)
    summary: str
    recommendations: list[str] = Field(default_factory=list)
    related_rules: list[str] = Field(default_factory=list)

    def names(self) -> list[str]:
        """照合に使用する名前（ID・タイトル・別名）を小文字で返す。"""
        return [name.lower() for name in (self.id, self.title, *self.aliases)]
