# storage/models.py
import json
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Headings:
    h1: str = ""
    h2: str = ""


@dataclass
class ScrapedContent:
    """
    Result of scraping one URL. Either carries extracted text or, on failure,
    empty text fields and a populated ``error``.
    """
    url: str
    title: str = ""
    headings: Headings = field(default_factory=Headings)
    meta_description: str = ""
    content: str = ""
    error: Optional[str] = None
    cached_at: Optional[int] = None  # unix epoch millis, set when written to cache

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, url: str, error: str) -> "ScrapedContent":
        return cls(url=url, error=error)

    def to_dict(self) -> dict:
        """Wire form stored in the cache (camelCase keys)."""
        data = {
            "url": self.url,
            "title": self.title,
            "headings": {"h1": self.headings.h1, "h2": self.headings.h2},
            "metaDescription": self.meta_description,
            "content": self.content,
            "error": self.error,
        }
        if self.cached_at is not None:
            data["cachedAt"] = self.cached_at
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict) -> "ScrapedContent":
        headings = data.get("headings") or {}
        cached_at = data.get("cachedAt")
        if isinstance(cached_at, bool) or not isinstance(cached_at, (int, float)):
            cached_at = None
        return cls(
            url=data["url"],
            title=data["title"],
            headings=Headings(h1=headings.get("h1", ""), h2=headings.get("h2", "")),
            meta_description=data["metaDescription"],
            content=data["content"],
            error=data.get("error"),
            cached_at=int(cached_at) if cached_at is not None else None,
        )
