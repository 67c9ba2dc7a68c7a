# wp_scraper/models.py
"""
Data models produced by a scraping run.

All of them are frozen: articles and category results are created once by
the scrape task and only read afterwards.
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple


@dataclass(slots=True, frozen=True)
class PageData:
    """Downloaded page: final URL, raw body and the charset declared by the server."""

    url: str
    content: bytes
    encoding: Optional[str] = None


@dataclass(slots=True, frozen=True)
class Article:
    title: str
    url: str
    eyecatch: str
    content: Optional[str] = None


@dataclass(slots=True, frozen=True)
class CategoryResult:
    """Articles of one category, in document order."""

    category: str
    path: str
    articles: Tuple[Article, ...] = ()

    def truncated(self, limit: Optional[int]) -> CategoryResult:
        """Keep only the first *limit* articles; ``None`` or negative means all."""
        if limit is None or limit < 0 or len(self.articles) <= limit:
            return self
        return CategoryResult(self.category, self.path, self.articles[:limit])


@dataclass(slots=True, frozen=True)
class ScrapeOutcome:
    """Every category result of a run, in the order the tasks completed."""

    results: Tuple[CategoryResult, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[CategoryResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def total_articles(self) -> int:
        return sum(len(r.articles) for r in self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categories": [
                {
                    "category": r.category,
                    "path": r.path,
                    "articles": [
                        {k: v for k, v in asdict(a).items() if v is not None}
                        for a in r.articles
                    ],
                }
                for r in self.results
            ]
        }

    def json(self, *, pretty: bool = False) -> str:
        """JSON representation used by the CLI and the JSON report."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)
