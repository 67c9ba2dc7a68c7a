# wp_scraper/errors.py
"""
Exception hierarchy shared by every stage of a scraping run.

Each stage raises its own class so the CLI can report the first failure
with a meaningful message; nothing here is retried or swallowed.
"""
from __future__ import annotations

from typing import Optional

__all__ = (
    "ScraperError",
    "ConfigError",
    "FetchError",
    "ExtractionError",
    "ScrapeError",
    "SyncError",
)


class ScraperError(Exception):
    """Base class for all wp-scraper errors."""


class ConfigError(ScraperError, ValueError):
    """Config file is missing, unreadable or does not match the schema."""


class FetchError(ScraperError):
    """A page could not be downloaded."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        self.url = url
        self.status = status
        super().__init__(f"failed to fetch {url}: {reason}")


class ExtractionError(ScraperError):
    """A configured field could not be extracted from a listing entry."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"field '{field}': {message}")


class ScrapeError(ScraperError):
    """First category task failure, as surfaced by the engine."""

    def __init__(self, category: str, cause: BaseException) -> None:
        self.category = category
        super().__init__(f"category '{category}': {cause}")


class SyncError(ScraperError):
    """Publishing scraped data to the destination server failed."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        self.url = url
        self.status = status
        super().__init__(f"POST {url} failed: {reason}")
