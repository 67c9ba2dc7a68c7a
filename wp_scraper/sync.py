# wp_scraper/sync.py
"""
Server sync: publishes a scrape outcome to the destination server.

Sequence of blocking POSTs under Basic auth:

1. ``{destination}/sites/{site_name}`` with an empty body (site creation);
2. ``{destination}/sites/{site_name}/articles/`` once per category.

The first failure stops the loop. Categories already posted stay posted,
and running the sync twice repeats every request.
"""
from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Optional

from aiohttp import BasicAuth, ClientError, ClientSession

from wp_scraper.config import ScraperConfig
from wp_scraper.crawler.fetcher import build_session
from wp_scraper.errors import SyncError
from wp_scraper.logger import logger
from wp_scraper.models import CategoryResult, ScrapeOutcome

__all__ = ("PLACEHOLDER_SOURCE", "ServerSync", "build_payload", "send_to_server")

PLACEHOLDER_SOURCE = "http://example.com"
_HEADERS = {"Content-Type": "application/json"}


def build_payload(category_id: int, result: CategoryResult) -> Dict[str, Any]:
    """JSON body for one category; article ids restart at 1."""
    return {
        "category": {"id": category_id, "name": result.category, "source": PLACEHOLDER_SOURCE},
        "articles": [
            {"id": article_id, "title": a.title, "link": a.url, "eyecatch": a.eyecatch}
            for article_id, a in enumerate(result.articles, start=1)
        ],
    }


class ServerSync:
    def __init__(self, config: ScraperConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self._session = session
        self._auth = BasicAuth(config.auth_username, config.auth_password)

    @property
    def site_url(self) -> str:
        return f"{self.config.destination}/sites/{self.config.site_name}"

    @property
    def articles_url(self) -> str:
        return f"{self.site_url}/articles/"

    async def send(self, outcome: ScrapeOutcome) -> str:
        """Create the site, post every category, return the articles endpoint URL."""
        if not self.config.destination or not self.config.site_name:
            raise SyncError(self.site_url, "destination and site_name must be configured")

        if self._session is not None:
            await self._send_all(self._session, outcome)
        else:
            async with build_session(self.config) as session:
                await self._send_all(session, outcome)
        return self.articles_url

    async def _send_all(self, session: ClientSession, outcome: ScrapeOutcome) -> None:
        await self._post(session, self.site_url, b"")
        for category_id, result in enumerate(outcome, start=1):
            body = json.dumps(build_payload(category_id, result), ensure_ascii=False)
            logger.info("Posting category %s (%d articles)", result.category, len(result.articles))
            await self._post(session, self.articles_url, body.encode("utf-8"))

    async def _post(self, session: ClientSession, url: str, body: bytes) -> None:
        logger.debug("POST %s (%d bytes)", url, len(body))
        try:
            async with session.post(url, data=body, headers=_HEADERS, auth=self._auth) as resp:
                await resp.read()
                if not 200 <= resp.status < 300:
                    raise SyncError(url, f"HTTP {resp.status}", status=resp.status)
        except asyncio.TimeoutError as exc:
            raise SyncError(url, f"timed out after {self.config.timeout} s") from exc
        except ClientError as exc:
            raise SyncError(url, str(exc) or type(exc).__name__) from exc


async def send_to_server(outcome: ScrapeOutcome, config: ScraperConfig) -> str:
    """Shortcut for ``ServerSync(config).send(outcome)``."""
    return await ServerSync(config).send(outcome)
