# wp_scraper/crawler/fetcher.py
"""
Fetcher module: downloads category and article pages over a shared session.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, ClientTimeout
from bs4 import BeautifulSoup

from wp_scraper.config import ScraperConfig
from wp_scraper.errors import FetchError
from wp_scraper.logger import logger
from wp_scraper.models import PageData


def build_session(config: ScraperConfig) -> ClientSession:
    """Session with the per-request timeout and User-Agent from *config*."""
    return ClientSession(
        timeout=ClientTimeout(total=config.timeout),
        headers={"User-Agent": config.user_agent},
        raise_for_status=False,
    )


def parse_page(page: PageData) -> BeautifulSoup:
    """Parse raw markup; without a header charset bs4 detects it, <meta> included."""
    return BeautifulSoup(page.content, "html.parser", from_encoding=page.encoding)


class Fetcher:
    """Handles HTTP GET of listing and article pages."""

    def __init__(self, session: ClientSession, config: ScraperConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its raw body with the charset from the headers, if any.

        Raises FetchError on transport errors, timeouts and non-2xx statuses.
        """
        logger.debug("GET %s", url)
        try:
            async with self.session.get(url) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(url, f"HTTP {resp.status}", status=resp.status)
                body = await resp.read()
                return PageData(str(resp.url), body, resp.charset)
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"timed out after {self.config.timeout} s") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

    async def fetch_document(self, url: str) -> BeautifulSoup:
        return parse_page(await self.fetch(url))
