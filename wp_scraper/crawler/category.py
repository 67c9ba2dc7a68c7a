# wp_scraper/crawler/category.py
"""
Category scrape task: one listing page -> ordered list of articles.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urljoin

from bs4.element import Tag

from wp_scraper.config import ScraperConfig
from wp_scraper.crawler.fetcher import Fetcher, parse_page
from wp_scraper.errors import ExtractionError
from wp_scraper.logger import logger
from wp_scraper.models import Article
from wp_scraper.parser.selector import resolve


class CategoryScraper:
    """Applies the configured selectors to every entry of a category page."""

    def __init__(self, fetcher: Fetcher, config: ScraperConfig) -> None:
        self.fetcher = fetcher
        self.config = config

    async def scrape_category(self, url: str) -> List[Article]:
        """
        Fetch the listing at *url* and build one Article per entry, in document order.

        FetchError and ExtractionError propagate; no partial list is returned.
        """
        page = await self.fetcher.fetch(url)
        soup = parse_page(page)
        entries = soup.select(self.config.article_selector)
        logger.debug("%s: %d entries match %r", url, len(entries), self.config.article_selector)

        articles: List[Article] = []
        for entry in entries:
            articles.append(await self._build_article(entry, page.url))
        return articles

    async def _build_article(self, entry: Tag, page_url: str) -> Article:
        classes = self.config.classes
        title = resolve(entry, classes.title, "title")
        link = resolve(entry, classes.url, "url")
        eyecatch = resolve(entry, classes.eyecatch, "eyecatch")

        content = None
        if classes.content is not None:
            if not link:
                raise ExtractionError("url", f"empty article URL on {page_url}, cannot fetch content")
            # one extra request per entry, strictly sequential
            document = await self.fetcher.fetch_document(urljoin(page_url, link))
            content = resolve(document, classes.content, "content")

        return Article(title=title, url=link, eyecatch=eyecatch, content=content)
