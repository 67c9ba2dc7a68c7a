# File: wp_scraper/engine.py
"""wp_scraper.engine: конкурентный запуск задач по категориям и сбор результатов."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import List, Optional

from wp_scraper.config import ScraperConfig
from wp_scraper.crawler.category import CategoryScraper
from wp_scraper.crawler.fetcher import Fetcher, build_session
from wp_scraper.errors import ScrapeError
from wp_scraper.logger import logger
from wp_scraper.models import CategoryResult, ScrapeOutcome

__all__ = ["Engine", "scrape"]


@dataclass(slots=True, frozen=True)
class _Message:
    """Сообщение от задачи категории: либо результат, либо ошибка."""

    category: str
    result: Optional[CategoryResult] = None
    error: Optional[BaseException] = None


class Engine:
    """Одна задача на категорию, один потребитель очереди, первая ошибка побеждает."""

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config

    async def scrape(self, limit: Optional[int] = None) -> ScrapeOutcome:
        """
        Scrape every configured category concurrently.

        Returns one CategoryResult per category in completion order, or raises
        ScrapeError for the first failing task after cancelling the rest.
        *limit* caps articles per category; ``None`` or negative is unbounded.
        """
        categories = self.config.categories
        if not categories:
            logger.info("No categories configured, nothing to scrape")
            return ScrapeOutcome()

        logger.info("Scraping %d categories from %s", len(categories), self.config.base_url)
        start = time.monotonic()
        results: List[CategoryResult] = []

        async with build_session(self.config) as session:
            scraper = CategoryScraper(Fetcher(session, self.config), self.config)
            queue: asyncio.Queue[_Message] = asyncio.Queue()
            tasks = [
                asyncio.create_task(self._run_category(scraper, path, name, queue), name=f"category:{path}")
                for path, name in categories.items()
            ]
            try:
                while len(results) < len(tasks):
                    message = await queue.get()
                    if message.result is not None:
                        results.append(message.result.truncated(limit))
                    else:
                        logger.error("Category %s failed: %s", message.category, message.error)
                        raise ScrapeError(message.category, message.error) from message.error
            finally:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)

        outcome = ScrapeOutcome(tuple(results))
        logger.info(
            "Done: %d categories, %d articles in %.2f s",
            len(outcome), outcome.total_articles, time.monotonic() - start,
        )
        return outcome

    async def _run_category(
        self,
        scraper: CategoryScraper,
        path: str,
        name: str,
        queue: asyncio.Queue[_Message],
    ) -> None:
        url = self.config.category_url(path)
        logger.info("Category %s: fetching %s", name, url)
        try:
            articles = await scraper.scrape_category(url)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            # forwarded to the consumer, which raises it as ScrapeError
            queue.put_nowait(_Message(name, error=exc))
            return
        logger.info("Category %s: %d articles", name, len(articles))
        queue.put_nowait(_Message(name, result=CategoryResult(name, path, tuple(articles))))


async def scrape(config: ScraperConfig, limit: Optional[int] = None) -> ScrapeOutcome:
    """Shortcut for ``Engine(config).scrape(limit)``."""
    return await Engine(config).scrape(limit)
