from wp_scraper.crawler.category import CategoryScraper
from wp_scraper.crawler.fetcher import Fetcher, build_session

__all__ = ["CategoryScraper", "Fetcher", "build_session"]
