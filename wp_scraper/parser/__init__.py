from wp_scraper.parser.selector import apply_capture, resolve, resolve_raw

__all__ = ["apply_capture", "resolve", "resolve_raw"]
