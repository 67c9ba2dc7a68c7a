# wp_scraper/report/__init__.py
from .json_report import render_json

__all__ = ["render_json"]
