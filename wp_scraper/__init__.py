# wp_scraper/__init__.py
"""
wp-scraper package initializer.
Defines package version; the CLI lives in :mod:`wp_scraper.cli`.
"""
__version__ = "0.1.0"
