# File: tests/helpers.py
"""Shared fixtures data and a tiny aiohttp test server runner."""
from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any, Dict

from aiohttp import web

LISTING_HTML = """
<html><body>
  <div class="item">
    <h2 class="t">First <b>post</b></h2>
    <a href="https://x.test/articles/1">read</a>
    <img src="/img/1.png">
  </div>
  <div class="item">
    <h2 class="t">Second post</h2>
    <a href="https://x.test/articles/2">read</a>
    <img src="/img/2.png">
  </div>
  <div class="sidebar"><h2 class="t">Not an article</h2></div>
</body></html>
"""


def make_config_data(base_url: str = "https://x.test", **overrides: Any) -> Dict[str, Any]:
    """Raw config mapping as it would appear in a YAML file."""
    data: Dict[str, Any] = {
        "destination": "https://dest.test/",
        "site_name": "example",
        "auth_username": "joe",
        "auth_password": "secret",
        "base_url": base_url,
        "categories": {"cat1": "Cat One"},
        "article_selector": ".item",
        "classes": {
            "title": {"css": ".t", "target": "text"},
            "url": {"css": "a", "target": "attribute", "additional_css": "href"},
            "eyecatch": {"css": "img", "target": "attribute", "additional_css": "src"},
        },
        "timeout": 5.0,
    }
    data.update(overrides)
    return data


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()


def html_response(text: str) -> web.Response:
    return web.Response(text=text, content_type="text/html")


def static_page(text: str):
    """Handler that always answers with *text* as HTML."""

    async def handler(_request: web.Request) -> web.Response:
        return html_response(text)

    return handler
