# File: tests/test_models.py
import json

from wp_scraper.models import Article, CategoryResult, ScrapeOutcome
from wp_scraper.report.json_report import render_json

ARTICLES = tuple(Article(f"T{i}", f"https://x.test/{i}", f"{i}.png") for i in range(3))


def test_truncated_keeps_document_order():
    result = CategoryResult("Cat", "cat", ARTICLES)
    assert result.truncated(2).articles == ARTICLES[:2]
    assert result.truncated(None) is result
    assert result.truncated(-1) is result
    assert result.truncated(10) is result
    assert result.truncated(0).articles == ()


def test_outcome_json_skips_missing_content():
    outcome = ScrapeOutcome(
        (
            CategoryResult("Cat", "cat", (ARTICLES[0],)),
            CategoryResult("Deep", "deep", (Article("D", "/d", "", content="body"),)),
        )
    )
    data = json.loads(outcome.json())
    assert data["categories"][0]["articles"][0] == {"title": "T0", "url": "https://x.test/0", "eyecatch": "0.png"}
    assert data["categories"][1]["articles"][0]["content"] == "body"
    assert outcome.total_articles == 2


def test_render_json_creates_parents(tmp_path):
    outcome = ScrapeOutcome((CategoryResult("Кошки", "cats", ARTICLES),))
    path = render_json(outcome, tmp_path / "reports" / "out.json")
    text = path.read_text(encoding="utf-8")
    assert "Кошки" in text
    assert json.loads(text) == outcome.to_dict()
