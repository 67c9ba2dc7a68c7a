# File: tests/test_selector.py
import pytest
from bs4 import BeautifulSoup

from wp_scraper.config import FieldSelector
from wp_scraper.errors import ExtractionError
from wp_scraper.parser.selector import apply_capture, resolve, resolve_raw

HTML = """
<div class="entry">
  <p class="title">Foo</p>
  <span class="tag">a</span><span class="tag">b</span>
  <a class="link primary" href="abc123">x</a>
  <img alt="no src">
</div>
"""


@pytest.fixture()
def entry():
    return BeautifulSoup(HTML, "html.parser").select_one(".entry")


def test_text_target(entry):
    assert resolve(entry, FieldSelector(css=".title", target="text")) == "Foo"


def test_text_of_all_matches_is_concatenated(entry):
    assert resolve(entry, FieldSelector(css=".tag", target="text")) == "ab"


def test_text_no_match_is_empty(entry):
    assert resolve(entry, FieldSelector(css=".missing", target="text")) == ""


def test_attribute_target(entry):
    field = FieldSelector(css="a", target="attribute", additional_css="href")
    assert resolve(entry, field) == "abc123"


def test_missing_attribute_is_empty(entry):
    field = FieldSelector(css="img", target="attribute", additional_css="href")
    assert resolve(entry, field) == ""


def test_attribute_no_match_is_empty(entry):
    field = FieldSelector(css="video", target="attribute", additional_css="src")
    assert resolve(entry, field) == ""


def test_multi_valued_attribute(entry):
    field = FieldSelector(css="a", target="attribute", additional_css="class")
    assert resolve_raw(entry, field) == "link primary"


def test_capture_regex(entry):
    field = FieldSelector(css="a", target="attribute", additional_css="href", regex="abc(.+)")
    assert resolve(entry, field) == "123"


def test_capture_regex_on_plain_value():
    field = FieldSelector(css="a", target="text", regex="abc(.+)")
    assert apply_capture("abc123", field) == "123"


def test_capture_regex_no_match_raises(entry):
    field = FieldSelector(css=".title", target="text", regex=r"(\d+)")
    with pytest.raises(ExtractionError, match="title"):
        resolve(entry, field, "title")


def test_resolution_does_not_modify_document(entry):
    before = str(entry)
    resolve(entry, FieldSelector(css=".tag", target="text"))
    resolve(entry, FieldSelector(css="a", target="attribute", additional_css="href", regex="abc(.+)"))
    assert str(entry) == before
