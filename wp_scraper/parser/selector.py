# === FILE: wp_scraper/parser/selector.py ===
"""Selector resolution: turn a configured field into a string.

Given a parsed node (a whole document or one listing entry) and a
:class:`~wp_scraper.config.FieldSelector`:

* ``target: text`` → text of every node matching ``css``, concatenated
  (``""`` when nothing matches).
* ``target: attribute`` → the ``additional_css`` attribute of the first
  match (``""`` when nothing matches or the attribute is absent).
* ``regex`` → the resolved string is narrowed to the first capture group.
  A pattern that does not match raises
  :class:`~wp_scraper.errors.ExtractionError`.

Resolution only reads the tree; it never modifies it.
"""
from __future__ import annotations

from collections.abc import Sequence

from bs4.element import Tag

from wp_scraper.config import FieldSelector, Target
from wp_scraper.errors import ExtractionError

__all__: Sequence[str] = ("resolve", "resolve_raw", "apply_capture")


def resolve_raw(node: Tag, field: FieldSelector) -> str:
    """Text or attribute value for *field* before the capture regex."""
    if field.target is Target.TEXT:
        return "".join(match.get_text() for match in node.select(field.css))

    match = node.select_one(field.css)
    if match is None:
        return ""
    value = match.get(field.additional_css)
    if value is None:
        return ""
    # multi-valued attributes such as class come back as lists
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def apply_capture(value: str, field: FieldSelector, name: str = "") -> str:
    """Narrow *value* to the first capture group of ``field.regex``."""
    pattern = field.pattern
    if pattern is None:
        return value
    found = pattern.search(value)
    if found is None:
        raise ExtractionError(name or field.css, f"regex {field.regex!r} did not match {value!r}")
    return found.group(1) or ""


def resolve(node: Tag, field: FieldSelector, name: str = "") -> str:
    """Resolve *field* against *node*; *name* is only used in error messages."""
    return apply_capture(resolve_raw(node, field), field, name)
