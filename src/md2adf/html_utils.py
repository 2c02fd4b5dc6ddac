"""Reduce raw HTML embedded in markdown to plain text."""

from __future__ import annotations

import re

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for raw HTML handling (pip install beautifulsoup4)."
    ) from exc


def html_to_text(html: str) -> str:
    """Return the visible text of an HTML fragment with whitespace collapsed.

    Scripts, styles and comments contribute nothing. An empty string means the
    fragment has no visible text (a lone tag such as ``<br>``).
    """
    soup = BeautifulSoup(html, "lxml")
    for tag in soup.find_all(["script", "style", "noscript"]):
        tag.decompose()
    return normalize_text(soup.get_text(" ", strip=True))


def normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
