"""Turn a Bible Gateway passage page into plain passage text."""

from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup, Tag

PASSAGE_SELECTORS = (".passage-text", ".passage-content")

# Page chrome, verse numbering and note markers that never belong in the text.
SKIP_SELECTORS = (
    "h1",
    "h2",
    "h3",
    "header",
    "footer",
    "nav",
    "script",
    "style",
    "noscript",
    "sup.versenum",
    "span.chapternum",
    "sup.footnote",
    "sup.crossreference",
    "div.footnotes",
    "div.crossrefs",
    "a.full-chap-link",
    ".passage-other-trans",
)

BLOCK_TAGS = ("p", "div", "li", "h4", "h5", "h6", "tr", "blockquote")

READ_FULL_CHAPTER_PHRASES = (
    "read full chapter",
    "читать всю главу",
    "читать главу полностью",
    "читати весь розділ",
    "leer el capítulo completo",
    "lire le chapitre entier",
    "lire le chapitre complet",
    "ganzes kapitel lesen",
    "ler o capítulo completo",
)
_READ_FULL_CHAPTER_PATTERN = re.compile(
    r"^(?:" + "|".join(re.escape(p) for p in READ_FULL_CHAPTER_PHRASES) + r")[.!]?$",
    re.IGNORECASE,
)
_HORIZONTAL_WHITESPACE = re.compile(r"[ \t\f\v\u00a0\u2009\u202f]+")
_SOURCE_INDENT = re.compile(r"^[ \t\f\v]+")
_RENDERED_INDENT = re.compile(r"^[\u00a0\u2002\u2003\u2009\u202f]+")


def _passage_roots(soup: BeautifulSoup) -> list[Tag]:
    for selector in PASSAGE_SELECTORS:
        roots = soup.select(selector)
        if roots:
            return roots
    return []


def _mark_block_boundaries(root: Tag) -> None:
    for br in root.find_all("br"):
        br.replace_with("\n")
    for block in root.find_all(BLOCK_TAGS):
        block.insert_before("\n")
        block.append("\n")


def is_read_full_chapter_line(line: str) -> bool:
    """Return True for "read full chapter" call-to-action lines in any known locale."""
    return bool(_READ_FULL_CHAPTER_PATTERN.match(line.strip()))


def _normalize_line(raw_line: str) -> str:
    # markup indentation is insignificant; non-breaking indentation is poetry layout
    line = _SOURCE_INDENT.sub("", raw_line.rstrip())
    indent = _RENDERED_INDENT.match(line)
    width = len(indent.group()) if indent else 0
    body = _HORIZONTAL_WHITESPACE.sub(" ", line[width:]).strip()
    return " " * width + body if body else ""


def normalize_passage_whitespace(text: str) -> str:
    """Trim trailing space per line, collapse blank-line runs to one and trim the block.

    Inside a line, whitespace runs collapse to one space. Leading indentation
    written with non-breaking spaces (how poetry is indented on the page)
    survives as plain spaces; ordinary markup indentation is dropped.
    """
    lines: list[str] = []
    for raw_line in text.splitlines():
        line = _normalize_line(raw_line)
        if not line and (not lines or not lines[-1]):
            continue
        lines.append(line)
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines)


def extract_passage_text(markup: str) -> str:
    """Extract the cleaned passage body from a passage page.

    Only the passage container is kept, so a page without one (a "no
    results" page, for instance) yields ``""``. Inside it, headings, verse
    numbers, footnote and cross-reference markers and "read full chapter"
    links are dropped. Entities left in the text are decoded before the
    whitespace is normalized.
    """
    if not markup:
        return ""
    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup.select(", ".join(SKIP_SELECTORS)):
        if not tag.decomposed:
            tag.decompose()

    blocks: list[str] = []
    for root in _passage_roots(soup):
        _mark_block_boundaries(root)
        blocks.append(root.get_text())

    text = html.unescape("\n".join(blocks))
    kept = [line for line in text.splitlines() if not is_read_full_chapter_line(line)]
    return normalize_passage_whitespace("\n".join(kept))


__all__ = [
    "extract_passage_text",
    "is_read_full_chapter_line",
    "normalize_passage_whitespace",
]
