"""Unit tests for passage page cleanup."""

from __future__ import annotations

from daily_verse_bot.services.passage_cleaning import (
    extract_passage_text,
    is_read_full_chapter_line,
    normalize_passage_whitespace,
)

# pylint: disable=missing-function-docstring

PASSAGE_PAGE = """
<html>
<head><title>Rev 3:14 NIV</title><style>.x { color: red; }</style>
<script>var tracking = "noise";</script></head>
<body>
<header>Bible Gateway</header>
<nav><a href="/">Home</a></nav>
<div class="passage-text">
  <div class="passage-content">
    <h1 class="passage-display">Revelation 3:14</h1>
    <h3><span class="text Rev-3-14">To the Church in Laodicea</span></h3>
    <p class="verse"><span class="text Rev-3-14"><span class="chapternum">3&nbsp;</span><sup class="versenum">14&nbsp;</sup>“To the angel of the church in Laodicea write:<sup class="footnote">[<a href="#f1">a</a>]</sup>
    These are the words of the Amen,<sup class="crossreference">(<a href="#cr">B</a>)</sup> the faithful and true witness.   </span></p>
    <div class="footnotes"><h4>Footnotes</h4><ol><li>Revelation 3:14 Or ruler</li></ol></div>
    <div class="crossrefs"><h4>Cross references</h4><ol><li>2 Cor 1:20</li></ol></div>
    <a class="full-chap-link" href="/passage/?search=Rev+3">Read full chapter</a>
  </div>
</div>
<footer>Copyright</footer>
</body>
</html>
"""


def test_extracts_only_the_passage_body() -> None:
    text = extract_passage_text(PASSAGE_PAGE)
    assert text == (
        "“To the angel of the church in Laodicea write:\n"
        "These are the words of the Amen, the faithful and true witness."
    )


def test_drops_localized_read_full_chapter_lines() -> None:
    page = (
        '<div class="passage-text"><p>Ибо так возлюбил Бог мир</p>'
        "<p>Читать всю главу</p></div>"
    )
    assert extract_passage_text(page) == "Ибо так возлюбил Бог мир"


def test_decodes_leftover_entities() -> None:
    page = '<div class="passage-text"><p>Grace &amp;amp; peace &amp;#8212; amen</p></div>'
    assert extract_passage_text(page) == "Grace & peace — amen"


def test_page_without_passage_container_yields_nothing() -> None:
    page = (
        "<html><body><div class='nav-menu'>Log In Sign Up Bible Gateway Plus</div>"
        "<div class='search'>Search the Bible</div>"
        "<p>No results found for Rev 99:1</p>"
        "<div class='ad'>Try Bible Gateway Plus free</div></body></html>"
    )
    assert extract_passage_text(page) == ""


def test_empty_markup_yields_empty_text() -> None:
    assert extract_passage_text("") == ""


def test_normalize_collapses_blank_runs_and_trims() -> None:
    raw = "\n\n  first line   \n\n\n\nsecond\t\tline \n\n\n"
    assert normalize_passage_whitespace(raw) == "first line\n\nsecond line"


def test_read_full_chapter_matcher() -> None:
    assert is_read_full_chapter_line("  Read full chapter ")
    assert is_read_full_chapter_line("ЧИТАТЬ ВСЮ ГЛАВУ")
    assert not is_read_full_chapter_line("Read the full chapter of John before bed")


def test_normalize_keeps_poetry_indentation() -> None:
    raw = "The Lord is my shepherd,  \n\u00a0\u00a0\u00a0\u00a0I lack nothing.\n    markup indent"
    assert normalize_passage_whitespace(raw) == (
        "The Lord is my shepherd,\n    I lack nothing.\nmarkup indent"
    )


def test_extract_keeps_indented_poetry_lines() -> None:
    page = (
        '<div class="passage-text"><p class="line">'
        '<span class="text Ps-23-1"><sup class="versenum">1&nbsp;</sup>The Lord is my shepherd,</span><br>'
        '<span class="indent-1"><span class="indent-1-breaks">&nbsp;&nbsp;&nbsp;&nbsp;</span></span>'
        '<span class="text Ps-23-1">I lack nothing.</span></p></div>'
    )
    assert extract_passage_text(page) == "The Lord is my shepherd,\n    I lack nothing."
