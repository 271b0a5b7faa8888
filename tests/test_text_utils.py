"""Tests for message chunking."""

from daily_verse_bot.utils.text_utils import chop_text

# pylint: disable=missing-function-docstring


def test_short_text_is_single_chunk() -> None:
    assert chop_text("hello", 10) == ["hello"]


def test_paragraphs_are_packed_greedily() -> None:
    text = "aaaa\n\nbbbb\n\ncccc"
    assert chop_text(text, 10) == ["aaaa\n\nbbbb", "cccc"]


def test_long_paragraph_splits_on_lines() -> None:
    text = "line one\nline two\nline three"
    chunks = chop_text(text, 18)
    assert chunks == ["line one\nline two", "line three"]


def test_long_line_is_hard_split() -> None:
    chunks = chop_text("x" * 25, 10)
    assert chunks == ["x" * 10, "x" * 10, "x" * 5]


def test_chunks_never_exceed_limit() -> None:
    text = "\n\n".join(["word " * 30, "short", "y" * 120, "tail line\nnext line"])
    for chunk in chop_text(text, 50):
        assert 0 < len(chunk) <= 50


def test_hard_split_keeps_escapes_whole() -> None:
    assert chop_text("ab\\_cd", 3) == ["ab", "\\_c", "d"]
