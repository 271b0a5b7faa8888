"""Text utilities for splitting outbound messages safely."""

from __future__ import annotations

from typing import List


def chop_text(text: str, n: int) -> List[str]:
    """Split text into chunks no longer than n, preferring paragraph breaks.

    Paragraphs (blank-line separated) are packed greedily; a paragraph longer
    than ``n`` falls back to line breaks and finally to a hard split.
    """
    if len(text) <= n:
        return [text]

    chunks: List[str] = []
    current_chunk = ""
    for piece in _pieces(text, n):
        separator = "\n\n" if current_chunk else ""
        if len(current_chunk) + len(separator) + len(piece) <= n:
            current_chunk += separator + piece
            continue
        if current_chunk:
            chunks.append(current_chunk)
        current_chunk = piece

    if current_chunk:
        chunks.append(current_chunk)
    return chunks


def _pieces(text: str, n: int) -> List[str]:
    pieces: List[str] = []
    for paragraph in text.split("\n\n"):
        paragraph = paragraph.strip("\n")
        if not paragraph:
            continue
        if len(paragraph) <= n:
            pieces.append(paragraph)
            continue
        line_chunk = ""
        for line in paragraph.split("\n"):
            if len(line) > n:
                if line_chunk:
                    pieces.append(line_chunk)
                    line_chunk = ""
                pieces.extend(_hard_split(line, n))
                continue
            separator = "\n" if line_chunk else ""
            if len(line_chunk) + len(separator) + len(line) <= n:
                line_chunk += separator + line
            else:
                pieces.append(line_chunk)
                line_chunk = line
        if line_chunk:
            pieces.append(line_chunk)
    return pieces


def _hard_split(line: str, n: int) -> List[str]:
    """Cut an over-long line into n-sized chunks without orphaning a backslash escape."""
    parts: List[str] = []
    start = 0
    while start < len(line):
        end = min(start + n, len(line))
        if end < len(line) and end - start > 1 and _ends_with_escape(line[start:end]):
            end -= 1
        parts.append(line[start:end])
        start = end
    return parts


def _ends_with_escape(chunk: str) -> bool:
    trailing = len(chunk) - len(chunk.rstrip("\\"))
    return trailing % 2 == 1


__all__ = ["chop_text"]
