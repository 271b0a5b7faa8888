"""Expand compact verse-of-the-day citations into fetchable references.

Bible Gateway reports the day's passage as a display citation that may name
several verses at once, e.g. ``"Rev 3:14,20"`` or ``"1 John 1:8-10, 2:1-2"``.
The passage page only renders contiguous selections reliably, so the citation
is expanded into one reference per contiguous piece:

- ``;`` separates independent passages;
- ``,`` separates verse pieces that share the book and the last seen chapter;
- a piece carrying its own ``chapter:verses`` switches the inherited chapter.
"""

from __future__ import annotations

import re

from daily_verse_bot.core.models import PassageRef

_SEGMENT_PATTERN = re.compile(r"^(.+?)\s+(\d+):(.*)$")
_CHAPTER_PIECE_PATTERN = re.compile(r"^(\d+)\s*:\s*([^:]*)$")


def _expand_segment(segment: str) -> list[PassageRef]:
    match = _SEGMENT_PATTERN.match(segment)
    if not match:
        return [PassageRef(book=segment)]

    book = match.group(1).strip()
    chapter = match.group(2).strip()
    rest = match.group(3).strip()

    pieces = [piece.strip() for piece in rest.split(",") if piece.strip()]
    if len(pieces) <= 1:
        return [PassageRef(book=book, chapter=chapter, verses=rest)]

    refs: list[PassageRef] = []
    for piece in pieces:
        if ":" not in piece:
            refs.append(PassageRef(book=book, chapter=chapter, verses=piece))
            continue
        chapter_match = _CHAPTER_PIECE_PATTERN.match(piece)
        if chapter_match is None:
            # nested colons: pass through raw, chapter unchanged
            refs.append(PassageRef(book=f"{book} {piece}"))
            continue
        chapter = chapter_match.group(1)
        refs.append(PassageRef(book=book, chapter=chapter, verses=chapter_match.group(2).strip()))
    return refs


def parse_passage_refs(citation: str) -> list[PassageRef]:
    """Return the ordered passage references named by ``citation``."""
    if not citation or not citation.strip():
        return []

    segments = [segment.strip() for segment in citation.split(";") if segment.strip()]
    refs: list[PassageRef] = []
    for segment in segments:
        refs.extend(_expand_segment(segment))

    return refs or [PassageRef(book=citation.strip())]


def parse_display_ref(citation: str) -> list[str]:
    """Return the ordered lookup strings for ``citation``.

    >>> parse_display_ref("Rev 3:14,20")
    ['Rev 3:14', 'Rev 3:20']
    """
    return [ref.label for ref in parse_passage_refs(citation)]


__all__ = ["parse_display_ref", "parse_passage_refs"]
