"""Assemble the daily verse message in Telegram's legacy Markdown."""

from __future__ import annotations

import re
from datetime import date

TITLE = "📖 *Verse of the Day*"
EXPLANATION_LABEL = "💡 *Explanation*"
SECTION_SEPARATOR = "\n\n"

_MARKDOWN_SPECIAL = re.compile(r"([_*`\[])")


def escape_markdown(text: str) -> str:
    """Escape characters that legacy Markdown would treat as entities."""
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def format_entity(text: str, marker: str) -> str:
    """Wrap ``text`` in a ``marker`` entity, one entity per line.

    Legacy Markdown cannot escape inside an entity, so special characters
    close the entity, appear escaped, and the entity reopens after them.
    Keeping each entity on one line means splitting a long message on line
    or paragraph breaks never leaves an entity unbalanced.

    >>> format_entity("a_b", "_")
    '_a_\\\\__b_'
    """
    lines = []
    for line in text.split("\n"):
        parts = []
        for segment in _MARKDOWN_SPECIAL.split(line):
            if not segment.strip():
                parts.append(segment)
            elif _MARKDOWN_SPECIAL.fullmatch(segment):
                parts.append("\\" + segment)
            else:
                core = segment.strip()
                start = segment.index(core)
                parts.append(
                    f"{segment[:start]}{marker}{core}{marker}{segment[start + len(core):]}"
                )
        lines.append("".join(parts))
    return "\n".join(lines)


def format_date_label(day: date) -> str:
    """Render ``day`` as ``DD.MM.YYYY``."""
    return day.strftime("%d.%m.%Y")


def compose_message(
    primary: str,
    secondary: str,
    display_ref: str,
    date_label: str,
    explanation: str = "",
) -> str:
    """Combine the passages, citation, date and explanation into one message.

    Empty ``secondary`` or ``explanation`` drop their whole section, label and
    separators included.
    """
    sections = [
        f"{TITLE} · {escape_markdown(date_label)}\n{format_entity(display_ref.strip(), '*')}",
        escape_markdown(primary.strip()),
    ]
    if secondary and secondary.strip():
        sections.append(format_entity(secondary.strip(), "_"))
    if explanation and explanation.strip():
        sections.append(f"{EXPLANATION_LABEL}\n{escape_markdown(explanation.strip())}")
    return SECTION_SEPARATOR.join(section for section in sections if section)


__all__ = ["compose_message", "escape_markdown", "format_date_label", "format_entity"]
