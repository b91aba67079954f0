"""Naming and documentation helpers exposed to code templates."""

from __future__ import annotations

import re
import textwrap

COMMENT_MARKER = "// "
COMMENT_COLUMN_LIMIT = 75
COMMENT_TEXT_WIDTH = COMMENT_COLUMN_LIMIT - len(f" {COMMENT_MARKER}")

ABBREVIATIONS: frozenset[str] = frozenset(
    {
        "id",
        "ppid",
        "pid",
        "mac",
        "ip",
        "iana",
        "uid",
        "ecs",
        "url",
        "os",
        "http",
        "dns",
        "ssl",
        "tls",
        "ttl",
        "uuid",
    }
)

# `@` is treated as a separator so that names like @timestamp lose it.
_NAME_SEPARATORS = re.compile(r"[._@]+")


def go_type_name(name: str) -> str:
    """Convert a dotted or underscored field name into an exported Go identifier.

    ``ephemeral_id`` becomes ``EphemeralID`` and ``host.ip`` becomes ``HostIP``.
    """
    return "".join(_capitalize(word) for word in _NAME_SEPARATORS.split(name) if word)


def _capitalize(word: str) -> str:
    if word.lower() in ABBREVIATIONS:
        return word.upper()
    return _title(word)


def _title(word: str) -> str:
    """Upper-case every letter that starts the word or follows a punctuation mark."""
    characters = []
    previous = " "
    for character in word:
        characters.append(character.upper() if _starts_word(previous) else character)
        previous = character
    return "".join(characters)


def _starts_word(previous: str) -> bool:
    return not (previous.isalnum() or previous == "_")


def go_comment(text: str) -> str:
    """Render free-form description text as wrapped ``//`` comment lines.

    Embedded line breaks are folded into one paragraph; blank lines never
    reach the output. Words longer than the line width are kept whole.
    """
    paragraph = " ".join(text.splitlines()).strip()
    lines = textwrap.wrap(
        paragraph,
        width=COMMENT_TEXT_WIDTH,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return "\n".join(f"{COMMENT_MARKER}{line}" for line in lines)
