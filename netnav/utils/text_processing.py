"""Text cleaning and normalization utilities."""

from __future__ import annotations

import hashlib
import re
import unicodedata

# @[Display Name](person-id) as inserted by the chat input's mention picker
_BRACKET_MENTION_RE = re.compile(r"@\[([^\]]+)\]\([^)]*\)")
_LEADING_SIGIL_RE = re.compile(r"^@+\s*")
_INLINE_SIGIL_RE = re.compile(r"(^|\s)@(?=\w)")


def normalize_text(text: str) -> str:
    """Normalize unicode, collapse whitespace, strip."""
    text = unicodedata.normalize("NFKC", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def strip_mention(token: str) -> str:
    """Reduce a single entity token carrying mention markup to the bare name."""
    token = _BRACKET_MENTION_RE.sub(r"\1", token)
    token = _LEADING_SIGIL_RE.sub("", normalize_text(token))
    return token.strip()


def strip_mentions(text: str) -> str:
    """Remove mention markers from free text while keeping the mentioned names."""
    text = _BRACKET_MENTION_RE.sub(r"\1", text)
    text = _INLINE_SIGIL_RE.sub(r"\1", text)
    return normalize_text(text)


def fold(text: str) -> str:
    """Case-insensitive comparison key."""
    return normalize_text(text).casefold()


def content_hash(text: str) -> str:
    """SHA-256 hash of text content, shortened for use in keys."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()[:32]


def human_join(items: list[str]) -> str:
    """Join names as 'A', 'A and B' or 'A, B and C'."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} and {items[-1]}"
