"""Text statistics: tokenization, paragraph and word counting."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterator

from docanalysis.models import TextStats

PARAGRAPH_SEPARATOR = "\n\n"

# Unicode White_Space characters; ASCII information separators are not breaks.
WHITESPACE = "\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"
_WHITESPACE_RE = re.compile(f"[{WHITESPACE}]+")
_BLANK_RE = re.compile(f"[{WHITESPACE}]*")


def normalize_token(raw: str) -> str:
    """Trim non-alphanumeric characters from both ends and lowercase."""
    start = 0
    end = len(raw)
    while start < end and not raw[start].isalnum():
        start += 1
    while end > start and not raw[end - 1].isalnum():
        end -= 1
    return raw[start:end].lower()


def tokenize(text: str) -> Iterator[str]:
    """Yield normalized tokens, skipping ones that end up empty."""
    for candidate in _WHITESPACE_RE.split(text):
        token = normalize_token(candidate)
        if token:
            yield token


def count_paragraphs(text: str) -> int:
    """Count blank-line separated paragraphs; blank text has none."""
    if _BLANK_RE.fullmatch(text):
        return 0
    return text.count(PARAGRAPH_SEPARATOR) + 1


def extract_stats(text: str) -> TextStats:
    frequency = Counter(tokenize(text))
    return TextStats(
        char_count=len(text),
        word_count=sum(frequency.values()),
        paragraph_count=count_paragraphs(text),
        word_frequency=dict(frequency),
    )
