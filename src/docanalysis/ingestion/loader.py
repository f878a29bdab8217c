"""Document loading: raw bytes to text."""

from __future__ import annotations

import codecs
from pathlib import Path

BYTEWISE_REPLACE = "docanalysis.bytewise-replace"


def _replace_one_byte(exc: UnicodeError) -> tuple[str, int]:
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    # One U+FFFD per offending byte, so a truncated sequence counts per byte.
    return "\ufffd", exc.start + 1


codecs.register_error(BYTEWISE_REPLACE, _replace_one_byte)


def decode_document(data: bytes, encoding: str = "utf-8") -> str:
    """Decode document bytes, replacing each invalid byte with U+FFFD."""
    return bytes(data).decode(encoding, errors=BYTEWISE_REPLACE)


def read_document(path: Path) -> bytes:
    """Read the raw bytes of a document on disk."""
    return path.read_bytes()
