"""Utility helpers for fingerprinting and locating documents."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Iterable, Iterator


def fingerprint(data: bytes) -> str:
    """Return the SHA256 hex digest identifying a byte sequence."""
    return hashlib.sha256(data).hexdigest()


def compute_sha256(path: Path) -> str:
    """Compute SHA256 hash for a file."""
    sha = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1 << 20), b""):
            sha.update(chunk)
    return sha.hexdigest()


def _is_hidden(relative: Path) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def iter_document_paths(inputs: Iterable[Path]) -> Iterator[Path]:
    """Yield document paths from input paths, descending into directories."""
    for item in inputs:
        if item.is_dir():
            children = sorted(
                child
                for child in item.rglob("*")
                if child.is_file() and not _is_hidden(child.relative_to(item))
            )
            yield from children
        elif item.is_file():
            yield item
