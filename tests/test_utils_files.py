"""Tests for file utility functions."""

from __future__ import annotations

import hashlib
from pathlib import Path

from docanalysis.utils.files import compute_sha256, fingerprint, iter_document_paths


class TestFingerprint:
    """Test fingerprint function."""

    def test_is_sha256_hex(self) -> None:
        digest = fingerprint(b"The quick fox")

        assert digest == hashlib.sha256(b"The quick fox").hexdigest()
        assert len(digest) == 64

    def test_empty_input(self) -> None:
        """Empty content has a well-known digest."""
        assert fingerprint(b"") == (
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        )

    def test_deterministic(self) -> None:
        assert fingerprint(b"same bytes") == fingerprint(b"same bytes")

    def test_sensitive_to_any_byte(self) -> None:
        """Whitespace and encoding differences change the fingerprint."""
        variants = [
            b"hello world",
            b"hello world ",
            b"hello  world",
            b"Hello world",
            b"hello world\n",
            "héllo world".encode("utf-8"),
            "héllo world".encode("latin-1"),
        ]
        assert len({fingerprint(v) for v in variants}) == len(variants)


class TestComputeSha256:
    """Test compute_sha256 function."""

    def test_matches_fingerprint_of_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.txt"
        data = b"some content\n" * 1000
        path.write_bytes(data)

        assert compute_sha256(path) == fingerprint(data)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")

        assert compute_sha256(path) == fingerprint(b"")


class TestIterDocumentPaths:
    """Test iter_document_paths function."""

    def test_single_file(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_text("a")

        assert list(iter_document_paths([path])) == [path]

    def test_directory_is_sorted_and_recursive(self, tmp_path: Path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "b.txt").write_text("b")
        (tmp_path / "a.md").write_text("a")
        (tmp_path / "sub" / "c.txt").write_text("c")

        result = list(iter_document_paths([tmp_path]))

        assert result == [tmp_path / "a.md", tmp_path / "b.txt", tmp_path / "sub" / "c.txt"]

    def test_skips_hidden_files(self, tmp_path: Path) -> None:
        (tmp_path / ".hidden").write_text("x")
        (tmp_path / "visible.txt").write_text("y")

        assert list(iter_document_paths([tmp_path])) == [tmp_path / "visible.txt"]

    def test_skips_hidden_directories(self, tmp_path: Path) -> None:
        objects = tmp_path / ".git" / "objects"
        objects.mkdir(parents=True)
        (objects / "ab12").write_bytes(b"blob")
        (tmp_path / "doc.txt").write_text("doc")

        assert list(iter_document_paths([tmp_path])) == [tmp_path / "doc.txt"]

    def test_hidden_parent_of_input_is_allowed(self, tmp_path: Path) -> None:
        """Only parts below the given directory are checked."""
        root = tmp_path / ".workspace"
        root.mkdir()
        (root / "doc.txt").write_text("doc")

        assert list(iter_document_paths([root])) == [root / "doc.txt"]

    def test_missing_path(self, tmp_path: Path) -> None:
        assert list(iter_document_paths([tmp_path / "missing.txt"])) == []
