"""Document analysis pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Sequence

from docanalysis.config import DEFAULT_MATCH_THRESHOLD
from docanalysis.errors import AnalysisError, InternalFailure, InvalidInput
from docanalysis.index.search import ComparisonEngine
from docanalysis.index.storage import AnalysisIndex
from docanalysis.ingestion.loader import decode_document, read_document
from docanalysis.models import AnalysisRecord
from docanalysis.utils.files import fingerprint, iter_document_paths
from docanalysis.utils.text import extract_stats

LOGGER = logging.getLogger(__name__)


def find_documents(paths: Sequence[Path]) -> list[Path]:
    """Find all document files under the given paths."""
    return list(iter_document_paths(paths))


@dataclass(slots=True)
class AnalyzeStats:
    inserted: int = 0
    updated: int = 0
    failed: int = 0
    processed_files: list[Path] = field(default_factory=list)
    records: Dict[Path, AnalysisRecord] = field(default_factory=dict)

    def increment(self, status: str, path: Path) -> None:
        if status == "inserted":
            self.inserted += 1
        elif status == "updated":
            self.updated += 1
        else:
            self.failed += 1
        self.processed_files.append(path)


class Analyzer:
    """Analyzes documents into the index and compares them."""

    def __init__(
        self,
        index: AnalysisIndex | None = None,
        *,
        threshold: float = DEFAULT_MATCH_THRESHOLD,
        encoding: str = "utf-8",
    ) -> None:
        self.index = index if index is not None else AnalysisIndex()
        self.engine = ComparisonEngine(self.index, threshold=threshold)
        self.encoding = encoding

    def build_record(self, data: bytes) -> AnalysisRecord:
        """Fingerprint and measure a document without storing it."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidInput("Document content must be bytes")
        data = bytes(data)
        try:
            stats = extract_stats(decode_document(data, self.encoding))
            return AnalysisRecord.from_stats(fingerprint(data), stats)
        except Exception as exc:
            raise InternalFailure(f"Failed to analyze document: {exc}") from exc

    def analyze(self, data: bytes) -> AnalysisRecord:
        record, _ = self._analyze(data)
        return record

    def _analyze(self, data: bytes) -> tuple[AnalysisRecord, bool]:
        record = self.build_record(data)
        is_new = self.index.put(record)
        LOGGER.debug(
            "%s %s: %d words, %d unique",
            "Stored" if is_new else "Replaced",
            record.fingerprint[:8],
            record.word_count,
            record.unique_word_count,
        )
        return record, is_new

    def compare(self, fingerprint: str, *, threshold: float | None = None) -> Dict[str, float]:
        return self.engine.find_matches(fingerprint, threshold=threshold)

    def analyze_paths(self, paths: Sequence[Path]) -> AnalyzeStats:
        """Analyze every document found under the given paths."""
        documents = find_documents(paths)
        stats = AnalyzeStats()
        if not documents:
            LOGGER.warning("No documents found")
            return stats

        for path in documents:
            try:
                LOGGER.info("Processing: %s", path)
                record, is_new = self._analyze(read_document(path))
            except (OSError, AnalysisError) as exc:
                LOGGER.error("Failed to process %s: %s", path, exc)
                stats.increment("failed", path)
                continue
            stats.records[path] = record
            stats.increment("inserted" if is_new else "updated", path)

        return stats
