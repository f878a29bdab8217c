"""Pairwise document similarity and index scans."""

from __future__ import annotations

import logging
from typing import Dict

from docanalysis.config import DEFAULT_MATCH_THRESHOLD
from docanalysis.errors import InvalidInput
from docanalysis.index.storage import AnalysisIndex
from docanalysis.models import AnalysisRecord

LOGGER = logging.getLogger(__name__)


def similarity(a: AnalysisRecord, b: AnalysisRecord) -> float:
    """Weighted Dice coefficient over word occurrences, scaled to 0-100."""
    total = a.word_count + b.word_count
    if total == 0:
        return 0.0

    # Iterate the smaller table; min() keeps the result symmetric.
    small, large = a.word_frequency, b.word_frequency
    if len(small) > len(large):
        small, large = large, small
    common = 0
    for word, count in small.items():
        other = large.get(word)
        if other:
            common += min(count, other)

    return 2 * common * 100 / total


def _check_threshold(threshold: float) -> float:
    if not 0 <= threshold <= 100:
        raise InvalidInput(f"threshold must be between 0 and 100, got {threshold}")
    return float(threshold)


class ComparisonEngine:
    """Scores a stored document against every other document in the index."""

    def __init__(self, index: AnalysisIndex, *, threshold: float = DEFAULT_MATCH_THRESHOLD) -> None:
        self.index = index
        self.threshold = _check_threshold(threshold)

    def find_matches(self, fingerprint: str, *, threshold: float | None = None) -> Dict[str, float]:
        """Return ``{other_fingerprint: score}`` for scores at or above the threshold.

        Raises NotFound when ``fingerprint`` is not in the index.
        """
        cutoff = self.threshold if threshold is None else _check_threshold(threshold)
        results: Dict[str, float] = {}
        scanned = 0
        with self.index.scan_except(fingerprint) as (query, others):
            for other_fingerprint, record in others:
                scanned += 1
                score = similarity(query, record)
                if score >= cutoff:
                    results[other_fingerprint] = score
        LOGGER.debug(
            "Compared %s against %d documents, %d at or above %.1f",
            fingerprint[:8],
            scanned,
            len(results),
            cutoff,
        )
        return results
