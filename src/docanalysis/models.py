"""Core docanalysis data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True, slots=True)
class TextStats:
    """Counts derived from the decoded text of one document."""

    char_count: int
    word_count: int
    paragraph_count: int
    word_frequency: Mapping[str, int] = field(default_factory=dict)

    @property
    def unique_word_count(self) -> int:
        return len(self.word_frequency)


@dataclass(frozen=True, slots=True)
class AnalysisRecord:
    """Stored statistics and fingerprint for one analyzed document."""

    fingerprint: str
    char_count: int
    word_count: int
    paragraph_count: int
    unique_word_count: int
    word_frequency: Mapping[str, int] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash(self.fingerprint)

    def __post_init__(self) -> None:
        # Freeze the table so a stored record cannot change under readers.
        frozen = MappingProxyType(dict(self.word_frequency))
        object.__setattr__(self, "word_frequency", frozen)

    @classmethod
    def from_stats(cls, fingerprint: str, stats: TextStats) -> "AnalysisRecord":
        return cls(
            fingerprint=fingerprint,
            char_count=stats.char_count,
            word_count=stats.word_count,
            paragraph_count=stats.paragraph_count,
            unique_word_count=stats.unique_word_count,
            word_frequency=stats.word_frequency,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "char_count": self.char_count,
            "word_count": self.word_count,
            "para_count": self.paragraph_count,
            "unique_words": self.unique_word_count,
            "fingerprint": self.fingerprint,
            "word_frequency": dict(self.word_frequency),
        }

    def summary(self) -> Dict[str, Any]:
        """Record fields without the frequency table."""
        data = self.to_dict()
        del data["word_frequency"]
        return data
