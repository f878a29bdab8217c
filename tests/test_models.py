"""Tests for core data models."""

from __future__ import annotations

import dataclasses

import pytest

from docanalysis.models import AnalysisRecord, TextStats


def _record(**overrides) -> AnalysisRecord:
    fields = dict(
        fingerprint="abc123",
        char_count=13,
        word_count=3,
        paragraph_count=1,
        unique_word_count=3,
        word_frequency={"the": 1, "quick": 1, "fox": 1},
    )
    fields.update(overrides)
    return AnalysisRecord(**fields)


class TestTextStats:
    """Test TextStats dataclass."""

    def test_unique_word_count(self) -> None:
        stats = TextStats(char_count=5, word_count=3, paragraph_count=1, word_frequency={"a": 2, "b": 1})
        assert stats.unique_word_count == 2


class TestAnalysisRecord:
    """Test AnalysisRecord dataclass."""

    def test_from_stats(self) -> None:
        stats = TextStats(char_count=5, word_count=3, paragraph_count=1, word_frequency={"a": 2, "b": 1})
        record = AnalysisRecord.from_stats("ff00", stats)

        assert record.fingerprint == "ff00"
        assert record.char_count == 5
        assert record.word_count == 3
        assert record.paragraph_count == 1
        assert record.unique_word_count == 2
        assert dict(record.word_frequency) == {"a": 2, "b": 1}

    def test_is_frozen(self) -> None:
        record = _record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.word_count = 10  # type: ignore[misc]

    def test_word_frequency_is_read_only(self) -> None:
        """The stored table cannot be mutated through the record."""
        source = {"a": 1}
        record = _record(word_frequency=source, word_count=1, unique_word_count=1)

        with pytest.raises(TypeError):
            record.word_frequency["b"] = 2  # type: ignore[index]
        source["c"] = 3
        assert "c" not in record.word_frequency

    def test_equality(self) -> None:
        assert _record() == _record()
        assert _record() != _record(fingerprint="other")

    def test_hashable_by_fingerprint(self) -> None:
        """Records can live in sets despite the read-only table."""
        assert hash(_record()) == hash(_record())
        assert len({_record(), _record(), _record(fingerprint="other")}) == 2

    def test_to_dict_uses_wire_names(self) -> None:
        data = _record().to_dict()

        assert data == {
            "char_count": 13,
            "word_count": 3,
            "para_count": 1,
            "unique_words": 3,
            "fingerprint": "abc123",
            "word_frequency": {"the": 1, "quick": 1, "fox": 1},
        }
        assert type(data["word_frequency"]) is dict

    def test_summary_omits_frequency(self) -> None:
        summary = _record().summary()

        assert "word_frequency" not in summary
        assert summary["fingerprint"] == "abc123"
