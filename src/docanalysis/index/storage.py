"""In-memory analysis index guarded by a readers-writer lock."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Tuple

from docanalysis.errors import NotFound
from docanalysis.models import AnalysisRecord


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    Waiting writers block new readers so scans cannot starve insertions.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._waiting_writers = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class AnalysisIndex:
    """Store of analysis records keyed by fingerprint.

    Lives for the lifetime of its owner; nothing is persisted. Insertions take
    the write side of the lock, lookups and scans share the read side.
    """

    def __init__(self) -> None:
        self._records: Dict[str, AnalysisRecord] = {}
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._records)

    def __contains__(self, fingerprint: object) -> bool:
        with self._lock.read():
            return fingerprint in self._records

    def put(self, record: AnalysisRecord) -> bool:
        """Insert or overwrite a record. Returns True if the key was new."""
        with self._lock.write():
            is_new = record.fingerprint not in self._records
            self._records[record.fingerprint] = record
        return is_new

    def get(self, fingerprint: str) -> AnalysisRecord:
        with self._lock.read():
            try:
                return self._records[fingerprint]
            except KeyError:
                raise NotFound(fingerprint) from None

    def all_except(self, fingerprint: str) -> List[Tuple[str, AnalysisRecord]]:
        with self._lock.read():
            return [(key, record) for key, record in self._records.items() if key != fingerprint]

    def fingerprints(self) -> List[str]:
        with self._lock.read():
            return list(self._records)

    def records(self) -> List[AnalysisRecord]:
        with self._lock.read():
            return list(self._records.values())

    @contextmanager
    def scan_except(
        self, fingerprint: str
    ) -> Iterator[Tuple[AnalysisRecord, Iterator[Tuple[str, AnalysisRecord]]]]:
        """Hold read access while iterating every record other than ``fingerprint``.

        Yields ``(query_record, others)``. Raises NotFound if the key is absent.
        """
        with self._lock.read():
            try:
                query = self._records[fingerprint]
            except KeyError:
                raise NotFound(fingerprint) from None
            others = (
                (key, record) for key, record in self._records.items() if key != fingerprint
            )
            yield query, others
