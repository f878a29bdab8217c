"""Error types raised by the analysis core."""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for analysis and comparison failures."""


class InvalidInput(AnalysisError):
    """Request payload is missing, unreadable or out of range."""


class NotFound(AnalysisError):
    """No record is stored under the requested fingerprint."""

    def __init__(self, fingerprint: str) -> None:
        self.fingerprint = fingerprint
        super().__init__(f"Document not found: {fingerprint}")


class InternalFailure(AnalysisError):
    """Unexpected failure while producing a result."""
