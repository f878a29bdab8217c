"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PORT = 8082
DEFAULT_MATCH_THRESHOLD = 100.0
DEFAULT_MAX_DOCUMENT_BYTES = 32 * 1024 * 1024

ENV_PREFIX = "DOCANALYSIS_"


@dataclass(slots=True)
class AppConfig:
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    match_threshold: float = DEFAULT_MATCH_THRESHOLD
    max_document_bytes: int = DEFAULT_MAX_DOCUMENT_BYTES
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if not 0 <= self.match_threshold <= 100:
            raise ValueError(
                f"match_threshold must be between 0 and 100, got {self.match_threshold}"
            )
        if self.max_document_bytes <= 0:
            raise ValueError("max_document_bytes must be positive")
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}")

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "AppConfig":
        """Build a config from DOCANALYSIS_* environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()

        def _get(name: str) -> str | None:
            value = env.get(ENV_PREFIX + name)
            return value.strip() if value and value.strip() else None

        host = _get("HOST")
        port = _get("PORT")
        threshold = _get("MATCH_THRESHOLD")
        max_bytes = _get("MAX_DOCUMENT_BYTES")
        return cls(
            host=host or defaults.host,
            port=int(port) if port else defaults.port,
            match_threshold=float(threshold) if threshold else defaults.match_threshold,
            max_document_bytes=int(max_bytes) if max_bytes else defaults.max_document_bytes,
            encoding=_get("ENCODING") or defaults.encoding,
        )
