"""FastAPI application exposing document analysis and comparison."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from docanalysis.config import AppConfig
from docanalysis.errors import InternalFailure, InvalidInput, NotFound
from docanalysis.index.indexer import Analyzer
from docanalysis.index.storage import AnalysisIndex

LOGGER = logging.getLogger(__name__)


class DocumentSummary(BaseModel):
    fingerprint: str
    char_count: int
    word_count: int
    para_count: int
    unique_words: int


class AnalysisResponse(DocumentSummary):
    word_frequency: Dict[str, int]


class DocumentList(BaseModel):
    documents: List[DocumentSummary]
    count: int


def _get_analyzer(request: Request) -> Analyzer:
    return request.app.state.analyzer


def _too_large(limit: int) -> HTTPException:
    return HTTPException(status_code=413, detail=f"Document exceeds {limit} bytes")


async def _read_body(request: Request, limit: int) -> bytes:
    """Read the request body, refusing to buffer more than ``limit`` bytes."""
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        raise _too_large(limit)

    chunks: List[bytes] = []
    total = 0
    try:
        async for chunk in request.stream():
            total += len(chunk)
            if total > limit:
                break
            chunks.append(chunk)
    except Exception as exc:
        LOGGER.error("Error reading content: %s", exc)
        raise HTTPException(status_code=400, detail="Error reading content") from exc
    if total > limit:
        raise _too_large(limit)
    return b"".join(chunks)


def create_app(index: AnalysisIndex | None = None, config: AppConfig | None = None) -> FastAPI:
    """Build an app bound to its own index (a fresh one unless given)."""
    config = config or AppConfig()
    app = FastAPI(title="DocAnalysis", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.config = config
    app.state.analyzer = Analyzer(
        index, threshold=config.match_threshold, encoding=config.encoding
    )

    @app.on_event("startup")
    async def startup_event() -> None:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    @app.post("/analyze", response_model=AnalysisResponse)
    async def analyze_document(request: Request) -> AnalysisResponse:
        analyzer = _get_analyzer(request)
        content = await _read_body(request, config.max_document_bytes)
        try:
            record = await asyncio.to_thread(analyzer.analyze, content)
        except InvalidInput as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except InternalFailure as exc:
            LOGGER.exception("Analysis failed: %s", exc)
            raise HTTPException(status_code=500, detail="Analysis failed") from exc
        return AnalysisResponse(**record.to_dict())

    @app.get("/compare/{fingerprint}")
    async def compare_document(
        fingerprint: str,
        request: Request,
        threshold: float | None = Query(None, ge=0, le=100),
    ) -> Dict[str, float]:
        analyzer = _get_analyzer(request)
        fingerprint = fingerprint.strip()
        if not fingerprint:
            raise HTTPException(status_code=400, detail="File ID required")
        try:
            return await asyncio.to_thread(analyzer.compare, fingerprint, threshold=threshold)
        except NotFound as exc:
            raise HTTPException(status_code=404, detail="File not found") from exc
        except InvalidInput as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except Exception as exc:
            LOGGER.exception("Comparison failed for %s: %s", fingerprint, exc)
            raise HTTPException(status_code=500, detail="Comparison failed") from exc

    @app.get("/documents", response_model=DocumentList)
    async def list_documents(request: Request) -> DocumentList:
        """List summaries of every analyzed document."""
        records = await asyncio.to_thread(_get_analyzer(request).index.records)
        return DocumentList(
            documents=[DocumentSummary(**record.summary()) for record in records],
            count=len(records),
        )

    @app.get("/health", response_class=PlainTextResponse)
    async def health() -> str:
        return "OK"

    return app


app = create_app(config=AppConfig.from_env())
