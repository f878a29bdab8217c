"""Command line interface for DocAnalysis."""

from __future__ import annotations

import logging
from itertools import combinations
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from docanalysis.config import AppConfig
from docanalysis.index.indexer import Analyzer
from docanalysis.index.search import similarity
from docanalysis.utils.files import compute_sha256, iter_document_paths


console = Console()
app = typer.Typer(help="DocAnalysis - document statistics and duplicate detection")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _short(fingerprint: str) -> str:
    return fingerprint[:8]


@app.command()
def analyze(
    inputs: List[Path] = typer.Argument(
        ..., help="Documents or directories to analyze.", resolve_path=True
    ),
    threshold: float = typer.Option(
        AppConfig().match_threshold, min=0, max=100, help="Report pairs scoring at least this"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Analyze documents and report similar pairs among them."""
    _setup_logging(verbose)
    analyzer = Analyzer(threshold=threshold)

    stats = analyzer.analyze_paths(inputs)
    if not stats.processed_files:
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID")
    table.add_column("Document")
    table.add_column("Chars", justify="right")
    table.add_column("Words", justify="right")
    table.add_column("Unique", justify="right")
    table.add_column("Paragraphs", justify="right")
    for path, record in stats.records.items():
        table.add_row(
            _short(record.fingerprint),
            str(path),
            str(record.char_count),
            str(record.word_count),
            str(record.unique_word_count),
            str(record.paragraph_count),
        )
    console.print(table)
    console.print(
        f"Analyzed: {stats.inserted + stats.updated}, duplicates: {stats.updated}, "
        f"failed: {stats.failed}"
    )

    matches = []
    for (path_a, a), (path_b, b) in combinations(stats.records.items(), 2):
        score = similarity(a, b)
        if score >= threshold:
            matches.append((score, path_a, path_b))

    if not matches:
        console.print(f"[green]No pairs at or above {threshold:.1f}% similarity.[/green]")
        return

    console.print(f"[red]Pairs at or above {threshold:.1f}% similarity:[/red]")
    for score, path_a, path_b in sorted(matches, key=lambda item: item[0], reverse=True):
        console.print(f"  {score:6.2f}%  {path_a} <-> {path_b}")


@app.command()
def fingerprint(
    inputs: List[Path] = typer.Argument(..., help="Documents or directories.", resolve_path=True),
) -> None:
    """Print the content fingerprint of each document."""
    paths = list(iter_document_paths(inputs))
    if not paths:
        console.print("[yellow]No documents found.[/yellow]")
        return
    for path in paths:
        console.print(f"{compute_sha256(path)}  {path}")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Host interface"),
    port: Optional[int] = typer.Option(None, help="Server port"),
    threshold: Optional[float] = typer.Option(
        None, min=0, max=100, help="Default similarity threshold for /compare"
    ),
) -> None:
    """Start the analysis HTTP service."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    from docanalysis.web.app import create_app

    defaults = AppConfig.from_env()
    config = AppConfig(
        host=host or defaults.host,
        port=port or defaults.port,
        match_threshold=defaults.match_threshold if threshold is None else threshold,
        max_document_bytes=defaults.max_document_bytes,
        encoding=defaults.encoding,
    )

    console.print(
        f"Starting analysis service on http://{config.host}:{config.port} "
        f"(threshold: {config.match_threshold:.1f})"
    )
    uvicorn.run(
        create_app(config=config),
        host=config.host,
        port=config.port,
        reload=False,
        log_level="info",
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
