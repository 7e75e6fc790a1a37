import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml
from pydantic import ValidationError

from ..chunking.assurance import build_chunk_assurance
from ..chunking.models import Chunk
from ..chunking.producer import ChunkProducer, make_producer
from ..chunking.sizing import resolve_counter
from ..core.config import SETTINGS, Settings
from ..core.logging import log, setup_logging
from ..obs.events import DiagnosticSink

app = typer.Typer(add_completion=False, help="Chunkline CLI")


@app.callback()
def _init(
    log_format: Optional[str] = typer.Option(
        None, "--log-format", help="Log format: json|plain|auto"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Minimum log level: debug|info|warning|error"
    ),
) -> None:
    try:
        setup_logging(
            log_format or SETTINGS.LOG_FORMAT,  # type: ignore[arg-type]
            level=log_level or SETTINGS.LOG_LEVEL,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command()
def version() -> None:
    from .. import __version__

    typer.echo(__version__)


def _parse_meta(items: List[str]) -> Optional[Dict[str, str]]:
    if not items:
        return None

    meta: Dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got {item!r}", param_hint="--meta")
        meta[key] = value
    return meta


def _decode_escapes(value: str) -> str:
    """Interpret backslash escapes such as ``\\n``; all other characters pass through."""
    return value.encode("latin-1", "backslashreplace").decode("unicode_escape")


def _read_input(path: Path) -> str:
    if not path.exists():
        typer.echo(f"❌ Input file not found: {path}", err=True)
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _build_producer(
    config_file: Optional[str],
    strategy: Optional[str],
    chunk_size: Optional[int],
    chunk_overlap: Optional[int],
    separator: Optional[str],
    tokenizer: Optional[str],
    on_diagnostic: Optional[DiagnosticSink] = None,
) -> ChunkProducer:
    """Resolve settings (file -> env -> CLI flags) into a producer."""
    try:
        settings = Settings.load_config(config_file)
        return make_producer(
            strategy=strategy or settings.CHUNK_STRATEGY,
            chunk_size=chunk_size if chunk_size is not None else settings.CHUNK_SIZE,
            chunk_overlap=chunk_overlap if chunk_overlap is not None else settings.CHUNK_OVERLAP,
            separator=_decode_escapes(
                separator if separator is not None else settings.CHUNK_SEPARATOR
            ),
            token_counter=resolve_counter(
                tokenizer or settings.TOKENIZER, settings.TOKENIZER_MODEL
            ),
            on_diagnostic=on_diagnostic,
        )
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        typer.echo(f"❌ Invalid chunking configuration: {e}", err=True)
        raise typer.Exit(1) from e


def _chunk_record(index: int, chunk: Chunk) -> Dict[str, Any]:
    return {
        "index": index,
        "text": chunk.text,
        "cursor": chunk.cursor,
        "length": len(chunk.text),
        "metadata": chunk.metadata,
    }


STRATEGY_HELP = "Splitting strategy: recursive|markdown|character|sentence"


@app.command()
def split(
    path: Path = typer.Argument(..., help="UTF-8 text or markdown file to chunk"),
    strategy: Optional[str] = typer.Option(None, "--strategy", help=STRATEGY_HELP),
    chunk_size: Optional[int] = typer.Option(None, "--chunk-size", help="Maximum size per chunk"),
    chunk_overlap: Optional[int] = typer.Option(
        None, "--chunk-overlap", help="Overlap budget between consecutive chunks"
    ),
    separator: Optional[str] = typer.Option(
        None,
        "--separator",
        help="Separator for the character strategy (escapes such as \\n are honored)",
    ),
    tokenizer: Optional[str] = typer.Option(None, "--tokenizer", help="Size model: chars|tiktoken"),
    meta: List[str] = typer.Option([], "--meta", help="Metadata KEY=VALUE attached to every chunk"),
    output_format: str = typer.Option("ndjson", "--format", help="Output format: ndjson|json"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write chunks to this file"),
    config_file: Optional[str] = typer.Option(
        None, "--config", help="Config file (.chunkline.yaml auto-discovered)"
    ),
) -> None:
    """Split a document into chunks.

    Writes one JSON object per chunk (ndjson) or a single JSON document
    (json) with index, text, cursor, length and metadata.

    Examples:
        chunkline split notes.md --strategy markdown --chunk-size 400
        chunkline split notes.txt --meta source=notes -o chunks.ndjson
    """
    if output_format not in ("ndjson", "json"):
        raise typer.BadParameter("Must be 'ndjson' or 'json'", param_hint="--format")

    metadata = _parse_meta(meta)
    producer = _build_producer(config_file, strategy, chunk_size, chunk_overlap, separator, tokenizer)
    text = _read_input(path)

    chunks = producer.produce(text, metadata=metadata)
    records = [_chunk_record(i, chunk) for i, chunk in enumerate(chunks)]

    if output_format == "json":
        rendered = json.dumps(
            {
                "metadata": {
                    "document_length": len(text),
                    "chunk_count": len(chunks),
                    "strategy": producer.strategy.name,
                    "chunk_size": producer.config.chunk_size,
                    "chunk_overlap": producer.config.chunk_overlap,
                },
                "chunks": records,
            },
            indent=2,
            ensure_ascii=False,
        )
    else:
        rendered = "\n".join(json.dumps(r, ensure_ascii=False) for r in records)

    if output:
        output.write_text(rendered + "\n", encoding="utf-8")
        typer.echo(f"📄 Wrote {len(chunks)} chunks to: {output}", err=True)
    else:
        typer.echo(rendered)

    log.info(
        "cli.split.done",
        path=str(path),
        strategy=producer.strategy.name,
        chunks=len(chunks),
    )


@app.command()
def stats(
    path: Path = typer.Argument(..., help="UTF-8 text or markdown file to chunk"),
    strategy: Optional[str] = typer.Option(None, "--strategy", help=STRATEGY_HELP),
    chunk_size: Optional[int] = typer.Option(None, "--chunk-size", help="Maximum size per chunk"),
    chunk_overlap: Optional[int] = typer.Option(
        None, "--chunk-overlap", help="Overlap budget between consecutive chunks"
    ),
    separator: Optional[str] = typer.Option(
        None,
        "--separator",
        help="Separator for the character strategy (escapes such as \\n are honored)",
    ),
    tokenizer: Optional[str] = typer.Option(None, "--tokenizer", help="Size model: chars|tiktoken"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    config_file: Optional[str] = typer.Option(
        None, "--config", help="Config file (.chunkline.yaml auto-discovered)"
    ),
) -> None:
    """Chunk a document and report size statistics and table integrity.

    Exits with status 1 when a detected table was torn across chunks.
    """
    # Breaches are part of the report; no need to log each one
    producer = _build_producer(
        config_file,
        strategy,
        chunk_size,
        chunk_overlap,
        separator,
        tokenizer,
        on_diagnostic=lambda event: None,
    )
    text = _read_input(path)

    chunks = producer.produce(text)
    report = build_chunk_assurance(text, chunks, producer.config)

    if as_json:
        typer.echo(json.dumps(report, indent=2))
    else:
        _print_report(report, producer.strategy.name)

    if report["status"] == "FAIL":
        raise typer.Exit(1)


def _print_report(report: Dict[str, Any], strategy: str) -> None:
    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Chunk assurance ({strategy})")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    cap = report["tokenCap"]
    table.add_row("Chunks", str(report["chunkCount"]))
    table.add_row("Chunk size / overlap", f"{cap['chunkSize']} / {cap['chunkOverlap']}")
    for key in ("min", "median", "p95", "max"):
        table.add_row(f"Tokens {key}", str(report["tokenStats"][key]))
    table.add_row("Breaches", str(report["breaches"]["count"]))
    table.add_row(
        "Tables intact",
        f"{report['tables']['intact']} / {report['tables']['detected']}",
    )
    table.add_row("Status", report["status"])

    Console().print(table)


if __name__ == "__main__":
    app()
