from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Tuple, TypedDict

import typer
import yaml

from .config import DocumentConfig, build_document, load_config
from .document import Document
from .errors import DocTokensError
from .models import TokenRecord, records_from_dicts
from .views import Span

app = typer.Typer(help="Inspect tokenized documents.", no_args_is_help=True)


class SpanPayload(TypedDict):
    start: int
    end: int
    text: str


class DocumentSummary(TypedDict):
    text: str
    size: int
    start_char: int
    end_char: int
    sentences: List[SpanPayload]


@app.command()
def inspect(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    text: str | None = typer.Option(
        None, "--text", help="Explicit document text (otherwise rebuilt from tokens)."
    ),
    validate: bool | None = typer.Option(
        None,
        "--validate/--no-validate",
        help="Override config validate_text flag.",
    ),
    implicit_sentence_start: bool | None = typer.Option(
        None,
        "--implicit-sentence-start/--no-implicit-sentence-start",
        help="Override config implicit_sentence_start flag.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Load token records from JSON and emit a document summary."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    cfg = load_config(config)
    if validate is not None:
        cfg.validate_text = validate
    if implicit_sentence_start is not None:
        cfg.implicit_sentence_start = implicit_sentence_start
    records, file_text = _load_records(input_path)
    try:
        doc = build_document(records, text if text is not None else file_text, cfg)
    except DocTokensError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps(_build_summary(doc, cfg), indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = DocumentConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_records(path: Path) -> Tuple[List[TokenRecord], str | None]:
    """Read a JSON list of records, or an object with ``tokens`` and ``text``."""
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON in {path}: {exc}") from exc
    text = None
    if isinstance(payload, dict):
        text = payload.get("text")
        payload = payload.get("tokens", [])
    if not isinstance(payload, list):
        raise typer.BadParameter(f"{path} must contain a list of token records")
    try:
        return records_from_dicts(payload), text
    except (TypeError, ValueError) as exc:
        raise typer.BadParameter(f"Malformed token record in {path}: {exc}") from exc


def _build_summary(doc: Document, config: DocumentConfig) -> DocumentSummary:
    """Create a JSON-serializable summary of the document."""
    return {
        "text": doc.text,
        "size": doc.size(),
        "start_char": doc.start_char(),
        "end_char": doc.end_char(),
        "sentences": [
            _span_dict(span)
            for span in doc.sentences(implicit_start=config.implicit_sentence_start)
        ],
    }


def _span_dict(span: Span) -> SpanPayload:
    return {"start": span.start, "end": span.end, "text": span.text}


if __name__ == "__main__":
    main()
