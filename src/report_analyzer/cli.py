from __future__ import annotations

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from .config import load_settings
from .errors import ReportAnalyzerError
from .file_selection import load_local_file
from .llm_client import AnalyzerClient
from .models import Language, PromptPolicy
from .prompts import build_message_content
from .rendering import render_markdown
from .response_parser import parse_response

app = typer.Typer(add_completion=False, help="Marketing Report Analyzer (hosted-LLM document verdicts)")


class OutputFormat(str, Enum):
    JSON = "json"
    MARKDOWN = "markdown"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def check(file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Report to validate")):
    """
    Check whether a file would be accepted by the upload allow-list.
    """
    try:
        selected = load_local_file(file)
    except ReportAnalyzerError as e:
        typer.echo(f"ERROR: {e.message}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"OK: {selected.name} ({selected.mime_type}, {selected.size:,} bytes)")


@app.command()
def analyze(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="PDF, CSV or Excel report"),
    policy: PromptPolicy = typer.Option(
        PromptPolicy.FILENAME_ONLY,
        "--policy",
        help="filename_only (name only, nothing uploaded) or document_content (file attached)",
        case_sensitive=False,
    ),
    language: Language = typer.Option(Language.EN, "--language", help="Prompt and output language", case_sensitive=False),
    schema: bool = typer.Option(True, "--schema/--no-schema", help="Constrain the response with a JSON schema"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON, "--format", help="Print the verdict as JSON or Markdown", case_sensitive=False
    ),
    model: Optional[str] = typer.Option(None, "--model", help="Override REPORT_ANALYZER_LLM_MODEL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
):
    """
    Send a report to the model and print the parsed verdict.
    """
    _configure_logging(verbose)
    settings = load_settings()
    if model:
        settings = settings.model_copy(update={"model": model})

    try:
        selected = load_local_file(file)
        client = AnalyzerClient.from_settings(settings)
        content = build_message_content(selected, policy, language)
        raw = client.generate(content, policy.shape, language=language, use_schema=schema)
        result = parse_response(raw, policy.shape, schema_constrained=schema)
    except ReportAnalyzerError as e:
        typer.echo(f"ERROR: {e.message}", err=True)
        raise typer.Exit(code=1)

    if output_format is OutputFormat.MARKDOWN:
        typer.echo(render_markdown(result, file_name=selected.name, language=language))
    else:
        typer.echo(json.dumps(result.model_dump(by_alias=True, exclude_none=True), indent=2, ensure_ascii=False))
