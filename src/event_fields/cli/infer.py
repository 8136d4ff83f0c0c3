"""Field inference command: prints the event catalog for a model dump."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..diagnostics import CollectingDiagnosticSink, DiagnosticKind
from ..exceptions import EventFieldsError
from ..loader import load_interfaces
from ..logging_config import setup_logging
from ..models import EventCatalog
from ..processor import build_processor
from ..serializers import catalog_to_dict
from . import app
from ._common import console, resolve_config

logger = logging.getLogger(__name__)

EXIT_ERROR = 1
EXIT_WARNINGS = 2


@app.command()
def infer(
    model: Path = typer.Argument(
        ...,
        help="Interface model dumped by the front end (JSON)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    annotation: Optional[str] = typer.Option(
        None,
        "--annotation",
        "-a",
        help="Qualified name of the explicit-field override annotation",
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (human-readable) or json (for generators)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 2 when any inference warning was emitted",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress warning logs"),
):
    """
    Infer the field model of every event interface in MODEL.

    [bold cyan]Examples:[/bold cyan]

      event-fields infer build/events.json

      event-fields infer build/events.json -a org.example.ImplementedBy --format json
    """
    if fmt not in ("rich", "json"):
        console.print(f"[red]Error:[/red] unknown format '{fmt}' (expected rich or json)")
        raise typer.Exit(EXIT_ERROR)

    try:
        settings = resolve_config(
            config=config, annotation=annotation, strict=strict, verbose=verbose, quiet=quiet
        )
        sink = CollectingDiagnosticSink(setup_logging(settings.verbosity))
        processor = build_processor(settings, diagnostics=sink)
        catalog = processor.process_all(load_interfaces(model))

        if fmt == "json":
            print(json.dumps(catalog_to_dict(catalog, sink.diagnostics), indent=2))
        else:
            _output_rich(catalog, sink, skipped=len(processor.skipped))

    except EventFieldsError as e:
        if fmt == "json":
            print(json.dumps(e.to_dict(), indent=2))
        else:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_ERROR)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(EXIT_ERROR)

    if settings.strict and len(sink):
        raise typer.Exit(EXIT_WARNINGS)


@app.command()
def version():
    """Print the event-fields version."""
    console.print(f"event-fields {__version__}")


def _output_rich(catalog: EventCatalog, sink: CollectingDiagnosticSink, skipped: int = 0):
    """Human-readable terminal output: one table per event, then a warning summary."""
    if not len(catalog):
        console.print("[yellow]No event interfaces processed[/yellow]")

    for event in catalog:
        console.print(f"[bold]{escape(event.qualified_name)}[/bold]")
        table = Table(show_edge=False)
        table.add_column("Field", style="bold")
        table.add_column("Type", style="cyan")
        for name, type_ref in event.fields.items():
            table.add_row(escape(name), escape(str(type_ref)))
        if not event.fields:
            table.add_row("[dim](no fields)[/dim]", "")
        console.print(table)
        console.print()

    conflicts = len(sink.of_kind(DiagnosticKind.TYPE_CONFLICT))
    unknown = len(sink.of_kind(DiagnosticKind.UNKNOWN_METHOD))
    summary = f"  [bold]{len(catalog)}[/bold] event(s)"
    if skipped:
        summary += f", {skipped} skipped"
    console.print(summary)
    if conflicts or unknown:
        console.print(
            f"  [yellow]{conflicts} type conflict(s), {unknown} unknown method(s)[/yellow]"
        )
