#!/usr/bin/env python3
"""
CLI interface for the 1CClientBankExchange statement parser.
"""
import logging
import typer
from pathlib import Path
from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.text import Text

from clientbank.core.detectors import DocumentTypeDetector
from clientbank.core.loader import DEFAULT_ENCODING, ClientBankError, load_file
from clientbank.core.normalize import DEFAULT_TIMEZONE
from clientbank.core.runner import parse_text
from clientbank.tools.trace import render_trace, trace_lines

app = typer.Typer(help="1CClientBankExchange Statement Parser")
console = Console()


def _load(path: Path, encoding: str) -> str:
    try:
        return load_file(path, encoding)
    except ClientBankError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def parse(
    statement_path: Path = typer.Argument(..., help="Path to exchange file"),
    output: Optional[Path] = typer.Option(None, "--out", "-o", help="Output JSON file path"),
    encoding: str = typer.Option(DEFAULT_ENCODING, "--encoding", "-e", help="Source encoding"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output")
):
    """Parse an exchange file into structured JSON."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    result = parse_text(_load(statement_path, encoding))

    if output:
        output.write_text(result.model_dump_json(indent=2), encoding="utf-8")
        console.print(f"[green]Output written to: {output}[/green]")
    else:
        console.print_json(result.model_dump_json())

    if not result.is_successful:
        console.print(
            f"[red]Parse failed: {result.state.value} at line {result.line_number}[/red]"
        )
        raise typer.Exit(1)


@app.command()
def documents(
    statement_path: Path = typer.Argument(..., help="Path to exchange file"),
    encoding: str = typer.Option(DEFAULT_ENCODING, "--encoding", "-e", help="Source encoding"),
    timezone: str = typer.Option(DEFAULT_TIMEZONE, "--timezone", "-z", help="Time zone of dates")
):
    """List the payment documents of an exchange file."""
    result = parse_text(_load(statement_path, encoding))
    if not result.is_successful:
        console.print(
            f"[red]Parse failed: {result.state.value} at line {result.line_number}[/red]"
        )
        raise typer.Exit(1)

    table = Table(title=f"Documents ({len(result.root.documents)})")
    table.add_column("Type")
    table.add_column("Number")
    table.add_column("Date")
    table.add_column("Amount", justify="right")
    table.add_column("Purpose", overflow="fold")

    try:
        for document in result.root.documents:
            date = document.get_date(timezone)
            amount = document.get_amount_fixed()
            table.add_row(
                Text(document.type_name),
                Text(document.get_number() or ""),
                date.strftime("%Y-%m-%d") if date else "",
                f"{amount / 100:.2f}" if amount is not None else "",
                Text(document.get_payment_purpose() or ""),
            )
    except ClientBankError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(table)


@app.command()
def detect(
    label: str = typer.Argument(..., help="Document label, e.g. 'Платёжное поручение'"),
    aliases: Optional[List[Path]] = typer.Option(None, "--aliases", "-a", help="Extra alias YAML file")
):
    """Show which document type a label maps to."""
    detector = DocumentTypeDetector(aliases)
    document_type = detector.detect(label)
    console.print(f"[green]Document type: {document_type.value}[/green]")


@app.command()
def trace(
    statement_path: Path = typer.Argument(..., help="Path to exchange file"),
    encoding: str = typer.Option(DEFAULT_ENCODING, "--encoding", "-e", help="Source encoding")
):
    """Show how every line of an exchange file is classified."""
    render_trace(trace_lines(_load(statement_path, encoding)), console)


if __name__ == "__main__":
    app()
