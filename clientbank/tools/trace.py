"""
Line trace tool for checking how a statement file is classified.
"""
from typing import List, Optional
import logging

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core.grammar import split_lines, clean_line
from ..core.runner import LineScanner
from ..models.types import ParserState

logger = logging.getLogger(__name__)

_STATE_STYLES = {
    ParserState.NO_HEADER: "red",
    ParserState.FILE_END: "green",
}


class TraceRow:
    """One line of the input with its classification and the state after it."""
    def __init__(self, line_number: int, text: str, kind: str, state: ParserState,
                 name: Optional[str] = None, value: Optional[str] = None):
        self.line_number = line_number
        self.text = text
        self.kind = kind
        self.state = state
        self.name = name
        self.value = value

    def __repr__(self):
        return f"TraceRow({self.line_number}, {self.kind}, state={self.state.value})"


def trace_lines(text: str) -> List[TraceRow]:
    """
    Run the scanner over the text and record what it did with every line.

    Lines after the point where parsing stops are not included.

    Args:
        text: Decoded statement text

    Returns:
        List of TraceRow, one per line read
    """
    scanner = LineScanner()
    rows = []

    for raw_line in split_lines(text):
        keep_going = scanner.feed(raw_line)
        line = clean_line(raw_line)
        token = scanner.token

        if not line:
            kind = "blank"
        elif token is None:
            kind = "ignored"
        else:
            kind = token.kind.value

        rows.append(TraceRow(
            line_number=scanner.line_number,
            text=line,
            kind=kind,
            state=scanner.state,
            name=token.name if token else None,
            value=token.value if token else None,
        ))

        if not keep_going:
            break

    logger.debug(f"Traced {len(rows)} lines")
    return rows


def render_trace(rows: List[TraceRow], console: Optional[Console] = None):
    """Print a trace as a table."""
    console = console or Console()

    table = Table(title="Line trace")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("State")
    table.add_column("Line", overflow="fold")

    for row in rows:
        if row.kind == "blank":
            continue
        style = _STATE_STYLES.get(row.state)
        if row.kind == "ignored":
            style = "yellow"
        table.add_row(str(row.line_number), row.kind, row.state.value, Text(row.text), style=style)

    console.print(table)
