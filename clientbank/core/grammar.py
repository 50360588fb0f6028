"""
Line classification for the 1CClientBankExchange format.

Rules are tried in a fixed order. Several markers share the "Конец" prefix,
so the footer and the document end marker must be checked before the generic
section end rule.
"""
import re
from enum import Enum
from typing import Callable, List, Optional
import logging

logger = logging.getLogger(__name__)

HEADER = "1CClientBankExchange"
FOOTER = "КонецФайла"

# Characters stripped from both ends of every line
LINE_WHITESPACE = " \t\n\r\0\x0b"

_LINE_BREAK_RE = re.compile(r'\r\n|\r|\n')
_DOCUMENT_BEGIN_RE = re.compile(r'^СекцияДокумент=(.+)$', re.IGNORECASE)
_DOCUMENT_END_RE = re.compile(r'^КонецДокумента$', re.IGNORECASE)
_SECTION_BEGIN_RE = re.compile(r'^Секция([^=]+)$', re.IGNORECASE)
_SECTION_END_RE = re.compile(r'^Конец([^=]+)$', re.IGNORECASE)
_FIELD_RE = re.compile(r'^([^=]+)=(.*)$')


class LineKind(str, Enum):
    """What a single line of the exchange file means."""
    HEADER = "header"
    FOOTER = "footer"
    DOCUMENT_BEGIN = "document_begin"
    DOCUMENT_END = "document_end"
    SECTION_BEGIN = "section_begin"
    SECTION_END = "section_end"
    FIELD = "field"


class Line:
    """A classified line with the values captured from it."""
    def __init__(self, kind: LineKind, text: str, name: Optional[str] = None,
                 value: Optional[str] = None):
        self.kind = kind
        self.text = text
        # Section name, document type label or field key
        self.name = name
        # Field value (FIELD lines only)
        self.value = value

    def __repr__(self):
        return f"Line({self.kind.value}, name={self.name!r}, value={self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return (self.kind, self.text, self.name, self.value) == \
            (other.kind, other.text, other.name, other.value)


def _match_header(line: str) -> Optional[Line]:
    if line == HEADER:
        return Line(LineKind.HEADER, line)
    return None


def _match_footer(line: str) -> Optional[Line]:
    if line == FOOTER:
        return Line(LineKind.FOOTER, line)
    return None


def _match_document_begin(line: str) -> Optional[Line]:
    match = _DOCUMENT_BEGIN_RE.match(line)
    if match:
        return Line(LineKind.DOCUMENT_BEGIN, line, name=match.group(1))
    return None


def _match_document_end(line: str) -> Optional[Line]:
    if _DOCUMENT_END_RE.match(line):
        return Line(LineKind.DOCUMENT_END, line)
    return None


def _match_section_begin(line: str) -> Optional[Line]:
    match = _SECTION_BEGIN_RE.match(line)
    if match:
        return Line(LineKind.SECTION_BEGIN, line, name=match.group(1))
    return None


def _match_section_end(line: str) -> Optional[Line]:
    match = _SECTION_END_RE.match(line)
    if match:
        return Line(LineKind.SECTION_END, line, name=match.group(1))
    return None


def _match_field(line: str) -> Optional[Line]:
    match = _FIELD_RE.match(line)
    if match:
        return Line(LineKind.FIELD, line, name=match.group(1), value=match.group(2))
    return None


# Order matters: first match wins
RULES: List[Callable[[str], Optional[Line]]] = [
    _match_header,
    _match_footer,
    _match_document_begin,
    _match_document_end,
    _match_section_begin,
    _match_section_end,
    _match_field,
]


def split_lines(text: str) -> List[str]:
    """Split text on CRLF, CR or LF, in any mix."""
    return _LINE_BREAK_RE.split(text)


def clean_line(line: str) -> str:
    """Trim surrounding whitespace the way the format's producers pad lines."""
    return line.strip(LINE_WHITESPACE)


def classify_line(line: str) -> Optional[Line]:
    """
    Classify one trimmed, non-blank line.

    Args:
        line: Line text without surrounding whitespace

    Returns:
        Classified Line, or None if the line matches no rule
    """
    for matcher in RULES:
        result = matcher(line)
        if result is not None:
            return result

    logger.debug(f"Unrecognized line: {line!r}")
    return None
