"""
1CClientBankExchange Statement Parser

A parser for the line-oriented bank statement exchange format used between
banking software and accounting systems. Produces a typed section tree with
accessors for dates, identifiers and amounts.
"""

__version__ = "1.0.0"
__author__ = "ClientBank Team"

from .core.runner import StatementParser, parse_text, parse_document, parse_statement
from .core.detectors import detect_document_type
from .core.loader import ClientBankError, UnreadableFileError, EncodingError
from .core.normalize import InvalidTimezoneError
from .models.schema import (
    DocumentType,
    ParserState,
    ParseResult,
    Section,
    DocumentSection,
    RootSection,
)

__all__ = [
    "StatementParser",
    "parse_text",
    "parse_document",
    "parse_statement",
    "detect_document_type",
    "ClientBankError",
    "UnreadableFileError",
    "EncodingError",
    "InvalidTimezoneError",
    "DocumentType",
    "ParserState",
    "ParseResult",
    "Section",
    "DocumentSection",
    "RootSection",
]
