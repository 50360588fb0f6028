"""
End-to-end parsing orchestration.
"""
from pathlib import Path
from typing import Optional, Union
import logging

from .grammar import Line, LineKind, classify_line, clean_line, split_lines
from .loader import DEFAULT_ENCODING, decode_text, load_file
from ..models.schema import DocumentSection, ParseResult, ParserState, RootSection, Section

logger = logging.getLogger(__name__)


class LineScanner:
    """Scratch state of a single pass. Created anew for every parse."""

    def __init__(self):
        self.state = ParserState.INIT
        self.line_number = 0
        self.root: Optional[RootSection] = None
        self.section: Optional[Section] = None
        self.document: Optional[DocumentSection] = None
        # Classification of the most recent line, None for blank or unrecognized
        self.token: Optional[Line] = None

    def feed(self, raw_line: str) -> bool:
        """
        Consume one line.

        Returns:
            False once the scan has to stop (footer or missing header)
        """
        self.line_number += 1
        self.token = None
        line = clean_line(raw_line)
        if not line:
            return True

        token = self.token = classify_line(line)

        if token is not None and token.kind is LineKind.HEADER:
            self.state = ParserState.FILE_BEGIN
            self.root = RootSection()
            return True

        if self.state is ParserState.INIT:
            logger.debug(f"Line {self.line_number}: expected header, got {line!r}")
            self.state = ParserState.NO_HEADER
            return False

        if token is None:
            return True

        if token.kind is LineKind.FOOTER:
            self.state = ParserState.FILE_END
            return False

        if token.kind is LineKind.DOCUMENT_BEGIN:
            self.state = ParserState.DOCUMENT_BEGIN
            self.document = DocumentSection.from_label(token.name)
            logger.debug(f"Line {self.line_number}: document {token.name!r} opened")

        elif token.kind is LineKind.DOCUMENT_END:
            self.state = ParserState.DOCUMENT_END
            if self.root is not None and self.document is not None:
                self.root.add_section(self.document)
            self.document = None

        elif token.kind is LineKind.SECTION_BEGIN:
            self.state = ParserState.SECTION_BEGIN
            self.section = Section(name=token.name)
            logger.debug(f"Line {self.line_number}: section {token.name!r} opened")

        elif token.kind is LineKind.SECTION_END:
            self.state = ParserState.SECTION_END
            if self.root is not None and self.section is not None:
                self.root.add_section(self.section)
            self.section = None

        elif token.kind is LineKind.FIELD:
            self._set_field(token.name, token.value)

        return True

    def _set_field(self, key: str, value: str):
        target = self._field_target()
        if target is None:
            logger.debug(f"Line {self.line_number}: field {key!r} outside of a section, dropped")
            return
        target.set_field(key, value)

    def _field_target(self) -> Optional[Section]:
        if self.state is ParserState.FILE_BEGIN:
            return self.root
        if self.state is ParserState.DOCUMENT_BEGIN:
            return self.document
        if self.state is ParserState.SECTION_BEGIN:
            return self.section
        return None

    def finish(self) -> ParseResult:
        if self.state is not ParserState.NO_HEADER:
            if self.state is ParserState.FILE_END:
                self.state = ParserState.SUCCESS
            else:
                self.state = ParserState.NO_END_OF_FILE
        return ParseResult(state=self.state, line_number=self.line_number, root=self.root)


def parse_text(text: str) -> ParseResult:
    """
    Parse decoded statement text.

    Args:
        text: Whole exchange file as text

    Returns:
        Fresh ParseResult; structural problems are reported in its state
    """
    scan = LineScanner()
    for raw_line in split_lines(text):
        if not scan.feed(raw_line):
            break
    result = scan.finish()

    if result.is_successful:
        logger.info(
            f"Parsed statement: {len(result.root.sections)} sections in {result.line_number} lines"
        )
    else:
        logger.warning(f"Parse failed with state {result.state.value} at line {result.line_number}")
    return result


def parse_document(data: Union[bytes, str], encoding: str = DEFAULT_ENCODING) -> ParseResult:
    """Decode statement bytes and parse them."""
    return parse_text(decode_text(data, encoding))


def parse_statement(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> ParseResult:
    """
    Parse a 1CClientBankExchange file.

    Args:
        path: Path to the exchange file
        encoding: Source code page

    Returns:
        ParseResult

    Raises:
        UnreadableFileError: if the file cannot be read
        EncodingError: if its bytes cannot be decoded
    """
    return parse_text(load_file(path, encoding))


class StatementParser:
    """
    Load-then-parse interface keeping the outcome of the last parse.

    Every call to parse() scans the loaded text from scratch; nothing from a
    previous call carries over. An instance must not be shared between threads.
    """

    def __init__(self, verbose: bool = False):
        self.text: Optional[str] = None
        self.result: Optional[ParseResult] = None

        if verbose:
            logging.basicConfig(level=logging.DEBUG)

    def load_document(self, data: Union[bytes, str], encoding: str = DEFAULT_ENCODING):
        """Load statement bytes (or already decoded text)."""
        self.text = decode_text(data, encoding)

    def load_file(self, path: Union[str, Path], encoding: str = DEFAULT_ENCODING):
        """Load a statement file."""
        self.text = load_file(path, encoding)

    def parse(self) -> bool:
        """
        Parse the loaded text into sections.

        Returns:
            True if the file had a header and a footer
        """
        if self.text is None:
            raise ValueError("No document loaded")
        self.result = parse_text(self.text)
        return self.result.is_successful

    @property
    def state(self) -> ParserState:
        return self.result.state if self.result is not None else ParserState.INIT

    @property
    def line_number(self) -> int:
        """Line where the last parse stopped, 1-based."""
        return self.result.line_number if self.result is not None else 0

    @property
    def root_section(self) -> Optional[RootSection]:
        return self.result.root if self.result is not None else None

    def is_successful(self) -> bool:
        return self.result is not None and self.result.is_successful
