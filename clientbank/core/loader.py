"""
Statement loading: reading bytes and decoding them from the legacy code page.
"""
import codecs
from pathlib import Path
from typing import Union
import logging

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "cp1251"


class ClientBankError(Exception):
    """Base class for errors raised by the statement loader."""


class UnreadableFileError(ClientBankError):
    """The statement file does not exist or cannot be read."""


class EncodingError(ClientBankError):
    """The statement bytes cannot be decoded with the requested encoding."""


def read_bytes(path: Union[str, Path]) -> bytes:
    """
    Read a statement file.

    Args:
        path: Path to the exchange file

    Returns:
        Raw file contents

    Raises:
        UnreadableFileError: if the file is missing, a directory, or not readable
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error(f"Unable to read file {path}: {e}")
        raise UnreadableFileError(f"Unable to read file: {path}") from e

    logger.info(f"Loaded {len(data)} bytes from {path}")
    return data


def decode_text(data: Union[bytes, str], encoding: str = DEFAULT_ENCODING) -> str:
    """
    Decode statement bytes to text.

    Text that is already decoded is returned unchanged.

    Args:
        data: Raw statement bytes
        encoding: Source code page

    Returns:
        Decoded text

    Raises:
        EncodingError: on an unknown codec or bytes invalid in that codec
    """
    if isinstance(data, str):
        return data

    try:
        codecs.lookup(encoding)
    except LookupError as e:
        logger.error(f"Unknown encoding: {encoding}")
        raise EncodingError(f"Unknown encoding: {encoding}") from e

    try:
        return data.decode(encoding)
    except UnicodeDecodeError as e:
        logger.error(f"Failed to decode document from {encoding}: {e}")
        raise EncodingError(
            f"Failed to convert document text to UTF-8 from {encoding}"
        ) from e


def load_file(path: Union[str, Path], encoding: str = DEFAULT_ENCODING) -> str:
    """Read and decode a statement file in one step."""
    return decode_text(read_bytes(path), encoding)
