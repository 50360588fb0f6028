"""
Enumerations shared by the models and the detectors.
"""
from enum import Enum


class DocumentType(str, Enum):
    """Kind of financial instrument held in a document section."""
    BANK_ORDER = "bank_order"              # Банковский ордер
    PAYMENT_ORDER = "payment_order"        # Платёжное поручение
    COLLECTION_ORDER = "collection_order"  # Инкассовое поручение
    PAYMENT_CLAIM = "payment_claim"        # Платёжное требование
    OTHER = "other"


class ParserState(str, Enum):
    """State of the statement parser."""
    INIT = "init"

    FILE_BEGIN = "file_begin"
    FILE_END = "file_end"
    DOCUMENT_BEGIN = "document_begin"
    DOCUMENT_END = "document_end"
    SECTION_BEGIN = "section_begin"
    SECTION_END = "section_end"

    SUCCESS = "success"

    # Failures
    NO_HEADER = "no_header"
    NO_END_OF_FILE = "no_end_of_file"
    GENERAL_FAIL = "general_fail"

    @classmethod
    def from_name(cls, name: str) -> "ParserState":
        """Resolve a stored state value; anything unknown is GENERAL_FAIL."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.GENERAL_FAIL
