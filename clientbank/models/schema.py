"""
Pydantic models for 1CClientBankExchange statement data.
"""
from datetime import datetime
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .types import DocumentType, ParserState
from ..core.detectors import detect_document_type
from ..core.normalize import (
    DATE_FORMAT,
    DATETIME_FORMAT,
    DEFAULT_TIMEZONE,
    TIME_FORMAT,
    TimezoneLike,
    combine_date_time,
    normalize_date,
    normalize_datetime,
    normalize_float,
    normalize_int,
    normalize_money_fixed,
)


class Section(BaseModel):
    """Named set of string fields."""
    name: str
    fields: Dict[str, str] = Field(default_factory=dict)

    def get_field(self, key: str) -> Optional[str]:
        return self.fields.get(key)

    def set_field(self, key: str, value: str):
        self.fields[key] = value

    def clear_fields(self):
        self.fields.clear()

    def get_date_field(self, field: str, timezone: TimezoneLike = DEFAULT_TIMEZONE,
                       date_format: str = DATE_FORMAT) -> Optional[datetime]:
        """Date-only field as midnight in the given zone."""
        return normalize_date(self.get_field(field), timezone, date_format)

    def get_datetime_field(self, field: str, timezone: TimezoneLike = DEFAULT_TIMEZONE,
                           datetime_format: str = DATETIME_FORMAT) -> Optional[datetime]:
        """Field holding both date and time."""
        return normalize_datetime(self.get_field(field), timezone, datetime_format)

    def get_datetime_fields(self, date_field: str, time_field: str,
                            timezone: TimezoneLike = DEFAULT_TIMEZONE,
                            date_format: str = DATE_FORMAT,
                            time_format: str = TIME_FORMAT) -> Optional[datetime]:
        """Timestamp assembled from a date field and a time field."""
        return combine_date_time(
            self.get_field(date_field), self.get_field(time_field),
            timezone, date_format, time_format
        )

    def get_float_field(self, field: str) -> Optional[float]:
        return normalize_float(self.get_field(field))

    def get_int_field(self, field: str) -> Optional[int]:
        return normalize_int(self.get_field(field))

    def get_currency_float_field(self, field: str) -> Optional[float]:
        """
        Amount in currency units (roubles, dollars) as a float.

        Prefer get_currency_fixed_field() for money arithmetic; floats do not
        hold kopecks exactly.
        """
        return self.get_float_field(field)

    def get_currency_fixed_field(self, field: str) -> Optional[int]:
        """Amount in subunits (kopecks, cents)."""
        return normalize_money_fixed(self.get_field(field))


class DocumentSection(Section):
    """One payment document: order, claim, etc."""
    name: str = "document"
    type_name: str
    type: DocumentType = DocumentType.OTHER

    @field_validator('type_name')
    @classmethod
    def validate_type_name(cls, v):
        """A document section always carries its raw label."""
        if not v:
            raise ValueError("Document type label cannot be empty")
        return v

    @model_validator(mode='before')
    @classmethod
    def classify_type_name(cls, data):
        """Derive the type from the label unless one is given explicitly."""
        if isinstance(data, dict) and data.get('type') is None and data.get('type_name'):
            data = {**data, 'type': detect_document_type(data['type_name'])}
        return data

    @classmethod
    def from_label(cls, type_name: str) -> "DocumentSection":
        """Open a document section for the label after "СекцияДокумент="."""
        return cls(type_name=type_name)

    def get_number(self) -> Optional[str]:
        return self.get_field('Номер')

    def get_date(self, timezone: TimezoneLike = DEFAULT_TIMEZONE) -> Optional[datetime]:
        return self.get_date_field('Дата', timezone)

    def get_withdrawal_date(self, timezone: TimezoneLike = DEFAULT_TIMEZONE) -> Optional[datetime]:
        """Date the amount was debited from the payer's account."""
        return self.get_date_field('ДатаСписано', timezone)

    def get_receipt_date(self, timezone: TimezoneLike = DEFAULT_TIMEZONE) -> Optional[datetime]:
        """Date the amount was credited to the recipient's account."""
        return self.get_date_field('ДатаПоступило', timezone)

    def get_amount_float(self) -> Optional[float]:
        """Amount in roubles. See get_amount_fixed()."""
        return self.get_currency_float_field('Сумма')

    def get_amount_fixed(self) -> Optional[int]:
        """Amount in kopecks."""
        return self.get_currency_fixed_field('Сумма')

    def get_payment_purpose(self) -> Optional[str]:
        return self.get_field('НазначениеПлатежа')

    # Payer

    def get_payer(self) -> Optional[str]:
        """Payer INN and name in one string."""
        return self.get_field('Плательщик')

    def get_payer_inn(self) -> Optional[str]:
        return self.get_field('ПлательщикИНН')

    def get_payer_name(self) -> Optional[str]:
        return self.get_field('Плательщик1')

    def get_payer_account(self) -> Optional[str]:
        """Payer settlement account (20 characters)."""
        return self.get_field('Плательщик2')

    def get_payer_account_real(self) -> Optional[str]:
        """Payer account in its own bank, whether or not that bank settles directly."""
        return self.get_field('ПлательщикСчет')

    def get_payer_bank(self) -> Optional[str]:
        return self.get_field('ПлательщикБанк1')

    def get_payer_bic(self) -> Optional[str]:
        return self.get_field('ПлательщикБИК')

    def get_payer_corr_account(self) -> Optional[str]:
        return self.get_field('ПлательщикКорсчет')

    # Recipient

    def get_recipient(self) -> Optional[str]:
        """Recipient INN and name in one string."""
        return self.get_field('Получатель')

    def get_recipient_inn(self) -> Optional[str]:
        return self.get_field('ПолучательИНН')

    def get_recipient_name(self) -> Optional[str]:
        return self.get_field('Получатель1')

    def get_recipient_account(self) -> Optional[str]:
        """Recipient settlement account (20 characters)."""
        return self.get_field('Получатель2')

    def get_recipient_account_real(self) -> Optional[str]:
        """Recipient account in its own bank, whether or not that bank settles directly."""
        return self.get_field('ПолучательСчет')

    def get_recipient_bank(self) -> Optional[str]:
        return self.get_field('ПолучательБанк1')

    def get_recipient_bic(self) -> Optional[str]:
        return self.get_field('ПолучательБИК')

    def get_recipient_corr_account(self) -> Optional[str]:
        return self.get_field('ПолучательКорсчет')


class RootSection(Section):
    """File-level fields plus every section of the file, in file order."""
    name: str = "root"
    sections: List[Union[DocumentSection, Section]] = Field(default_factory=list)

    def add_section(self, section: Section):
        self.sections.append(section)

    def clear_sections(self):
        self.sections.clear()

    @property
    def documents(self) -> List[DocumentSection]:
        return [s for s in self.sections if isinstance(s, DocumentSection)]

    def sections_named(self, name: str) -> List[Section]:
        """Generic sections with the given name, e.g. "РасчСчет"."""
        return [
            s for s in self.sections
            if not isinstance(s, DocumentSection) and s.name == name
        ]

    def get_format_version(self) -> Optional[str]:
        return self.get_field('ВерсияФормата')

    def get_encoding(self) -> Optional[str]:
        """Encoding label declared by the file, e.g. "Windows"."""
        return self.get_field('Кодировка')

    def get_sender(self) -> Optional[str]:
        return self.get_field('Отправитель')

    def get_receiver(self) -> Optional[str]:
        return self.get_field('Получатель')

    def get_creation_time(self, timezone: TimezoneLike = DEFAULT_TIMEZONE) -> Optional[datetime]:
        return self.get_datetime_fields('ДатаСоздания', 'ВремяСоздания', timezone)

    def get_start_date(self, timezone: TimezoneLike = DEFAULT_TIMEZONE) -> Optional[datetime]:
        """Start of the statement period."""
        return self.get_date_field('ДатаНачала', timezone)

    def get_end_date(self, timezone: TimezoneLike = DEFAULT_TIMEZONE) -> Optional[datetime]:
        """End of the statement period."""
        return self.get_date_field('ДатаКонца', timezone)

    def get_account(self) -> Optional[str]:
        """Settlement account; both spellings of the key are accepted."""
        account = self.get_field('РасчСчет')
        if account is None:
            account = self.get_field('РасчСчёт')
        return account


class ParseResult(BaseModel):
    """Outcome of one parse pass."""
    model_config = ConfigDict(frozen=True)

    state: ParserState
    line_number: int
    root: Optional[RootSection] = None

    @property
    def is_successful(self) -> bool:
        return self.state is ParserState.SUCCESS and self.root is not None
