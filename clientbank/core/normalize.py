"""
Typed conversion of raw field values.

Every helper treats an empty string and the literal "0" as a missing value,
the same way the exchange format's producers mark an unset field.
"""
import math
import re
from datetime import datetime, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging

from .loader import ClientBankError

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Europe/Moscow"

DATE_FORMAT = "%d.%m.%Y"
TIME_FORMAT = "%H:%M:%S"
DATETIME_FORMAT = f"{DATE_FORMAT} {TIME_FORMAT}"

TimezoneLike = Union[str, tzinfo]

_MONEY_RE = re.compile(r'([+-]?[0-9]*)(?:[.,]([0-9]*))?', re.ASCII)
_INT_RE = re.compile(r'[+-]?[0-9]+', re.ASCII)
_FLOAT_RE = re.compile(r'[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?', re.ASCII)


class InvalidTimezoneError(ClientBankError, ValueError):
    """Raised when a caller passes a time zone identifier that does not exist."""


def is_missing(value: Optional[str]) -> bool:
    """True for values the typed accessors report as absent."""
    return value is None or value == "" or value == "0"


def resolve_timezone(timezone: TimezoneLike = DEFAULT_TIMEZONE) -> tzinfo:
    """
    Turn a zone identifier into a tzinfo.

    Args:
        timezone: IANA zone name or a ready tzinfo object

    Returns:
        tzinfo instance

    Raises:
        InvalidTimezoneError: if the identifier is unknown
    """
    if isinstance(timezone, tzinfo):
        return timezone
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezoneError(f"Unknown time zone: {timezone!r}") from e


def _strptime(value: str, format_str: str, zone: tzinfo) -> Optional[datetime]:
    try:
        return datetime.strptime(value, format_str).replace(tzinfo=zone)
    except ValueError:
        logger.debug(f"Could not parse {value!r} with format {format_str!r}")
        return None


def normalize_date(value: Optional[str], timezone: TimezoneLike = DEFAULT_TIMEZONE,
                   format_str: str = DATE_FORMAT) -> Optional[datetime]:
    """
    Parse a date-only value as midnight in the given zone.

    Args:
        value: Raw field value, e.g. "31.12.2024"
        timezone: Zone to attach
        format_str: strptime pattern of the date

    Returns:
        Aware datetime at 00:00:00, or None if missing or unparsable
    """
    zone = resolve_timezone(timezone)
    if is_missing(value):
        return None
    return _strptime(value, format_str, zone)


def normalize_datetime(value: Optional[str], timezone: TimezoneLike = DEFAULT_TIMEZONE,
                       format_str: str = DATETIME_FORMAT) -> Optional[datetime]:
    """Parse a combined "d.m.Y H:M:S" value in the given zone."""
    zone = resolve_timezone(timezone)
    if is_missing(value):
        return None
    return _strptime(value, format_str, zone)


def combine_date_time(date_value: Optional[str], time_value: Optional[str],
                      timezone: TimezoneLike = DEFAULT_TIMEZONE,
                      date_format: str = DATE_FORMAT,
                      time_format: str = TIME_FORMAT) -> Optional[datetime]:
    """
    Build one timestamp from separate date and time values.

    Returns None if either part is missing or does not parse.
    """
    zone = resolve_timezone(timezone)
    if is_missing(date_value) or is_missing(time_value):
        return None
    return _strptime(f"{date_value} {time_value}", f"{date_format} {time_format}", zone)


def normalize_float(value: Optional[str]) -> Optional[float]:
    """Parse a float, None if missing or not a number."""
    if is_missing(value):
        return None
    if not _FLOAT_RE.fullmatch(value):
        logger.debug(f"Could not parse float: {value!r}")
        return None
    result = float(value)
    if not math.isfinite(result):
        logger.debug(f"Float out of range: {value!r}")
        return None
    return result


def normalize_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer, None if missing or not an integer."""
    if is_missing(value):
        return None
    if not _INT_RE.fullmatch(value):
        logger.debug(f"Could not parse integer: {value!r}")
        return None
    return int(value)


def normalize_money_fixed(value: Optional[str]) -> Optional[int]:
    """
    Convert a decimal amount to an integer count of subunits (kopecks, cents).

    The value is split on the first "." or "," and fractional digits past the
    second are truncated:

        "1500"     -> 150000
        "1500."    -> 150000
        "1500.5"   -> 150050
        "1500,55"  -> 150055
        "1500.567" -> 150056

    The fraction is added without the integer part's sign, so "-5.50" gives
    -450. Statements produced by existing banking software rely on this.

    Args:
        value: Raw amount string

    Returns:
        Amount in subunits, or None if missing or not numeric
    """
    if is_missing(value):
        return None

    match = _MONEY_RE.fullmatch(value)
    if not match or not (match.group(1).lstrip("+-") or match.group(2)):
        logger.debug(f"Could not parse amount: {value!r}")
        return None

    integer_part, fraction = match.group(1), match.group(2)
    units = 100 * _leading_int(integer_part)

    if not fraction:
        return units
    if len(fraction) == 1:
        return units + 10 * int(fraction)
    return units + int(fraction[:2])


def _leading_int(text: str) -> int:
    # "" and a lone sign count as zero: ".5" is half a unit
    if text in ("", "+", "-"):
        return 0
    return int(text)
