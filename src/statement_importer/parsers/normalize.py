"""Amount and date normalization shared by all format parsers."""

import logging
import re
from datetime import date
from decimal import Decimal
from enum import Enum

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+)")


class DateParseError(ValueError):
    """Raised when a date cell does not match its format's pattern."""

    def __init__(self, value: str, date_format: "DateFormat"):
        self.value = value
        self.date_format = date_format
        super().__init__(f'cannot parse "{value}" as {date_format.label}')


class DateFormat(Enum):
    """Source date patterns used by the supported statements.

    Each member holds a regex with year, month and day groups plus a
    human-readable label used in skip reasons.
    """

    SLASH = (r"([0-9]{4})/([0-9]{1,2})/([0-9]{1,2})", "YYYY/M/D")
    SLASH_PADDED = (r"([0-9]{4})/([0-9]{2})/([0-9]{2})", "YYYY/MM/DD")
    COMPACT = (r"([0-9]{4})([0-9]{2})([0-9]{2})", "YYYYMMDD")
    KANJI = (r"([0-9]{4})年([0-9]{2})月([0-9]{2})日", "YYYY年MM月DD日")

    def __init__(self, pattern: str, label: str):
        self.regex = re.compile(pattern)
        self.label = label


def convert_date(date_format: DateFormat, value: str) -> str:
    """Convert a source date string to YYYY-MM-DD.

    Only the given pattern is tried; there is no fallback.

    Args:
        date_format: Pattern the value is expected to follow
        value: Raw date cell

    Returns:
        ISO formatted date

    Raises:
        DateParseError: If the value does not match or is not a real date
    """
    match = date_format.regex.fullmatch(value)
    if not match:
        raise DateParseError(value, date_format)
    year, month, day = (int(group) for group in match.groups())
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        raise DateParseError(value, date_format) from None


def flip_sign(value: str) -> str:
    """Negate a localized amount string.

    Thousands separators are stripped, decimals are truncated toward zero
    and the result is a plain integer string. Empty input yields "0".
    Unparsable input is logged and yields "0".

    Example:
        >>> flip_sign("1,000")
        '-1000'
        >>> flip_sign("-500")
        '500'
    """
    cleaned = value.replace(",", "").strip()
    if cleaned == "":
        return "0"

    if INTEGER_PATTERN.fullmatch(cleaned):
        number = int(cleaned)
    elif DECIMAL_PATTERN.fullmatch(cleaned):
        number = int(Decimal(cleaned))
    else:
        logger.warning("Invalid amount for flip_sign: %r", value)
        return "0"

    return str(-number)
