"""Statement parsing module.

This module turns raw CSV rows (or text extracted from a PDF) into
normalized budgeting records:
- StatementDispatcher picks the parser whose format signature matches
- Format parsers extract dates, payees and signed amounts
"""

from statement_importer.parsers.base import StatementParser
from statement_importer.parsers.dispatcher import DispatchResult, StatementDispatcher
from statement_importer.parsers.formats import DEFAULT_PARSERS
from statement_importer.parsers.normalize import DateFormat, DateParseError, convert_date, flip_sign

__all__ = [
    "DEFAULT_PARSERS",
    "DateFormat",
    "DateParseError",
    "DispatchResult",
    "StatementDispatcher",
    "StatementParser",
    "convert_date",
    "flip_sign",
]
