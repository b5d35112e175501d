"""Dispatcher routing statements to the parser for their format.

This module orchestrates format recognition:
1. Try each registered parser in priority order
2. Stop at the first parser that recognizes the input
3. Return that parser's name and result, or None if nothing matched
"""

import logging
from collections.abc import Iterable

from pydantic import BaseModel

from statement_importer.parsers.base import StatementParser, Table
from statement_importer.parsers.formats import DEFAULT_PARSERS
from statement_importer.schemas.internal import ParseResult

logger = logging.getLogger(__name__)


class DispatchResult(BaseModel):
    """The parser that claimed a statement and what it produced."""

    parser_name: str
    result: ParseResult


class StatementDispatcher:
    """Dispatcher for Japanese bank and card statements.

    The registry is fixed at construction and its order is the matching
    priority. Parsers hold no state, so one dispatcher can be reused for
    any number of files.

    Example:
        >>> dispatcher = StatementDispatcher()
        >>> dispatched = dispatcher.dispatch(rows)
        >>> if dispatched:
        ...     print(f"Matched: {dispatched.parser_name}")
        ... else:
        ...     print("No matched parser")
    """

    def __init__(self, parsers: Iterable[StatementParser] = DEFAULT_PARSERS):
        """Initialize the dispatcher.

        Args:
            parsers: Parsers in priority order (default: every supported format)
        """
        self._parsers: tuple[StatementParser, ...] = tuple(parsers)

    @property
    def parser_names(self) -> list[str]:
        """Registered parser names in priority order."""
        return [parser.name for parser in self._parsers]

    def dispatch(self, rows: Table) -> DispatchResult | None:
        """Parse CSV rows with the first parser that recognizes them.

        Args:
            rows: Raw rows of one CSV file

        Returns:
            DispatchResult, or None if no parser matched

        Raises:
            StatementProcessingError: If the matched parser hits a fatal row
        """
        for parser in self._parsers:
            result = parser.parse(rows)
            if result is not None:
                logger.info(f"Matched parser {parser.name}")
                return DispatchResult(parser_name=parser.name, result=result)

        logger.info("No matched parser")
        return None

    def dispatch_text(self, text: str, source_name: str) -> DispatchResult | None:
        """Parse text extracted from a PDF with the first parser that recognizes it.

        Args:
            text: Layout-preserving PDF text
            source_name: Original file name (some formats read the year from it)

        Returns:
            DispatchResult, or None if no parser matched
        """
        for parser in self._parsers:
            result = parser.parse_text(text, source_name)
            if result is not None:
                logger.info(f"Matched parser {parser.name}")
                return DispatchResult(parser_name=parser.name, result=result)

        logger.info("No matched parser")
        return None
