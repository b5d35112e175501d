"""Base statement parser.

This module provides the StatementParser class which handles the
parsing loop shared by every CSV statement format: header recognition,
per-row extraction, and downgrading bad rows to skipped rows.
Format-specific parsers inherit from this and override only
what's different.
"""

import logging
from collections.abc import Sequence

from statement_importer.core.exceptions import ParsingError
from statement_importer.parsers.normalize import DateFormat, DateParseError, convert_date, flip_sign
from statement_importer.schemas.internal import NormalizedRecord, ParseResult, SkippedRow

logger = logging.getLogger(__name__)

Row = Sequence[str]
Table = Sequence[Row]


class RowSkipped(Exception):
    """Raised by a parser to record a row as skipped with a reason."""


def cell(rows: Table, row_index: int, column: int) -> str | None:
    """Return a cell from a table, or None when it does not exist."""
    if row_index >= len(rows):
        return None
    row = rows[row_index]
    if column >= len(row):
        return None
    return row[column]


def debit_or_credit(debit: str, credit: str) -> str:
    """Pick the signed amount from a withdrawal/deposit column pair.

    A populated withdrawal wins and is negated; otherwise the deposit
    cell is returned unchanged.
    """
    if debit != "":
        return flip_sign(debit)
    return credit


class StatementParser:
    """Universal parsing loop for tabular statements.

    Subclasses declare their layout with class attributes and override:
        - matches(): Shape/header signature of the format
        - parse_row(): Turn one data row and its ISO date into a NormalizedRecord
        - check_row(): Raise RowSkipped for rows to record as skipped
        - is_data_row(): Rows to silently ignore (default: none)

    Example:
        >>> parser = SmbcParser()
        >>> result = parser.parse(rows)
        >>> if result is None:
        ...     print("not an SMBC statement")
    """

    name: str = ""

    # Leading rows (header and metadata) before the first data row
    header_rows: int = 1

    # Data rows must have at least this many cells
    min_columns: int = 1

    date_column: int = 0
    date_format: DateFormat = DateFormat.SLASH_PADDED

    def parse(self, rows: Table) -> ParseResult | None:
        """Parse a table if it has this parser's format.

        Args:
            rows: Raw CSV rows, header included

        Returns:
            ParseResult, or None if the table is not in this format

        Raises:
            ParsingError: If a row with a valid date is too short to read
        """
        if not rows or not self.matches(rows):
            return None

        result = ParseResult()
        for row_number, row in enumerate(rows[self.header_rows:], start=self.header_rows + 1):
            if not self.is_data_row(row):
                continue
            try:
                self.check_row(row)
                row_date = self._parse_date(row)
            except (DateParseError, RowSkipped) as exc:
                result.skipped_rows.append(
                    SkippedRow(row_number=row_number, raw_data=list(row), reason=str(exc))
                )
                continue
            # Trailer and summary rows are skipped above; a dated row must be complete
            self._check_width(row, row_number)
            result.valid_records.append(self.parse_row(row, row_date))

        logger.debug(
            "Parsed statement",
            extra={
                "parser": self.name,
                "records": len(result.valid_records),
                "skipped": len(result.skipped_rows),
            },
        )
        return result

    def parse_text(self, text: str, source_name: str) -> ParseResult | None:
        """Parse text extracted from a PDF statement.

        CSV formats always decline; PDF formats override this.
        """
        return None

    def matches(self, rows: Table) -> bool:
        """Check the table's shape against this format's signature."""
        raise NotImplementedError

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        """Extract one record from a data row whose date is already converted."""
        raise NotImplementedError

    def check_row(self, row: Row) -> None:
        pass

    def is_data_row(self, row: Row) -> bool:
        return True

    def _parse_date(self, row: Row) -> str:
        value = row[self.date_column] if self.date_column < len(row) else ""
        return convert_date(self.date_format, value)

    def _check_width(self, row: Row, row_number: int) -> None:
        if len(row) >= self.min_columns:
            return
        raise ParsingError(
            "PARSE_003",
            details={
                "parser": self.name,
                "row_number": row_number,
                "reason": (
                    f"row {row_number} has {len(row)} columns, "
                    f"{self.name} needs at least {self.min_columns}"
                ),
            },
        )


class HeaderStatementParser(StatementParser):
    """Parser for formats identified by an exact header row."""

    headers: tuple[tuple[str, ...], ...] = ()

    def matches(self, rows: Table) -> bool:
        return tuple(rows[0]) in self.headers
