"""Rakuten Card parser.

Identified by a 10-column header whose last column is 新規サイン.
"""

from statement_importer.parsers.base import StatementParser, Row, Table
from statement_importer.parsers.normalize import DateFormat, flip_sign
from statement_importer.schemas.internal import NormalizedRecord


class RakutenCardParser(StatementParser):
    """Parser for Rakuten Card statements."""

    name = "rakuten_card"
    min_columns = 7
    date_format = DateFormat.SLASH_PADDED

    def matches(self, rows: Table) -> bool:
        return len(rows[0]) == 10 and rows[0][9] == "新規サイン"

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        return NormalizedRecord(
            date=date,
            amount=flip_sign(row[6]),
            payee=row[1],
        )
