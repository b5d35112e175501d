"""SMBC Card parser for the newer export layout.

The first row holds the holder name (ending in 様) and the masked card
number. Section headers and totals are mixed in with the transactions,
so every row is scanned and only rows starting with a date are kept.
"""

from statement_importer.parsers.base import StatementParser, Row, Table, cell
from statement_importer.parsers.normalize import DateFormat, DateParseError, convert_date, flip_sign
from statement_importer.schemas.internal import NormalizedRecord


class SmbcCard2Parser(StatementParser):
    """Parser for the SMBC Card holder-summary layout."""

    name = "smbc_card2"
    header_rows = 0
    min_columns = 6
    date_format = DateFormat.SLASH

    def matches(self, rows: Table) -> bool:
        holder = cell(rows, 0, 0)
        card_number = cell(rows, 0, 1)
        if holder is None or card_number is None:
            return False
        return holder.endswith("様") and card_number.endswith("****")

    def is_data_row(self, row: Row) -> bool:
        if not row:
            return False
        try:
            convert_date(self.date_format, row[0])
        except DateParseError:
            return False
        return True

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        return NormalizedRecord(
            date=date,
            amount=flip_sign(row[5]),
            payee=row[1],
        )
