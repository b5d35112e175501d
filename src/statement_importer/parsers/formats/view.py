"""View card (JR East) parser.

The export starts with six rows of member metadata; the column header
sits on row 5 and transactions begin on row 7.
"""

from statement_importer.parsers.base import StatementParser, Row, Table, cell
from statement_importer.parsers.normalize import DateFormat, flip_sign
from statement_importer.schemas.internal import NormalizedRecord


class ViewParser(StatementParser):
    """Parser for View card statements."""

    name = "view"
    header_rows = 6
    min_columns = 5
    date_format = DateFormat.SLASH_PADDED

    def matches(self, rows: Table) -> bool:
        if len(rows) <= self.header_rows:
            return False
        return cell(rows, 0, 0) == "会員番号" and cell(rows, 4, 0) == "ご利用年月日"

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        return NormalizedRecord(
            date=date,
            amount=flip_sign(row[4]),
            payee=row[1],
        )
