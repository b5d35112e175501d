"""Saison card parser.

Rows 1-3 hold card name, holder and payment date; row 4 is the header.
"""

from statement_importer.parsers.base import StatementParser, Row, Table, cell
from statement_importer.parsers.normalize import DateFormat, flip_sign
from statement_importer.schemas.internal import NormalizedRecord


class SaisonParser(StatementParser):
    """Parser for Saison card statements."""

    name = "saison"
    header_rows = 4
    min_columns = 6
    date_format = DateFormat.SLASH_PADDED

    def matches(self, rows: Table) -> bool:
        if len(rows) <= self.header_rows:
            return False
        return cell(rows, 0, 0) == "カード名称" and cell(rows, 3, 0) == "利用日"

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        return NormalizedRecord(
            date=date,
            amount=flip_sign(row[5]),
            payee=row[1],
        )
