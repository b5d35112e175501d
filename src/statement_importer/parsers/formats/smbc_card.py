"""SMBC Card (Vpass) parser.

The export has no header row. The first transaction row is recognized by
the card user column (ご本人/ご家族) and the quoted payment month ('26/01).
"""

from statement_importer.parsers.base import StatementParser, Row, Table, cell
from statement_importer.parsers.normalize import DateFormat, flip_sign
from statement_importer.schemas.internal import NormalizedRecord

CARD_USERS = ("ご本人", "ご家族")


class SmbcCardParser(StatementParser):
    """Parser for SMBC Card statements."""

    name = "smbc_card"
    header_rows = 0
    min_columns = 8
    date_format = DateFormat.SLASH

    def matches(self, rows: Table) -> bool:
        if cell(rows, 0, 2) not in CARD_USERS:
            return False
        payment_month = cell(rows, 0, 5)
        return payment_month is not None and payment_month.startswith("'")

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        # Foreign currency charges leave column 7 empty
        amount = row[7] or row[6]
        return NormalizedRecord(
            date=date,
            amount=flip_sign(amount),
            payee=row[1],
        )
