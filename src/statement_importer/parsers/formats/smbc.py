"""SMBC (Sumitomo Mitsui Banking Corporation) bank account parser.

Header: 年月日, お引出し, お預入れ, お取り扱い内容, 残高, メモ, ラベル
Withdrawals and deposits live in separate columns.
"""

from statement_importer.parsers.base import HeaderStatementParser, Row, debit_or_credit
from statement_importer.parsers.normalize import DateFormat
from statement_importer.schemas.internal import NormalizedRecord


class SmbcParser(HeaderStatementParser):
    """Parser for SMBC bank account statements."""

    name = "smbc"
    headers = (("年月日", "お引出し", "お預入れ", "お取り扱い内容", "残高", "メモ", "ラベル"),)
    min_columns = 4
    date_format = DateFormat.SLASH

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        return NormalizedRecord(
            date=date,
            amount=debit_or_credit(row[1], row[2]),
            payee=row[3],
        )
