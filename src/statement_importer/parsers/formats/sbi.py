"""SBI Sumishin Net Bank parser.

The description column goes to the memo; SBI exports have no payee.
"""

from statement_importer.parsers.base import HeaderStatementParser, Row, debit_or_credit
from statement_importer.parsers.normalize import DateFormat
from statement_importer.schemas.internal import NormalizedRecord


class SbiParser(HeaderStatementParser):
    """Parser for SBI Sumishin Net Bank statements."""

    name = "sbi"
    headers = (("日付", "内容", "出金金額(円)", "入金金額(円)", "残高(円)", "メモ"),)
    min_columns = 4
    date_format = DateFormat.SLASH_PADDED

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        return NormalizedRecord(
            date=date,
            amount=debit_or_credit(row[2], row[3]),
            memo=row[1],
        )
