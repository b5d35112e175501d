"""Rakuten Bank account parser.

Header: 取引日, 入出金(円), 取引後残高(円), 入出金内容
The amount column is already signed.
"""

from statement_importer.parsers.base import HeaderStatementParser, Row
from statement_importer.parsers.normalize import DateFormat
from statement_importer.schemas.internal import NormalizedRecord


class RakutenParser(HeaderStatementParser):
    """Parser for Rakuten Bank statements."""

    name = "rakuten"
    headers = (("取引日", "入出金(円)", "取引後残高(円)", "入出金内容"),)
    min_columns = 4
    date_format = DateFormat.COMPACT

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        return NormalizedRecord(
            date=date,
            amount=row[1],
            payee=row[3],
        )
