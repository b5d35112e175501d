"""Epos card parser.

Dates are written as 2025年01月05日. Summary rows such as the annual fee
line carry a placeholder instead of a date and end up skipped.
"""

from statement_importer.parsers.base import HeaderStatementParser, Row, RowSkipped
from statement_importer.parsers.normalize import DateFormat, flip_sign
from statement_importer.schemas.internal import NormalizedRecord


class EposParser(HeaderStatementParser):
    """Parser for Epos card statements."""

    name = "epos"
    headers = (
        (
            "種別（ショッピング、キャッシング、その他）",
            "ご利用年月日",
            "ご利用場所",
            "ご利用内容",
            "ご利用金額",
            "お支払金額（キャッシングでは利息を含みます）",
            "支払区分",
        ),
    )
    min_columns = 7
    date_column = 1
    date_format = DateFormat.KANJI

    def check_row(self, row: Row) -> None:
        # Cells past the end of a short row count as empty
        payment_date = row[1] if len(row) > 1 else ""
        payment_type = row[6] if len(row) > 6 else ""
        if payment_date == "" or payment_type == "":
            raise RowSkipped("missing required fields (date or payment type)")

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        return NormalizedRecord(
            date=date,
            amount=flip_sign(row[5]),
            payee=row[2],
        )
