"""PayPay wallet parser.

PayPay marks empty money columns with "-". Withdrawals are negated with
commas stripped; deposits are passed through with their comma grouping.
"""

from statement_importer.parsers.base import HeaderStatementParser, Row
from statement_importer.parsers.normalize import DateFormat, convert_date, flip_sign
from statement_importer.schemas.internal import NormalizedRecord

PAYPAY_COLUMNS = (
    "取引日",
    "出金金額（円）",
    "入金金額（円）",
    "海外出金金額",
    "通貨",
    "変換レート（円）",
    "利用国",
    "取引内容",
    "取引先",
    "取引方法",
    "支払い区分",
    "利用者",
    "取引番号",
)

EMPTY_AMOUNTS = ("", "-")


class PayPayParser(HeaderStatementParser):
    """Parser for PayPay transaction history."""

    name = "paypay"
    # The real export starts with a UTF-8 BOM
    headers = (PAYPAY_COLUMNS, ("\ufeff" + PAYPAY_COLUMNS[0],) + PAYPAY_COLUMNS[1:])
    min_columns = 9
    date_format = DateFormat.SLASH

    def _parse_date(self, row: Row) -> str:
        # 2025/12/27 12:00:46 -> 2025/12/27
        return convert_date(self.date_format, row[0].split(" ")[0])

    def parse_row(self, row: Row, date: str) -> NormalizedRecord:
        amount = row[2]
        if row[1] not in EMPTY_AMOUNTS:
            amount = flip_sign(row[1])
        return NormalizedRecord(
            date=date,
            amount=amount,
            payee=row[8],
        )
