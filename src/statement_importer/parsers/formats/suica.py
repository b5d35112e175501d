"""Mobile Suica PDF parser.

The Suica "残高ご利用明細" is only available as a PDF. pdftotext -layout
gives one transaction per line with columns separated by runs of spaces:

    月 日 種別 利用駅 種別 利用駅 残高 入金・利用額
    12   27   入   京王橋本   出   調布        \\14,173      -314
    12   27   物販                               \\14,487      -170

There are no delimiters, so lines are recognized by their leading month
and day tokens and the trailing signed amount.
"""

import logging
import re
from datetime import date
from pathlib import Path

from statement_importer.parsers.base import RowSkipped, StatementParser, Table
from statement_importer.readers.pdf_text import PDFTextExtractor
from statement_importer.schemas.internal import NormalizedRecord, ParseResult, SkippedRow

logger = logging.getLogger(__name__)

PRODUCT_MARKER = "Ｓｕｉｃａ"
STATEMENT_MARKER = "残高ご利用明細"
BANNER_MARKERS = ("モバイル", "残高履歴")

# JE000000000000000_20251028_20260101110125.pdf -> 20251028
FILENAME_DATE_PATTERN = re.compile(r"_([0-9]{8})_")

RETAIL = "物販"
ENTRY = "入"
EXIT = "出"
AUTO_CHARGE = "ｵｰﾄ"
TRANSIT_PAYEE = "交通"

# The yen sign comes out as a backslash with Japanese PDF fonts
BALANCE_PREFIXES = ("\\", "¥", "￥")

MIN_TOKENS = 4


def extract_year_from_filename(filename: str) -> int | None:
    """Extract the statement year from a Suica PDF file name.

    Args:
        filename: File name or path

    Returns:
        Year from the first 8-digit date block, or None if absent
    """
    match = FILENAME_DATE_PATTERN.search(Path(filename).name)
    if not match:
        return None
    return int(match.group(1)[:4])


def _parse_bounded_int(token: str, low: int, high: int) -> int | None:
    if not (token.isascii() and token.isdigit()):
        return None
    value = int(token)
    if low <= value <= high:
        return value
    return None


class SuicaParser(StatementParser):
    """Parser for Mobile Suica usage history PDFs.

    Only spend is imported: auto-charges and other positive amounts are
    balance top-ups, not transactions.
    """

    name = "suica"

    def parse(self, rows: Table) -> ParseResult | None:
        # Suica is PDF only
        return None

    def parse_pdf(self, path: str | Path, extractor: PDFTextExtractor | None = None) -> ParseResult | None:
        """Extract text from a PDF and parse it.

        Raises:
            PDFExtractionError: If text extraction fails
        """
        extractor = extractor or PDFTextExtractor()
        text = extractor.extract(path)
        return self.parse_text(text, str(path))

    def parse_text(self, text: str, source_name: str) -> ParseResult | None:
        """Parse the text of a Suica statement.

        Args:
            text: Layout-preserving text of the whole PDF
            source_name: Original file name, used to find the year

        Returns:
            ParseResult, or None if the text is not a Suica statement
        """
        if not self._is_suica_statement(text):
            return None

        year = extract_year_from_filename(source_name)
        if year is None:
            year = date.today().year
            logger.debug("No date in file name; using current year", extra={"year": year})

        return self.parse_transactions(text, year)

    def parse_transactions(self, text: str, year: int) -> ParseResult:
        result = ParseResult()
        for line_number, line in enumerate(text.splitlines(), start=1):
            line = line.strip()
            if not line or any(marker in line for marker in BANNER_MARKERS):
                continue
            try:
                record = self._parse_line(line.split(), year)
            except RowSkipped as e:
                result.skipped_rows.append(
                    SkippedRow(row_number=line_number, raw_data=line.split(), reason=str(e))
                )
                continue
            if record is not None:
                result.valid_records.append(record)
        return result

    def _is_suica_statement(self, text: str) -> bool:
        # pdftotext may insert spaces between wide characters
        compact = re.sub(r"\s+", "", text)
        return PRODUCT_MARKER in compact and STATEMENT_MARKER in compact

    def _parse_line(self, tokens: list[str], year: int) -> NormalizedRecord | None:
        """Turn one line into a record.

        Returns None for lines that are not spend transactions.

        Raises:
            RowSkipped: If the amount column of a transaction is malformed
        """
        if len(tokens) < MIN_TOKENS:
            return None

        month = _parse_bounded_int(tokens[0], 1, 12)
        day = _parse_bounded_int(tokens[1], 1, 31)
        if month is None or day is None:
            return None

        kind = tokens[2]
        if kind == RETAIL:
            payee, memo = RETAIL, ""
        elif kind == ENTRY:
            route = self._extract_route(tokens)
            if route is None:
                return None
            payee, memo = TRANSIT_PAYEE, route
        elif kind == AUTO_CHARGE:
            # Balance top-up
            return None
        else:
            # Unknown kind
            return None

        amount = self._parse_amount(tokens[-1])
        if amount is None or amount > 0:
            return None

        return NormalizedRecord(
            date=f"{year:04d}-{month:02d}-{day:02d}",
            payee=payee,
            memo=memo,
            amount=str(amount),
        )

    def _extract_route(self, tokens: list[str]) -> str | None:
        """Build "from -> to" from an entry line, or None if incomplete."""
        try:
            exit_index = tokens.index(EXIT, 3)
        except ValueError:
            return None

        from_station = "".join(tokens[3:exit_index])

        to_tokens = []
        for token in tokens[exit_index + 1:]:
            if token.startswith(BALANCE_PREFIXES):
                break
            to_tokens.append(token)
        to_station = "".join(to_tokens)

        if not from_station or not to_station:
            return None
        return f"{from_station} -> {to_station}"

    def _parse_amount(self, token: str) -> int | None:
        if not token.startswith(("+", "-")):
            return None
        cleaned = token.replace(",", "")
        if not re.fullmatch(r"[+-][0-9]+", cleaned):
            raise RowSkipped(f'invalid amount "{token}"')
        return int(cleaned)
