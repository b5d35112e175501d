"""Tests for the shared parsing loop."""

import pytest

from statement_importer.core.exceptions import ParsingError
from statement_importer.parsers.base import (
    HeaderStatementParser,
    RowSkipped,
    StatementParser,
    cell,
    debit_or_credit,
)
from statement_importer.parsers.normalize import DateFormat
from statement_importer.schemas.internal import NormalizedRecord


class SampleParser(HeaderStatementParser):
    """Minimal header-identified parser for testing the loop."""

    name = "sample"
    headers = (("date", "amount", "payee"),)
    min_columns = 3
    date_format = DateFormat.SLASH_PADDED

    def check_row(self, row):
        if len(row) > 2 and row[2] == "skip me":
            raise RowSkipped("asked to skip")

    def parse_row(self, row, date):
        return NormalizedRecord(date=date, amount=row[1], payee=row[2])


class TestCell:
    """Test suite for cell lookup."""

    def test_existing_cell(self):
        """Test a present cell is returned."""
        assert cell([["a", "b"]], 0, 1) == "b"

    def test_missing_row_or_column(self):
        """Test out-of-range lookups return None instead of raising."""
        rows = [["a"]]
        assert cell(rows, 1, 0) is None
        assert cell(rows, 0, 3) is None


class TestDebitOrCredit:
    """Test suite for withdrawal/deposit column pairs."""

    def test_withdrawal_is_negated(self):
        """Test a populated withdrawal becomes negative."""
        assert debit_or_credit("23,000", "") == "-23000"

    def test_deposit_passes_through(self):
        """Test the deposit cell is returned unchanged."""
        assert debit_or_credit("", "31113") == "31113"
        assert debit_or_credit("", "1,600") == "1,600"

    def test_withdrawal_wins_when_both_present(self):
        """Test withdrawal takes priority over deposit."""
        assert debit_or_credit("1000", "2000") == "-1000"


class TestStatementParser:
    """Test suite for StatementParser.parse."""

    def test_empty_input_is_not_matched(self):
        """Test an empty table is declined."""
        assert SampleParser().parse([]) is None

    def test_wrong_header_is_not_matched(self):
        """Test a different header is declined."""
        assert SampleParser().parse([["x", "y", "z"], ["2025/01/01", "1", "a"]]) is None

    def test_header_only_is_matched_and_empty(self):
        """Test a recognized file with no data rows is an empty result."""
        result = SampleParser().parse([["date", "amount", "payee"]])

        assert result is not None
        assert result.valid_records == []
        assert result.skipped_rows == []

    def test_parses_data_rows(self):
        """Test data rows become records in input order."""
        rows = [
            ["date", "amount", "payee"],
            ["2025/01/01", "-100", "shop"],
            ["2025/01/02", "200", "salary"],
        ]

        result = SampleParser().parse(rows)

        assert [r.date for r in result.valid_records] == ["2025-01-01", "2025-01-02"]
        assert result.valid_records[0].amount == "-100"
        assert result.valid_records[1].payee == "salary"

    def test_bad_date_becomes_skipped_row(self):
        """Test a bad date skips the row with its 1-based row number."""
        rows = [
            ["date", "amount", "payee"],
            ["2025/01/01", "-100", "shop"],
            ["invalid", "-50", "cafe"],
        ]

        result = SampleParser().parse(rows)

        assert len(result.valid_records) == 1
        assert len(result.skipped_rows) == 1
        skipped = result.skipped_rows[0]
        assert skipped.row_number == 3
        assert skipped.raw_data == ["invalid", "-50", "cafe"]
        assert skipped.reason == 'cannot parse "invalid" as YYYY/MM/DD'

    def test_row_skipped_reason_is_kept(self):
        """Test RowSkipped raised by parse_row is recorded."""
        rows = [["date", "amount", "payee"], ["2025/01/01", "1", "skip me"]]

        result = SampleParser().parse(rows)

        assert result.valid_records == []
        assert result.skipped_rows[0].reason == "asked to skip"

    def test_short_row_is_fatal(self):
        """Test a row narrower than min_columns aborts the file."""
        rows = [["date", "amount", "payee"], ["2025/01/01", "1"]]

        with pytest.raises(ParsingError) as exc_info:
            SampleParser().parse(rows)

        assert exc_info.value.error_code == "PARSE_003"
        assert exc_info.value.details["row_number"] == 2
        assert exc_info.value.details["parser"] == "sample"

    def test_short_row_without_date_is_skipped(self):
        """Test a narrow trailer row is skipped instead of failing the file."""
        rows = [
            ["date", "amount", "payee"],
            ["2025/01/01", "-100", "shop"],
            ["合計", "-100"],
        ]

        result = SampleParser().parse(rows)

        assert len(result.valid_records) == 1
        assert len(result.skipped_rows) == 1
        assert result.skipped_rows[0].row_number == 3
        assert result.skipped_rows[0].raw_data == ["合計", "-100"]

    def test_date_column_past_row_end_is_skipped(self):
        """Test a row that does not reach the date column is a skipped row."""
        parser = SampleParser()
        parser.date_column = 2

        result = parser.parse([["date", "amount", "payee"], ["only"]])

        assert result.valid_records == []
        assert result.skipped_rows[0].reason == 'cannot parse "" as YYYY/MM/DD'

    def test_check_row_runs_before_date(self):
        """Test check_row decides the skip reason for a row with a bad date."""
        rows = [["date", "amount", "payee"], ["invalid", "1", "skip me"]]

        result = SampleParser().parse(rows)

        assert result.skipped_rows[0].reason == "asked to skip"

    def test_non_ascii_digits_in_date_skipped(self):
        """Test full-width digits do not satisfy the date pattern."""
        rows = [["date", "amount", "payee"], ["２０２５/01/05", "1", "shop"]]

        result = SampleParser().parse(rows)

        assert result.valid_records == []
        assert result.skipped_rows[0].row_number == 2

    def test_parse_text_declines_by_default(self):
        """Test CSV parsers never claim PDF text."""
        assert SampleParser().parse_text("anything", "file.pdf") is None

    def test_base_methods_are_abstract(self):
        """Test the base class requires matches and parse_row."""
        parser = StatementParser()

        with pytest.raises(NotImplementedError):
            parser.matches([["a"]])
        with pytest.raises(NotImplementedError):
            parser.parse_row(["a"], "2025-01-01")
