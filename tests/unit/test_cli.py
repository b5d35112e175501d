"""Tests for the command-line entry point."""

from unittest.mock import patch

import pytest

from statement_importer import cli
from statement_importer.config import Settings
from statement_importer.schemas.report import FileReport, RunSummary


@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, input_dir=str(tmp_path), output_dir=None)


@pytest.fixture(autouse=True)
def no_logging_setup():
    # Keep pytest's log capture handlers on the root logger
    with patch.object(cli, "setup_logging") as mock_setup:
        yield mock_setup


class TestParseArgs:
    """Test suite for argument parsing."""

    def test_defaults_from_settings(self, settings):
        """Test flags fall back to configured values."""
        args = cli.parse_args([], settings)

        assert args.input_dir == settings.input_dir
        assert args.output_dir is None
        assert args.watch is False
        assert args.interval == 5.0
        assert args.pdf_strategy == "pdftotext"

    def test_flags_override_settings(self, settings):
        """Test command-line flags win over settings."""
        args = cli.parse_args(
            ["--input-dir", "/in", "--output-dir", "/out", "--watch", "--interval", "1", "--pdf-strategy", "pypdf"],
            settings,
        )

        assert args.input_dir == "/in"
        assert args.output_dir == "/out"
        assert args.watch is True
        assert args.interval == 1.0
        assert args.pdf_strategy == "pypdf"

    def test_invalid_strategy_rejected(self, settings):
        """Test unknown PDF backends are rejected by argparse."""
        with pytest.raises(SystemExit):
            cli.parse_args(["--pdf-strategy", "ocr"], settings)


class TestMain:
    """Test suite for main."""

    def test_converts_directory(self, tmp_path, settings, write_csv):
        """Test a one-shot run converts files into the output directory."""
        write_csv(
            "bank.csv",
            "取引日,入出金(円),取引後残高(円),入出金内容\n20251201,-3000,97000,口座振替\n",
        )
        output_dir = tmp_path / "out"

        with patch.object(cli, "get_settings", return_value=settings):
            exit_code = cli.main(["--output-dir", str(output_dir)])

        assert exit_code == 0
        assert (output_dir / "bank_rakuten.csv").read_text(encoding="utf-8") == (
            "Date,Payee,Memo,Amount\n2025-12-01,口座振替,,-3000\n"
        )

    def test_default_output_dir(self, tmp_path, settings):
        """Test the dated output directory under the input directory is used."""
        with patch.object(cli, "get_settings", return_value=settings), patch.object(
            cli.StatementImporter, "process_directory", return_value=RunSummary()
        ) as mock_process:
            assert cli.main([]) == 0

        input_dir, output_dir = mock_process.call_args[0]
        assert input_dir == tmp_path
        assert output_dir.parent == tmp_path
        assert output_dir.name.endswith("_output")

    def test_failure_exit_code(self, settings):
        """Test any failed file makes the process exit 1."""
        summary = RunSummary(reports=[FileReport(source="a.csv", error_code="PARSE_003")])

        with patch.object(cli, "get_settings", return_value=settings), patch.object(
            cli.StatementImporter, "process_directory", return_value=summary
        ):
            assert cli.main([]) == 1

    def test_missing_input_dir(self, tmp_path, settings):
        """Test an unreadable input directory exits 1."""
        with patch.object(cli, "get_settings", return_value=settings):
            assert cli.main(["--input-dir", str(tmp_path / "missing")]) == 1

    def test_watch_mode(self, settings):
        """Test --watch polls instead of running once."""
        with patch.object(cli, "get_settings", return_value=settings), patch.object(
            cli.StatementImporter, "watch_directory", return_value=RunSummary()
        ) as mock_watch:
            assert cli.main(["--watch", "--interval", "0.5"]) == 0

        assert mock_watch.call_args.kwargs["interval_seconds"] == 0.5
