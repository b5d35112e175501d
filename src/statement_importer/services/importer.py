"""Statement import service.

This module orchestrates the complete import workflow for a file:
1. Read the file (CSV rows, or PDF text)
2. Dispatch to the parser for its format
3. Write the normalized records
4. Report converted and skipped rows

Fatal errors abort only the file they occur in; a directory run keeps
going and collects them in a RunSummary.
"""

import logging
import time
from datetime import datetime, timezone
from pathlib import Path

from statement_importer.core.errors import get_user_message
from statement_importer.core.exceptions import FileReadError, StatementProcessingError
from statement_importer.parsers.dispatcher import DispatchResult, StatementDispatcher
from statement_importer.readers.csv_reader import read_csv_rows
from statement_importer.readers.pdf_text import PDFTextExtractor
from statement_importer.schemas.report import FileReport, RunSummary
from statement_importer.writer import write_records_to_csv

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".pdf")


def default_output_dir(input_dir: str | Path, now: datetime | None = None) -> Path:
    """Output directory used when none is configured (e.g. ~/Desktop/20260102_output)."""
    now = now or datetime.now(timezone.utc)
    return Path(input_dir) / f"{now.strftime('%Y%m%d')}_output"


def output_path_for(source: Path, output_dir: Path, parser_name: str) -> Path:
    return output_dir / f"{source.stem}_{parser_name}.csv"


class StatementImporter:
    """Service for converting statement files into budgeting CSVs.

    Example:
        >>> importer = StatementImporter()
        >>> summary = importer.process_directory("~/Desktop", "~/Desktop/out")
        >>> raise SystemExit(summary.exit_code)
    """

    def __init__(
        self,
        dispatcher: StatementDispatcher | None = None,
        extractor: PDFTextExtractor | None = None,
    ):
        """Initialize the service.

        Args:
            dispatcher: Format dispatcher (default: every supported format)
            extractor: PDF text extractor (default: pdftotext)
        """
        self.dispatcher = dispatcher or StatementDispatcher()
        self.extractor = extractor or PDFTextExtractor()

    def process_file(self, path: str | Path, output_dir: str | Path) -> FileReport:
        """Import one statement file.

        Args:
            path: CSV or PDF statement
            output_dir: Directory for the normalized CSV (created if missing)

        Returns:
            FileReport; fatal errors are recorded in it rather than raised
        """
        path = Path(path)
        output_dir = Path(output_dir)
        report = FileReport(source=str(path))
        logger.info(f"Parsing {path} ...")

        try:
            dispatched = self._dispatch(path)
            if dispatched is None:
                logger.info(
                    f"Skipping {path}: {get_user_message('PARSE_001')}",
                    extra={"error_code": "PARSE_001"},
                )
                return report

            report.parser_name = dispatched.parser_name
            report.skipped_rows = dispatched.result.skipped_rows

            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_path_for(path, output_dir, dispatched.parser_name)
            report.converted_count = write_records_to_csv(
                dispatched.result.valid_records, output_path
            )
            report.output_path = str(output_path)
        except StatementProcessingError as e:
            report.error_code = e.error_code
            report.error_message = str(e)
            logger.error(f"Failed to import {path}: {e}", extra={"error_code": e.error_code})
            return report
        except OSError as e:
            report.error_code = "WRITE_001"
            report.error_message = str(e)
            logger.error(f"Failed to import {path}: {e}", extra={"error_code": "WRITE_001"})
            return report

        self._log_report(report)
        return report

    def process_directory(self, input_dir: str | Path, output_dir: str | Path) -> RunSummary:
        """Import every CSV and PDF file directly inside a directory.

        Subdirectories and other file types are ignored.

        Args:
            input_dir: Directory holding statement exports
            output_dir: Directory for the normalized CSVs

        Returns:
            RunSummary of all processed files

        Raises:
            FileReadError: If the input directory cannot be listed
        """
        summary = RunSummary()
        for path in self._list_statements(Path(input_dir)):
            summary.add(self.process_file(path, output_dir))

        logger.info(
            f"Processed {len(summary.reports)} files: "
            f"{summary.successes} succeeded, {summary.failures} failed"
        )
        for report in summary.failed_reports:
            logger.error(f"  {report.source}: {report.error_message}")
        return summary

    def watch_directory(
        self,
        input_dir: str | Path,
        output_dir: str | Path,
        interval_seconds: float = 5.0,
        max_cycles: int | None = None,
    ) -> RunSummary:
        """Poll a directory and import files when they appear or change.

        Files are processed one at a time on this loop. Stops on
        KeyboardInterrupt, or after max_cycles polls when given.

        Returns:
            RunSummary of every import done while watching
        """
        input_dir = Path(input_dir)
        summary = RunSummary()
        seen: dict[Path, float] = {}
        cycles = 0
        logger.info(f"Watching {input_dir} (every {interval_seconds}s, Ctrl+C to stop)")

        try:
            while max_cycles is None or cycles < max_cycles:
                cycles += 1
                try:
                    paths = self._list_statements(input_dir)
                except FileReadError as e:
                    logger.error(f"Cannot read {input_dir}: {e}")
                    paths = []

                for path in paths:
                    try:
                        mtime = path.stat().st_mtime
                    except OSError:
                        # Removed between listing and stat
                        continue
                    if seen.get(path) == mtime:
                        continue
                    seen[path] = mtime
                    summary.add(self.process_file(path, output_dir))

                if max_cycles is None or cycles < max_cycles:
                    time.sleep(interval_seconds)
        except KeyboardInterrupt:
            logger.info("Stopped watching")

        return summary

    def _dispatch(self, path: Path) -> DispatchResult | None:
        if path.suffix.lower() == ".pdf":
            text = self.extractor.extract(path)
            return self.dispatcher.dispatch_text(text, path.name)
        rows = read_csv_rows(path)
        return self.dispatcher.dispatch(rows)

    def _list_statements(self, input_dir: Path) -> list[Path]:
        try:
            entries = sorted(input_dir.iterdir())
        except OSError as e:
            raise FileReadError(
                "READ_002", details={"path": str(input_dir), "reason": str(e)}
            ) from e
        return [
            entry
            for entry in entries
            if entry.is_file() and entry.suffix.lower() in SUPPORTED_SUFFIXES
        ]

    def _log_report(self, report: FileReport) -> None:
        logger.info(
            f"{report.parser_name}: converted {report.converted_count} rows, "
            f"skipped {report.skipped_count} rows"
        )
        for skipped in report.skipped_rows:
            logger.warning(f"  row {skipped.row_number}: {skipped.reason}")
        if report.output_path:
            logger.info(f"Write csv to {report.output_path}")
