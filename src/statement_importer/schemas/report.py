"""Import report schemas.

A FileReport describes what happened to one input file; a RunSummary
collects the reports of one import run and decides the exit code.
"""

from pydantic import BaseModel, Field

from statement_importer.schemas.internal import SkippedRow


class FileReport(BaseModel):
    """Outcome of importing one statement file."""

    source: str = Field(..., description="Input file path")
    parser_name: str | None = Field(None, description="Matched format, None if unrecognized")
    converted_count: int = Field(default=0, description="Records written to the output")
    skipped_rows: list[SkippedRow] = Field(default_factory=list)
    output_path: str | None = Field(None, description="Written CSV, if any")
    error_code: str | None = Field(None, description="Catalog code of a fatal error")
    error_message: str | None = Field(None, description="Fatal error description")

    @property
    def matched(self) -> bool:
        return self.parser_name is not None

    @property
    def failed(self) -> bool:
        return self.error_code is not None

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_rows)


class RunSummary(BaseModel):
    """Reports of every file processed in one run."""

    reports: list[FileReport] = Field(default_factory=list)

    def add(self, report: FileReport) -> None:
        self.reports.append(report)

    @property
    def successes(self) -> int:
        # Unrecognized files count as successes
        return sum(1 for report in self.reports if not report.failed)

    @property
    def failures(self) -> int:
        return sum(1 for report in self.reports if report.failed)

    @property
    def failed_reports(self) -> list[FileReport]:
        return [report for report in self.reports if report.failed]

    @property
    def exit_code(self) -> int:
        return 1 if self.failures else 0
