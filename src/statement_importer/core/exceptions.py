"""Custom exception classes for statement importing.

This module defines a hierarchy of exceptions used for file-level fatal
errors. Each exception maps to a specific error code defined in errors.py.
Format mismatches and per-row defects are not exceptions: parsers return
None or record a skipped row instead.
"""

from typing import Any

from statement_importer.core.errors import get_error


class StatementProcessingError(Exception):
    """Base exception for all file-level import errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "READ_001")
        details: Additional context about the error (for logging)
    """

    def __init__(self, error_code: str, details: dict[str, Any] | None = None):
        """Initialize the exception.

        Args:
            error_code: Error code from errors.py
            details: Additional error context
        """
        self.error_code = error_code
        self.details = details or {}
        super().__init__(error_code)

    def __str__(self) -> str:
        message = get_error(self.error_code)["message"]
        reason = self.details.get("reason")
        if reason:
            return f"{self.error_code}: {message} ({reason})"
        return f"{self.error_code}: {message}"


class FileReadError(StatementProcessingError):
    """Raised when a statement file or the input directory cannot be read.

    Maps to READ_001 (file) and READ_002 (directory).
    """

    pass


class PDFExtractionError(StatementProcessingError):
    """Raised when PDF text extraction fails.

    Common causes:
    - pdftotext is not installed (PDF_001)
    - Corrupted PDF or extraction timeout (PDF_002)
    """

    pass


class ParsingError(StatementProcessingError):
    """Raised when a claimed statement contains a row the parser cannot read.

    Maps to PARSE_003. Aborts the whole file.
    """

    pass


class OutputWriteError(StatementProcessingError):
    """Raised when the normalized CSV cannot be written (WRITE_001)."""

    pass
