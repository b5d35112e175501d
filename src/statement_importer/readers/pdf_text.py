"""PDF text extraction wrapper.

This module provides a clean abstraction over the tools that turn a PDF
statement into layout-preserving plain text, making it easy to swap the
extraction backend without affecting the parsers.
"""

import logging
import subprocess
from pathlib import Path

from statement_importer.core.exceptions import PDFExtractionError

logger = logging.getLogger(__name__)

STRATEGIES = ("pdftotext", "pypdf")


class PDFTextExtractor:
    """Extracts text from a PDF with column positions kept as spacing.

    Example:
        >>> extractor = PDFTextExtractor()
        >>> text = extractor.extract("JE000000000000000_20251028_20260101110125.pdf")
    """

    def __init__(self, strategy: str = "pdftotext", timeout_seconds: float = 30.0):
        """Initialize the PDF text extractor.

        Args:
            strategy: Extraction backend.
                     "pdftotext" - poppler's pdftotext -layout (recommended)
                     "pypdf" - pure Python layout extraction, no external tool
            timeout_seconds: Limit for the pdftotext subprocess
        """
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown PDF extraction strategy: {strategy}")
        self.strategy = strategy
        self.timeout_seconds = timeout_seconds

    def extract(self, path: str | Path) -> str:
        """Extract UTF-8 text from a PDF file.

        Args:
            path: PDF file path

        Returns:
            Text with one visual line per text line

        Raises:
            PDFExtractionError: If the tool is missing or extraction fails
        """
        if self.strategy == "pypdf":
            return self._extract_with_pypdf(Path(path))
        return self._extract_with_pdftotext(Path(path))

    def _extract_with_pdftotext(self, path: Path) -> str:
        command = ["pdftotext", "-layout", str(path), "-"]
        logger.debug("Running pdftotext", extra={"path": str(path)})
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                timeout=self.timeout_seconds,
                check=False,
            )
        except FileNotFoundError as e:
            raise PDFExtractionError(
                "PDF_001",
                details={"path": str(path), "reason": "pdftotext not found in PATH"},
            ) from e
        except subprocess.TimeoutExpired as e:
            raise PDFExtractionError(
                "PDF_002",
                details={
                    "path": str(path),
                    "reason": f"pdftotext timed out after {self.timeout_seconds}s",
                },
            ) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise PDFExtractionError(
                "PDF_002",
                details={"path": str(path), "reason": stderr or f"exit status {completed.returncode}"},
            )

        return completed.stdout.decode("utf-8", errors="replace")

    def _extract_with_pypdf(self, path: Path) -> str:
        from pypdf import PdfReader
        from pypdf.errors import PyPdfError

        try:
            reader = PdfReader(path)
            pages = [page.extract_text(extraction_mode="layout") or "" for page in reader.pages]
        except (OSError, PyPdfError) as e:
            raise PDFExtractionError(
                "PDF_002", details={"path": str(path), "reason": str(e)}
            ) from e
        return "\n".join(pages)
