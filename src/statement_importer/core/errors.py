"""Error codes and user-friendly messages.

This module defines the error catalog for statement importing.
Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
"""

# Error catalog for statement importing
ERROR_CATALOG: dict[str, dict] = {
    "READ_001": {
        "code": "READ_001",
        "message": "Statement file could not be read",
        "user_message": "We couldn't open this statement file.",
        "suggestion": "Check that the file exists and is readable, then run the import again.",
    },
    "READ_002": {
        "code": "READ_002",
        "message": "Input directory could not be listed",
        "user_message": "We couldn't read the input directory.",
        "suggestion": "Check the --input-dir flag or the INPUT_DIR environment variable.",
    },
    "PARSE_001": {
        "code": "PARSE_001",
        "message": "No matched parser for statement format",
        "user_message": "We couldn't recognize this statement format.",
        "suggestion": (
            "Export the statement as CSV from SMBC, Rakuten, Epos, View, Saison, "
            "SBI, SMBC Card, PayPay, or the Suica PDF history."
        ),
    },
    "PARSE_003": {
        "code": "PARSE_003",
        "message": "Statement row is missing required columns",
        "user_message": "A row in this statement is shorter than its format allows.",
        "suggestion": "Download the statement again; the export may have been truncated.",
    },
    "PDF_001": {
        "code": "PDF_001",
        "message": "pdftotext executable not found",
        "user_message": "PDF statements need the pdftotext tool.",
        "suggestion": (
            "Install poppler (brew install poppler on macOS, "
            "apt-get install poppler-utils on Linux)."
        ),
    },
    "PDF_002": {
        "code": "PDF_002",
        "message": "PDF text extraction failed",
        "user_message": "This PDF appears to be corrupted or unreadable.",
        "suggestion": "Try downloading the statement again.",
    },
    "WRITE_001": {
        "code": "WRITE_001",
        "message": "Output CSV could not be written",
        "user_message": "We couldn't save the converted statement.",
        "suggestion": "Check that the output directory is writable.",
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details (a generic entry for unknown codes)
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Run the import again with --log-level DEBUG for details.",
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str) -> str:
    """Get user-friendly message for an error code."""
    return get_error(error_code)["user_message"]


def get_suggestion(error_code: str) -> str:
    """Get actionable suggestion for an error code."""
    return get_error(error_code)["suggestion"]
