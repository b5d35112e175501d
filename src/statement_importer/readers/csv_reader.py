"""CSV loading with character encoding detection.

Japanese banks still export Shift_JIS; newer services use UTF-8 (PayPay
adds a BOM). Files are decoded to text, then split into raw rows without
any interpretation of the cells.
"""

import csv
import io
import logging
from pathlib import Path

from charset_normalizer import from_bytes

from statement_importer.core.exceptions import FileReadError

logger = logging.getLogger(__name__)

# charset-normalizer names for the Shift_JIS family; cp932 is the superset
# Windows-era exports actually use (NEC/IBM extensions, ①, ㈱ ...)
SHIFT_JIS_ALIASES = {
    "shift_jis",
    "shift-jis",
    "sjis",
    "cp932",
    "ms932",
    "windows-31j",
    "shift_jis_2004",
    "shift_jisx0213",
}


def detect_encoding(raw: bytes) -> str:
    """Pick the encoding used to decode a CSV file.

    UTF-8 is the default. Anything that is not valid UTF-8 is sniffed with
    charset-normalizer, and Shift_JIS guesses are decoded as cp932.

    Args:
        raw: File content

    Returns:
        Python codec name
    """
    try:
        raw.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    match = from_bytes(raw).best()
    if match is None:
        logger.debug("Encoding detection failed; assuming cp932")
        return "cp932"

    detected = match.encoding.lower()
    if detected in SHIFT_JIS_ALIASES:
        return "cp932"
    return detected


def decode_csv_bytes(raw: bytes) -> list[list[str]]:
    """Decode CSV bytes into rows of strings.

    Blank lines are dropped and rows may have different lengths. A UTF-8
    BOM is kept in the first cell.
    """
    encoding = detect_encoding(raw)
    text = raw.decode(encoding, errors="replace")
    reader = csv.reader(io.StringIO(text, newline=""))
    return [row for row in reader if row]


def read_csv_rows(path: str | Path) -> list[list[str]]:
    """Read a CSV statement file into raw rows.

    Args:
        path: CSV file path

    Returns:
        All rows, header included

    Raises:
        FileReadError: If the file cannot be read
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise FileReadError("READ_001", details={"path": str(path), "reason": str(e)}) from e

    try:
        rows = decode_csv_bytes(raw)
    except csv.Error as e:
        raise FileReadError("READ_001", details={"path": str(path), "reason": str(e)}) from e
    logger.debug("Read CSV", extra={"path": str(path), "rows": len(rows)})
    return rows
