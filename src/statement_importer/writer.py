"""Write normalized records as a budgeting-tool CSV."""

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

from statement_importer.core.exceptions import OutputWriteError
from statement_importer.schemas.internal import NormalizedRecord

logger = logging.getLogger(__name__)

OUTPUT_COLUMNS = ("Date", "Payee", "Memo", "Amount")


def _is_writable(record: NormalizedRecord) -> bool:
    """Records without a date or amount were never real income or spend."""
    return record.date != "" and record.amount != ""


def write_records_to_csv(records: Iterable[NormalizedRecord], output_path: str | Path) -> int:
    """Write records to a CSV file with a Date, Payee, Memo, Amount header.

    Amounts are written exactly as the parsers produced them.

    Args:
        records: Normalized records
        output_path: Destination file (overwritten)

    Returns:
        Number of rows written, header excluded

    Raises:
        OutputWriteError: If the file cannot be written
    """
    output_path = Path(output_path)
    written = 0
    try:
        with output_path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(OUTPUT_COLUMNS)
            for record in records:
                if not _is_writable(record):
                    continue
                writer.writerow([record.date, record.payee, record.memo, record.amount])
                written += 1
    except OSError as e:
        raise OutputWriteError(
            "WRITE_001", details={"path": str(output_path), "reason": str(e)}
        ) from e

    logger.debug("Wrote CSV", extra={"path": str(output_path), "rows": written})
    return written
