"""Command-line entry point.

Converts every CSV/PDF statement in the input directory once, or keeps
watching it with --watch. Exits non-zero if any file failed fatally.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from statement_importer.config import Settings, expand_home_dir, get_settings
from statement_importer.core.exceptions import StatementProcessingError
from statement_importer.core.logging_config import setup_logging
from statement_importer.readers.pdf_text import STRATEGIES, PDFTextExtractor
from statement_importer.services.importer import StatementImporter, default_output_dir

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="statement-importer",
        description="Convert Japanese bank and card statements into budgeting CSV files.",
    )
    parser.add_argument(
        "--input-dir",
        default=settings.input_dir,
        help="Directory containing statement CSV/PDF files (env: INPUT_DIR, default: %(default)s).",
    )
    parser.add_argument(
        "--output-dir",
        default=settings.output_dir,
        help="Directory for converted CSV files (env: OUTPUT_DIR, default: <input-dir>/<YYYYMMDD>_output).",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        default=settings.watch,
        help="Keep running and convert files as they appear (env: WATCH).",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=settings.watch_interval_seconds,
        help="Polling interval in seconds for --watch (env: WATCH_INTERVAL_SECONDS, default: %(default)s).",
    )
    parser.add_argument(
        "--pdf-strategy",
        choices=STRATEGIES,
        default=settings.pdf_extraction_strategy,
        help="PDF text extraction backend (env: PDF_EXTRACTION_STRATEGY, default: %(default)s).",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (env: LOG_LEVEL, default: %(default)s).",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    args = parse_args(argv, settings)
    setup_logging(args.log_level, settings.log_file)

    input_dir = Path(expand_home_dir(args.input_dir))
    if args.output_dir:
        output_dir = Path(expand_home_dir(args.output_dir))
    else:
        output_dir = default_output_dir(input_dir)

    importer = StatementImporter(
        extractor=PDFTextExtractor(
            strategy=args.pdf_strategy,
            timeout_seconds=settings.pdftotext_timeout_seconds,
        )
    )

    if args.watch:
        importer.watch_directory(input_dir, output_dir, interval_seconds=args.interval)
        return 0

    try:
        summary = importer.process_directory(input_dir, output_dir)
    except StatementProcessingError as e:
        logger.error(str(e))
        return 1
    return summary.exit_code
