from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import CartParserConfig
from ..files.reader import scan_csv_files
from ..files.writer import write_cart_json
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.cart_file import CartFile, FileStatus
from ..models.processing_result import FileStat, ProcessingResult
from .cart_parser import CartParser, DetailedValidationFailure, ValidationFailure
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Batch orchestration: parse every cart CSV of the configured directory.

Each file is handled independently; an unreadable or invalid file is recorded
as FAILED and processing continues with the next file. Validation errors are
buffered into the error log, which is flushed once at the end of the run.
"""

__all__ = [
    "ProcessingError",
    "scan_source_directory",
    "parser_from_config",
    "process_file",
    "process_all",
]

READ_ERROR = "READ_ERROR"
VALIDATION_FAILED = "VALIDATION_FAILED"
WRITE_ERROR = "WRITE_ERROR"


class ProcessingError(Exception):
    """Fatal error that prevents the batch from running at all."""
    pass


def scan_source_directory(directory: Path) -> list[Path]:
    """Scan directory for .csv files (non-recursive).

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return scan_csv_files(directory)
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def parser_from_config(config: CartParserConfig) -> CartParser:
    return CartParser(delimiter=config.delimiter, encoding=config.encoding)


def process_file(
    file_path: Path,
    parser: CartParser,
    error_log: ErrorLogBuffer,
    *,
    detailed_errors: bool = True,
    output_directory: Path | None = None,
) -> CartFile:
    """Parse one CSV file into a CartFile (never raises for per-file problems)."""
    start_time = datetime.now(UTC)

    try:
        cart = parser.parse_content(parser.read_file(file_path), detailed=detailed_errors)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        error_log.append(ErrorRecord.file_level(file_path.name, READ_ERROR, str(e)))
        logger.warning(f"{file_path.name}: read failed: {e}")
        return CartFile(
            path=file_path,
            name=file_path.name,
            start_time=start_time,
            end_time=datetime.now(UTC),
            status=FileStatus.FAILED,
            error=f"read failed: {e}",
        )
    except DetailedValidationFailure as e:
        error_log.extend_from_validation(file_path.name, e.errors)
        logger.warning(f"{file_path.name}: {e} ({len(e.errors)} error(s))")
        for err in e.errors:
            logger.debug(f"{file_path.name}: row={err.row} column={err.column} {err.message}")
        return CartFile(
            path=file_path,
            name=file_path.name,
            start_time=start_time,
            end_time=datetime.now(UTC),
            status=FileStatus.FAILED,
            errors=list(e.errors),
            error=str(e),
        )
    except ValidationFailure as e:
        error_log.append(ErrorRecord.file_level(file_path.name, VALIDATION_FAILED, str(e)))
        logger.warning(f"{file_path.name}: {e}")
        return CartFile(
            path=file_path,
            name=file_path.name,
            start_time=start_time,
            end_time=datetime.now(UTC),
            status=FileStatus.FAILED,
            error=str(e),
        )

    output_path = None
    if output_directory is not None:
        try:
            output_path = write_cart_json(cart, output_directory / f"{file_path.stem}.json")
        except OSError as e:
            error_log.append(ErrorRecord.file_level(file_path.name, WRITE_ERROR, str(e)))
            logger.error(f"{file_path.name}: write failed: {e}")
            return CartFile(
                path=file_path,
                name=file_path.name,
                start_time=start_time,
                end_time=datetime.now(UTC),
                status=FileStatus.FAILED,
                error=f"write failed: {e}",
            )
        logger.debug(f"{file_path.name}: written {output_path}")

    return CartFile(
        path=file_path,
        name=file_path.name,
        start_time=start_time,
        end_time=datetime.now(UTC),
        status=FileStatus.SUCCESS,
        cart=cart,
        output_path=output_path,
    )


def process_all(config: CartParserConfig, parser: CartParser | None = None) -> ProcessingResult:
    """Parse all cart CSV files in the configured source directory.

    Args:
        config: Loaded configuration
        parser: Parser to use (default: built from config)

    Returns:
        ProcessingResult with aggregated metrics and file stats

    Raises:
        ProcessingError: If the source directory cannot be scanned
    """
    start_time = datetime.now(UTC)
    error_log = ErrorLogBuffer()
    parser = parser or parser_from_config(config)
    output_directory = Path(config.output_directory) if config.output_directory else None

    file_paths = scan_source_directory(Path(config.source_directory))

    file_stats: list[FileStat] = []
    grand_total = 0.0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path.name)

            cart_file = process_file(
                file_path,
                parser,
                error_log,
                detailed_errors=config.detailed_errors,
                output_directory=output_directory,
            )
            progress.finish_file(cart_file)

            file_total = cart_file.cart.total if cart_file.cart is not None else 0.0
            grand_total += file_total

            elapsed = (cart_file.end_time - cart_file.start_time).total_seconds()
            file_stats.append(
                FileStat(
                    file_name=cart_file.name,
                    status=cart_file.status.value,
                    items=cart_file.item_count,
                    errors=len(cart_file.errors),
                    total=file_total,
                    elapsed_seconds=elapsed,
                )
            )

    log_path = error_log.flush()
    if log_path is not None:
        logger.info(f"error log: {log_path}")

    end_time = datetime.now(UTC)
    elapsed_seconds = (end_time - start_time).total_seconds()
    throughput = progress.items / elapsed_seconds if elapsed_seconds > 0 else 0.0

    return ProcessingResult(
        success_files=progress.succeeded,
        failed_files=progress.failed,
        total_items=progress.items,
        total_errors=progress.errors,
        grand_total=grand_total,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed_seconds,
        throughput_items_per_sec=throughput,
        file_stats=file_stats,
    )
