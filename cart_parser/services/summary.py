from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for batch runs.

Format:
SUMMARY files={total}/{total} success={success} failed={failed} items={items}
errors={errors} total={grand_total} elapsed_sec={elapsed} throughput_ips={throughput}
"""


def _format_number(value: float, *, small_precision: int | None = None) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if small_precision is not None and abs(value) < 0.01:
        # 指数表記を避ける
        return f"{value:.{small_precision}f}".rstrip("0").rstrip(".")
    return str(value)


def _format_money(value: float) -> str:
    return f"{value:.2f}"


def render_summary_line(total_files: int, result: ProcessingResult) -> str:
    """Render a SUMMARY line from a ProcessingResult.

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2023, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2023, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_files=1, failed_files=0, total_items=10, total_errors=0,
        ...     grand_total=28.32, start_time=start, end_time=end,
        ...     elapsed_seconds=2.0, throughput_items_per_sec=5.0
        ... )
        >>> render_summary_line(1, result)
        'SUMMARY files=1/1 success=1 failed=0 items=10 errors=0 total=28.32 elapsed_sec=2 throughput_ips=5'
    """
    elapsed_str = _format_number(result.elapsed_seconds, small_precision=6)
    throughput_str = _format_number(result.throughput_items_per_sec)

    return (
        f"SUMMARY files={total_files}/{total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"items={result.total_items} "
        f"errors={result.total_errors} "
        f"total={_format_money(result.grand_total)} "
        f"elapsed_sec={elapsed_str} "
        f"throughput_ips={throughput_str}"
    )
