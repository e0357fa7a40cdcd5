from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Processing result models for batch cart parsing.

FileStat carries per-file numbers; ProcessingResult aggregates them for the
SUMMARY output line.
"""


@dataclass(frozen=True)
class FileStat:
    """Per-file processing statistics (internal helper for ProcessingResult)."""
    file_name: str  # ファイル名
    status: str  # success/failed
    items: int  # 成功時アイテム数
    errors: int  # 検証エラー数
    total: float  # カート合計
    elapsed_seconds: float  # ファイル処理時間


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of a batch run over a source directory."""
    success_files: int
    failed_files: int
    total_items: int  # 成功ファイルのアイテム合計
    total_errors: int  # 全ファイルの検証エラー合計
    grand_total: float  # 成功カートの total 合計
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_items_per_sec: float
    file_stats: list[FileStat] | None = None
