from __future__ import annotations

from pathlib import Path

"""Cart CSV file access.

The only disk I/O of the parsing pipeline lives here; the parser facade takes
read_file as an overridable collaborator so tests never touch the disk.
"""

__all__ = [
    "DEFAULT_ENCODING",
    "CSV_SUFFIX",
    "read_file",
    "scan_csv_files",
]

DEFAULT_ENCODING = "utf-8"
CSV_SUFFIX = ".csv"


def read_file(path: str | Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read a whole file as text.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the content is not valid for encoding
        LookupError: If encoding is not a known codec
    """
    return Path(path).read_text(encoding=encoding)


def scan_csv_files(directory: Path) -> list[Path]:
    """List .csv files in directory (non-recursive), sorted by name."""
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == CSV_SUFFIX)
