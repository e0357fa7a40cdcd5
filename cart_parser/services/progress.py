from __future__ import annotations

import sys

from tqdm import tqdm

from ..models.cart_file import CartFile, FileStatus

"""Batch progress display.

One tqdm bar over the files of a run, with running ok/failed/items/errors
tallies in its postfix. The bar is only drawn when stdout is a TTY; the tallies
are kept either way and the orchestrator reads its counts from them.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    return sys.stdout.isatty()


class ProgressTracker:
    """Counts finished cart files and mirrors the counts on a tqdm bar."""

    def __init__(self, total_files: int, *, description: str = "Parsing carts") -> None:
        self.description = description
        self.succeeded = 0
        self.failed = 0
        self.items = 0
        self.errors = 0
        # disable=True の tqdm は何も描画しない
        self.pbar = tqdm(
            total=total_files,
            desc=description,
            unit="file",
            disable=not is_tty_enabled(),
            leave=False,
            dynamic_ncols=True,
        )

    @property
    def finished(self) -> int:
        return self.succeeded + self.failed

    def start_file(self, name: str) -> None:
        self.pbar.set_description(f"{self.description} [{name}]")

    def finish_file(self, cart_file: CartFile) -> None:
        if cart_file.status is FileStatus.SUCCESS:
            self.succeeded += 1
            self.items += cart_file.item_count
        else:
            self.failed += 1
        self.errors += len(cart_file.errors)

        self.pbar.set_description(self.description)
        self.pbar.set_postfix(ok=self.succeeded, failed=self.failed, items=self.items, errors=self.errors)
        self.pbar.update(1)

    def close(self) -> None:
        self.pbar.close()

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
