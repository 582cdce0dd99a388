from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display with tqdm (TTY only).

Large workbooks can take a few seconds per sheet, so sheet progress is shown
as a single tqdm bar. In non-TTY environments (CI, pipes) the bar is disabled
to avoid ANSI control sequence spam.
"""

__all__ = [
    "is_tty_enabled",
    "SheetProgressIndicator",
]


def is_tty_enabled() -> bool:
    """True when stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


class SheetProgressIndicator:
    """Sheet-level progress bar for one workbook."""

    def __init__(self, source: str, total_sheets: int) -> None:
        """Initialize the indicator.

        Args:
            source: Workbook name shown in the bar description
            total_sheets: Number of sheets that will be processed
        """
        self.source = source
        self.total_sheets = total_sheets
        self.current_sheet = 0
        self.records = 0
        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_sheets,
                desc=source,
                unit="sheet",
                leave=False,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def start_sheet(self, sheet_name: str) -> None:
        self.current_sheet += 1
        if self.pbar is not None:
            self.pbar.set_description(f"{self.source} ({sheet_name})")

    def finish_sheet(self, rows_processed: int = 0) -> None:
        self.records += rows_processed
        if self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_postfix(records=self.records)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> SheetProgressIndicator:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
