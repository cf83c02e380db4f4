"""Tab-separated result logging."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from sqlrunner.core.session import LogSink

if TYPE_CHECKING:
    from sqlrunner.execution.executor import ResultCursor


def _to_text(value: Any) -> str:
    return "" if value is None else str(value)


class ResultLogger:
    """Write a result cursor to a log channel, one row at a time

    Output format (every cell, header included, is followed by a tab):

        ID\tNAME\t
        1\talice\t
    """

    def __init__(self, log: LogSink) -> None:
        self.log = log

    def log_results(self, cursor: "ResultCursor") -> int:
        """Drain and close the cursor, returning the number of rows written."""
        row_count = 0
        with cursor:
            self._write_line(cursor.columns)
            for row in cursor:
                self._write_line(_to_text(value) for value in row)
                row_count += 1
        return row_count

    def _write_line(self, cells: Iterable[str]) -> None:
        for cell in cells:
            self.log.write(f"{cell}\t")
        self.log.println()
