"""
DB-API Statement Executor

Submits assembled statements to a DB-API 2.0 connection and reports what
came back: an update count or a result cursor.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from sqlrunner.core.session import LogSink
from sqlrunner.domain.errors import ExecutionFailure
from sqlrunner.domain.results import StatementResult
from sqlrunner.execution.result_logger import ResultLogger


class DBAPICursor(Protocol):
    """Minimal DB-API cursor used by the executor."""

    description: Sequence[Sequence[Any]] | None
    rowcount: int

    def execute(self, operation: str) -> object: ...

    def fetchone(self) -> Sequence[Any] | None: ...

    def close(self) -> None: ...


class DBAPIConnection(Protocol):
    """Minimal DB-API connection used by the runner."""

    autocommit: bool

    def cursor(self) -> DBAPICursor: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


@dataclass(frozen=True, slots=True)
class RowsAffected:
    """Outcome of a statement that produced no result set."""

    count: int


class ResultCursor:
    """Outcome of a row-producing statement

    Forward-only, single pass. Owns the underlying DB-API cursor until
    closed; use it as a context manager.
    """

    def __init__(self, cursor: DBAPICursor) -> None:
        self._cursor = cursor
        self.columns = [column[0] for column in cursor.description or ()]
        self.closed = False

    def __iter__(self) -> Iterator[Sequence[Any]]:
        while True:
            row = self._cursor.fetchone()
            if row is None:
                return
            yield row

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self._cursor.close()

    def __enter__(self) -> "ResultCursor":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


ExecutionOutcome = RowsAffected | ResultCursor


class StatementExecutor:
    """Execute single statements against a DB-API connection

    Attributes:
        connection: Caller-owned DB-API connection (never closed here)
        log: Log channel receiving statement text and result rows
        escape_processing: Forwarded driver option, kept for callers
    """

    def __init__(
        self, connection: DBAPIConnection, log: LogSink, escape_processing: bool = True
    ) -> None:
        self.connection = connection
        self.log = log
        self.escape_processing = escape_processing
        self.result_logger = ResultLogger(log)

    def submit(self, statement: str) -> StatementResult:
        """Log, execute and report one statement

        Args:
            statement: Assembled statement text (surrounding whitespace is trimmed)

        Returns:
            StatementResult for the successful statement

        Raises:
            ExecutionFailure: If the driver fails executing or fetching
        """
        sql = statement.strip()
        self.log.println(sql)
        self.log.println()

        match self.execute(sql):
            case ResultCursor() as cursor:
                try:
                    row_count = self.result_logger.log_results(cursor)
                except ExecutionFailure:
                    raise
                except Exception as e:
                    raise ExecutionFailure.for_statement(sql, e) from e
                return StatementResult(sql=sql, status="success", row_count=row_count)
            case RowsAffected(count=count):
                return StatementResult(sql=sql, status="success", rows_affected=count)

    def execute(self, sql: str) -> ExecutionOutcome:
        """Execute a statement and classify the outcome.

        Raises:
            ExecutionFailure: If the driver rejects the statement
        """
        cursor = self.connection.cursor()
        try:
            cursor.execute(sql)
        except Exception as e:
            cursor.close()
            raise ExecutionFailure.for_statement(sql, e) from e

        if cursor.description is not None:
            return ResultCursor(cursor)

        count = cursor.rowcount
        cursor.close()
        return RowsAffected(count=count)
