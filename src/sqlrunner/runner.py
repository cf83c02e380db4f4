"""
Script Runner

Drives a script through directive detection, segmentation and execution.
Two modes are available: segmented (default), which splits the script on
the active delimiter line by line, and full-script, which hands the whole
text to the connection as one statement.
"""

import io
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from sqlrunner.core.config import RunnerConfig
from sqlrunner.core.directives import is_comment, parse_delimiter_directive
from sqlrunner.core.segmenter import StatementSegmenter
from sqlrunner.core.session import ScriptSession
from sqlrunner.domain.errors import (
    ExecutionFailure,
    MissingTerminatorError,
    TransactionError,
)
from sqlrunner.domain.results import ScriptRunResult, StatementResult
from sqlrunner.execution.executor import DBAPIConnection, StatementExecutor


class ScriptRunner:
    """Run SQL scripts against a caller-owned DB-API connection

    Configuration and log writers persist across runs; delimiter state does
    not (every run starts at ``config.delimiter``). The connection is never
    closed by the runner.

    Attributes:
        connection: DB-API connection statements are submitted to
        config: Runner options
        log_writer: Stream receiving statements, comments and result rows
        error_log_writer: Stream receiving failure diagnostics
    """

    def __init__(
        self,
        connection: DBAPIConnection,
        config: RunnerConfig | None = None,
        log_writer: TextIO | None = None,
        error_log_writer: TextIO | None = None,
    ) -> None:
        self.connection = connection
        self.config = config or RunnerConfig()
        self.log_writer = log_writer
        self.error_log_writer = error_log_writer

    def run_script(self, reader: TextIO | str) -> ScriptRunResult:
        """Run every statement of a script

        Args:
            reader: Script text stream (a plain string is also accepted)

        Returns:
            ScriptRunResult with one entry per submitted statement

        Raises:
            MissingTerminatorError: If the script ends inside a statement
            ExecutionFailure: If a statement fails and stop_on_error is set
            TransactionError: If auto-commit cannot be set or the commit fails
        """
        if isinstance(reader, str):
            reader = io.StringIO(reader)

        session = ScriptSession.from_config(self.config, self.log_writer, self.error_log_writer)
        executor = StatementExecutor(self.connection, session.log, session.escape_processing)

        with self._auto_commit_scope(session):
            try:
                if session.send_full_script:
                    result = self._execute_full_script(reader, session, executor)
                else:
                    result = self._execute_line_by_line(reader, session, executor)
                self._commit()
            except BaseException:
                self._rollback(session)
                raise
        return result

    def _execute_full_script(
        self, reader: TextIO, session: ScriptSession, executor: StatementExecutor
    ) -> ScriptRunResult:
        script = session.prepare_text(reader.read())

        result = ScriptRunResult(mode="full_script")
        statement = script.strip()
        if statement:
            result.statement_results.append(self._submit(statement, session, executor))
        return result

    def _execute_line_by_line(
        self, reader: TextIO, session: ScriptSession, executor: StatementExecutor
    ) -> ScriptRunResult:
        result = ScriptRunResult(mode="segmented")
        segmenter = StatementSegmenter(session)

        for raw_line in reader:
            line = raw_line.rstrip("\r\n")
            if is_comment(line):
                directive = parse_delimiter_directive(line)
                if directive is not None:
                    session.change_delimiter(directive.new_delimiter)
                session.log.println(line.strip())
                continue

            statement = segmenter.feed(line)
            if statement is not None and statement.strip():
                result.statement_results.append(self._submit(statement, session, executor))

        try:
            segmenter.finish()
        except MissingTerminatorError as e:
            session.error_log.println(e.message)
            raise
        return result

    def _submit(
        self, statement: str, session: ScriptSession, executor: StatementExecutor
    ) -> StatementResult:
        """Submit one statement, applying the stop-on-error policy."""
        try:
            return executor.submit(statement)
        except ExecutionFailure as e:
            session.error_log.println(e.message)
            if session.stop_on_error:
                raise
            return StatementResult(sql=e.statement, status="failed", error_message=e.cause)

    @contextmanager
    def _auto_commit_scope(self, session: ScriptSession) -> Iterator[None]:
        """Force auto-commit for the run and restore the previous value afterwards.

        A failed restore after an aborted run goes to the error log; the
        error that aborted the run is the one propagated.
        """
        override = session.auto_commit_override
        if override is None:
            yield
            return

        previous = self.connection.autocommit
        self._set_auto_commit(override)
        try:
            yield
        except BaseException:
            try:
                self._set_auto_commit(previous)
            except TransactionError as e:
                session.error_log.println(e.message)
            raise
        self._set_auto_commit(previous)

    def _set_auto_commit(self, value: bool) -> None:
        if self.connection.autocommit == value:
            return
        try:
            self.connection.autocommit = value
        except Exception as e:
            raise TransactionError(
                message=f"Could not set AutoCommit to {value}. Cause: {e}",
                code="transaction",
            ) from e

    def _commit(self) -> None:
        if self.connection.autocommit:
            return
        try:
            self.connection.commit()
        except Exception as e:
            raise TransactionError(
                message=f"Could not commit transaction. Cause: {e}", code="transaction"
            ) from e

    def _rollback(self, session: ScriptSession) -> None:
        if self.connection.autocommit:
            return
        try:
            self.connection.rollback()
        except Exception as e:
            session.error_log.println(f"Could not roll back transaction. Cause: {e}")
