"""Error taxonomy for script runs."""

from dataclasses import dataclass


@dataclass(slots=True)
class SqlRunnerError(Exception):
    """Base class for failures raised by a script run."""

    message: str
    code: str

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class MissingTerminatorError(SqlRunnerError):
    """Raised when the script ends inside a statement that was never terminated.

    Always fatal: there is no well-defined next statement to resume at.
    """

    statement: str = ""
    delimiter: str = ";"

    @classmethod
    def for_statement(cls, statement: str, delimiter: str) -> "MissingTerminatorError":
        return cls(
            message=f"Line missing end-of-line terminator ({delimiter}) => {statement}",
            code="missing_terminator",
            statement=statement,
            delimiter=delimiter,
        )


@dataclass(slots=True)
class ExecutionFailure(SqlRunnerError):
    """Raised when the connection rejects or fails a statement."""

    statement: str = ""
    cause: str = ""

    @classmethod
    def for_statement(cls, statement: str, cause: BaseException | str) -> "ExecutionFailure":
        cause_text = str(cause)
        return cls(
            message=f"Error executing: {statement}.  Cause: {cause_text}",
            code="execution_failed",
            statement=statement,
            cause=cause_text,
        )


class TransactionError(SqlRunnerError):
    """Raised when auto-commit cannot be switched or a commit fails."""
