"""Domain errors and result envelopes."""

from .errors import ExecutionFailure, MissingTerminatorError, SqlRunnerError, TransactionError
from .results import ScriptRunResult, StatementResult

__all__ = [
    "SqlRunnerError",
    "MissingTerminatorError",
    "ExecutionFailure",
    "TransactionError",
    "StatementResult",
    "ScriptRunResult",
]
