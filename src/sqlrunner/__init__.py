"""
sqlrunner

Run multi-statement SQL scripts against DB-API connections, with
in-script delimiter directives and tab-separated result logging.
"""

__version__ = "0.1.0"

from .core import (
    DEFAULT_DELIMITER,
    DelimiterDirective,
    LogSink,
    RunnerConfig,
    ScriptSession,
    StatementSegmenter,
    parse_delimiter_directive,
)
from .domain import (
    ExecutionFailure,
    MissingTerminatorError,
    ScriptRunResult,
    SqlRunnerError,
    StatementResult,
    TransactionError,
)
from .execution import ResultCursor, ResultLogger, RowsAffected, StatementExecutor
from .runner import ScriptRunner

__all__ = [
    "__version__",
    "DEFAULT_DELIMITER",
    "ScriptRunner",
    "RunnerConfig",
    "ScriptSession",
    "LogSink",
    "DelimiterDirective",
    "parse_delimiter_directive",
    "StatementSegmenter",
    "StatementExecutor",
    "ResultLogger",
    "ResultCursor",
    "RowsAffected",
    "ScriptRunResult",
    "StatementResult",
    "SqlRunnerError",
    "MissingTerminatorError",
    "ExecutionFailure",
    "TransactionError",
]
