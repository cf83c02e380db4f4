"""Statement execution and result logging."""

from .executor import (
    DBAPIConnection,
    DBAPICursor,
    ExecutionOutcome,
    ResultCursor,
    RowsAffected,
    StatementExecutor,
)
from .result_logger import ResultLogger

__all__ = [
    "DBAPIConnection",
    "DBAPICursor",
    "ExecutionOutcome",
    "ResultCursor",
    "RowsAffected",
    "StatementExecutor",
    "ResultLogger",
]
