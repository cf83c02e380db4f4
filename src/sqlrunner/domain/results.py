"""Typed result envelopes returned from script runs."""

from typing import Literal

from pydantic import BaseModel, Field


class StatementResult(BaseModel):
    """Result of a single submitted statement

    Attributes:
        sql: The statement text as it was submitted
        status: Execution status (success/failed)
        rows_affected: Update count reported by the driver (non-query statements)
        row_count: Number of rows written to the log (query statements)
        error_message: Error details if execution failed
    """

    sql: str = Field(..., description="Submitted SQL statement")
    status: Literal["success", "failed"] = Field(..., description="Execution status")
    rows_affected: int | None = Field(None, description="Rows affected")
    row_count: int | None = Field(None, description="Rows returned by a query")
    error_message: str | None = Field(None, description="Error message if failed")


class ScriptRunResult(BaseModel):
    """Result of a full script run

    Attributes:
        mode: How the script was submitted (segmented or full_script)
        statement_results: Detailed results for each submitted statement
    """

    mode: Literal["segmented", "full_script"] = Field(..., description="Submission mode")
    statement_results: list[StatementResult] = Field(
        default_factory=list, description="Statement results"
    )

    @property
    def total_statements(self) -> int:
        return len(self.statement_results)

    @property
    def successful_statements(self) -> int:
        return sum(1 for result in self.statement_results if result.status == "success")

    @property
    def failed_statements(self) -> int:
        return self.total_statements - self.successful_statements

    @property
    def status(self) -> Literal["success", "partial", "failed"]:
        """Overall status: "failed" if nothing succeeded, "partial" if some did"""
        if self.failed_statements == 0:
            return "success"
        return "failed" if self.successful_statements == 0 else "partial"

    @property
    def statements(self) -> list[str]:
        """Submitted statement texts, in order."""
        return [result.sql for result in self.statement_results]
