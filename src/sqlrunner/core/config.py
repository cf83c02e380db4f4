"""
Runner configuration

Options that control how a script is segmented, submitted and committed.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DELIMITER = ";"


class RunnerConfig(BaseModel):
    """Configuration for script runs

    Options persist on a runner across runs until they are changed.

    Attributes:
        stop_on_error: If True, the first failing statement aborts the run
        send_full_script: If True, submit the whole script as one statement
        auto_commit: Auto-commit value forced on the connection for the run (None keeps it)
        full_line_delimiter: If True, the delimiter must occupy its own line
        remove_crs: If True, strip carriage returns before segmentation
        escape_processing: Forwarded to execution, no local effect
        delimiter: Delimiter every run starts with
    """

    model_config = ConfigDict(validate_assignment=True)

    stop_on_error: bool = Field(default=False, description="Abort the run on the first failure")
    send_full_script: bool = Field(default=False, description="Submit the script as one statement")
    auto_commit: bool | None = Field(default=None, description="Auto-commit override for the run")
    full_line_delimiter: bool = Field(
        default=False, description="Delimiter must be alone on its line"
    )
    remove_crs: bool = Field(default=False, description="Strip carriage returns")
    escape_processing: bool = Field(default=True, description="Driver escape processing")
    delimiter: str = Field(default=DEFAULT_DELIMITER, description="Initial statement delimiter")

    @field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        if not value or any(char.isspace() for char in value):
            raise ValueError("delimiter must be a non-empty run of non-whitespace characters")
        return value
