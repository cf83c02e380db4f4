"""
Per-run engine state

A ScriptSession is built from the runner's configuration at the start of
every run and discarded when the run ends. The active delimiter lives here
and nowhere else.
"""

import os
from dataclasses import dataclass, field
from typing import TextIO

from sqlrunner.core.config import RunnerConfig

LINE_SEPARATOR = os.linesep


class LogSink:
    """Optional write-only text channel. Without a stream every call is a no-op."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def write(self, text: str) -> None:
        if self.stream is not None:
            self.stream.write(text)

    def println(self, text: str = "") -> None:
        if self.stream is not None:
            self.stream.write(text + LINE_SEPARATOR)
            self.stream.flush()


@dataclass
class ScriptSession:
    """Mutable state for a single script run

    Attributes:
        active_delimiter: Delimiter in effect for the line being read
        full_line_delimiter: Delimiter must occupy its own line
        stop_on_error: Abort on the first execution failure
        send_full_script: Submit the script as one statement
        auto_commit_override: Auto-commit forced for the run, or None
        remove_crs: Strip carriage returns before segmentation
        escape_processing: Forwarded to execution
        log: Normal log channel
        error_log: Error log channel
    """

    active_delimiter: str = ";"
    full_line_delimiter: bool = False
    stop_on_error: bool = False
    send_full_script: bool = False
    auto_commit_override: bool | None = None
    remove_crs: bool = False
    escape_processing: bool = True
    log: LogSink = field(default_factory=LogSink)
    error_log: LogSink = field(default_factory=LogSink)

    def __post_init__(self) -> None:
        if not self.active_delimiter:
            raise ValueError("active delimiter must not be empty")

    @classmethod
    def from_config(
        cls,
        config: RunnerConfig,
        log_writer: TextIO | None = None,
        error_log_writer: TextIO | None = None,
    ) -> "ScriptSession":
        return cls(
            active_delimiter=config.delimiter,
            full_line_delimiter=config.full_line_delimiter,
            stop_on_error=config.stop_on_error,
            send_full_script=config.send_full_script,
            auto_commit_override=config.auto_commit,
            remove_crs=config.remove_crs,
            escape_processing=config.escape_processing,
            log=LogSink(log_writer),
            error_log=LogSink(error_log_writer),
        )

    def prepare_text(self, text: str) -> str:
        """Apply the carriage-return pass to script text read in either mode."""
        if self.remove_crs:
            return text.replace("\r", "")
        return text

    def change_delimiter(self, delimiter: str) -> None:
        if not delimiter:
            raise ValueError("active delimiter must not be empty")
        self.active_delimiter = delimiter
