"""
Script segmentation core

Configuration, per-run session state, delimiter directives and the
statement segmenter.
"""

from .config import DEFAULT_DELIMITER, RunnerConfig
from .directives import DelimiterDirective, is_comment, parse_delimiter_directive
from .segmenter import StatementBuffer, StatementSegmenter
from .session import LINE_SEPARATOR, LogSink, ScriptSession

__all__ = [
    "DEFAULT_DELIMITER",
    "LINE_SEPARATOR",
    "RunnerConfig",
    "DelimiterDirective",
    "is_comment",
    "parse_delimiter_directive",
    "StatementBuffer",
    "StatementSegmenter",
    "LogSink",
    "ScriptSession",
]
