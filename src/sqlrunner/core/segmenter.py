"""
Statement segmentation

Accumulates non-comment script lines into statement buffers and decides
where statements end. A line ends a statement when, after trimming trailing
whitespace, it ends with the active delimiter (or, in full-line mode, when
it consists of the delimiter alone). No SQL is parsed: a delimiter inside a
string literal at the end of a line still ends the statement.
"""

from dataclasses import dataclass, field

from sqlrunner.core.session import LINE_SEPARATOR, ScriptSession
from sqlrunner.domain.errors import MissingTerminatorError


@dataclass
class StatementBuffer:
    """Lines accumulated since the last flush."""

    fragments: list[str] = field(default_factory=list)

    def append(self, fragment: str) -> None:
        self.fragments.append(fragment)

    def text(self) -> str:
        return LINE_SEPARATOR.join(self.fragments)

    def has_content(self) -> bool:
        return any(fragment.strip() for fragment in self.fragments)


class StatementSegmenter:
    """Turns a sequence of lines into delimiter-terminated statements

    Boundaries are checked against the session's delimiter at the time each
    line is fed; a later delimiter change never re-splits buffered lines.

    Usage:
        segmenter = StatementSegmenter(session)
        for line in lines:
            statement = segmenter.feed(line)
            if statement is not None:
                ...
        segmenter.finish()
    """

    def __init__(self, session: ScriptSession) -> None:
        self.session = session
        self.buffer = StatementBuffer()

    @property
    def pending(self) -> str:
        """Text accumulated since the last boundary."""
        return self.buffer.text()

    def feed(self, line: str) -> str | None:
        """Append a line and return the completed statement, if any.

        Args:
            line: Script line without its line terminator

        Returns:
            Statement text with the delimiter removed, or None if the
            statement continues on the next line
        """
        line = self.session.prepare_text(line)
        delimiter = self.session.active_delimiter
        if not self._completes_statement(line, delimiter):
            self.buffer.append(line)
            return None

        self.buffer.append(line.rstrip()[: -len(delimiter)])
        statement = self.buffer.text()
        self.buffer = StatementBuffer()
        return statement

    def finish(self) -> None:
        """Check that the stream did not end inside a statement.

        Raises:
            MissingTerminatorError: If the buffer still holds non-blank text
        """
        if self.buffer.has_content():
            raise MissingTerminatorError.for_statement(
                self.buffer.text(), self.session.active_delimiter
            )

    def _completes_statement(self, line: str, delimiter: str) -> bool:
        if self.session.full_line_delimiter:
            return line.strip() == delimiter
        return line.rstrip().endswith(delimiter)
