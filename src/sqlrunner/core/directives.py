"""
Delimiter directives

A directive is a comment line that redeclares the statement delimiter:

    -- @DELIMITER |
    //  @DELIMITER  ;
    -- //@deLimiTer $  trailing text is ignored

Any comment line of that shape is a directive, even one written as prose.
"""

import re
from dataclasses import dataclass

COMMENT_MARKERS = ("--", "//")

DELIMITER_PATTERN = re.compile(r"^\s*(?:(?:--|//)\s*)+@DELIMITER\s+(\S+)", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class DelimiterDirective:
    """New delimiter declared by a directive line."""

    new_delimiter: str


def is_comment(line: str) -> bool:
    """Return True if the trimmed line starts with a comment marker."""
    return line.strip().startswith(COMMENT_MARKERS)


def parse_delimiter_directive(line: str) -> DelimiterDirective | None:
    """Parse a directive line.

    Args:
        line: Raw script line

    Returns:
        The directive, or None if the line is not a directive (including a
        marker and keyword with no delimiter token)
    """
    match = DELIMITER_PATTERN.match(line.strip())
    if match is None:
        return None
    return DelimiterDirective(new_delimiter=match.group(1))
