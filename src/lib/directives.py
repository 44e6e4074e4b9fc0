"""
Directive line classifier

Recognises lines of the form

    //<tag>[ ]<payload>

starting at the left margin. The tag is [A-Za-z0-9_]+, a single space after
the tag is consumed as separator, and the payload is the rest of the line.
Anything else is a plain line.
"""

import re
from typing import Optional

from ..models.directives import DirectiveLine, COMMENT_MARKER


DIRECTIVE_PATTERN = re.compile(
    re.escape(COMMENT_MARKER) + r'([A-Za-z0-9_]+) ?(.*)',
    re.DOTALL,
)


def directive_match(line: str) -> Optional[DirectiveLine]:
    """
    Classify one line

    Args:
        line: A single line with its terminator already removed

    Returns:
        DirectiveLine for a directive line, None for a plain line

    Example:
        >>> directive_match("//debug  log(x)")
        DirectiveLine(tag='debug', payload=' log(x)')
        >>> directive_match("// just a comment") is None
        True
        >>> directive_match("  //debug indented") is None
        True
    """
    match = DIRECTIVE_PATTERN.fullmatch(line)
    if not match:
        return None
    return DirectiveLine(tag=match.group(1), payload=match.group(2))
