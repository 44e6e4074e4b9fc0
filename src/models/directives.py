"""
Directive line models

Defines the recognised shape of a conditional comment line and the
policies governing lines whose tag is not active.
"""

from enum import Enum
from dataclasses import dataclass


# Two-character line-comment marker that opens every directive line
COMMENT_MARKER: str = "//"

# Single normalized terminator used when joining output lines
LINE_TERMINATOR: str = "\n"


class UnknownTagPolicy(str, Enum):
    """
    What to do with a directive line whose tag is not active

    SUPPRESS:
        Single pass. The line is deleted from the output and contributes
        no line at all.
    PASSTHROUGH:
        The line is emitted unchanged. Active-tag payloads are re-classified
        until they stop matching, so stacked tags (//outer//inner x) resolve
        one level per active tag.
    """
    SUPPRESS = "suppress"
    PASSTHROUGH = "passthrough"


@dataclass(frozen=True)
class DirectiveLine:
    """
    A source line that matched the directive pattern

    Attributes:
        tag: Candidate tag captured right after the comment marker
        payload: Remainder of the line after the tag and the optional
                 single separating space (may be empty)

    Example:
        "//debug console.log(x)" -> DirectiveLine(tag="debug", payload="console.log(x)")
        "//debug"                -> DirectiveLine(tag="debug", payload="")
    """
    tag: str
    payload: str
