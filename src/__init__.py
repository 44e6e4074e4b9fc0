"""
ecomcon - Conditional comment preprocessor

Turns tagged //<tag> comment lines into live code for the tags a build
enables, and prepends optional annotation comments.
"""

__version__ = "1.0.0"

from .lib import (
    Transformer,
    transform,
    directive_match,
    MalformedTagError,
    tag_isValid,
    tagSet_build,
    LOG,
    state_connectToLogger,
    logging_configure,
)
from .models import DirectiveLine, UnknownTagPolicy

__all__ = [
    "Transformer",
    "transform",
    "directive_match",
    "DirectiveLine",
    "UnknownTagPolicy",
    "MalformedTagError",
    "tag_isValid",
    "tagSet_build",
    "LOG",
    "state_connectToLogger",
    "logging_configure",
    "__version__",
]
