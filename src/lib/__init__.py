"""
ecomcon - Conditional comment preprocessor

Enables //<tag> comment lines whose tag is active and removes (or keeps)
the rest.
"""

__version__ = "1.0.0"

from .transformer import Transformer, transform
from .directives import directive_match
from .tags import MalformedTagError, tag_isValid, tagSet_build
from .log import LOG, logging_configure, state_connectToLogger

__all__ = [
    "Transformer",
    "transform",
    "directive_match",
    "MalformedTagError",
    "tag_isValid",
    "tagSet_build",
    "LOG",
    "state_connectToLogger",
    "logging_configure",
    "__version__",
]
