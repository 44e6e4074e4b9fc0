"""
Models package for ecomcon

Contains data structures and type definitions for the transformation pipeline.
"""

from .state import TransformState, pipeline
from .directives import DirectiveLine, UnknownTagPolicy, COMMENT_MARKER, LINE_TERMINATOR

__all__ = [
    "TransformState",
    "pipeline",
    "DirectiveLine",
    "UnknownTagPolicy",
    "COMMENT_MARKER",
    "LINE_TERMINATOR",
]
