"""
Models package for mdhtml

Contains data structures and type definitions for the rendering pipeline.
"""

from .state import ProgramState, pipeline
from .markup import (
    TokenKind,
    Token,
    TagSpec,
    TagMarker,
    MarkupTable,
    DEFAULT_TABLE,
    table_build,
)
from .lines import LineKind, Line, Paragraph

__all__ = [
    "ProgramState",
    "pipeline",
    "TokenKind",
    "Token",
    "TagSpec",
    "TagMarker",
    "MarkupTable",
    "DEFAULT_TABLE",
    "table_build",
    "LineKind",
    "Line",
    "Paragraph",
]
