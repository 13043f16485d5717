"""
mdhtml - Small-dialect markdown to HTML renderer

Converts emphasis, strong and code spans, links, headers, ordered lists
and indented code blocks into HTML.
"""

__version__ = "1.0.0"

from .config import AppSettings, appsettings
from .lib import (
    Tokenizer,
    InlineResolver,
    LineClassifier,
    ParagraphAssembler,
    DocumentRenderer,
    render,
    page_wrap,
    LOG,
    verbosity_connect,
)

__all__ = [
    "AppSettings",
    "appsettings",
    "Tokenizer",
    "InlineResolver",
    "LineClassifier",
    "ParagraphAssembler",
    "DocumentRenderer",
    "render",
    "page_wrap",
    "LOG",
    "verbosity_connect",
    "__version__",
]
