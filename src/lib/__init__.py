"""
mdhtml rendering pipeline

tokenizer -> resolver -> classifier -> assembler -> renderer
"""

from .tokenizer import Tokenizer, tokenize
from .resolver import InlineResolver, resolve
from .classifier import LineClassifier
from .assembler import ParagraphAssembler
from .renderer import DocumentRenderer, render
from .page import page_wrap
from .log import LOG, verbosity_connect

__all__ = [
    "Tokenizer",
    "tokenize",
    "InlineResolver",
    "resolve",
    "LineClassifier",
    "ParagraphAssembler",
    "DocumentRenderer",
    "render",
    "page_wrap",
    "LOG",
    "verbosity_connect",
]
