"""
Document renderer

Splits a document into paragraphs on empty lines, renders each paragraph
and joins the results with the original line separator. Every empty line
becomes an empty paragraph, so vertical spacing survives the round trip:

    "a\n\nb"    ->  "<p>a</p>\n\n<p>b</p>"
    "a\n\n\nb"  ->  "<p>a</p>\n\n\n<p>b</p>"

Nothing is shared between paragraphs or between calls beyond the immutable
markup table and settings, so independent documents may be rendered on
separate threads.
"""

from typing import Iterator, List, Optional

from ..config import AppSettings, appsettings
from ..models.lines import Paragraph
from ..models.markup import DEFAULT_TABLE, MarkupTable
from .assembler import ParagraphAssembler
from .classifier import LineClassifier
from .log import LOG
from .resolver import InlineResolver


class DocumentRenderer:
    """
    Renders complete documents

    Wires tokenizer, resolver, classifier and assembler together for one
    set of settings.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        table: Optional[MarkupTable] = None,
    ) -> None:
        """
        Args:
            settings: Render settings; defaults to the appsettings singleton
            table: Markup table; defaults to DEFAULT_TABLE
        """
        self.settings = settings or appsettings
        self.table = table or DEFAULT_TABLE
        self.resolver = InlineResolver(self.table, self.settings)
        self.classifier = LineClassifier(self.resolver, self.settings)
        self.assembler = ParagraphAssembler(self.settings)

    def lines_split(self, text: str) -> List[str]:
        """Split text on the configured line separator; "" has no lines"""
        if not text:
            return []
        return text.split(self.settings.line_separator)

    def paragraphs_build(self, lines: List[str]) -> Iterator[List[str]]:
        """
        Group raw lines into paragraphs

        Yields:
            Lists of raw non-empty lines; every empty line yields an extra
            empty list in its own position. Whitespace-only lines are
            content, so their text survives rendering.
        """
        pending: List[str] = []
        for line in lines:
            if line:
                pending.append(line)
                continue
            if pending:
                yield pending
                pending = []
            yield []
        if pending:
            yield pending

    def paragraph_render(self, raw_lines: List[str]) -> str:
        """Classify and assemble one paragraph"""
        paragraph: Paragraph = [self.classifier.line_classify(raw) for raw in raw_lines]
        return self.assembler.paragraph_assemble(paragraph)

    def document_render(self, text: str) -> str:
        """
        Render a whole document

        Args:
            text: Source text

        Returns:
            HTML fragment; "" for empty input

        Raises:
            TypeError: text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"markdown must be str, not {type(text).__name__}")

        rendered = [
            self.paragraph_render(raw_lines)
            for raw_lines in self.paragraphs_build(self.lines_split(text))
        ]
        LOG(f"Rendered {len(rendered)} paragraphs from {len(text)} characters", level=2)
        return self.settings.line_separator.join(rendered)


def render(markdown: str, config: Optional[AppSettings] = None) -> str:
    """
    Render markdown text to an HTML fragment

    Args:
        markdown: Source text
        config: Render settings (base_url, style, line_separator);
                defaults to the appsettings singleton

    Returns:
        HTML fragment

    Example:
        >>> render("_x_")
        '<p><em>x</em></p>'
        >>> render("[T](page)", AppSettings(base_url="http://b/"))
        '<p><a href="http://b/page">T</a></p>'
    """
    return DocumentRenderer(config).document_render(markdown)
