"""
Paragraph assembly

Joins the classified lines of one paragraph into a single <p> element.
Consecutive lines of the same kind share one wrapping element; a change of
kind closes the current wrapper and opens the next.

Example:
    lines "text", "    code 1", "    code 2" assemble to:

    <p>text
    <pre><code>code 1
    code 2</code></pre></p>
"""

from typing import List, Optional, Sequence

from ..config import AppSettings, appsettings
from ..models.lines import Line
from .html import tag_close, tag_open


class ParagraphAssembler:
    """Assembles classified lines into paragraph HTML"""

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or appsettings

    def lines_join(self, lines: Sequence[Line]) -> str:
        """
        Join line bodies, opening and closing wrappers where the kind changes

        Args:
            lines: Non-empty sequence of classified lines

        Returns:
            Joined body without the surrounding <p> element
        """
        separator = self.settings.line_separator
        parts: List[str] = [lines[0].opening_tag]

        # Runs are keyed by kind only: adjacent headers of different levels
        # share one wrapper, opened by the first and closed by the last.
        for line, following in zip(lines, lines[1:]):
            parts.append(line.value)
            if line.kind != following.kind:
                parts.append(line.closing_tag)
                parts.append(separator)
                parts.append(following.opening_tag)
            else:
                parts.append(separator)

        last = lines[-1]
        parts.append(last.value)
        parts.append(last.closing_tag)
        return "".join(parts)

    def paragraph_assemble(self, lines: Sequence[Line]) -> str:
        """
        Render one paragraph

        An empty paragraph stands for a blank input line and renders as "".
        """
        if not lines:
            return ""
        return f"{tag_open('p', self.settings)}{self.lines_join(lines)}{tag_close('p')}"
