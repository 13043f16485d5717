"""
Line and paragraph models

Type-safe structures passed from the line classifier to the paragraph
assembler.
"""

from enum import Enum
from dataclasses import dataclass
from typing import List


class LineKind(Enum):
    """
    Classification of a single input line

    Adjacent lines of the same kind share one wrapping element.
    """
    BASIC = "basic"                # inline-resolved text, unwrapped
    HEADER = "header"              # <h1> .. <h6>
    CODE_BLOCK = "code_block"      # <pre><code>
    ORDERED_LIST = "ordered_list"  # <ol><li>


@dataclass(frozen=True)
class Line:
    """
    A classified line ready for paragraph assembly

    Attributes:
        value: Rendered body of the line (without its wrapping element)
        kind: Line classification
        opening_tag: Markup emitted before the first line of a run
        closing_tag: Markup emitted after the last line of a run

    Example:
        "## Title" classifies to:
        Line(value=" Title", kind=LineKind.HEADER,
             opening_tag="<h2>", closing_tag="</h2>")
    """
    value: str
    kind: LineKind = LineKind.BASIC
    opening_tag: str = ""
    closing_tag: str = ""


# A paragraph is an ordered run of lines; an empty one stands for a blank line
Paragraph = List[Line]
