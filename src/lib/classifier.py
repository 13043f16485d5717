"""
Line classification

Each input line is offered to an ordered chain of matchers; the first one
that recognizes the line decides its kind and wrapping element. A matcher
declares whether it looks at the raw line or at the inline-resolved line:

    code block    raw       tab or four spaces     <pre><code>
    ordered list  raw       "12. text"             <ol><li>
    header        resolved  "#" .. "######"        <h1> .. <h6>
    basic         resolved  anything else          (no wrapper)

The resolved line is computed lazily, so raw-only matches never pay for
inline resolution.
"""

from typing import Callable, List, Optional

from ..config import AppSettings, appsettings
from ..models.lines import Line, LineKind
from .html import angleBrackets_escape, tag_close, tag_open
from .log import LOG
from .resolver import InlineResolver

MAX_HEADER_LEVEL = 6


class LineMatcher:
    """
    Base class for classification matchers

    Attributes:
        markup_allowed: Match against the inline-resolved line instead of
                        the raw one
    """

    markup_allowed: bool = False

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or appsettings

    def line_match(self, text: str) -> Optional[Line]:
        """Return a classified Line, or None when the matcher does not apply"""
        raise NotImplementedError


class CodeBlockMatcher(LineMatcher):
    """Lines indented by one tab or four spaces"""

    INDENTS = ("\t", "    ")

    def line_match(self, text: str) -> Optional[Line]:
        for indent in self.INDENTS:
            if text.startswith(indent):
                return Line(
                    value=text[len(indent):],
                    kind=LineKind.CODE_BLOCK,
                    opening_tag=tag_open("pre", self.settings) + tag_open("code", self.settings),
                    closing_tag=tag_close("code") + tag_close("pre"),
                )
        return None


class OrderedListMatcher(LineMatcher):
    """
    Lines such as "3. item"

    The digits before the first "." are not checked for sequence; any
    non-empty decimal run followed by ". " is a list item.
    """

    def line_match(self, text: str) -> Optional[Line]:
        period = text.find(".")
        if period <= 0:
            return None

        number = text[:period]
        if not number.isdecimal():
            return None
        if not text.startswith(" ", period + 1):
            return None

        body = text[period + 1:].lstrip(" ")
        return Line(
            value=f"{tag_open('li', self.settings)}{body}{tag_close('li')}",
            kind=LineKind.ORDERED_LIST,
            opening_tag=tag_open("ol", self.settings),
            closing_tag=tag_close("ol"),
        )


class HeaderMatcher(LineMatcher):
    """
    Lines starting with one to six "#"

    Longer runs produce a level-6 header that keeps the extra "#" as text.
    """

    markup_allowed = True

    def line_match(self, text: str) -> Optional[Line]:
        for level in range(MAX_HEADER_LEVEL, 0, -1):
            prefix = "#" * level
            if text.startswith(prefix):
                element = f"h{level}"
                return Line(
                    value=text[level:],
                    kind=LineKind.HEADER,
                    opening_tag=tag_open(element, self.settings),
                    closing_tag=tag_close(element),
                )
        return None


class LineClassifier:
    """
    Ordered chain of line matchers with a basic-line fallback
    """

    def __init__(
        self,
        resolver: Optional[InlineResolver] = None,
        settings: Optional[AppSettings] = None,
        matchers: Optional[List[LineMatcher]] = None,
    ) -> None:
        """
        Args:
            resolver: Inline resolver for markup-allowed matchers
            settings: Render settings; defaults to the resolver's settings
            matchers: Custom matcher chain; defaults to code block, ordered
                      list, header
        """
        self.settings = settings or (resolver.settings if resolver else appsettings)
        self.resolver = resolver or InlineResolver(settings=self.settings)
        self.matchers: List[LineMatcher] = matchers if matchers is not None else [
            CodeBlockMatcher(self.settings),
            OrderedListMatcher(self.settings),
            HeaderMatcher(self.settings),
        ]

    def line_classify(self, raw: str) -> Line:
        """
        Classify a single raw input line

        Args:
            raw: Input line without its line separator

        Returns:
            Line with its rendered body, kind and wrapping tags
        """
        text = angleBrackets_escape(raw, self.resolver.table.escape)
        resolved = _Lazy(lambda: self.resolver.line_resolve(text))

        for matcher in self.matchers:
            candidate = resolved() if matcher.markup_allowed else text
            line = matcher.line_match(candidate)
            if line is not None:
                LOG(f"{line.kind.value:<12} │ {raw!r}", level=3)
                return line

        LOG(f"{LineKind.BASIC.value:<12} │ {raw!r}", level=3)
        return Line(value=resolved(), kind=LineKind.BASIC)


class _Lazy:
    """Compute a string once, on first call"""

    def __init__(self, producer: Callable[[], str]) -> None:
        self.producer = producer
        self.value: Optional[str] = None

    def __call__(self) -> str:
        if self.value is None:
            self.value = self.producer()
        return self.value
