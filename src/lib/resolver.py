"""
Inline markup resolver

Turns the tokens of one line into HTML: matched delimiter pairs become
tags, links are expanded, code spans mask everything inside them and any
delimiter that cannot be paired stays in the output as literal text.

Resolution is a single left-to-right pass with six tokens of lookahead for
links. For every token, in order:

1. Link: "[", text, "]", "(", url, ")" is consumed as one anchor.
2. Escape: an escape token directly before this one is popped and this
   token is emitted literally, whatever it is.
3. Non-tag tokens (text, brackets, parens) are emitted literally.
4. Inside an open code span, non-code delimiters are emitted literally.
5. Alternation: the symbol's live marker decides whether the delimiter
   is expected to open (+1) or close (-1). An opener may not be followed by
   a space and a closer may not be preceded by one. A rejected delimiter is
   emitted as escape+symbol and removed by the final unescape pass.
6. Pairing: a symbol with an unmatched opener closes it; otherwise the
   delimiter becomes a new opener.

All state lives in a ResolutionState created per line, so nothing leaks
between lines or between concurrent renders.

Example:
    >>> InlineResolver().line_resolve("a _b_ `_c_`")
    'a <em>b</em> <code>_c_</code>'
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..config import AppSettings, appsettings
from ..models.markup import (
    DEFAULT_TABLE,
    MarkupTable,
    TagMarker,
    TagSpec,
    Token,
    TokenKind,
)
from .html import link_render, tag_wrap
from .log import LOG
from .tokenizer import Tokenizer

LINK_WIDTH = 6


@dataclass
class ResolutionState:
    """
    Working state for resolving a single line

    Attributes:
        tokens: Tokens of the line
        last_code: Index of the last code delimiter token, or -1
        output: Finalized output fragments, in order
        openers: Symbol -> output index of its unmatched opener
        markers: Symbol -> live alternation marker
        open_tags: Symbols of unmatched openers, innermost last
        inside_code: A code span is open and masks other markup
        escape_pending: The last output fragment is an unconsumed escape token
    """
    tokens: Sequence[Token]
    last_code: int = -1
    output: List[str] = field(default_factory=list)
    openers: Dict[str, int] = field(default_factory=dict)
    markers: Dict[str, TagMarker] = field(default_factory=dict)
    open_tags: List[str] = field(default_factory=list)
    inside_code: bool = False
    escape_pending: bool = False


class InlineResolver:
    """
    Resolves inline markup of single lines

    The resolver itself is immutable after construction and may be shared
    across threads.
    """

    def __init__(
        self,
        table: Optional[MarkupTable] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        """
        Args:
            table: Markup table; defaults to DEFAULT_TABLE
            settings: Render settings (base_url, style); defaults to appsettings
        """
        self.table = table or DEFAULT_TABLE
        self.settings = settings or appsettings
        self.tokenizer = Tokenizer(self.table)

        symbols = sorted(self.table.tags, key=len, reverse=True)
        self.escaped_pattern: Optional[re.Pattern[str]] = None
        if symbols:
            self.escaped_pattern = re.compile(
                re.escape(self.table.escape) + "(" + "|".join(re.escape(s) for s in symbols) + ")"
            )

    def line_resolve(self, line: str) -> str:
        """Tokenize and resolve a single line"""
        return self.tokens_resolve(self.tokenizer.tokens_split(line))

    def tokens_resolve(self, tokens: Sequence[Token]) -> str:
        """
        Resolve the tokens of one line into an HTML string

        Args:
            tokens: Output of Tokenizer.tokens_split() for one line

        Returns:
            The line with matched spans wrapped in tags, links expanded and
            every unmatched delimiter kept as literal text
        """
        state = ResolutionState(tokens=tokens, last_code=self.codeIndex_findLast(tokens))

        index = 0
        while index < len(tokens):
            index = self.token_process(state, index)

        resolved = self.escapes_remove("".join(state.output))
        if state.open_tags:
            LOG(f"Unmatched openers left literal: {state.open_tags}", level=3)
        return resolved

    def codeIndex_findLast(self, tokens: Sequence[Token]) -> int:
        """Index of the last code delimiter in tokens, or -1"""
        for index in range(len(tokens) - 1, -1, -1):
            token = tokens[index]
            if token.kind is TokenKind.DELIMITER and token.value == self.table.code:
                return index
        return -1

    def token_process(self, state: ResolutionState, index: int) -> int:
        """
        Handle the token at index

        Returns:
            Index of the next unprocessed token
        """
        tokens = state.tokens
        token = tokens[index]

        if not state.inside_code:
            link = self.link_match(tokens, index)
            if link is not None:
                state.escape_pending = False
                state.output.append(link)
                return index + LINK_WIDTH

        if state.escape_pending:
            state.escape_pending = False
            state.output.pop()
            state.output.append(token.value)
            return index + 1

        if token.kind is TokenKind.ESCAPE:
            state.escape_pending = True
            state.output.append(token.value)
            return index + 1

        spec = self.table.tag_get(token.value) if token.kind is TokenKind.DELIMITER else None
        if spec is None:
            state.output.append(token.value)
            return index + 1

        if state.inside_code and not spec.masks_markup:
            state.output.append(token.value)
            return index + 1

        self.tag_process(state, index, spec)
        return index + 1

    def link_match(self, tokens: Sequence[Token], index: int) -> Optional[str]:
        """
        Render a link starting at index, if the next six tokens form one

        The pattern is exactly: "[", text, "]", "(", url, ")" where text
        and url are single literal tokens.

        Returns:
            Anchor HTML, or None when the tokens do not form a link
        """
        if index + LINK_WIDTH > len(tokens):
            return None

        open_bracket, close_bracket, open_paren, close_paren = self.table.link
        window = tokens[index:index + LINK_WIDTH]
        expected: Tuple[Optional[str], ...] = (
            open_bracket, None, close_bracket, open_paren, None, close_paren,
        )
        for token, value in zip(window, expected):
            if value is None:
                if token.kind is not TokenKind.LITERAL:
                    return None
            elif token.kind is not TokenKind.DELIMITER or token.value != value:
                return None

        return link_render(window[1].value, window[4].value, self.settings)

    def tag_process(self, state: ResolutionState, index: int, spec: TagSpec) -> None:
        """
        Apply the alternation, whitespace and pairing rules to a tag delimiter
        """
        bias, marker = self.bias_lookup(state, spec)

        if bias != 0 and not self.whitespace_isValid(state.tokens, index, bias):
            state.output.append(self.table.escape + spec.symbol)
            return

        if bias != 0:
            marker.bias = -bias

        if spec.symbol in state.openers:
            self.span_close(state, spec)
        else:
            self.span_open(state, spec, marker, index)

    def bias_lookup(self, state: ResolutionState, spec: TagSpec) -> Tuple[int, TagMarker]:
        """
        Expected polarity of the next use of spec.symbol

        Returns:
            (bias, marker) where bias is:
                initial_bias  no marker exists yet (implicit opener)
                marker.bias   the innermost open tag has this symbol
                0             another symbol is innermost; no whitespace check
        """
        marker = state.markers.get(spec.symbol)
        if marker is None:
            return spec.initial_bias, TagMarker(spec=spec, bias=spec.initial_bias)
        if state.open_tags and state.open_tags[-1] == spec.symbol:
            return marker.bias, marker
        return 0, marker

    def whitespace_isValid(self, tokens: Sequence[Token], index: int, bias: int) -> bool:
        """
        Openers may not be followed by a space, closers not preceded by one
        """
        if bias < 0:
            return index == 0 or not tokens[index - 1].value.endswith(" ")
        return index + 1 >= len(tokens) or not tokens[index + 1].value.startswith(" ")

    def span_open(
        self, state: ResolutionState, spec: TagSpec, marker: TagMarker, index: int
    ) -> None:
        state.openers[spec.symbol] = len(state.output)
        state.output.append(spec.symbol)
        state.markers[spec.symbol] = marker
        state.open_tags.append(spec.symbol)

        # A code delimiter at the last code position has nothing left to close it
        if spec.masks_markup and index < state.last_code:
            state.inside_code = True

    def span_close(self, state: ResolutionState, spec: TagSpec) -> None:
        """
        Close the unmatched opener of spec.symbol

        Pops the output down to and including the opener, drops any openers
        nested inside the span and pushes the rendered span.
        """
        start = state.openers[spec.symbol]
        body = "".join(state.output[start + 1:])
        del state.output[start:]

        while state.open_tags:
            symbol = state.open_tags.pop()
            state.markers.pop(symbol, None)
            state.openers.pop(symbol, None)
            if symbol == spec.symbol:
                break

        if spec.masks_markup:
            state.inside_code = False

        state.output.append(self.span_render(spec, body))

    def span_render(self, spec: TagSpec, body: str) -> str:
        """
        Wrap body in the tag's element

        Digit-suppressed tags leave digit-only bodies unwrapped, so version
        numbers such as 1_2_3 stay literal.
        """
        if spec.digits_suppressed and all(char.isdecimal() for char in body):
            return f"{spec.symbol}{body}{spec.symbol}"
        return tag_wrap(spec.element, body, self.settings)

    def escapes_remove(self, text: str) -> str:
        """Drop escapes that still precede a tag symbol"""
        if self.escaped_pattern is None:
            return text
        return self.escaped_pattern.sub(lambda match: match.group(1), text)


def resolve(
    tokens: Sequence[Token],
    table: Optional[MarkupTable] = None,
    settings: Optional[AppSettings] = None,
) -> str:
    """Module-level convenience wrapper around InlineResolver.tokens_resolve()"""
    return InlineResolver(table, settings).tokens_resolve(tokens)
