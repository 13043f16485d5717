"""
Markup table and token models

Defines the immutable tag table shared by the tokenizer and the resolver,
plus the per-line token and open-tag marker structures.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


class TokenKind(Enum):
    """
    Kinds of tokens produced by the tokenizer
    """
    LITERAL = "literal"        # plain text run
    DELIMITER = "delimiter"    # _, __, `, [, ], (, )
    ESCAPE = "escape"          # backslash


@dataclass(frozen=True)
class Token:
    """
    A single piece of a tokenized line

    Attributes:
        value: Exact source text of the token
        kind: Whether the text is a literal run, a delimiter or the escape symbol

    Example:
        "a_b" tokenizes to:
        [Token("a", LITERAL), Token("_", DELIMITER), Token("b", LITERAL)]
    """
    value: str
    kind: TokenKind

    @property
    def is_delimiter(self) -> bool:
        return self.kind is not TokenKind.LITERAL


@dataclass(frozen=True)
class TagSpec:
    """
    Definition of an inline tag

    Attributes:
        symbol: Delimiter that bounds the span (e.g., "_", "__", "`")
        element: HTML element produced for a matched span (e.g., "em")
        initial_bias: Polarity assumed for the first occurrence (+1 opens)
        digits_suppressed: Leave the span unwrapped when its body is digits only
        masks_markup: Disable every other markup inside the span (code)
    """
    symbol: str
    element: str
    initial_bias: int = 1
    digits_suppressed: bool = True
    masks_markup: bool = False


@dataclass
class TagMarker:
    """
    Live open-tag marker for one symbol during a single line's resolution

    Attributes:
        spec: Tag definition the marker was created from
        bias: Current polarity; flips each time the symbol is validly used
    """
    spec: TagSpec
    bias: int

    @property
    def symbol(self) -> str:
        return self.spec.symbol


@dataclass(frozen=True)
class MarkupTable:
    """
    Read-only description of the inline dialect

    Built once and passed by reference into the tokenizer and the resolver.
    Delimiter order matters: multi-character delimiters precede their
    single-character prefixes.

    Attributes:
        tags: Tag definitions, keyed by symbol
        delimiters: Ordered delimiter strings recognized by the tokenizer
        escape: Escape symbol
        code: Symbol of the masking (code) tag
        link: Link punctuation in pattern order: [ ] ( )
    """
    tags: Dict[str, TagSpec]
    delimiters: Tuple[str, ...]
    escape: str = "\\"
    code: str = "`"
    link: Tuple[str, str, str, str] = ("[", "]", "(", ")")

    def tag_get(self, symbol: str) -> Optional[TagSpec]:
        """Return the TagSpec for symbol, or None for non-tag delimiters"""
        return self.tags.get(symbol)


def table_build(*specs: TagSpec, escape: str = "\\",
                link: Tuple[str, str, str, str] = ("[", "]", "(", ")")) -> MarkupTable:
    """
    Assemble a MarkupTable from tag definitions

    Delimiters are ordered longest first so that "__" is tried before "_".

    Args:
        *specs: Tag definitions; exactly one may set masks_markup
        escape: Escape symbol
        link: Link punctuation

    Returns:
        Immutable MarkupTable
    """
    tags = {spec.symbol: spec for spec in specs}
    code = next((spec.symbol for spec in specs if spec.masks_markup), "")
    symbols = list(tags) + [escape] + list(link)
    delimiters = tuple(sorted(dict.fromkeys(symbols), key=len, reverse=True))
    return MarkupTable(tags=tags, delimiters=delimiters, escape=escape, code=code, link=link)


DEFAULT_TABLE: MarkupTable = table_build(
    TagSpec(symbol="__", element="strong"),
    TagSpec(symbol="_", element="em"),
    TagSpec(symbol="`", element="code", digits_suppressed=False, masks_markup=True),
)
