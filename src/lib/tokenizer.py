"""
Tokenizer for the inline dialect

Splits one line of text into literal runs, delimiters and escapes using the
delimiter order of a MarkupTable. Delimiters are tried in table order at
every position; the first one that matches wins.

Example:
    >>> Tokenizer().tokens_split("a__b")
    [Token(value='a', kind=<TokenKind.LITERAL: 'literal'>),
     Token(value='__', kind=<TokenKind.DELIMITER: 'delimiter'>),
     Token(value='b', kind=<TokenKind.LITERAL: 'literal'>)]
"""

from typing import Iterator, List, Optional

from ..models.markup import DEFAULT_TABLE, MarkupTable, Token, TokenKind


class Tokenizer:
    """
    Line tokenizer

    Holds no state between calls; a single instance may be shared freely.
    """

    def __init__(self, table: Optional[MarkupTable] = None) -> None:
        self.table = table or DEFAULT_TABLE

    def delimiter_matchAt(self, text: str, pos: int) -> Optional[str]:
        """
        Return the first configured delimiter found at text[pos], if any
        """
        for delimiter in self.table.delimiters:
            if text.startswith(delimiter, pos):
                return delimiter
        return None

    def tokens_iterate(self, text: str) -> Iterator[Token]:
        """
        Lazily yield the tokens of text

        Args:
            text: A single line (no line separator)

        Yields:
            Token objects in source order. An empty line yields one empty
            literal token.
        """
        if not text:
            yield Token("", TokenKind.LITERAL)
            return

        literal: List[str] = []
        pos = 0
        while pos < len(text):
            delimiter = self.delimiter_matchAt(text, pos)
            if delimiter is None:
                literal.append(text[pos])
                pos += 1
                continue

            if literal:
                yield Token("".join(literal), TokenKind.LITERAL)
                literal = []
            kind = TokenKind.ESCAPE if delimiter == self.table.escape else TokenKind.DELIMITER
            yield Token(delimiter, kind)
            pos += len(delimiter)

        if literal:
            yield Token("".join(literal), TokenKind.LITERAL)

    def tokens_split(self, text: str) -> List[Token]:
        """Tokenize text into a list; see tokens_iterate()"""
        return list(self.tokens_iterate(text))


def tokenize(line: str, table: Optional[MarkupTable] = None) -> List[Token]:
    """Module-level convenience wrapper around Tokenizer.tokens_split()"""
    return Tokenizer(table).tokens_split(line)
