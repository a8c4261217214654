"""Peek/next cursor over a token list.

Readers walk tokens one at a time, looking at the current token to decide
which form to read and then consuming it. TokenStream provides exactly
that pair of operations and raises UnexpectedEOF when a reader runs off
the end, which is how an unbalanced ``(`` or a truncated scan surfaces.

Example:
    >>> stream = TokenStream.from_source("(a)")
    >>> stream.peek().text
    '('
    >>> stream.next().text, stream.next().text, stream.next().text
    ('(', 'a', ')')
    >>> stream.at_end
    True

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from mallex.config import ScanConfig
from mallex.errors import UnexpectedEOF
from mallex.lexer import Lexer
from mallex.location import SourceLocation
from mallex.tokens import Token


class TokenStream:
    """Cursor over a fully materialized token sequence.

    Thread Safety:
        Not thread-safe. The cursor position is mutable; use one stream
        per reader.

    """

    __slots__ = ("_tokens", "_pos", "_source_file", "_end", "truncated")

    def __init__(
        self,
        tokens: Iterable[Token],
        *,
        source_file: str | None = None,
        truncated: bool = False,
        end: SourceLocation | None = None,
    ) -> None:
        """Wrap a token sequence.

        Args:
            tokens: Tokens in source order
            source_file: Source file path for EOF errors on an empty stream
            truncated: Whether the scan that produced the tokens stopped early
            end: Where that scan stopped, reported by EOF on an empty stream
        """
        self._tokens: list[Token] = list(tokens)
        self._pos = 0
        self._source_file = source_file
        self._end = end
        self.truncated = truncated

    @classmethod
    def from_source(
        cls,
        source: str,
        *,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> TokenStream:
        """Tokenize ``source`` and wrap the result.

        The stream records whether the scan was truncated so a reader can
        report an unterminated string instead of a bare EOF.
        """
        lexer = Lexer(source, source_file=source_file, config=config)
        tokens = list(lexer.tokenize())
        return cls(
            tokens,
            source_file=source_file,
            truncated=lexer.truncated,
            end=lexer.location,
        )

    @property
    def position(self) -> int:
        """Index of the next token to be returned."""
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def peek(self) -> Token:
        """Return the current token without advancing.

        Raises:
            UnexpectedEOF: If no tokens remain.
        """
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        raise self._eof_error()

    def next(self) -> Token:
        """Return the current token and advance.

        Raises:
            UnexpectedEOF: If no tokens remain.
        """
        token = self.peek()
        self._pos += 1
        return token

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        """Consume and yield the remaining tokens."""
        while not self.at_end:
            yield self.next()

    def _eof_error(self) -> UnexpectedEOF:
        if self._tokens:
            return UnexpectedEOF(self._tokens[-1].location.after())
        if self._end is not None:
            return UnexpectedEOF(self._end)
        return UnexpectedEOF(SourceLocation(1, 1, source_file=self._source_file))
