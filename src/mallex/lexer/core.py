"""Single-pass lexer with O(n) guaranteed performance.

Each step skips separators, then tries the lexeme rules in fixed priority
order at the current position:

1. ``~@``
2. one structural character
3. a double-quoted string
4. a ``;`` line comment (matched and dropped)
5. an atom (possibly empty)

An empty match ends the scan. Every other match advances the position by
at least one character, so the loop always terminates.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mallex.charsets import (
    COMMENT_START,
    SPLICE_UNQUOTE,
    STRING_QUOTE,
    STRUCTURAL,
    is_separator,
)
from mallex.config import ScanConfig, get_scan_config
from mallex.errors import TruncatedInput
from mallex.lexer.scanners import (
    AtomScannerMixin,
    CommentScannerMixin,
    StringScannerMixin,
)
from mallex.location import SourceLocation
from mallex.tokens import Token
from mallex.utils.logger import get_logger

if TYPE_CHECKING:
    from mallex.protocols import TokenSink

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Summary of a push-style scan.

    Attributes:
        token_count: Number of tokens handed to the sink
        consumed: Offset where scanning stopped
        source_length: Length of the scanned source
        truncated: True if the scan stopped on an empty match with
            non-separator input left over

    """

    token_count: int
    consumed: int
    source_length: int
    truncated: bool


class Lexer(
    StringScannerMixin,
    CommentScannerMixin,
    AtomScannerMixin,
):
    """Lexer for Lisp-style source.

    Usage:
            >>> lexer = Lexer("(+ 1 2)")
            >>> [t.text for t in lexer.tokenize()]
            ['(', '+', '1', '2', ')']

    After the scan, ``consumed`` and ``truncated`` tell a reader whether
    the whole input was read. An unterminated string stops the scan
    silently unless the config is strict.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_config",
        "_truncated",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Source text
            source_file: Optional source file path for locations and errors
            config: Scan configuration (defaults to the active context config)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._config = config if config is not None else get_scan_config()
        self._truncated = False

        self._saved_lineno: int = 1
        self._saved_col: int = 1

    @property
    def consumed(self) -> int:
        """Offset up to which the source has been consumed."""
        return self._pos

    @property
    def truncated(self) -> bool:
        """Whether the scan stopped before the end of the input."""
        return self._truncated

    @property
    def location(self) -> SourceLocation:
        """Current scan position. After the scan, where it stopped."""
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._pos,
            end_offset=self._pos,
            source_file=self._source_file,
        )

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, in source order

        Raises:
            TruncatedInput: In strict mode, when the scan stops early.

        Complexity: O(n) where n = len(source)
        """
        source = self._source
        while True:
            self._skip_separators()
            start = self._pos
            char = source[start] if start < self._source_len else ""

            if char == "~" and source.startswith(SPLICE_UNQUOTE, start):
                end = start + 2
            elif char in STRUCTURAL:
                end = start + 1
            elif char == COMMENT_START:
                self._commit_to(self._match_comment(start))
                continue
            else:
                end = start
                if char == STRING_QUOTE:
                    end = self._match_string(start)
                if end == start:
                    end = self._match_atom(start)

            if end == start:
                self._stop()
                return

            self._save_location()
            self._commit_to(end)
            yield self._make_token(start)

    def scan_into(self, sink: TokenSink) -> ScanResult:
        """Push every token into ``sink`` in source order.

        Args:
            sink: Any object with an ``append(token)`` method

        Returns:
            ScanResult describing how far the scan got.
        """
        count = 0
        for token in self.tokenize():
            sink.append(token)
            count += 1
        return ScanResult(
            token_count=count,
            consumed=self._pos,
            source_length=self._source_len,
            truncated=self._truncated,
        )

    # =========================================================================
    # Navigation helpers
    # =========================================================================

    def _skip_separators(self) -> None:
        """Advance past whitespace and commas."""
        source = self._source
        source_len = self._source_len
        pos = self._pos
        while pos < source_len and is_separator(source[pos]):
            pos += 1
        if pos != self._pos:
            self._commit_to(pos)

    def _commit_to(self, end: int) -> None:
        """Move position to ``end``, updating line and column.

        Uses str.count / str.rfind on the skipped segment instead of
        walking it character by character.
        """
        segment = self._source[self._pos : end]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl  # chars after last newline + 1
        else:
            self._col += len(segment)

        self._pos = end

    def _stop(self) -> None:
        """Handle the empty-match stop condition.

        At end of input this is normal termination. Anywhere else the rest
        of the source is dropped.
        """
        if self._pos >= self._source_len:
            return

        self._truncated = True
        char = self._source[self._pos]
        reason = "unterminated string" if char == STRING_QUOTE else "unexpected character"

        if self._config.strict:
            raise TruncatedInput(reason, self.location)
        logger.debug(
            "Scan stopped at offset %d (%d:%d) of %d: %s",
            self._pos,
            self._lineno,
            self._col,
            self._source_len,
            reason,
        )

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, start_pos: int) -> Token:
        """Create a Token spanning ``start_pos`` to the current position.

        Uses the location saved by _save_location(); SourceLocation is only
        built if ``token.location`` is read.
        """
        return Token(
            text=self._source[start_pos : self._pos],
            offset=start_pos,
            end_offset=self._pos,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )
