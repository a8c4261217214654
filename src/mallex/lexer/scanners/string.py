"""Double-quoted string scanner mixin."""

from mallex.charsets import LINE_TERMINATORS, STRING_ESCAPE, STRING_QUOTE


class StringScannerMixin:
    """Mixin providing double-quoted string matching.

    Escapes are recognized only so that an escaped quote does not close
    the string. Their meaning is left to the reader.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int

    def _match_string(self, start: int) -> int:
        """Match a string literal opening at ``start``.

        A backslash consumes the character after it, so ``"\\\\"`` is
        closed while ``"\\"`` is not. A backslash cannot escape a line
        terminator: ``"a\\<newline>b"`` is unterminated. A bare newline
        inside the quotes is fine.

        Args:
            start: Position of the opening quote

        Returns:
            Position just past the closing quote, or ``start`` if the
            string is not terminated.
        """
        source = self._source
        source_len = self._source_len
        pos = start + 1
        while pos < source_len:
            char = source[pos]
            if char == STRING_QUOTE:
                return pos + 1
            if char == STRING_ESCAPE:
                # Escaped pair needs a second character on the same line
                if pos + 1 >= source_len or source[pos + 1] in LINE_TERMINATORS:
                    break
                pos += 2
            else:
                pos += 1
        return start
