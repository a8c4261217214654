"""Line comment scanner mixin."""

from mallex.charsets import LINE_TERMINATORS


class CommentScannerMixin:
    """Mixin providing ``;`` line comment matching."""

    _source: str
    _source_len: int

    def _match_comment(self, start: int) -> int:
        """Match a comment from ``start`` to the end of the line.

        Any of ``\\n``, ``\\r``, U+2028 or U+2029 ends the line. The
        terminator is not part of the comment; it is skipped afterwards
        as a separator.

        Returns:
            Position of the line terminator, or end of source.
        """
        source = self._source
        source_len = self._source_len
        pos = start
        while pos < source_len and source[pos] not in LINE_TERMINATORS:
            pos += 1
        return pos
