"""Token definition for the mallex lexer.

The lexer produces a stream of Token objects that a reader consumes.
A Token is the exact source substring of one lexeme plus its position.
Tokens carry no type tag: deciding whether a token is a string, a symbol
or a bracket is left to the reader.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mallex.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        text: The exact substring matched in the source (never empty)
        offset: Absolute start position in source (0-indexed)
        end_offset: Absolute end position in source (exclusive), so
            ``source[offset:end_offset] == text``
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _end_lineno: End line number (differs for strings spanning lines)
        _end_col: Column just past the last character
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    text: str
    offset: int
    end_offset: int
    _lineno: int = 1
    _col: int = 1
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from mallex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self.offset,
            end_offset=self.end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({val!r}, {self._lineno}:{self._col})"

    def __str__(self) -> str:
        return self.text

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col
