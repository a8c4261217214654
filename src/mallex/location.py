"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in source text.
Tokens build one lazily; TruncatedInput and UnexpectedEOF carry one.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A position or span in source text.

    Line and column are 1-indexed. Offsets are 0-indexed positions in the
    source string, with ``end_offset`` exclusive. A bare position has no
    end line or column.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column offset (optional)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5)
            >>> str(loc)
            '2:5'

            >>> loc = SourceLocation(1, 1, source_file="core.mal")
            >>> str(loc)
            'core.mal:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.mal:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def after(self) -> SourceLocation:
        """Position just past the end of this span.

        A location without an end is returned as a position at its start.

        Example:
            >>> span = SourceLocation(1, 1, 0, 2, end_lineno=1, end_col_offset=3)
            >>> str(span.after())
            '1:3'
        """
        if self.end_lineno is None or self.end_col_offset is None:
            return SourceLocation(
                lineno=self.lineno,
                col_offset=self.col_offset,
                offset=self.offset,
                end_offset=self.offset,
                source_file=self.source_file,
            )
        return SourceLocation(
            lineno=self.end_lineno,
            col_offset=self.end_col_offset,
            offset=self.end_offset,
            end_offset=self.end_offset,
            source_file=self.source_file,
        )
