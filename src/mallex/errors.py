"""Exception classes for mallex.

The scanner itself never raises on malformed input unless strict mode is
enabled. These exceptions exist for that mode and for reader-side helpers.
"""

from __future__ import annotations

from mallex.location import SourceLocation


class MallexError(Exception):
    """Base exception for all mallex errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(MallexError):
    """Error tied to a position in the scanned source.

    The message is prefixed with ``file:line:col`` when a location is known.
    """

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            location: Where the error occurred (optional)
        """
        self.message = message
        self.location = location
        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")

    @property
    def lineno(self) -> int | None:
        return self.location.lineno if self.location is not None else None

    @property
    def col_offset(self) -> int | None:
        return self.location.col_offset if self.location is not None else None

    @property
    def source_file(self) -> str | None:
        return self.location.source_file if self.location is not None else None


class TruncatedInput(ScanError):
    """Scanning stopped before the end of the input.

    Only raised when ``ScanConfig.strict`` is enabled. In the default mode
    the same condition ends the scan silently and is reported through
    ``Lexer.truncated`` / ``ScanResult.truncated``.
    """

    def __init__(self, reason: str, location: SourceLocation) -> None:
        """Initialize truncation error.

        Args:
            reason: Short description, e.g. "unterminated string"
            location: Position where scanning stopped
        """
        self.reason = reason
        self.offset = location.offset
        super().__init__(reason, location)


class UnexpectedEOF(ScanError):
    """A token was requested after the last token of a stream."""

    def __init__(self, location: SourceLocation | None = None) -> None:
        super().__init__("unexpected EOF", location)
