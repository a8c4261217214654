"""Ready-made TokenSink implementations.

Usage:
    >>> from mallex import scan_into
    >>> from mallex.sinks import CallbackSink
    >>> seen = []
    >>> result = scan_into("(a b)", CallbackSink(lambda t: seen.append(t.text)))
    >>> seen
    ['(', 'a', 'b', ')']
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mallex.protocols import TokenSink
    from mallex.tokens import Token


class CallbackSink:
    """Adapt a one-argument callable to the TokenSink protocol."""

    __slots__ = ("_callback",)

    def __init__(self, callback: Callable[[Token], object]) -> None:
        self._callback = callback

    def append(self, token: Token) -> None:
        self._callback(token)


class CountingSink:
    """Count tokens, optionally forwarding each one to another sink.

    Example:
        >>> sink = CountingSink()
        >>> _ = scan_into("a b c", sink)
        >>> sink.count
        3
    """

    __slots__ = ("count", "_inner")

    def __init__(self, inner: TokenSink | None = None) -> None:
        self.count = 0
        self._inner = inner

    def append(self, token: Token) -> None:
        self.count += 1
        if self._inner is not None:
            self._inner.append(token)


__all__ = ["CallbackSink", "CountingSink"]
