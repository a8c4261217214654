"""Protocols for mallex.

Defines the sink contract used by the push form of the scanner.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mallex.tokens import Token


@runtime_checkable
class TokenSink(Protocol):
    """Receiver for tokens pushed by ``Lexer.scan_into``.

    A plain ``list`` satisfies this protocol.

    Thread Safety:
        The lexer calls ``append`` from the scanning thread only, once per
        token, in source order. Sinks shared between threads must do their
        own locking.

    """

    def append(self, token: Token) -> None:
        """Accept one token."""
        ...
