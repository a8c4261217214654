"""
mallex: Tokenizer for Lisp-style source

Splits source text into the token stream a Lisp reader consumes: brackets,
quote markers, string literals and atoms, with whitespace, commas and
``;`` comments dropped. Tokens are exact source substrings with positions;
classifying them is left to the reader.

Quick Start:
    >>> from mallex import tokenize
    >>> [t.text for t in tokenize("(+ 1 2)")]
    ['(', '+', '1', '2', ')']

    >>> # Push tokens into any object with an append() method
    >>> from mallex import scan_into
    >>> out = []
    >>> scan_into('(str "a b")', out).token_count
    4

Truncation:
    An unterminated string stops the scan without an error. Check
    ``ScanResult.truncated`` or enable strict mode:

    >>> from mallex import ScanConfig, TruncatedInput
    >>> tokenize('"open', config=ScanConfig(strict=True))
    Traceback (most recent call last):
    ...
    mallex.errors.TruncatedInput: 1:1 unterminated string
"""

from collections.abc import Iterator

from mallex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from mallex.errors import MallexError, ScanError, TruncatedInput, UnexpectedEOF
from mallex.lexer import Lexer, ScanResult
from mallex.location import SourceLocation
from mallex.protocols import TokenSink
from mallex.sinks import CallbackSink, CountingSink
from mallex.stream import TokenStream
from mallex.tokens import Token

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Tokenize source into a list of tokens.

    Args:
        source: Source text
        source_file: Optional source file path for token locations
        config: Scan configuration (defaults to the active context config)

    Returns:
        Tokens in source order. The list ends early, without error, if the
        scan was truncated and strict mode is off.

    Example:
        >>> [t.text for t in tokenize("~@x")]
        ['~@', 'x']
    """
    return list(Lexer(source, source_file=source_file, config=config).tokenize())


def iter_tokens(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> Iterator[Token]:
    """Lazily tokenize source.

    Tokens are produced as the scan reaches them; nothing is accumulated.
    """
    return Lexer(source, source_file=source_file, config=config).tokenize()


def scan_into(
    source: str,
    sink: TokenSink,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> ScanResult:
    """Tokenize source, calling ``sink.append`` once per token.

    Args:
        source: Source text
        sink: Any object with an ``append(token)`` method (a list works)
        source_file: Optional source file path for token locations
        config: Scan configuration (defaults to the active context config)

    Returns:
        ScanResult with the token count and where the scan stopped.
    """
    return Lexer(source, source_file=source_file, config=config).scan_into(sink)


__all__ = [
    # Version
    "__version__",
    # Core API
    "tokenize",
    "iter_tokens",
    "scan_into",
    # Lexer
    "Lexer",
    "ScanResult",
    # Tokens
    "Token",
    "TokenStream",
    # Sinks
    "TokenSink",
    "CallbackSink",
    "CountingSink",
    # Errors
    "MallexError",
    "ScanError",
    "TruncatedInput",
    "UnexpectedEOF",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Location
    "SourceLocation",
]
