"""Single-pass lexer for the mallex tokenizer.

The lexer scans left to right, skipping separators and matching one
lexeme at a time with a fixed priority order. Scanning stops on the
first empty match.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ScanResult
├── core.py              # Lexer class (dispatch + position tracking)
└── scanners/            # Lexeme scanners (pure, return end positions)
    ├── string.py        # Double-quoted strings
    ├── comment.py       # ; line comments
    └── atom.py          # Fallback atom rule

Usage:
    >>> from mallex.lexer import Lexer
    >>> for token in Lexer("'(a b)").tokenize():
    ...     print(token)
    '
    (
    a
    b
    )

"""

from mallex.lexer.core import Lexer, ScanResult

__all__ = ["Lexer", "ScanResult"]
