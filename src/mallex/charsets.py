"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

WHITESPACE is the ECMAScript ``\\s`` class, not ``str.isspace()``. The two
disagree: ``\\x1c``-``\\x1f`` and ``\\x85`` are atom characters here while
``\\ufeff`` is whitespace. Separator skipping and atom termination both
use WHITESPACE, so they cannot drift apart.

Usage:
    from mallex.charsets import STRUCTURAL

    if char in STRUCTURAL:
        ...
"""

# ECMAScript WhiteSpace + LineTerminator
WHITESPACE: frozenset[str] = frozenset(
    chr(code)
    for code in (
        0x0009, 0x000A, 0x000B, 0x000C, 0x000D, 0x0020, 0x00A0, 0x1680,
        *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
    )
)

# Characters that end a line comment or cannot follow an escaping backslash
LINE_TERMINATORS: frozenset[str] = frozenset(chr(code) for code in (0x000A, 0x000D, 0x2028, 0x2029))

# Single-character tokens: brackets, braces, parens and reader-macro markers
STRUCTURAL: frozenset[str] = frozenset("[]{}()'`~^@")

# Skipped between tokens, never emitted
SEPARATORS: frozenset[str] = WHITESPACE | frozenset(",")

# Two-character unquote-splice marker, tried before STRUCTURAL
SPLICE_UNQUOTE = "~@"

STRING_QUOTE = '"'
STRING_ESCAPE = "\\"
COMMENT_START = ";"

# Characters that end an atom
ATOM_DELIMITERS: frozenset[str] = WHITESPACE | frozenset("[]{}('\"`,;)")


def is_separator(char: str) -> bool:
    """Check if character is skipped between tokens (whitespace or comma)."""
    return char in SEPARATORS


def is_atom_char(char: str) -> bool:
    """Check if character may appear inside an atom."""
    return char not in ATOM_DELIMITERS
