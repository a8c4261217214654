"""Lexeme scanners for the mallex lexer.

Each scanner is a mixin that matches one kind of lexeme at a given
position. Scanners are pure: they return an end position and never move
the lexer.
"""

from __future__ import annotations

from mallex.lexer.scanners.atom import AtomScannerMixin
from mallex.lexer.scanners.comment import CommentScannerMixin
from mallex.lexer.scanners.string import StringScannerMixin

__all__ = [
    "AtomScannerMixin",
    "CommentScannerMixin",
    "StringScannerMixin",
]
