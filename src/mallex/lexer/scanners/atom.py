"""Atom scanner mixin."""

from mallex.charsets import is_atom_char


class AtomScannerMixin:
    """Mixin providing the fallback atom rule.

    An atom is the longest run of characters that are neither whitespace
    nor one of the atom delimiters. The run may be empty, which is what
    stops the scan.

    """

    _source: str
    _source_len: int

    def _match_atom(self, start: int) -> int:
        """Return the position just past the atom starting at ``start``."""
        source = self._source
        source_len = self._source_len
        pos = start
        while pos < source_len and is_atom_char(source[pos]):
            pos += 1
        return pos
