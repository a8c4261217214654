"""Tests for lexer state before, during and after tokenization.

The lexer is single-use and lazy. These tests verify that the public
``consumed``/``truncated`` state tracks the scan and that the push form
reports the same thing.
"""

from __future__ import annotations

import pytest

from mallex.config import ScanConfig, scan_config_context
from mallex.errors import TruncatedInput
from mallex.lexer import Lexer, ScanResult


class TestLazyScanning:
    """tokenize() does no work until iterated."""

    def test_nothing_consumed_before_iteration(self) -> None:
        lexer = Lexer("(a b)")
        lexer.tokenize()
        assert lexer.consumed == 0

    def test_partial_iteration(self) -> None:
        lexer = Lexer("(a b)")
        it = lexer.tokenize()
        assert next(it).text == "("
        assert next(it).text == "a"
        assert lexer.consumed == 2
        assert lexer.truncated is False

    def test_exhausted_iteration(self) -> None:
        lexer = Lexer("(a b)  ")
        tokens = list(lexer.tokenize())
        assert len(tokens) == 4
        assert lexer.consumed == 7


class TestScanInto:
    """Push form delivers the same tokens as the iterator."""

    def test_list_as_sink(self) -> None:
        out: list = []
        result = Lexer("(a b)").scan_into(out)
        assert [t.text for t in out] == ["(", "a", "b", ")"]
        assert result == ScanResult(token_count=4, consumed=5, source_length=5, truncated=False)

    def test_truncated_result(self) -> None:
        out: list = []
        result = Lexer('x "y').scan_into(out)
        assert [t.text for t in out] == ["x"]
        assert result.truncated is True
        assert result.consumed == 2
        assert result.source_length == 4

    def test_same_tokens_as_iterator(self) -> None:
        source = "(defn f [x] ; doc\n  `(~x ~@xs))"
        out: list = []
        Lexer(source).scan_into(out)
        assert out == list(Lexer(source).tokenize())


class TestConfigResolution:
    """The lexer takes its config at construction."""

    def test_explicit_strict_config_raises(self) -> None:
        lexer = Lexer('a "b', config=ScanConfig(strict=True))
        with pytest.raises(TruncatedInput):
            list(lexer.tokenize())
        assert lexer.truncated is True

    def test_default_config_stops_silently(self) -> None:
        lexer = Lexer('a "b')
        assert [t.text for t in lexer.tokenize()] == ["a"]
        assert lexer.truncated is True

    def test_context_config_read_at_construction(self) -> None:
        with scan_config_context(ScanConfig(strict=True)):
            lexer = Lexer('"b')
        # Leaving the context does not change a lexer already built
        with pytest.raises(TruncatedInput):
            list(lexer.tokenize())

    def test_explicit_config_overrides_context(self) -> None:
        with scan_config_context(ScanConfig(strict=True)):
            lexer = Lexer('"b', config=ScanConfig())
            assert list(lexer.tokenize()) == []
