"""Tests for TokenSink implementations."""

from mallex import CallbackSink, CountingSink, TokenSink, scan_into


class TestTokenSinkProtocol:
    """Anything with append() is a sink."""

    def test_list_is_sink(self) -> None:
        assert isinstance([], TokenSink)

    def test_provided_sinks_satisfy_protocol(self) -> None:
        assert isinstance(CallbackSink(print), TokenSink)
        assert isinstance(CountingSink(), TokenSink)

    def test_object_without_append_is_not_sink(self) -> None:
        assert not isinstance(object(), TokenSink)


class TestCallbackSink:
    def test_callback_receives_tokens_in_order(self) -> None:
        seen: list[str] = []
        scan_into("(a b)", CallbackSink(lambda t: seen.append(t.text)))
        assert seen == ["(", "a", "b", ")"]


class TestCountingSink:
    def test_counts(self) -> None:
        sink = CountingSink()
        result = scan_into("a b c ; d", sink)
        assert sink.count == 3
        assert result.token_count == 3

    def test_forwards_to_inner(self) -> None:
        out: list = []
        sink = CountingSink(out)
        scan_into("[x]", sink)
        assert sink.count == 3
        assert [t.text for t in out] == ["[", "x", "]"]

    def test_count_stops_at_truncation(self) -> None:
        sink = CountingSink()
        scan_into('a "b c', sink)
        assert sink.count == 1
