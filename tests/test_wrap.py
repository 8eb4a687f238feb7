"""Tests for greedy text wrapping."""

from __future__ import annotations

from resume_fit.rendering.wrap import wrap_text

from conftest import RecordingBackend


def _backend(size: float = 10) -> RecordingBackend:
    backend = RecordingBackend()
    backend.set_font("", size)
    return backend


class TestWrapText:
    def test_short_text_single_line(self):
        assert wrap_text(_backend(), "hello world", 200) == ["hello world"]

    def test_wraps_at_width(self):
        # 5pt per character at 10pt: 50pt holds 10 characters.
        assert wrap_text(_backend(), "aaaa bbbb cccc", 50) == ["aaaa bbbb", "cccc"]

    def test_collapses_whitespace(self):
        assert wrap_text(_backend(), "  a   b\n c ", 200) == ["a b c"]

    def test_breaks_long_words(self):
        lines = wrap_text(_backend(), "x" * 25, 50)
        assert lines == ["x" * 10, "x" * 10, "x" * 5]

    def test_long_word_after_text(self):
        lines = wrap_text(_backend(), "ab " + "y" * 12 + " cd", 50)
        assert lines == ["ab", "y" * 10, "yy cd"]

    def test_empty_text(self):
        assert wrap_text(_backend(), "", 100) == []

    def test_lines_fit_width(self):
        backend = _backend()
        text = "The quick brown fox jumps over the lazy dog " * 10
        for line in wrap_text(backend, text, 120):
            assert backend.string_width(line) <= 120
