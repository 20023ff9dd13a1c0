"""
文本格式化单元测试

每个模块完成后必须运行：pytest backend/tests/unit/test_text_formatter.py -v
"""

import pytest

from export_service.config import PdfConfig
from export_service.exporters.pdf import (
    BilingualTextFormatter,
    SimpleTruncation,
    TruncationMode,
    WordBoundaryTruncation,
)

SAMPLE_TEXTS = [
    "",
    "Hello",
    "Hello World",
    "The quick brown fox jumps over the lazy dog",
    "NoSpacesHereAtAllJustOneVeryLongToken",
    "สวัสดีครับ ยินดีต้อนรับ",
    "Mixed ภาษาไทย and English text together",
    "Tabs\tand\nnewlines\rin text",
    "“Quoted” — with … punctuation",
    "          ",
]


class TestSanitize:
    """字符集映射测试"""

    @pytest.mark.parametrize("text,expected", [
        ("Hello World", "Hello World"),
        ("Test“Quote”", 'Test"Quote"'),
        ("It’s", "It's"),
        ("‘a’", "'a'"),
        ("1–2", "1-2"),
        ("a—b", "a-b"),
        ("wait…", "wait."),
        ("a\tb\nc\rd", "a b c d"),
        ("x\x7fy", "x y"),
        ("\x00", " "),
    ])
    def test_replacements(self, formatter, text, expected):
        assert formatter.sanitize(text) == expected

    def test_thai_passthrough(self, formatter):
        thai = "ภาษาไทย กขฃ"
        assert formatter.sanitize(thai) == thai

    def test_other_characters_unchanged(self, formatter):
        assert formatter.sanitize("café © 中") == "café © 中"

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_idempotent(self, formatter, text):
        once = formatter.sanitize(text)
        assert formatter.sanitize(once) == once

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_length_preserved(self, formatter, text):
        assert len(formatter.sanitize(text)) == len(text)


class TestTruncateWordBoundary:
    """词边界截断（默认模式）"""

    def test_short_text_unchanged(self, formatter):
        assert formatter.truncate("Short", 10) == "Short"

    def test_exact_length_unchanged(self, formatter):
        assert formatter.truncate("1234567890", 10) == "1234567890"

    def test_cuts_at_word_boundary(self, formatter):
        text = "This is a very long text that needs truncation"
        assert formatter.truncate(text, 12) == "This is a..."

    def test_sentence_budget(self, formatter):
        result = formatter.truncate("This is a test sentence", 15)
        assert result == "This is a..."
        assert len(result) <= 15

    def test_sentence(self, formatter):
        text = "The quick brown fox jumps over the lazy dog"
        assert formatter.truncate(text, 20) == "The quick brown..."

    def test_long_word_is_broken(self, formatter):
        assert formatter.truncate("NoSpacesHereAtAll", 10) == "NoSpace..."

    def test_budget_not_above_ellipsis(self, formatter):
        """预算 <= 省略号长度：直接取前缀，不加省略号"""
        assert formatter.truncate("Hello", 3) == "Hel"
        assert formatter.truncate("Hello", 2) == "He"
        assert formatter.truncate("Hello", 0) == ""

    def test_whitespace_only_collapses_to_ellipsis(self, formatter):
        assert formatter.truncate(" " * 10, 5) == "..."

    def test_tab_counts_as_one_character(self, formatter):
        text = "Name:\tValue long text"
        assert formatter.truncate(text, 15) == "Name: Value..."
        assert formatter.truncate(text, 15) == formatter.truncate(formatter.sanitize(text), 15)

    def test_newline_is_hard_break(self, formatter):
        assert formatter.truncate("ab\ncdefgh xyz", 12) == "ab..."
        assert formatter.truncate("Line one\nLine two", 12) == "Line one..."

    def test_leading_newline(self, formatter):
        assert formatter.truncate("\nsecond line text", 8) == "..."

    def test_thai_words(self, formatter):
        text = "สวัสดี ครับ ยินดีต้อนรับ"
        result = formatter.truncate(text, 12)
        assert result == "สวัสดี..."
        assert len(result) <= 12


class TestTruncateSimple:
    """按字符位置截断"""

    @pytest.fixture
    def simple(self) -> BilingualTextFormatter:
        return BilingualTextFormatter().with_truncation_mode(TruncationMode.SIMPLE)

    def test_cut_mid_word(self, simple):
        assert simple.truncate("Hello World", 8) == "Hello..."
        assert simple.truncate("Hello World Test", 10) == "Hello W..."

    def test_custom_ellipsis(self, simple):
        """单字符省略号可多容纳一个字符"""
        custom = simple.with_ellipsis("…")
        result = custom.truncate("Hello World", 8)
        assert result == "Hello W…"
        assert len(result) == 8

    def test_strategy_selected_by_mode(self, simple):
        assert isinstance(simple.strategy, SimpleTruncation)
        assert isinstance(BilingualTextFormatter().strategy, WordBoundaryTruncation)


class TestTruncateProperties:
    """两种模式的预算上限与原样返回"""

    @pytest.mark.parametrize("mode", list(TruncationMode))
    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    @pytest.mark.parametrize("max_chars", [0, 1, 3, 4, 5, 8, 13, 20, 50])
    def test_never_exceeds_budget(self, mode, text, max_chars):
        formatter = BilingualTextFormatter(truncation_mode=mode)
        assert len(formatter.truncate(text, max_chars)) <= max_chars

    @pytest.mark.parametrize("mode", list(TruncationMode))
    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_fitting_text_returned_unchanged(self, mode, text):
        formatter = BilingualTextFormatter(truncation_mode=mode)
        assert formatter.truncate(text, len(text)) == text
        assert formatter.truncate(text, len(text) + 5) == text


class TestMaxCharsForWidth:
    """字符预算估算"""

    def test_min_column_width(self, formatter):
        """28mm、10pt：79.37pt / 6pt -> 13"""
        assert formatter.max_chars_for_width(28.0, 10.0) == 13

    def test_five_column_a4(self, formatter):
        assert formatter.max_chars_for_width(34.0, 10.0) == 16

    def test_clamped_to_minimum(self, formatter):
        assert formatter.max_chars_for_width(5.0, 10.0) == 5

    def test_clamped_to_maximum(self, formatter):
        assert formatter.max_chars_for_width(500.0, 10.0) == 50

    def test_custom_limits(self, formatter):
        limited = formatter.with_limits(2, 10)
        assert limited.max_chars_for_width(5.0, 10.0) == 2
        assert limited.max_chars_for_width(170.0, 10.0) == 10

    @pytest.mark.parametrize("width", [1.0, 10.0, 17.0, 28.0, 42.5, 85.0, 170.0, 400.0])
    def test_always_within_limits(self, formatter, width):
        assert 5 <= formatter.max_chars_for_width(width, 10.0) <= 50


class TestFromConfig:
    def test_from_pdf_config(self):
        formatter = BilingualTextFormatter.from_config(
            PdfConfig(truncation_mode="simple", ellipsis="~", min_chars=3, max_chars=20)
        )
        assert formatter.truncation_mode is TruncationMode.SIMPLE
        assert formatter.truncate("abcdefghij", 5) == "abcd~"
        assert formatter.max_chars_for_width(500.0, 10.0) == 20
