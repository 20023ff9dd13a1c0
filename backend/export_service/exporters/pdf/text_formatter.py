"""
文本格式化 - 单元格文本的清洗 / 估算 / 截断

职责：
1. 将任意文本映射到嵌入字体支持的字符集
2. 按列宽估算字符预算（不使用真实字形度量）
3. 按预算截断文本，支持词边界截断与按字符截断

注意：
- sanitize 逐字符映射且幂等
- 截断结果（含省略号）不超过预算
"""

from __future__ import annotations

import textwrap
from enum import Enum
from typing import TYPE_CHECKING

from ...interfaces import ITextFormatter, ITruncationStrategy

if TYPE_CHECKING:
    from ...config import PdfConfig

MM_TO_PT = 2.83465
AVG_CHAR_WIDTH_RATIO = 0.6

THAI_BLOCK = ("\u0e00", "\u0e7f")

_REPLACEMENTS = {
    "\u201c": '"',
    "\u201d": '"',
    "\u2018": "'",
    "\u2019": "'",
    "\u2013": "-",
    "\u2014": "-",
    "\u2026": ".",
}


class TruncationMode(str, Enum):
    """截断模式"""
    SIMPLE = "simple"
    WORD_BOUNDARY = "word_boundary"


def _sanitize_char(c: str) -> str:
    if " " <= c <= "~":
        return c
    if THAI_BLOCK[0] <= c <= THAI_BLOCK[1]:
        return c
    if c in _REPLACEMENTS:
        return _REPLACEMENTS[c]
    if c < " " or c == "\x7f":
        return " "
    return c


class SimpleTruncation(ITruncationStrategy):
    """按字符位置截断，可能截断单词"""

    def truncate(self, text: str, max_chars: int, ellipsis: str) -> str:
        if max_chars <= len(ellipsis):
            return text[:max_chars]
        return text[:max_chars - len(ellipsis)] + ellipsis


class WordBoundaryTruncation(ITruncationStrategy):
    """在可容纳的最后一个词边界截断；超长单词强制拆分"""

    def truncate(self, text: str, max_chars: int, ellipsis: str) -> str:
        if max_chars <= len(ellipsis):
            return text[:max_chars]

        available = max_chars - len(ellipsis)
        # "\n" 视为强制换行；制表符按一个字符计
        wrapped = [
            line
            for segment in text.split("\n")
            for line in textwrap.wrap(
                segment, width=available, expand_tabs=False, break_on_hyphens=False
            ) or [""]
        ]

        first_line = wrapped[0].rstrip()
        if len(wrapped) > 1 or len(first_line) < len(text):
            return first_line + ellipsis
        return first_line


_STRATEGIES: dict[TruncationMode, type[ITruncationStrategy]] = {
    TruncationMode.SIMPLE: SimpleTruncation,
    TruncationMode.WORD_BOUNDARY: WordBoundaryTruncation,
}


class BilingualTextFormatter(ITextFormatter):
    """默认格式化器：拉丁/泰文原样保留，基于 textwrap 截断"""

    def __init__(
        self,
        min_chars: int = 5,
        max_chars: int = 50,
        truncation_mode: TruncationMode = TruncationMode.WORD_BOUNDARY,
        ellipsis: str = "...",
        strategy: ITruncationStrategy | None = None,
    ):
        self.min_chars = min_chars
        self.max_chars = max_chars
        self.truncation_mode = TruncationMode(truncation_mode)
        self.ellipsis = ellipsis
        self.strategy = strategy or _STRATEGIES[self.truncation_mode]()

    @classmethod
    def from_config(cls, pdf: PdfConfig) -> BilingualTextFormatter:
        """从 PdfConfig 配置节构建"""
        return cls(
            min_chars=pdf.min_chars,
            max_chars=pdf.max_chars,
            truncation_mode=TruncationMode(pdf.truncation_mode),
            ellipsis=pdf.ellipsis,
        )

    def with_ellipsis(self, ellipsis: str) -> BilingualTextFormatter:
        return BilingualTextFormatter(
            self.min_chars, self.max_chars, self.truncation_mode, ellipsis, self.strategy
        )

    def with_truncation_mode(self, mode: TruncationMode) -> BilingualTextFormatter:
        return BilingualTextFormatter(self.min_chars, self.max_chars, mode, self.ellipsis)

    def with_limits(self, min_chars: int, max_chars: int) -> BilingualTextFormatter:
        return BilingualTextFormatter(
            min_chars, max_chars, self.truncation_mode, self.ellipsis, self.strategy
        )

    def sanitize(self, text: str) -> str:
        return "".join(_sanitize_char(c) for c in text)

    def truncate(self, text: str, max_chars: int) -> str:
        if len(text) <= max_chars:
            return text
        return self.strategy.truncate(text, max_chars, self.ellipsis)

    def max_chars_for_width(self, width_mm: float, font_size: float) -> int:
        width_pt = width_mm * MM_TO_PT
        max_chars = int(width_pt / (font_size * AVG_CHAR_WIDTH_RATIO))
        return min(max(max_chars, self.min_chars), self.max_chars)
