"""
对齐解析 - 列文本对齐方式与 x 坐标

优先级：
1. 该列显式声明的 ColumnMetadata
2. 表头关键词推测（英文 + 泰文）
3. 左对齐

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ...models import ColumnMetadata
from .layout import PdfLayoutConfig

PT_TO_MM = 0.3528
AVG_GLYPH_WIDTH_RATIO = 0.5

NUMERIC_HEADER_KEYWORDS: tuple[str, ...] = (
    "amount", "total", "sum", "count", "qty", "quantity",
    "price", "cost", "rate", "value", "number", "num", "#",
    "balance", "credit", "debit", "fee", "tax", "discount",
    "percent", "%", "score", "points", "weight", "height",
    "width", "length", "size", "age", "year", "month", "day",
    "จำนวน", "ราคา", "รวม", "ยอด", "เงิน", "บาท",
)


class Alignment(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ColumnBounds:
    """单列水平范围（mm）"""
    left: float
    right: float


def is_numeric_header(header: str) -> bool:
    """根据表头名推测是否为数值列"""
    lower = header.lower()
    return any(keyword in lower for keyword in NUMERIC_HEADER_KEYWORDS)


def estimate_text_width(text: str, font_size: float) -> float:
    """估算文本宽度 mm（字符数 x 平均字宽）"""
    return len(text) * font_size * AVG_GLYPH_WIDTH_RATIO * PT_TO_MM


class AlignmentResolver:
    """解析表格各列的对齐方式与 x 坐标"""

    def __init__(
        self,
        config: PdfLayoutConfig,
        headers: Sequence[str],
        column_metadata: Sequence[ColumnMetadata] | None = None,
    ):
        self.config = config
        self.headers = headers
        self.column_metadata = column_metadata
        self.column_width = config.calculate_column_width(len(headers))

    def resolve(self, col_idx: int) -> Alignment:
        if self.column_metadata is not None and col_idx < len(self.column_metadata):
            if self.column_metadata[col_idx].column_type.is_right_aligned:
                return Alignment.RIGHT
            return Alignment.LEFT
        if col_idx < len(self.headers) and is_numeric_header(self.headers[col_idx]):
            return Alignment.RIGHT
        return Alignment.LEFT

    def column_bounds(self, col_idx: int) -> ColumnBounds:
        left = self.config.margins.left + self.column_width * col_idx
        right = min(
            self.config.margins.left + self.column_width * (col_idx + 1),
            self.config.content_right(),
        )
        return ColumnBounds(left=left, right=right)

    def text_x(self, text: str, col_idx: int, alignment: Alignment | None = None) -> float:
        """文本起点 x；右对齐文本不会越过列左边界"""
        bounds = self.column_bounds(col_idx)
        alignment = alignment or self.resolve(col_idx)
        if alignment is Alignment.RIGHT:
            text_width = estimate_text_width(text, self.config.typography.body_size)
            x = bounds.right - text_width - self.config.spacing.cell_padding
            return max(x, bounds.left)
        return bounds.left
