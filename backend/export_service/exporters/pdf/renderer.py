"""
PDF渲染器 - 分页引擎

职责：
1. 开页并跟踪纵向游标 / 页码（PageState）
2. 绘制标题（仅第1页）、表头（每页）、数据行与页脚
3. 游标越过有效下边界时换页
4. 将完成的文档序列化为字节

页面生命周期：
    新页 -> 填充 -> 换页 -> 新页 ... -> 收尾

依赖：
- reportlab: pdfgen canvas（invariant 模式保证输出字节可复现）

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Sequence

from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas

from ...interfaces import ITextFormatter, SerializationError
from ...models import ColumnMetadata
from .alignment import AlignmentResolver
from .fonts import DEFAULT_CATALOG, FontCatalog, FontConfig, load_fonts
from .layout import PdfLayoutConfig

logger = logging.getLogger(__name__)

HEADER_LINE_GREY = 0.8
HEADER_LINE_THICKNESS = 0.5
PAGE_NUMBER_X_OFFSET = 10.0


@dataclass
class PageState:
    """渲染游标：当前基线 y（mm）与页码（从1开始）"""
    current_y: float
    page_number: int = 1


class PdfRenderer:
    """单文档渲染器；每次导出新建实例"""

    def __init__(
        self,
        title: str,
        config: PdfLayoutConfig,
        text_formatter: ITextFormatter,
        num_columns: int,
        font_config: FontConfig | None = None,
        font_catalog: FontCatalog = DEFAULT_CATALOG,
    ):
        self.config = config
        self.text_formatter = text_formatter
        self.fonts = load_fonts(font_config, font_catalog)
        self.column_width = config.calculate_column_width(num_columns)

        self._buffer = BytesIO()
        self.canvas = Canvas(
            self._buffer,
            pagesize=(config.page_size.width * mm, config.page_size.height * mm),
            invariant=1,
        )
        self.canvas.setTitle(text_formatter.sanitize(title))

    # === 文档 ===

    def render(
        self,
        title: str,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
        column_metadata: Sequence[ColumnMetadata] | None = None,
    ) -> bytes:
        """分页渲染标题、表头与数据行，返回PDF字节"""
        resolver = AlignmentResolver(self.config, headers, column_metadata)
        state = PageState(current_y=self.config.content_start_y())

        state.current_y = self.render_title(title, state.current_y)
        if headers:
            state.current_y = self.render_headers(headers, state.current_y)

        effective_bottom = self.config.effective_bottom()
        for row in rows:
            if state.current_y < effective_bottom:
                self.break_page(state, headers)
            self.render_row(row, resolver, state.current_y)
            state.current_y -= self.config.typography.line_height

        self.render_page_number(state.page_number)
        logger.debug(f"PDF rendered: {len(rows)} rows on {state.page_number} pages")
        return self.save_to_bytes()

    def break_page(self, state: PageState, headers: Sequence[str]) -> None:
        """结束当前页并开始下一页"""
        self.render_page_number(state.page_number)
        self.canvas.showPage()
        state.page_number += 1
        state.current_y = self.config.content_start_y()
        logger.debug(f"Page break -> page {state.page_number}")
        if headers:
            state.current_y = self.render_headers(headers, state.current_y)

    def save_to_bytes(self) -> bytes:
        try:
            self.canvas.save()
        except Exception as e:
            raise SerializationError(str(e)) from e
        return self._buffer.getvalue()

    # === 元素 ===

    def _draw_text(self, text: str, font: str, size: float, x: float, y: float) -> None:
        self.canvas.setFont(font, size)
        self.canvas.drawString(x * mm, y * mm, text)

    def render_title(self, title: str, y: float) -> float:
        sanitized = self.text_formatter.sanitize(title)
        self._draw_text(
            sanitized, self.fonts.bold, self.config.typography.title_size,
            self.config.margins.left, y,
        )
        return y - self.config.spacing.title_bottom

    def render_headers(self, headers: Sequence[str], y: float) -> float:
        """表头：只清洗不截断，始终左对齐"""
        for col_idx, header in enumerate(headers):
            x = self.config.margins.left + self.column_width * col_idx
            self._draw_text(
                self.text_formatter.sanitize(header),
                self.fonts.bold, self.config.typography.header_size, x, y,
            )

        # 基线下方留出泰文下标元音的空间
        self.render_header_line(y - self.config.spacing.header_line_offset)
        return y - self.config.spacing.header_to_content

    def render_header_line(self, y: float) -> None:
        self.canvas.setStrokeColorRGB(HEADER_LINE_GREY, HEADER_LINE_GREY, HEADER_LINE_GREY)
        self.canvas.setLineWidth(HEADER_LINE_THICKNESS)
        self.canvas.line(
            self.config.margins.left * mm, y * mm,
            self.config.content_right() * mm, y * mm,
        )

    def prepare_cell_text(self, cell: str) -> str:
        """按列字符预算截断，再清洗"""
        max_chars = self.text_formatter.max_chars_for_width(
            self.column_width, self.config.typography.body_size
        )
        truncated = self.text_formatter.truncate(cell, max_chars)
        return self.text_formatter.sanitize(truncated)

    def render_row(self, row: Sequence[str], resolver: AlignmentResolver, y: float) -> None:
        for col_idx, cell in enumerate(row):
            text = self.prepare_cell_text(cell)
            x = resolver.text_x(text, col_idx)
            self._draw_text(text, self.fonts.regular, self.config.typography.body_size, x, y)

    def render_page_number(self, page_number: int) -> None:
        self._draw_text(
            f"Page {page_number}",
            self.fonts.regular,
            self.config.typography.page_number_size,
            self.config.page_size.width / 2 - PAGE_NUMBER_X_OFFSET,
            self.config.margins.bottom,
        )
