"""
Excel导出 - 单工作表，第1行表头，其下为数据

使用的选项：
- include_header_row / freeze_headers / header_bold / header_background
- auto_fit_columns: 按最长单元格计算列宽，替代固定默认列宽

依赖：
- openpyxl: 工作簿写入

"""

from __future__ import annotations

from io import BytesIO
from typing import TYPE_CHECKING

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from ..interfaces import ExportError, IExportService

if TYPE_CHECKING:
    from ..config import RuntimeConfig
    from ..models import ExportData

MIN_AUTO_WIDTH = 8


class ExcelExporter(IExportService):
    """Excel导出器实现"""

    def __init__(self, default_column_width: float = 20, max_auto_width: float = 60):
        self.default_column_width = default_column_width
        self.max_auto_width = max_auto_width

    @classmethod
    def from_config(cls, runtime: RuntimeConfig) -> ExcelExporter:
        return cls(
            default_column_width=runtime.excel.default_column_width,
            max_auto_width=runtime.excel.max_auto_width,
        )

    def export(self, data: ExportData) -> bytes:
        wb = Workbook()
        ws = wb.active

        include_header = data.option("include_header_row", default=True)
        current_row = 1

        # 表头行
        if include_header:
            self._write_header(ws, data)
            current_row = 2

        # 数据行（一律按文本写入，不作公式）
        for row in data.rows:
            for col_idx, value in enumerate(row, start=1):
                cell = ws.cell(row=current_row, column=col_idx, value=value)
                cell.data_type = "s"
            current_row += 1

        self._set_column_widths(ws, data, include_header)

        if include_header and data.option("freeze_headers"):
            ws.freeze_panes = "A2"

        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    def _write_header(self, ws, data: ExportData) -> None:
        """写入表头（可选加粗 / 背景色）"""
        fill = None
        background = data.options.header_background if data.options else None
        if background:
            fill = PatternFill(fill_type="solid", start_color=self._argb(background))

        for col_idx, header in enumerate(data.headers, start=1):
            cell = ws.cell(row=1, column=col_idx, value=header)
            cell.data_type = "s"
            if data.option("header_bold"):
                cell.font = Font(bold=True)
            if fill is not None:
                cell.fill = fill

    def _set_column_widths(self, ws, data: ExportData, include_header: bool) -> None:
        auto_fit = data.option("auto_fit_columns")
        for col_idx, header in enumerate(data.headers):
            width = self.default_column_width
            if auto_fit:
                lengths = [len(row[col_idx]) for row in data.rows if col_idx < len(row)]
                if include_header:
                    lengths.append(len(header))
                longest = max(lengths, default=0)
                width = min(max(longest + 2, MIN_AUTO_WIDTH), self.max_auto_width)
            ws.column_dimensions[get_column_letter(col_idx + 1)].width = width

    @staticmethod
    def _argb(color: str) -> str:
        """'#RRGGBB' -> 'FFRRGGBB'"""
        value = color.lstrip("#").upper()
        if len(value) == 6:
            value = "FF" + value
        if len(value) != 8 or any(c not in "0123456789ABCDEF" for c in value):
            raise ExportError(f"Invalid header background color: {color}")
        return value
