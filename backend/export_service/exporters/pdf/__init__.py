"""
PDF导出引擎 - 分页表格文档

模块结构：
- layout.py: 页面几何与排版参数
- fonts.py: 字体目录与 FontSet 解析
- text_formatter.py: 清洗 / 估算 / 截断
- alignment.py: 列对齐与 x 坐标
- renderer.py: 分页与绘制
- exporter.py: IExportService 门面

使用方式：
    from export_service.exporters.pdf import PdfExporter

    pdf_bytes = PdfExporter().export(data)

"""

from .alignment import Alignment, AlignmentResolver, ColumnBounds, estimate_text_width, is_numeric_header
from .exporter import PdfExporter
from .fonts import FontCatalog, FontConfig, FontSet, FontWeight, get_font_bytes, load_fonts
from .layout import Margins, PageSize, PdfLayoutConfig, Spacing, Typography
from .renderer import PageState, PdfRenderer
from .text_formatter import (
    BilingualTextFormatter,
    SimpleTruncation,
    TruncationMode,
    WordBoundaryTruncation,
)

__all__ = [
    # 主入口
    "PdfExporter",
    # 版式
    "PdfLayoutConfig",
    "PageSize",
    "Margins",
    "Typography",
    "Spacing",
    # 字体
    "FontWeight",
    "FontConfig",
    "FontSet",
    "FontCatalog",
    "load_fonts",
    "get_font_bytes",
    # 文本
    "BilingualTextFormatter",
    "TruncationMode",
    "SimpleTruncation",
    "WordBoundaryTruncation",
    # 对齐
    "Alignment",
    "AlignmentResolver",
    "ColumnBounds",
    "is_numeric_header",
    "estimate_text_width",
    # 渲染
    "PageState",
    "PdfRenderer",
]
