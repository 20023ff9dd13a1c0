"""
导出器 - 每种输出格式一个 IExportService 实现

子模块：
- pdf: 分页PDF引擎
- excel_writer: XLSX（openpyxl）
- csv_writer: CSV

"""

from .csv_writer import CsvExporter
from .excel_writer import ExcelExporter
from .pdf import PdfExporter

__all__ = [
    "CsvExporter",
    "ExcelExporter",
    "PdfExporter",
]
