"""
CSV导出 - 表头记录 + 数据行，UTF-8 编码

使用的选项：
- delimiter: 单个字符（默认 ","）
- include_header_row: 为 False 时不输出表头

"""

from __future__ import annotations

import csv
from io import StringIO
from typing import TYPE_CHECKING

from ..interfaces import ExportError, IExportService

if TYPE_CHECKING:
    from ..models import ExportData


class CsvExporter(IExportService):
    """CSV导出器实现"""

    def export(self, data: ExportData) -> bytes:
        delimiter = (data.options and data.options.delimiter) or ","
        if len(delimiter) != 1:
            raise ExportError(f"CSV delimiter must be a single character: {delimiter!r}")

        buf = StringIO()
        writer = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
        if data.option("include_header_row", default=True):
            writer.writerow(data.headers)
        writer.writerows(data.rows)
        return buf.getvalue().encode("utf-8")
