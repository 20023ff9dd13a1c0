"""
导出数据校验器

检查项（按顺序）：
1. 表头非空
2. 数据行非空
3. 行数 <= max_rows
4. 每行单元格数与表头数一致
5. 每个单元格与表头 <= max_cell_bytes（UTF-8 字节）

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..interfaces import (
    CellTooLongError,
    ColumnCountMismatchError,
    EmptyDataError,
    IExportValidator,
    TooManyRowsError,
)

if TYPE_CHECKING:
    from ..config import RuntimeConfig
    from ..models import ExportData


class DefaultExportValidator(IExportValidator):
    """默认校验器实现"""

    def __init__(self, max_rows: int = 10000, max_cell_bytes: int = 1000):
        self.max_rows = max_rows
        self.max_cell_bytes = max_cell_bytes

    @classmethod
    def from_config(cls, runtime: RuntimeConfig) -> DefaultExportValidator:
        return cls(
            max_rows=runtime.validation.max_rows,
            max_cell_bytes=runtime.validation.max_cell_bytes,
        )

    def validate(self, data: ExportData) -> None:
        if not data.headers:
            raise EmptyDataError("Headers cannot be empty")

        if not data.rows:
            raise EmptyDataError("Data rows cannot be empty")

        if len(data.rows) > self.max_rows:
            raise TooManyRowsError(len(data.rows), self.max_rows)

        header_count = len(data.headers)
        for i, row in enumerate(data.rows, start=1):
            if len(row) != header_count:
                raise ColumnCountMismatchError(row=i, expected=header_count, actual=len(row))
            for cell in row:
                self._check_length(cell)

        for header in data.headers:
            self._check_length(header)

    def _check_length(self, value: str) -> None:
        length = len(value.encode("utf-8"))
        if length > self.max_cell_bytes:
            raise CellTooLongError(length)
