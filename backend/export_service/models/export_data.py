"""
导出数据模型 - 所有导出器读取的数据

HTTP/CLI 层解析 ExportRequest 并经 to_domain() 转换，
导出器只读取转换后的 ExportData。

"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..interfaces import InvalidFormatError


class ColumnType(str, Enum):
    """列数据类型（决定对齐方式）"""
    TEXT = "text"
    NUMBER = "number"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    DATE = "date"

    @property
    def is_right_aligned(self) -> bool:
        return self in (ColumnType.NUMBER, ColumnType.CURRENCY, ColumnType.PERCENTAGE)


class ColumnMetadata(BaseModel):
    """单列元数据"""
    column_type: ColumnType = ColumnType.TEXT
    width_hint: float | None = Field(None, description="自定义列宽提示（百分比或固定值）")

    @classmethod
    def text(cls) -> ColumnMetadata:
        return cls(column_type=ColumnType.TEXT)

    @classmethod
    def number(cls) -> ColumnMetadata:
        return cls(column_type=ColumnType.NUMBER)

    @classmethod
    def currency(cls) -> ColumnMetadata:
        return cls(column_type=ColumnType.CURRENCY)

    @classmethod
    def percentage(cls) -> ColumnMetadata:
        return cls(column_type=ColumnType.PERCENTAGE)

    @classmethod
    def date(cls) -> ColumnMetadata:
        return cls(column_type=ColumnType.DATE)

    def with_width(self, width: float) -> ColumnMetadata:
        return self.model_copy(update={"width_hint": width})


class ExportFormat(str, Enum):
    """导出文件格式"""
    EXCEL = "excel"
    CSV = "csv"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        return {
            ExportFormat.EXCEL: "xlsx",
            ExportFormat.CSV: "csv",
            ExportFormat.PDF: "pdf",
        }[self]

    @property
    def mime_type(self) -> str:
        return {
            ExportFormat.EXCEL: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            ExportFormat.CSV: "text/csv",
            ExportFormat.PDF: "application/pdf",
        }[self]

    @classmethod
    def parse(cls, value: str) -> ExportFormat:
        """不区分大小写解析"""
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidFormatError(value) from None


class ExportOptions(BaseModel):
    """格式选项（主要供 Excel/CSV 导出使用）"""
    freeze_headers: bool | None = None
    auto_fit_columns: bool | None = None
    header_bold: bool | None = None
    header_background: str | None = Field(None, description="#RRGGBB")
    include_header_row: bool | None = None
    delimiter: str | None = None


class ExportData(BaseModel):
    """导出数据"""
    title: str
    format: ExportFormat
    headers: list[str]
    rows: list[list[str]]
    options: ExportOptions | None = None
    # 为空或短于表头时，缺失列按表头名推测对齐
    column_metadata: list[ColumnMetadata] | None = None

    def option(self, name: str, default: bool = False) -> bool:
        """读取布尔选项，未设置时返回默认值"""
        if self.options is None:
            return default
        value = getattr(self.options, name)
        return default if value is None else value


class ExportRequest(BaseModel):
    """请求DTO（format 仍为字符串）"""
    title: str
    format: str
    headers: list[str]
    rows: list[list[str]]
    options: ExportOptions | None = None
    column_metadata: list[ColumnMetadata] | None = None

    def to_domain(self) -> ExportData:
        """转换为领域模型"""
        return ExportData(
            title=self.title,
            format=ExportFormat.parse(self.format),
            headers=list(self.headers),
            rows=[list(row) for row in self.rows],
            options=self.options,
            column_metadata=self.column_metadata,
        )
