"""
数据模型层 - 核心数据结构

各模块之间传递的模型：
- ExportData: 已校验的导出数据
- ExportRequest: 请求结构，经 to_domain() 转换
- ColumnMetadata / ColumnType: 列类型声明
- ExportOptions: 格式选项

"""

from .export_data import (
    ColumnMetadata,
    ColumnType,
    ExportData,
    ExportFormat,
    ExportOptions,
    ExportRequest,
)

__all__ = [
    "ColumnMetadata",
    "ColumnType",
    "ExportData",
    "ExportFormat",
    "ExportOptions",
    "ExportRequest",
]
