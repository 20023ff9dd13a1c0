"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from export_service.interfaces import IExportService

    class MyExporter(IExportService):
        def export(self, data: ExportData) -> bytes:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ExportData


# ============================================================================
# 导出模块接口
# ============================================================================

class IExportService(ABC):
    """导出器接口 - 表格数据转文件字节"""

    @abstractmethod
    def export(self, data: ExportData) -> bytes:
        """
        生成一个文档

        Args:
            data: 已校验的导出数据（只读）

        Returns:
            完整的文件内容

        Raises:
            ExportError: 渲染或序列化失败
        """
        ...


class IExportValidator(ABC):
    """校验器接口 - 在导出前拒绝非法数据"""

    @abstractmethod
    def validate(self, data: ExportData) -> None:
        """
        检查行数/列数与单元格长度

        Raises:
            ValidationError: 数据超出限制
        """
        ...


# ============================================================================
# 文本处理接口
# ============================================================================

class ITextFormatter(ABC):
    """文本格式化接口 - 清洗 / 截断 / 估算"""

    @abstractmethod
    def sanitize(self, text: str) -> str:
        """将文本映射到嵌入字体支持的字符集"""
        ...

    @abstractmethod
    def truncate(self, text: str, max_chars: int) -> str:
        """截断文本至不超过 max_chars 个字符"""
        ...

    @abstractmethod
    def max_chars_for_width(self, width_mm: float, font_size: float) -> int:
        """估算 width_mm 宽度内可容纳的字符数"""
        ...


class ITruncationStrategy(ABC):
    """截断策略接口 - 供文本格式化器使用"""

    @abstractmethod
    def truncate(self, text: str, max_chars: int, ellipsis: str) -> str:
        """截断已知超出 max_chars 的文本"""
        ...


# ============================================================================
# 异常定义
# ============================================================================

class ExportServiceError(Exception):
    """基础异常"""
    pass


class ValidationError(ExportServiceError):
    """导出前校验失败"""
    pass


class InvalidFormatError(ValidationError):
    """未知导出格式"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid format: {value}")


class EmptyDataError(ValidationError):
    """表头或数据行为空"""

    def __init__(self, message: str):
        super().__init__(f"Empty data: {message}")


class ColumnCountMismatchError(ValidationError):
    """行的列数与表头不一致"""

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row}: column count mismatch (expected {expected}, got {actual})"
        )


class CellTooLongError(ValidationError):
    """单元格或表头超出字节上限"""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Cell content too long: {length} chars")


class TooManyRowsError(ValidationError):
    """行数超出上限"""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"Too many rows: {count} (max {limit})")


class ExportError(ExportServiceError):
    """导出失败"""
    pass


class FontLoadError(ExportError):
    """字体资源被渲染引擎拒绝"""

    def __init__(self, message: str):
        super().__init__(f"Failed to load font: {message}")


class SerializationError(ExportError):
    """文档最终序列化失败"""

    def __init__(self, message: str):
        super().__init__(f"Failed to serialize PDF: {message}")
