"""
校验模块 - 在导出前拒绝非法数据

"""

from .validator import DefaultExportValidator

__all__ = ["DefaultExportValidator"]
