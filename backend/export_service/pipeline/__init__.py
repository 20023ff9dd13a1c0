"""
流水线模块 - 导出编排

子模块：
- use_case: 校验、按格式分派与结果打包

"""

from .use_case import ExportResult, ExportUseCase, build_filename

__all__ = [
    "ExportUseCase",
    "ExportResult",
    "build_filename",
]
