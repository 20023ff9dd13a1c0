"""
配置层 - 运行期配置

职责：
- 加载 config/export_runtime.yaml（运行期参数）
- 提供类型安全的配置访问

"""

from .runtime_config import (
    ExcelConfig,
    FontsConfig,
    LoggingConfig,
    PdfConfig,
    RuntimeConfig,
    ValidationLimitsConfig,
    get_config,
    reload_config,
)

__all__ = [
    "RuntimeConfig",
    "ValidationLimitsConfig",
    "PdfConfig",
    "FontsConfig",
    "ExcelConfig",
    "LoggingConfig",
    "get_config",
    "reload_config",
]
