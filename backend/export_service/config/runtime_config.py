"""
运行期配置 - 读取 config/export_runtime.yaml

职责：
- 加载校验上限、PDF/字体/Excel 默认值与日志参数
- 提供环境变量覆盖机制（EXPORT_ 前缀）
- 类型安全的配置访问

"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class ValidationLimitsConfig(BaseModel):
    """上游校验限制"""

    max_rows: int = 10000
    max_cell_bytes: int = 1000


class PdfConfig(BaseModel):
    """PDF 版式与文本适配默认值"""

    page_size: Literal["a4", "letter"] = "a4"
    truncation_mode: Literal["word_boundary", "simple"] = "word_boundary"
    ellipsis: str = "..."
    min_chars: int = 5
    max_chars: int = 50


class FontsConfig(BaseModel):
    """字体目录配置（directory 为空时使用 reportlab 自带字体）"""

    directory: str | None = None
    light: str = "Vera.ttf"
    medium: str = "Vera.ttf"
    bold: str = "VeraBd.ttf"
    regular_weight: Literal["light", "medium", "bold"] = "light"
    bold_weight: Literal["light", "medium", "bold"] = "bold"


class ExcelConfig(BaseModel):
    """Excel 导出默认值"""

    default_column_width: float = 20
    max_auto_width: float = 60


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_to_file: bool = False
    log_file: str = "export_service.log"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    validation: ValidationLimitsConfig = Field(default_factory=ValidationLimitsConfig)
    pdf: PdfConfig = Field(default_factory=PdfConfig)
    fonts: FontsConfig = Field(default_factory=FontsConfig)
    excel: ExcelConfig = Field(default_factory=ExcelConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "EXPORT_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        config = cls(
            validation=ValidationLimitsConfig(**cls._extract(runtime_opts, "validation")),
            pdf=PdfConfig(**cls._extract(runtime_opts, "pdf")),
            fonts=FontsConfig(**cls._extract(runtime_opts, "fonts")),
            excel=ExcelConfig(**cls._extract(runtime_opts, "excel")),
            logging=LoggingConfig(**cls._extract(runtime_opts, "logging")),
        )

        config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并扁平化配置节（{default: x} 取 x）"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """相对路径以配置文件所在目录为基准解析"""
        if self.fonts.directory:
            font_dir = Path(self.fonts.directory)
            if not font_dir.is_absolute():
                self.fonts.directory = str((base_dir / font_dir).resolve())
        if self.logging.log_to_file:
            log_file = Path(self.logging.log_file)
            if not log_file.is_absolute():
                self.logging.log_file = str((base_dir / log_file).resolve())


# 全局配置实例
_config: RuntimeConfig | None = None

DEFAULT_CONFIG_PATH = Path("config/export_runtime.yaml")


def get_config() -> RuntimeConfig:
    """获取全局配置（懒加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_CONFIG_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
