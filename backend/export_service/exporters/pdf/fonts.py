"""
字体目录 - 三种字重的嵌入 TrueType 字体

职责：
1. 每个 FontWeight 对应一个 TrueType 文件（静态只读表）
2. 字体字节每进程只读取一次
3. 向 reportlab 注册字体，并为每个文档解析 FontSet

依赖：
- reportlab: pdfmetrics / TTFont
- 默认字体：reportlab 发行包自带的 Vera 字体族

注意：
- 字体被拒绝时抛出 FontLoadError，不做字体降级

"""

from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from io import BytesIO
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

import reportlab
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ...interfaces import FontLoadError

if TYPE_CHECKING:
    from ...config import FontsConfig


class FontWeight(str, Enum):
    """字重"""
    LIGHT = "light"
    MEDIUM = "medium"
    BOLD = "bold"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class FontConfig:
    """正文与标题/表头使用的字重"""
    regular_weight: FontWeight = FontWeight.LIGHT
    bold_weight: FontWeight = FontWeight.BOLD

    @classmethod
    def from_config(cls, fonts: FontsConfig) -> FontConfig:
        return cls(
            regular_weight=FontWeight(fonts.regular_weight),
            bold_weight=FontWeight(fonts.bold_weight),
        )


@dataclass(frozen=True)
class FontSet:
    """单次文档生成使用的已注册字体名"""
    regular: str
    bold: str


REPORTLAB_FONT_DIR = Path(os.path.dirname(reportlab.__file__)) / "fonts"

DEFAULT_FONT_FILES: Mapping[FontWeight, str] = MappingProxyType({
    FontWeight.LIGHT: "Vera.ttf",
    FontWeight.MEDIUM: "Vera.ttf",
    FontWeight.BOLD: "VeraBd.ttf",
})


@dataclass(frozen=True)
class FontCatalog:
    """各字重对应的字体文件位置"""
    directory: Path = REPORTLAB_FONT_DIR
    files: Mapping[FontWeight, str] = field(default_factory=lambda: DEFAULT_FONT_FILES)

    @classmethod
    def from_config(cls, fonts: FontsConfig) -> FontCatalog:
        directory = Path(fonts.directory) if fonts.directory else REPORTLAB_FONT_DIR
        return cls(
            directory=directory,
            files=MappingProxyType({
                FontWeight.LIGHT: fonts.light,
                FontWeight.MEDIUM: fonts.medium,
                FontWeight.BOLD: fonts.bold,
            }),
        )

    def asset_path(self, weight: FontWeight) -> Path:
        return self.directory / self.files[weight]


DEFAULT_CATALOG = FontCatalog()


@lru_cache(maxsize=None)
def _read_asset(path: Path) -> bytes:
    """读取字体文件（进程内缓存）"""
    return path.read_bytes()


@lru_cache(maxsize=None)
def _register_font(path: Path) -> str:
    """向 reportlab 注册字体并返回字体名"""
    data = _read_asset(path)
    # 字体名由内容哈希得出，相同字节只注册一次
    name = f"ExportSans-{hashlib.sha1(data).hexdigest()[:10]}"
    pdfmetrics.registerFont(TTFont(name, BytesIO(data)))
    return name


def get_font_bytes(weight: FontWeight, catalog: FontCatalog = DEFAULT_CATALOG) -> bytes:
    """获取指定字重的字体原始字节"""
    path = catalog.asset_path(weight)
    try:
        return _read_asset(path)
    except OSError as e:
        raise FontLoadError(f"{weight.label} ({path}): {e}") from e


def _resolve(slot: str, weight: FontWeight, catalog: FontCatalog) -> str:
    path = catalog.asset_path(weight)
    try:
        return _register_font(path)
    except Exception as e:
        raise FontLoadError(f"{slot} font ({weight.label}): {e}") from e


def load_fonts(
    config: FontConfig | None = None,
    catalog: FontCatalog = DEFAULT_CATALOG,
) -> FontSet:
    """
    为一个文档解析常规与粗体字体

    Raises:
        FontLoadError: 字体文件缺失或被 reportlab 拒绝
    """
    config = config or FontConfig()
    return FontSet(
        regular=_resolve("Regular", config.regular_weight, catalog),
        bold=_resolve("Bold", config.bold_weight, catalog),
    )
