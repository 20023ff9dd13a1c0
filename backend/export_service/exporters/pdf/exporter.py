"""
PDF导出器 - 分页文档的 IExportService 实现

只持有不可变的协作对象（版式配置、文本格式化器、字体选择），
同一实例可并发导出；每次调用各自新建 PdfRenderer。

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...interfaces import IExportService, ITextFormatter
from .fonts import DEFAULT_CATALOG, FontCatalog, FontConfig
from .layout import PageSize, PdfLayoutConfig
from .renderer import PdfRenderer
from .text_formatter import BilingualTextFormatter

if TYPE_CHECKING:
    from ...config import RuntimeConfig
    from ...models import ExportData


class PdfExporter(IExportService):
    """PDF导出器实现"""

    def __init__(
        self,
        config: PdfLayoutConfig | None = None,
        text_formatter: ITextFormatter | None = None,
        font_config: FontConfig | None = None,
        font_catalog: FontCatalog = DEFAULT_CATALOG,
    ):
        self.config = config or PdfLayoutConfig()
        self.text_formatter = text_formatter or BilingualTextFormatter()
        self.font_config = font_config or FontConfig()
        self.font_catalog = font_catalog

    @classmethod
    def from_config(cls, runtime: RuntimeConfig) -> PdfExporter:
        """从运行期配置构建"""
        layout = PdfLayoutConfig(page_size=PageSize.from_name(runtime.pdf.page_size))
        return cls(
            config=layout,
            text_formatter=BilingualTextFormatter.from_config(runtime.pdf),
            font_config=FontConfig.from_config(runtime.fonts),
            font_catalog=FontCatalog.from_config(runtime.fonts),
        )

    def with_config(self, config: PdfLayoutConfig) -> PdfExporter:
        return PdfExporter(config, self.text_formatter, self.font_config, self.font_catalog)

    def with_formatter(self, text_formatter: ITextFormatter) -> PdfExporter:
        return PdfExporter(self.config, text_formatter, self.font_config, self.font_catalog)

    def export(self, data: ExportData) -> bytes:
        """
        将导出数据渲染为分页PDF

        Raises:
            FontLoadError: 字体文件被拒绝
            SerializationError: 文档无法写出
        """
        renderer = PdfRenderer(
            data.title,
            self.config,
            self.text_formatter,
            len(data.headers),
            font_config=self.font_config,
            font_catalog=self.font_catalog,
        )
        return renderer.render(data.title, data.headers, data.rows, data.column_metadata)
