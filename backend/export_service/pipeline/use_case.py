"""
导出用例 - 校验、按格式分派、导出

职责：
1. 在任何导出器之前执行校验
2. 按请求格式选择导出器
3. 抛出类型化的失败（不重试，不返回部分输出）
4. 生成下载文件名与 MIME 类型

测试要点：
- test_dispatches_by_format
- test_validation_runs_first
- test_unexpected_error_wrapped

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Mapping

from ..config import get_config
from ..exporters import CsvExporter, ExcelExporter, PdfExporter
from ..interfaces import ExportError, ExportServiceError
from ..models import ExportFormat
from ..validation import DefaultExportValidator

if TYPE_CHECKING:
    from ..config import RuntimeConfig
    from ..interfaces import IExportService, IExportValidator
    from ..models import ExportData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    """导出结果（可直接下载）"""
    content: bytes
    format: ExportFormat
    filename: str

    @property
    def mime_type(self) -> str:
        return self.format.mime_type


def build_filename(title: str, fmt: ExportFormat, now: datetime | None = None) -> str:
    """'<标题(空格转下划线)>_<unix时间戳>.<扩展名>'"""
    now = now or datetime.now(timezone.utc)
    return f"{title.replace(' ', '_')}_{int(now.timestamp())}.{fmt.extension}"


class ExportUseCase:
    """导出主用例"""

    def __init__(
        self,
        validator: IExportValidator,
        exporters: Mapping[ExportFormat, IExportService],
    ):
        self.validator = validator
        self.exporters = dict(exporters)

    @classmethod
    def from_config(cls, runtime: RuntimeConfig | None = None) -> ExportUseCase:
        """按运行期配置装配默认校验器与导出器"""
        runtime = runtime or get_config()
        return cls(
            validator=DefaultExportValidator.from_config(runtime),
            exporters={
                ExportFormat.EXCEL: ExcelExporter.from_config(runtime),
                ExportFormat.CSV: CsvExporter(),
                ExportFormat.PDF: PdfExporter.from_config(runtime),
            },
        )

    def execute(self, data: ExportData) -> bytes:
        """校验并导出，返回文件字节"""
        # 1. 校验
        self.validator.validate(data)

        # 2. 选择导出器
        exporter = self.exporters.get(data.format)
        if exporter is None:
            raise ExportError(f"No exporter registered for format: {data.format.value}")

        # 3. 导出
        logger.info(
            f"Export started: format={data.format.value} "
            f"columns={len(data.headers)} rows={len(data.rows)}"
        )
        try:
            content = exporter.export(data)
        except ExportServiceError as e:
            logger.error(f"Export failed ({data.format.value}): {e}")
            raise
        except Exception as e:
            logger.exception(f"Export failed ({data.format.value})")
            raise ExportError(str(e)) from e

        logger.info(f"Export finished: format={data.format.value} bytes={len(content)}")
        return content

    def export(self, data: ExportData, now: datetime | None = None) -> ExportResult:
        """执行导出并附带文件名打包结果"""
        content = self.execute(data)
        return ExportResult(
            content=content,
            format=data.format,
            filename=build_filename(data.title, data.format, now),
        )
