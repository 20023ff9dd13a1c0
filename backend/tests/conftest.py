"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(sample_data, pdf_exporter):
        assert pdf_exporter.export(sample_data).startswith(b"%PDF")
"""

from __future__ import annotations

import re
import tempfile
from io import BytesIO
from pathlib import Path
from typing import Callable, Generator

import pdfplumber
import pytest

from export_service.config import RuntimeConfig
from export_service.exporters.pdf import BilingualTextFormatter, PdfExporter, PdfLayoutConfig
from export_service.models import ColumnMetadata, ExportData, ExportFormat, ExportOptions

PAGE_NUMBER_RE = re.compile(r"Page (\d+)")


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置（默认值）"""
    return RuntimeConfig()


@pytest.fixture
def layout_config() -> PdfLayoutConfig:
    """A4 版式，20mm 页边距"""
    return PdfLayoutConfig()


@pytest.fixture
def formatter() -> BilingualTextFormatter:
    """默认文本格式化器（词边界模式）"""
    return BilingualTextFormatter()


@pytest.fixture
def pdf_exporter() -> PdfExporter:
    return PdfExporter()


# ============================================================================
# 数据 Fixtures
# ============================================================================

@pytest.fixture
def sample_data() -> ExportData:
    """2 列表头 x 2 行，无列元数据"""
    return ExportData(
        title="Test Report",
        format=ExportFormat.PDF,
        headers=["Name", "Value"],
        rows=[["Item 1", "100"], ["Item 2", "200"]],
    )


@pytest.fixture
def sales_data() -> ExportData:
    """数值型表头、格式选项与部分列元数据"""
    return ExportData(
        title="Sales Report",
        format=ExportFormat.PDF,
        headers=["Product Name", "Quantity", "Price", "Total Amount"],
        rows=[
            ["Widget A", "10", "99.99", "999.90"],
            ["Widget B", "5", "149.99", "749.95"],
        ],
        options=ExportOptions(freeze_headers=True, header_bold=True),
        column_metadata=[ColumnMetadata.text(), ColumnMetadata.number()],
    )


@pytest.fixture
def make_rows_data() -> Callable[[int], ExportData]:
    """工厂：生成含 n 行数据的PDF导出数据"""
    def _make(n: int, fmt: ExportFormat = ExportFormat.PDF) -> ExportData:
        return ExportData(
            title="Inventory",
            format=fmt,
            headers=["Code", "Description", "Amount"],
            rows=[[f"C{i:04d}", f"Row {i} description", f"{i * 10}.00"] for i in range(1, n + 1)],
        )
    return _make


# ============================================================================
# PDF 解析 Fixtures
# ============================================================================

@pytest.fixture
def pdf_page_texts() -> Callable[[bytes], list[str]]:
    """用 pdfplumber 提取每页文本"""
    def _read(pdf_bytes: bytes) -> list[str]:
        with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
            return [page.extract_text() or "" for page in pdf.pages]
    return _read


@pytest.fixture
def footer_numbers(pdf_page_texts) -> Callable[[bytes], list[int]]:
    """页脚页码，每页一项"""
    def _numbers(pdf_bytes: bytes) -> list[int]:
        numbers = []
        for text in pdf_page_texts(pdf_bytes):
            found = PAGE_NUMBER_RE.findall(text)
            assert len(found) == 1, f"expected one footer per page, got {found}"
            numbers.append(int(found[0]))
        return numbers
    return _numbers


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
