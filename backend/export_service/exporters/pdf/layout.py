"""
PDF版式配置 - 页面几何与排版参数

除字号（pt）外所有长度单位均为毫米。派生计算均为纯函数：
相同配置得到相同结果。

"""

from __future__ import annotations

from pydantic import BaseModel, Field

FROZEN = {"frozen": True}


class PageSize(BaseModel):
    """页面尺寸（mm）"""
    width: float
    height: float

    model_config = FROZEN

    @classmethod
    def a4(cls) -> PageSize:
        return cls(width=210.0, height=297.0)

    @classmethod
    def letter(cls) -> PageSize:
        return cls(width=215.9, height=279.4)

    @classmethod
    def from_name(cls, name: str) -> PageSize:
        return {"a4": cls.a4, "letter": cls.letter}[name.lower()]()


class Margins(BaseModel):
    """页边距（mm）"""
    top: float = 20.0
    bottom: float = 20.0
    left: float = 20.0
    right: float = 20.0

    model_config = FROZEN


class Typography(BaseModel):
    """字号（pt）与行高（mm）"""
    title_size: float = 16.0
    header_size: float = 10.0
    body_size: float = 10.0
    page_number_size: float = 8.0
    line_height: float = 7.0

    model_config = FROZEN


class Spacing(BaseModel):
    """版面元素间距（mm）"""
    title_bottom: float = Field(15.0, description="标题下方到表头的间距")
    header_line_offset: float = Field(4.0, description="表头基线到分隔线")
    header_to_content: float = Field(10.0, description="表头基线到第一行")
    cell_padding: float = Field(2.0, description="右对齐单元格的右内边距")
    page_number_area: float = Field(20.0, description="下边距上方预留的页脚区域")
    content_top_offset: float = Field(10.0, description="内容起始位置（上边距以下）")

    model_config = FROZEN


class PdfLayoutConfig(BaseModel):
    """单次文档生成的完整版式配置"""
    page_size: PageSize = Field(default_factory=PageSize.a4)
    margins: Margins = Field(default_factory=Margins)
    typography: Typography = Field(default_factory=Typography)
    spacing: Spacing = Field(default_factory=Spacing)
    min_column_width: float = 28.0
    # 仅作参考；单元格字符预算由文本格式化器的上下限决定
    max_chars_per_cell: int = 50

    model_config = FROZEN

    def content_width(self) -> float:
        """左右页边距之间的可用宽度"""
        return self.page_size.width - self.margins.left - self.margins.right

    def content_right(self) -> float:
        """内容区右边界 x 坐标"""
        return self.page_size.width - self.margins.right

    def calculate_column_width(self, num_columns: int) -> float:
        """
        均分列宽

        总宽度始终不超出页面；min_column_width 仅在没有列时返回，
        其余情况不强制。
        """
        if num_columns == 0:
            return self.min_column_width
        return self.content_width() / num_columns

    def content_start_y(self) -> float:
        """每页首行基线 y 坐标"""
        return self.page_size.height - self.margins.top - self.spacing.content_top_offset

    def effective_bottom(self) -> float:
        """下边距加页脚区域；越过即换页"""
        return self.margins.bottom + self.spacing.page_number_area
