"""
表格导出服务 - 核心包

模块结构：
- config/       运行期配置
- models/       数据模型（ExportData, ColumnMetadata, ...）
- validation/   导出数据校验
- exporters/    PDF（分页版式引擎）/ XLSX / CSV 导出
- pipeline/     导出用例
- cli.py        命令行入口

"""

__version__ = "0.1.0"
