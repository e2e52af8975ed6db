"""
cemtext - 定长文本（cemtext）渲染引擎

模块结构：
- config/     布局文件与运行期配置
- models/     数据模型定义
- engine/     渲染引擎（取值/定宽/排序/分段/明细/组装）
- output/     渲染结果落盘
- api         render 函数与 Cemtext 构建器
- cli         命令行入口
"""

from .api import Cemtext, render
from .models import FieldDescriptor, Option, OrderingMode, PaddingMode

__version__ = "0.1.0"

__all__ = [
    "Cemtext",
    "render",
    "FieldDescriptor",
    "Option",
    "OrderingMode",
    "PaddingMode",
]
