"""
数据模型层 - 定义渲染引擎的输入结构

- FieldDescriptor / FieldSet: 定长字段描述与字段集合
- PaddingMode: 填充方式
- Option: 分段级选项
- DetailRow: 明细数据行
"""

from .field import FieldDescriptor, FieldSet, PaddingMode, build_field_set
from .option import Option, OrderingMode
from .row import DetailRow, ScalarValue, stringify_value

__all__ = [
    "FieldDescriptor",
    "FieldSet",
    "PaddingMode",
    "build_field_set",
    "Option",
    "OrderingMode",
    "DetailRow",
    "ScalarValue",
    "stringify_value",
]
