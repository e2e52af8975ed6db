"""
渲染引擎 - 字段取值/定宽/排序/分段/明细/组装

子模块：
- transform: 取值变换（默认值/删除/替换）
- padding: 定宽格式化
- ordering: 字段排序
- section: 分段拼装
- detail: 明细迭代
- composer: 文档组装（三段并行）
"""

from .composer import DocumentComposer
from .detail import DetailIterator
from .ordering import resolve_order
from .padding import format_field, format_value, left_pad, right_pad
from .section import SectionAssembler, apply_max_length
from .transform import derive_value

__all__ = [
    "DocumentComposer",
    "DetailIterator",
    "SectionAssembler",
    "apply_max_length",
    "resolve_order",
    "format_field",
    "format_value",
    "left_pad",
    "right_pad",
    "derive_value",
]
