"""
分段拼装器 - 字段集合 -> 分段字符串

流程：
1. 逐字段取值变换 + 定宽格式化
2. 按 order 排序后无分隔拼接
3. 结果非空且有 Option 时：先定宽到 max_length_per_section，再追加 add_char_per_section

空字段集合（None/{}）直接返回 ""，不经过 Option。

测试要点：
- test_assemble_header: 表头拼装
- test_option_max_length: 分段定宽
- test_option_add_char: 分段尾字符
- test_empty_field_set: 空集合
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ..interfaces import ISectionAssembler
from ..models import OrderingMode
from .ordering import resolve_order
from .padding import format_field, right_pad

if TYPE_CHECKING:
    from ..models import FieldSet, Option

logger = logging.getLogger(__name__)


class SectionAssembler(ISectionAssembler):
    """分段拼装器实现"""

    def __init__(self, ordering: OrderingMode | str = OrderingMode.NUMERIC):
        self.ordering = OrderingMode(ordering)

    def assemble(
        self,
        field_set: FieldSet | None,
        option: Option | None = None,
        values: Mapping[str, str] | None = None,
    ) -> str:
        """拼装单个分段"""
        if not field_set:
            return ""

        text = "".join(value for _, value in self.format_fields(field_set, values))

        if text and option is not None:
            text = apply_max_length(text, option.max_length_per_section)
            if option.add_char_per_section:
                text = text + option.add_char_per_section

        return text

    def format_fields(
        self,
        field_set: FieldSet,
        values: Mapping[str, str] | None = None,
    ) -> list[tuple[str, str]]:
        """逐字段格式化并排序"""
        formatted = {
            name: format_field(attr, values.get(name) if values is not None else None)
            for name, attr in field_set.items()
        }
        return resolve_order(field_set, formatted, self.ordering)


def apply_max_length(text: str, max_length: int) -> str:
    """分段定宽（0 表示不处理）"""
    if max_length != 0:
        return right_pad(text, " ", max_length)
    return text
