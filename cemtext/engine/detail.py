"""
明细迭代器 - 每行数据拼装一次明细分段

职责：
1. 按模板字段名从数据行取值（缺省/None/"" -> ""，落到 default_value）
2. 以本行取值绑定调用分段拼装器（Option 逐行生效）
3. 按行序无分隔拼接

模板字段不会被修改：每行使用独立的取值绑定，模板可跨线程、跨渲染共享。

测试要点：
- test_detail_rows: 多行拼接
- test_missing_value_uses_default: 缺省取默认值
- test_template_not_mutated: 模板不被修改
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from ..interfaces import IDetailIterator
from ..models import stringify_value
from .section import SectionAssembler

if TYPE_CHECKING:
    from ..models import DetailRow, FieldSet, Option

logger = logging.getLogger(__name__)


class DetailIterator(IDetailIterator):
    """明细迭代器实现"""

    def __init__(self, assembler: SectionAssembler | None = None):
        self.assembler = assembler or SectionAssembler()

    def bind_row(self, field_set: FieldSet, row: DetailRow) -> dict[str, str]:
        """数据行 -> 字段取值绑定"""
        return {name: stringify_value(row.get(name)) for name in field_set}

    def iterate(
        self,
        field_set: FieldSet | None,
        rows: Iterable[DetailRow] | None,
        option: Option | None = None,
    ) -> Iterator[str]:
        """逐行产出明细块"""
        if field_set is None or rows is None:
            return
        for row in rows:
            yield self.assembler.assemble(field_set, option, self.bind_row(field_set, row))

    def render(
        self,
        field_set: FieldSet | None,
        rows: Iterable[DetailRow] | None,
        option: Option | None = None,
    ) -> str:
        """渲染全部明细行"""
        blocks = list(self.iterate(field_set, rows, option))
        logger.debug(f"明细渲染完成: {len(blocks)} 行")
        return "".join(blocks)
