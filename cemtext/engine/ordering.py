"""
字段排序 - 无序字段集合 -> 确定的输出顺序

两种模式：
- NUMERIC: (order, name) 稳定排序，order 按数值比较
- LEGACY: 旧版排序键 "{order}{name}{SEPARATOR}{formatted}" 按字符串排序，
          多位数 order 按字典序比较（10 排在 2 之前），用于字节级兼容

测试要点：
- test_numeric_order: 1,2,3 与插入顺序无关
- test_legacy_lexicographic: 10 排在 2 之前
- test_total: 每个字段恰好出现一次
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from ..models import OrderingMode

if TYPE_CHECKING:
    from ..models import FieldSet

SEPARATOR = " __{{[[((0RD3R_53P))]]}}__ "


def resolve_order(
    field_set: FieldSet,
    formatted: Mapping[str, str],
    mode: OrderingMode = OrderingMode.NUMERIC,
) -> list[tuple[str, str]]:
    """
    按 order 排序

    Args:
        field_set: 字段集合
        formatted: 字段名 -> 已格式化取值
        mode: 排序方式

    Returns:
        [(字段名, 已格式化取值), ...]
    """
    if OrderingMode(mode) is OrderingMode.LEGACY:
        def legacy_key(name: str) -> str:
            return f"{field_set[name].order}{name}{SEPARATOR}{formatted[name]}"
        names = sorted(field_set, key=legacy_key)
    else:
        names = sorted(field_set, key=lambda name: (field_set[name].order, name))

    return [(name, formatted[name]) for name in names]
