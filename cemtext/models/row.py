"""
明细行 - 明细数据的取值约定

明细行是 字段名 -> 标量值 的映射，取值只允许：
- str
- 数值（int / float / Decimal）
- 缺省（None 或不存在）

stringify_value 给出统一的文本化规则，明细绑定与字段默认值都走这里。
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Union

ScalarValue = Union[str, int, float, Decimal, bool, None]

DetailRow = Mapping[str, ScalarValue]


def stringify_value(value: object) -> str:
    """标量值转文本（None/空串 -> ""）"""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool 是 int 的子类，必须先判断
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)
