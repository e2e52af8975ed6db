"""
取值变换 - 定宽格式化之前的字段取值

顺序固定：
1. value 为空时使用 default_value
2. 删除 remove_chars 的全部出现
3. replace_chars 两项均非空时全部替换

任何输入都不会报错，缺省一律退化为空串。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import FieldDescriptor


def derive_value(descriptor: FieldDescriptor, value: str | None = None) -> str:
    """计算字段原始取值（value 参数优先于 descriptor.value）"""
    val = descriptor.value if value is None else value
    if not val:
        val = descriptor.default_value or ""

    if descriptor.remove_chars:
        val = remove_all_chars(val, descriptor.remove_chars)

    if descriptor.replace_enabled:
        old, new = descriptor.replace_chars
        val = replace_all_chars(val, old, new)

    return val


def remove_all_chars(val: str, chars: str) -> str:
    return val.replace(chars, "")


def replace_all_chars(val: str, old: str, new: str) -> str:
    return val.replace(old, new)
