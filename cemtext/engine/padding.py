"""
定宽格式化 - 补齐并截断到固定宽度

规则：
- 左补齐：在左侧补填充字符直到达到宽度，再保留前 length 个字符
- 右补齐：在右侧补填充字符，再保留前 length 个字符
- 两种方式都从尾部截断：超长输入保留原始的前 length 个字符
- length == 0 -> ""；length < 0 -> FieldLengthError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..interfaces import FieldLengthError
from ..models import PaddingMode
from .transform import derive_value

if TYPE_CHECKING:
    from ..models import FieldDescriptor


def _check_length(length: int) -> None:
    if length < 0:
        raise FieldLengthError(f"字段宽度不能为负数: {length}")


def left_pad(val: str, fill: str, length: int) -> str:
    """左补齐后截断"""
    _check_length(length)
    if len(val) < length:
        val = fill * (length - len(val)) + val
    return val[:length]


def right_pad(val: str, fill: str, length: int) -> str:
    """右补齐后截断"""
    _check_length(length)
    if len(val) < length:
        val = val + fill * (length - len(val))
    return val[:length]


def format_value(val: str, padding: PaddingMode, length: int) -> str:
    """按填充方式格式化到 length 个字符"""
    if padding.is_left:
        return left_pad(val, padding.fill_char, length)
    return right_pad(val, padding.fill_char, length)


def format_field(descriptor: FieldDescriptor, value: str | None = None) -> str:
    """取值变换 + 定宽格式化"""
    return format_value(derive_value(descriptor, value), descriptor.padding, descriptor.length)
