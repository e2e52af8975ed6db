"""
生成选项 - 作用于每个分段（表头/每条明细/表尾）
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class OrderingMode(str, Enum):
    """字段排序方式"""
    NUMERIC = "numeric"   # 按 order 数值升序，同序按字段名
    LEGACY = "legacy"     # 兼容旧版：order 转字符串后按字典序（10 排在 2 之前）


class Option(BaseModel):
    """分段级选项"""

    # 0 表示不限制；否则右补空格/截断到该宽度
    max_length_per_section: int = Field(default=0, ge=0)

    # 在定宽处理之后追加，不计入 max_length_per_section
    add_char_per_section: str = ""
