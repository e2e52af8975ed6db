"""
字段模型 - 定长字段描述

对应原始 JSON 标签：
    order / type / length / value / default_value /
    remove_all_chars / replace_all_chars

使用方式：
    header = build_field_set({
        "record_type": {"order": 1, "type": "lpz", "length": 1, "value": "0"},
        "bank_name": {"order": 2, "type": "rps", "length": 3, "value": "WBC"},
    })
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .row import stringify_value


class PaddingMode(str, Enum):
    """填充方式枚举"""
    LEFT_SPACE = "lps"    # 左补空格: "  john doe"
    LEFT_ZERO = "lpz"     # 左补零:   "0000000123"
    RIGHT_SPACE = "rps"   # 右补空格: "john doe   "（默认）
    RIGHT_ZERO = "rpz"    # 右补零:   "1230000000"

    @property
    def fill_char(self) -> str:
        if self in (PaddingMode.LEFT_ZERO, PaddingMode.RIGHT_ZERO):
            return "0"
        return " "

    @property
    def is_left(self) -> bool:
        return self in (PaddingMode.LEFT_SPACE, PaddingMode.LEFT_ZERO)


class FieldDescriptor(BaseModel):
    """定长字段描述"""

    order: int = Field(default=0, description="输出位置（升序）")
    padding: PaddingMode = Field(default=PaddingMode.RIGHT_SPACE, alias="type")
    length: int = Field(default=0, ge=0, description="定长宽度")

    # 取值：value 为空时使用 default_value
    value: str = ""
    default_value: str = ""

    # 字符处理：先删除，后替换
    remove_chars: str = Field(default="", alias="remove_all_chars")
    replace_chars: tuple[str, str] = Field(default=("", ""), alias="replace_all_chars")

    model_config = {"populate_by_name": True}

    @field_validator("padding", mode="before")
    @classmethod
    def _default_padding(cls, v: Any) -> Any:
        if v is None or v == "":
            return PaddingMode.RIGHT_SPACE
        return v

    @field_validator("value", "default_value", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> str:
        return stringify_value(v)

    @field_validator("replace_chars", mode="before")
    @classmethod
    def _normalize_replace(cls, v: Any) -> Any:
        if v is None:
            return ("", "")
        return v

    @property
    def replace_enabled(self) -> bool:
        """替换规则是否生效（两项均非空）"""
        old, new = self.replace_chars
        return bool(old) and bool(new)


FieldSet = dict[str, FieldDescriptor]


def build_field_set(raw: Mapping[str, Any] | None) -> FieldSet | None:
    """原始映射 -> FieldSet（None 原样返回）"""
    if raw is None:
        return None
    return {
        name: attr if isinstance(attr, FieldDescriptor) else FieldDescriptor.model_validate(attr)
        for name, attr in raw.items()
    }
