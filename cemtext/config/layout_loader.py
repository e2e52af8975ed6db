"""
布局加载器 - 读取 cemtext 布局 YAML

职责：
- 解析YAML并提供类型安全访问
- 提供表头/明细/表尾字段集合与分段选项
- 缓存加载结果（避免重复解析）

布局文件结构：
    schema_version: "1.0"
    option:
      max_length_per_section: 120
      add_char_per_section: "\\r\\n"
    header:
      record_type: {order: 1, type: lpz, length: 1, value: "0"}
    detail:
      account_name: {order: 1, type: rps, length: 32}
    footer:
      total_amount: {order: 1, type: lpz, length: 10, remove_all_chars: "."}

使用方式：
    layout = LayoutLoader.load("layouts/aba.yaml")
    header = layout.get_section("header")
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from ..interfaces import LayoutError
from ..models import FieldSet, Option

SECTION_NAMES = ("header", "detail", "footer")


class LayoutSpec(BaseModel):
    """布局规范（布局 YAML 的结构化表示）"""
    schema_version: str = "1.0"

    # 分段级选项
    option: Option | None = None

    # 三段字段集合（缺省表示该段不输出）
    header: FieldSet | None = None
    detail: FieldSet | None = None
    footer: FieldSet | None = None

    def get_section(self, name: str) -> FieldSet | None:
        """获取分段字段集合"""
        if name not in SECTION_NAMES:
            raise KeyError(f"未知分段: {name}")
        return getattr(self, name)

    def total_length(self, name: str) -> int:
        """分段字段宽度之和（不含 Option）"""
        field_set = self.get_section(name) or {}
        return sum(attr.length for attr in field_set.values())


class LayoutLoader:
    """布局加载器（缓存）"""

    @classmethod
    @lru_cache(maxsize=8)
    def load(cls, layout_path: str | Path) -> LayoutSpec:
        """加载并缓存布局"""
        path = Path(layout_path)
        if not path.exists():
            raise FileNotFoundError(f"布局文件不存在: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise LayoutError(f"布局文件解析失败: {path}: {e}") from e

        if not isinstance(data, dict):
            raise LayoutError(f"布局文件格式错误（应为映射）: {path}")

        try:
            return LayoutSpec(**data)
        except ValidationError as e:
            raise LayoutError(f"布局文件校验失败: {path}: {e}") from e

    @classmethod
    def reload(cls, layout_path: str | Path) -> LayoutSpec:
        """强制重新加载（清除缓存）"""
        cls.load.cache_clear()
        return cls.load(Path(layout_path).resolve())


# 便捷函数
def load_layout(layout_path: str | Path) -> LayoutSpec:
    """加载布局（缓存键统一为绝对路径）"""
    return LayoutLoader.load(Path(layout_path).resolve())
