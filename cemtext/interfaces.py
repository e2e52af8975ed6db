"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from cemtext.interfaces import ISectionAssembler

    class MySectionAssembler(ISectionAssembler):
        def assemble(self, field_set, option=None, values=None) -> str:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import DetailRow, FieldSet, Option


# ============================================================================
# 渲染引擎接口
# ============================================================================

class ISectionAssembler(ABC):
    """分段拼装器接口 - 字段集合 -> 分段字符串"""

    @abstractmethod
    def assemble(
        self,
        field_set: FieldSet | None,
        option: Option | None = None,
        values: Mapping[str, str] | None = None,
    ) -> str:
        """
        拼装单个分段

        Args:
            field_set: 字段集合（None/空 -> ""）
            option: 分段级选项
            values: 本次调用的字段取值绑定（覆盖 descriptor.value）

        Returns:
            分段字符串
        """
        ...


class IDetailIterator(ABC):
    """明细迭代器接口 - 每行数据拼装一次明细分段"""

    @abstractmethod
    def render(
        self,
        field_set: FieldSet | None,
        rows: Iterable[DetailRow] | None,
        option: Option | None = None,
    ) -> str:
        """
        渲染全部明细行

        Args:
            field_set: 明细字段模板
            rows: 明细数据行（按顺序）
            option: 分段级选项（逐行生效）

        Returns:
            所有明细块按行序拼接的字符串
        """
        ...


class IDocumentComposer(ABC):
    """文档组装器接口 - 表头 + 明细 + 表尾"""

    @abstractmethod
    def compose(
        self,
        header: FieldSet | None = None,
        detail: FieldSet | None = None,
        rows: Iterable[DetailRow] | None = None,
        footer: FieldSet | None = None,
        option: Option | None = None,
    ) -> str:
        """组装完整文档"""
        ...


# ============================================================================
# 输出接口
# ============================================================================

class IDocumentWriter(ABC):
    """文档写出器接口"""

    @abstractmethod
    def write(self, document: str, path: str | Path) -> Path:
        """
        原样写出文档

        Args:
            document: 渲染结果
            path: 输出文件路径

        Returns:
            输出文件路径

        Raises:
            OSError: 创建/写入/关闭失败（原样抛出）
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class CemtextError(Exception):
    """基础异常"""
    pass


class LayoutError(CemtextError):
    """布局文件错误"""
    pass


class FieldLengthError(CemtextError, ValueError):
    """字段宽度非法（负数）"""
    pass


class RenderError(CemtextError):
    """渲染错误"""
    pass
