"""
输出模块 - 渲染结果落盘
"""

from .writer import DocumentWriter

__all__ = ["DocumentWriter"]
