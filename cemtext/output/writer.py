"""
文档写出器 - 渲染结果原样落盘

职责：
1. 创建/截断输出文件并原样写入（不做换行转换）
2. 创建/写入/关闭失败时记录日志并原样抛出 OSError

已知限制：写入中途失败时不清理已产生的部分文件。

测试要点：
- test_write_verbatim: 原样写出
- test_write_failure_propagates: 失败原样抛出
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..interfaces import IDocumentWriter

if TYPE_CHECKING:
    from ..config import RuntimeConfig

logger = logging.getLogger(__name__)


class DocumentWriter(IDocumentWriter):
    """文档写出器实现"""

    def __init__(self, encoding: str = "utf-8", newline: str = ""):
        self.encoding = encoding
        self.newline = newline

    @classmethod
    def from_config(cls, config: RuntimeConfig) -> DocumentWriter:
        return cls(encoding=config.output.encoding, newline=config.output.newline)

    def write(self, document: str, path: str | Path) -> Path:
        """原样写出文档"""
        output = Path(path)
        try:
            with open(output, "w", encoding=self.encoding, newline=self.newline) as f:
                f.write(document)
        except OSError as e:
            logger.error(f"文档写出失败: {output}: {e}")
            raise

        logger.info(f"文档已写出: {output} ({len(document)} 字符)")
        return output
