"""
文档组装器 - 表头 + 明细 + 表尾

职责：
1. 表头/明细/表尾三段互不依赖，提交到线程池并行计算
2. 等待三段全部完成（ALL_COMPLETED）后按固定顺序拼接
3. 单段失败时整体失败（不输出部分文档）

测试要点：
- test_compose_order: 拼接顺序与完成顺序无关
- test_parallel_equals_sequential: 并行/串行结果一致
- test_worker_failure: 单段失败
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ALL_COMPLETED, ThreadPoolExecutor, wait
from typing import TYPE_CHECKING

from ..interfaces import CemtextError, IDocumentComposer, RenderError
from .detail import DetailIterator
from .section import SectionAssembler

if TYPE_CHECKING:
    from ..config import RuntimeConfig
    from ..models import DetailRow, FieldSet, Option

logger = logging.getLogger(__name__)

SECTIONS = ("header", "detail", "footer")


class DocumentComposer(IDocumentComposer):
    """文档组装器实现"""

    def __init__(
        self,
        assembler: SectionAssembler | None = None,
        detail_iterator: DetailIterator | None = None,
        parallel: bool = True,
        max_workers: int = 3,
    ):
        self.assembler = assembler or SectionAssembler()
        self.detail_iterator = detail_iterator or DetailIterator(self.assembler)
        self.parallel = parallel
        self.max_workers = max_workers

    @classmethod
    def from_config(cls, config: RuntimeConfig) -> DocumentComposer:
        """根据运行期配置创建"""
        assembler = SectionAssembler(config.rendering.ordering)
        return cls(
            assembler=assembler,
            parallel=config.concurrency.parallel_sections,
            max_workers=config.concurrency.max_workers,
        )

    def compose(
        self,
        header: FieldSet | None = None,
        detail: FieldSet | None = None,
        rows: Iterable[DetailRow] | None = None,
        footer: FieldSet | None = None,
        option: Option | None = None,
    ) -> str:
        """组装完整文档"""
        tasks: dict[str, Callable[[], str]] = {
            "header": lambda: self.assembler.assemble(header, option),
            "detail": lambda: self.detail_iterator.render(detail, rows, option),
            "footer": lambda: self.assembler.assemble(footer, option),
        }

        start = time.perf_counter()
        if self.parallel and self.max_workers > 1:
            results = self._run_parallel(tasks)
        else:
            results = {name: self._run_task(name, task) for name, task in tasks.items()}
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.debug(
            "文档组装完成: "
            + ", ".join(f"{name}={len(results[name])}" for name in SECTIONS)
            + f" ({elapsed_ms:.1f}ms)"
        )
        return "".join(results[name] for name in SECTIONS)

    def _run_parallel(self, tasks: dict[str, Callable[[], str]]) -> dict[str, str]:
        """并行计算三段，等待全部完成"""
        with ThreadPoolExecutor(
            max_workers=min(self.max_workers, len(tasks)),
            thread_name_prefix="cemtext-section",
        ) as pool:
            futures = {name: pool.submit(self._run_task, name, task) for name, task in tasks.items()}
            wait(futures.values(), return_when=ALL_COMPLETED)

        return {name: future.result() for name, future in futures.items()}

    def _run_task(self, name: str, task: Callable[[], str]) -> str:
        """执行单段计算"""
        try:
            return task()
        except (CemtextError, ValueError):
            raise
        except Exception as e:
            logger.error(f"分段渲染失败 {name}: {e}")
            raise RenderError(f"分段渲染失败: {name}") from e
