"""
对外接口 - render 函数与 Cemtext 构建器

使用方式：
    text = render(
        header={"record": FieldDescriptor(order=1, type="lpz", length=5, value="1")},
        detail=(detail_fields, rows),
        option=Option(add_char_per_section="\\r\\n"),
    )

    cmtx = Cemtext()
    cmtx.set_header(header)
    cmtx.set_detail(detail_fields, rows)
    cmtx.set_footer(footer)
    cmtx.generate_to_file("out.aba")
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .config import get_config
from .engine import DocumentComposer, SectionAssembler
from .models import OrderingMode
from .output import DocumentWriter

if TYPE_CHECKING:
    from .config import LayoutSpec, RuntimeConfig
    from .models import DetailRow, FieldSet, Option


def render(
    header: FieldSet | None = None,
    detail: tuple[FieldSet | None, Iterable[DetailRow] | None] | None = None,
    footer: FieldSet | None = None,
    option: Option | None = None,
    *,
    ordering: OrderingMode | str | None = None,
    parallel: bool | None = None,
) -> str:
    """渲染完整文档（未指定的参数取运行期配置）"""
    config = get_config()
    composer = DocumentComposer(
        assembler=SectionAssembler(ordering or config.rendering.ordering),
        parallel=config.concurrency.parallel_sections if parallel is None else parallel,
        max_workers=config.concurrency.max_workers,
    )
    detail_fields, rows = detail if detail is not None else (None, None)
    return composer.compose(header, detail_fields, rows, footer, option)


class Cemtext:
    """cemtext 构建器"""

    def __init__(self, config: RuntimeConfig | None = None):
        self.config = config or get_config()
        self.header: FieldSet | None = None
        self.detail: FieldSet | None = None
        self.detail_rows: Sequence[DetailRow] | None = None
        self.footer: FieldSet | None = None
        self.option: Option | None = None

    @classmethod
    def from_layout(
        cls,
        layout: LayoutSpec,
        rows: Sequence[DetailRow] | None = None,
        config: RuntimeConfig | None = None,
    ) -> Cemtext:
        """由布局规范创建"""
        cmtx = cls(config)
        cmtx.set_header(layout.header)
        cmtx.set_detail(layout.detail, rows)
        cmtx.set_footer(layout.footer)
        cmtx.set_option(layout.option)
        return cmtx

    def set_header(self, field_set: FieldSet | None) -> None:
        self.header = field_set

    def set_detail(self, field_set: FieldSet | None, rows: Sequence[DetailRow] | None) -> None:
        self.detail = field_set
        self.detail_rows = rows

    def set_footer(self, field_set: FieldSet | None) -> None:
        self.footer = field_set

    def set_option(self, option: Option | None) -> None:
        self.option = option

    def generate(self) -> str:
        """生成 cemtext 字符串"""
        composer = DocumentComposer.from_config(self.config)
        return composer.compose(
            self.header, self.detail, self.detail_rows, self.footer, self.option
        )

    def generate_to_file(self, output: str | Path) -> Path:
        """生成并写出到文件（写出失败原样抛出 OSError）"""
        document = self.generate()
        return DocumentWriter.from_config(self.config).write(document, output)
