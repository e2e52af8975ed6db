"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(header_fields, assembler):
        assert assembler.assemble(header_fields) == "00001AB "
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from cemtext.config import RuntimeConfig
from cemtext.engine import DetailIterator, DocumentComposer, SectionAssembler
from cemtext.models import FieldDescriptor, FieldSet, PaddingMode


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置"""
    return RuntimeConfig()


# ============================================================================
# 字段 Fixtures
# ============================================================================

@pytest.fixture
def header_fields() -> FieldSet:
    """示例表头：{1,lpz,5,"1"} + {2,rps,3,"AB"} -> "00001AB " """
    return {
        "rps": FieldDescriptor(order=2, padding=PaddingMode.RIGHT_SPACE, length=3, value="AB"),
        "lpz": FieldDescriptor(order=1, padding=PaddingMode.LEFT_ZERO, length=5, value="1"),
    }


@pytest.fixture
def detail_fields() -> FieldSet:
    """示例明细模板"""
    return {
        "name": FieldDescriptor(order=1, type="rps", length=6),
        "amount": FieldDescriptor(order=2, type="lpz", length=8, remove_all_chars="."),
        "code": FieldDescriptor(order=3, type="rps", length=3, default_value="NA"),
    }


@pytest.fixture
def detail_rows() -> list[dict]:
    """示例明细数据"""
    return [
        {"name": "alice", "amount": "1.000", "code": "A1"},
        {"name": "bob", "amount": 250},
        {"name": None, "amount": "", "code": ""},
    ]


@pytest.fixture
def footer_fields() -> FieldSet:
    """示例表尾"""
    return {
        "record_type": FieldDescriptor(order=1, type="lpz", length=1, value="7"),
        "total": FieldDescriptor(order=2, type="lpz", length=10, value="1.000.000", remove_all_chars="."),
    }


# ============================================================================
# 引擎 Fixtures
# ============================================================================

@pytest.fixture
def assembler() -> SectionAssembler:
    return SectionAssembler()


@pytest.fixture
def detail_iterator(assembler: SectionAssembler) -> DetailIterator:
    return DetailIterator(assembler)


@pytest.fixture
def composer() -> DocumentComposer:
    return DocumentComposer()


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_layout_path(temp_dir: Path) -> Path:
    """示例布局文件"""
    layout_path = temp_dir / "layout.yaml"
    layout_path.write_text(
        """schema_version: "1.0"
option:
  add_char_per_section: "|"
header:
  record_type: {order: 1, type: lpz, length: 1, value: 0}
  bank: {order: 2, type: rps, length: 4, value: WBC}
detail:
  name: {order: 1, type: rps, length: 5}
  amount: {order: 2, type: lpz, length: 6, remove_all_chars: "."}
footer:
  record_type: {order: 1, type: lpz, length: 1, value: 7}
  total: {order: 2, type: lpz, length: 6, value: "1.250", replace_all_chars: [".", ""]}
""",
        encoding="utf-8",
    )
    return layout_path
