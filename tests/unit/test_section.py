"""
分段拼装单元测试

每个模块完成后必须运行：pytest tests/unit/test_section.py -v
"""

import pytest

from cemtext.engine import SectionAssembler, apply_max_length
from cemtext.interfaces import FieldLengthError
from cemtext.models import FieldDescriptor, FieldSet, Option, OrderingMode


class TestSectionAssembler:
    """分段拼装器测试"""

    def test_assemble_header(self, assembler: SectionAssembler, header_fields: FieldSet):
        """测试表头拼装（无 Option）"""
        assert assembler.assemble(header_fields) == "00001AB "

    def test_assemble_order(self, assembler: SectionAssembler):
        """测试按 order 拼接"""
        field_set = {
            "first": FieldDescriptor(order=1, type="lps", length=5, value="First"),
            "third": FieldDescriptor(order=3, type="lps", length=5, value="Third"),
            "second": FieldDescriptor(order=2, type="lps", length=6, value="Second"),
        }
        assert assembler.assemble(field_set) == "FirstSecondThird"

    def test_empty_field_set(self, assembler: SectionAssembler):
        """测试空集合不经过 Option"""
        option = Option(max_length_per_section=10, add_char_per_section="\n")
        assert assembler.assemble(None, option) == ""
        assert assembler.assemble({}, option) == ""

    def test_zero_width_section_skips_option(self, assembler: SectionAssembler):
        """测试拼装结果为空时不经过 Option"""
        field_set = {"a": FieldDescriptor(order=1, length=0, value="x")}
        option = Option(max_length_per_section=4, add_char_per_section="\n")
        assert assembler.assemble(field_set, option) == ""

    def test_values_binding(self, assembler: SectionAssembler, header_fields: FieldSet):
        """测试调用方取值绑定"""
        assert assembler.assemble(header_fields, values={"lpz": "42"}) == "00042AB "
        # 绑定不会写回模板
        assert header_fields["lpz"].value == "1"

    def test_legacy_ordering(self):
        """测试兼容旧版排序"""
        field_set = {
            "a": FieldDescriptor(order=2, length=1, value="A"),
            "b": FieldDescriptor(order=10, length=1, value="B"),
        }
        assert SectionAssembler().assemble(field_set) == "AB"
        assert SectionAssembler(OrderingMode.LEGACY).assemble(field_set) == "BA"

    def test_invalid_length_propagates(self, assembler: SectionAssembler):
        """测试绕过校验的负数宽度快速失败"""
        attr = FieldDescriptor.model_construct(length=-1)
        with pytest.raises(FieldLengthError):
            assembler.assemble({"bad": attr})


class TestSectionOption:
    """分段选项测试"""

    def test_max_length_pads(self, assembler: SectionAssembler, header_fields: FieldSet):
        """测试分段定宽补齐"""
        option = Option(max_length_per_section=12)
        assert assembler.assemble(header_fields, option) == "00001AB     "

    def test_max_length_truncates(self, assembler: SectionAssembler, header_fields: FieldSet):
        """测试分段定宽截断"""
        option = Option(max_length_per_section=6)
        assert assembler.assemble(header_fields, option) == "00001A"

    def test_add_char_after_max_length(self, assembler: SectionAssembler, header_fields: FieldSet):
        """测试尾字符在定宽之后追加"""
        option = Option(max_length_per_section=10, add_char_per_section="\r\n")
        result = assembler.assemble(header_fields, option)
        assert result == "00001AB   \r\n"
        assert len(result) == 12

    def test_add_char_only(self, assembler: SectionAssembler, header_fields: FieldSet):
        option = Option(add_char_per_section="|")
        assert assembler.assemble(header_fields, option) == "00001AB |"

    def test_apply_max_length_disabled(self):
        assert apply_max_length("abc", 0) == "abc"
        assert apply_max_length("abc", 5) == "abc  "
