"""
字段排序单元测试

每个模块完成后必须运行：pytest tests/unit/test_ordering.py -v
"""

from cemtext.engine import resolve_order
from cemtext.models import FieldDescriptor, OrderingMode


def _fields(**orders: int) -> dict[str, FieldDescriptor]:
    return {name: FieldDescriptor(order=order, length=1) for name, order in orders.items()}


def _names(pairs: list[tuple[str, str]]) -> list[str]:
    return [name for name, _ in pairs]


class TestNumericOrdering:
    """数值排序测试"""

    def test_insertion_order_irrelevant(self):
        """测试与插入顺序无关"""
        field_set = _fields(third=3, first=1, second=2)
        formatted = {"first": "F", "second": "S", "third": "T"}
        assert resolve_order(field_set, formatted) == [
            ("first", "F"),
            ("second", "S"),
            ("third", "T"),
        ]

    def test_multi_digit_numeric(self):
        """测试多位数按数值比较"""
        field_set = _fields(ten=10, two=2, one=1)
        formatted = {name: name for name in field_set}
        assert _names(resolve_order(field_set, formatted)) == ["one", "two", "ten"]

    def test_tie_broken_by_name(self):
        """测试同序按字段名"""
        field_set = _fields(beta=1, alpha=1, gamma=0)
        formatted = {name: "" for name in field_set}
        assert _names(resolve_order(field_set, formatted)) == ["gamma", "alpha", "beta"]

    def test_total(self):
        """测试每个字段恰好出现一次"""
        field_set = _fields(a=5, b=5, c=1, d=100, e=-1)
        formatted = {name: name.upper() for name in field_set}
        result = resolve_order(field_set, formatted)
        assert sorted(_names(result)) == sorted(field_set)
        assert all(value == name.upper() for name, value in result)


class TestLegacyOrdering:
    """兼容旧版排序测试"""

    def test_lexicographic_order(self):
        """测试 order 按字符串比较（10 排在 2 之前）"""
        field_set = _fields(b=10, c=2, a=1)
        formatted = {name: name for name in field_set}
        result = resolve_order(field_set, formatted, OrderingMode.LEGACY)
        # "10b" < "1a" < "2c"
        assert _names(result) == ["b", "a", "c"]
        assert _names(result).index("b") < _names(result).index("c")

    def test_single_digit_matches_numeric(self):
        """测试单位数 order 两种模式一致"""
        field_set = _fields(c=3, a=1, b=2)
        formatted = {name: name for name in field_set}
        assert resolve_order(field_set, formatted, "legacy") == resolve_order(field_set, formatted)

    def test_name_prefix(self):
        """测试字段名前缀关系"""
        field_set = _fields(ab=1, a=1)
        formatted = {"a": "1", "ab": "2"}
        assert _names(resolve_order(field_set, formatted, OrderingMode.LEGACY)) == ["a", "ab"]
