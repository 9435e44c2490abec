"""
Тесты для ComparisonCriterion

Проверяет:
1. Валидацию Pydantic модели (upper обязателен только для диапазонов)
2. Immutability
3. Построение предикатов и фильтрацию
4. criterion_from_dict с проверкой JSON Schema контракта
"""

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from src.core.compare.criteria import (
    ComparisonCriterion,
    ComparisonOp,
    criterion_from_dict,
)
from src.core.compare.ordering import tolerance_comparator

VALUES = [21, 22, 24, 25, 26]


# =============================================================================
# МОДЕЛЬ
# =============================================================================


class TestComparisonOp:
    """Тесты для ComparisonOp"""

    def test_range_ops(self) -> None:
        assert ComparisonOp.BETWEEN.is_range
        assert ComparisonOp.BETWEEN_EXCLUSIVE.is_range
        assert not ComparisonOp.GE.is_range

    def test_str_values(self) -> None:
        assert ComparisonOp("between_exclusive") is ComparisonOp.BETWEEN_EXCLUSIVE
        assert ComparisonOp.LE == "le"


class TestComparisonCriterionModel:
    """Тесты валидации модели"""

    def test_single_bound(self) -> None:
        criterion = ComparisonCriterion(op=ComparisonOp.GE, value=10)
        assert criterion.upper is None

    def test_range(self) -> None:
        criterion = ComparisonCriterion(op="between", value=5, upper=10)
        assert criterion.op is ComparisonOp.BETWEEN
        assert criterion.upper == 10

    def test_range_without_upper_rejected(self) -> None:
        with pytest.raises(ValidationError, match="upper is required"):
            ComparisonCriterion(op="between", value=5)

    def test_upper_on_single_bound_rejected(self) -> None:
        with pytest.raises(ValidationError, match="upper is not allowed"):
            ComparisonCriterion(op="gt", value=5, upper=10)

    def test_unknown_op_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ComparisonCriterion(op="approx", value=5)

    def test_inverted_bounds_accepted(self) -> None:
        """Порядок границ не проверяется"""
        criterion = ComparisonCriterion(op="between", value=10, upper=5)
        assert not any(criterion.matches(v) for v in range(15))

    def test_frozen(self) -> None:
        criterion = ComparisonCriterion(op="lt", value=1)
        with pytest.raises(ValidationError):
            criterion.value = 2  # type: ignore[misc]


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


class TestCriterionPredicates:
    """Тесты для to_predicate / matches"""

    @pytest.mark.parametrize(
        "op, value, upper, expected",
        [
            ("lt", 24, None, [21, 22]),
            ("le", 24, None, [21, 22, 24]),
            ("gt", 24, None, [25, 26]),
            ("ge", 24, None, [24, 25, 26]),
            ("eq", 24, None, [24]),
            ("between", 22, 25, [22, 24, 25]),
            ("between_exclusive", 22, 25, [24]),
            ("between", 5, 10, []),
            ("ge", 10, None, VALUES),
        ],
    )
    def test_filter(self, op, value, upper, expected) -> None:
        predicate = ComparisonCriterion(op=op, value=value, upper=upper).to_predicate()
        assert [v for v in VALUES if predicate(v)] == expected

    def test_matches(self) -> None:
        criterion = ComparisonCriterion(op="between", value=0, upper=10)
        assert criterion.matches(1)
        assert not criterion.matches(11)

    def test_with_comparator(self) -> None:
        criterion = ComparisonCriterion(op="eq", value=1.0)
        assert criterion.matches(1.005, tolerance_comparator(0.01))
        assert not criterion.matches(1.005)

    def test_string_bounds(self) -> None:
        criterion = ComparisonCriterion(op="between", value="b", upper="d")
        assert [s for s in "abcde" if criterion.matches(s)] == ["b", "c", "d"]


# =============================================================================
# CRITERION FROM DICT
# =============================================================================


class TestCriterionFromDict:
    """Тесты для criterion_from_dict"""

    def test_valid_single_bound(self) -> None:
        criterion = criterion_from_dict({"op": "ge", "value": 10})
        assert criterion == ComparisonCriterion(op="ge", value=10)

    def test_valid_range(self) -> None:
        criterion = criterion_from_dict({"op": "between", "value": 5, "upper": 10.5})
        assert criterion.upper == 10.5
        assert criterion.matches(10.5)

    @pytest.mark.parametrize(
        "data",
        [
            {"op": "between", "value": 5},
            {"op": "lt", "value": 5, "upper": 10},
            {"op": "lt"},
            {"op": "approx", "value": 5},
            {"op": "lt", "value": True},
            {"op": "lt", "value": [1]},
            {"op": "lt", "value": 5, "extra": 1},
        ],
    )
    def test_contract_violations(self, data) -> None:
        with pytest.raises(SchemaValidationError):
            criterion_from_dict(data)
