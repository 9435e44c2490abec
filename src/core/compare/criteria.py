"""
ComparisonCriterion — декларативная форма предиката

Критерий сравнения как данные (например, из конфигурации или JSON):

    {"op": "between", "value": 5, "upper": 10}

Immutable Pydantic модель, соответствующая схеме comparison_criterion.json.
Превращается в Predicate через to_predicate().
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, model_validator

from src.core.compare import predicates
from src.core.compare.ordering import Comparator
from src.core.compare.predicates import Predicate
from src.core.contracts import validate_comparison_criterion

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class ComparisonOp(str, Enum):
    """Оператор сравнения"""

    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"
    EQ = "eq"
    BETWEEN = "between"
    BETWEEN_EXCLUSIVE = "between_exclusive"

    @property
    def is_range(self) -> bool:
        return self in (ComparisonOp.BETWEEN, ComparisonOp.BETWEEN_EXCLUSIVE)


_SINGLE_BOUND = {
    ComparisonOp.LT: predicates.lt,
    ComparisonOp.LE: predicates.le,
    ComparisonOp.GT: predicates.gt,
    ComparisonOp.GE: predicates.ge,
    ComparisonOp.EQ: predicates.eq,
}

_RANGE = {
    ComparisonOp.BETWEEN: predicates.between,
    ComparisonOp.BETWEEN_EXCLUSIVE: predicates.between_exclusive,
}


# =============================================================================
# CRITERION MODEL
# =============================================================================


class ComparisonCriterion(BaseModel):
    """
    Критерий "x <op> value" или "value <op> x <op> upper".

    Порядок границ (value <= upper) не проверяется: диапазон
    интерпретируется буквально, как и в predicates.between.
    """

    op: ComparisonOp = Field(..., description="Оператор сравнения")
    value: Union[int, float, str] = Field(
        ..., description="Порог (нижняя граница для range-операторов)"
    )
    upper: Optional[Union[int, float, str]] = Field(
        default=None, description="Верхняя граница (только для between/between_exclusive)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_upper_bound(self) -> "ComparisonCriterion":
        """upper обязателен для range-операторов и запрещён для остальных"""
        if self.op.is_range and self.upper is None:
            raise ValueError(f"upper is required for op={self.op.value}")
        if not self.op.is_range and self.upper is not None:
            raise ValueError(f"upper is not allowed for op={self.op.value}")
        return self

    def to_predicate(self, comparator: Optional[Comparator] = None) -> Predicate:
        """
        Построение предиката из критерия.

        Args:
            comparator: Функция (a, b) -> int (default: естественный порядок)

        Returns:
            Predicate
        """
        if self.op.is_range:
            return _RANGE[self.op](self.value, self.upper, comparator)
        return _SINGLE_BOUND[self.op](self.value, comparator)

    def matches(self, x: Any, comparator: Optional[Comparator] = None) -> bool:
        """Проверка одного значения против критерия"""
        return self.to_predicate(comparator)(x)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def criterion_from_dict(data: Dict[str, Any]) -> ComparisonCriterion:
    """
    Построение критерия из JSON-данных с проверкой контракта.

    Args:
        data: Данные вида {"op": ..., "value": ..., "upper": ...}

    Returns:
        ComparisonCriterion

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    validate_comparison_criterion(data)
    criterion = ComparisonCriterion.model_validate(data)
    logger.debug("Built criterion %s from %r", criterion.op.value, data)
    return criterion
