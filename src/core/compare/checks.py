"""
ComparisonCheck — fluent-проверки одного значения

Обёртка над значением a, позволяющая писать:

    is_(a).between(b, c)
    is_(price).greater_than_or_equal_to(floor)

Обёртка immutable и не хранит ничего, кроме ссылки на значение и
опционального comparator. Создаётся на одну цепочку проверок.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from src.core.compare.ordering import Comparator, bounds_inverted, compare

logger = logging.getLogger(__name__)


def _log_inverted_range(b: Any, c: Any, comparator: Optional[Comparator]) -> None:
    # Диапазон не переупорядочивается: b > c оставляется на вызывающем коде
    if bounds_inverted(b, c, comparator):
        logger.debug("Inverted range: lower bound %r is greater than upper bound %r", b, c)


@dataclass(frozen=True)
class ComparisonCheck:
    """
    Проверки значения a относительно других значений того же типа.

    Все методы чистые; при несравнимых типах поднимается
    IncomparableValuesError.
    """

    a: Any
    comparator: Optional[Comparator] = None

    def _cmp(self, b: Any) -> int:
        return compare(self.a, b, self.comparator)

    def equal_to(self, b: Any) -> bool:
        """a == b по порядку (compare(a, b) == 0)"""
        return self._cmp(b) == 0

    def less_than(self, b: Any) -> bool:
        """a < b"""
        return self._cmp(b) < 0

    def less_than_or_equal_to(self, b: Any) -> bool:
        """a <= b"""
        return self._cmp(b) <= 0

    def greater_than(self, b: Any) -> bool:
        """a > b"""
        return self._cmp(b) > 0

    def greater_than_or_equal_to(self, b: Any) -> bool:
        """a >= b"""
        return self._cmp(b) >= 0

    def between(self, b: Any, c: Any) -> bool:
        """
        Проверка b <= a <= c (замкнутый диапазон).

        Ожидается b <= c. Если b > c, сравнения выполняются буквально
        и результат, как правило, False.

        Args:
            b: Нижняя граница (включительно)
            c: Верхняя граница (включительно)

        Returns:
            True если compare(a, b) >= 0 и compare(a, c) <= 0
        """
        result = self._cmp(b) >= 0 and self._cmp(c) <= 0
        if not result:
            _log_inverted_range(b, c, self.comparator)
        return result

    def between_exclusive(self, b: Any, c: Any) -> bool:
        """
        Проверка b < a < c (открытый диапазон).

        Args:
            b: Нижняя граница (не включается)
            c: Верхняя граница (не включается)

        Returns:
            True если compare(a, b) > 0 и compare(a, c) < 0
        """
        result = self._cmp(b) > 0 and self._cmp(c) < 0
        if not result:
            _log_inverted_range(b, c, self.comparator)
        return result


def is_(a: Any, comparator: Optional[Comparator] = None) -> ComparisonCheck:
    """
    Точка входа для fluent-проверок.

    Args:
        a: Проверяемое значение
        comparator: Функция (a, b) -> int (default: естественный порядок)

    Returns:
        ComparisonCheck для значения a

    Examples:
        >>> is_(1).between(0, 10)
        True
        >>> is_(1).between_exclusive(0, 1)
        False
    """
    return ComparisonCheck(a, comparator)
