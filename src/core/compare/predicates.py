"""
Predicates — переиспользуемые предикаты сравнения

Свободные конструкторы предикатов для фильтрации коллекций:

    [x for x in values if ge(10)(x)]
    list(filter(between(5, 10), values))

Порог фиксируется при создании, проверяемое значение x передаётся
при вызове. Предикаты immutable и могут разделяться между потоками.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from src.core.compare.ordering import Comparator, bounds_inverted, compare

logger = logging.getLogger(__name__)


# =============================================================================
# PREDICATE
# =============================================================================


@dataclass(frozen=True)
class Predicate:
    """
    Булева функция одного аргумента с читаемым описанием.

    Поддерживает композицию: p & q, p | q, ~p.
    """

    test: Callable[[Any], bool]
    description: str

    def __call__(self, x: Any) -> bool:
        return self.test(x)

    def __and__(self, other: "Predicate") -> "Predicate":
        return Predicate(
            lambda x: self.test(x) and other.test(x),
            f"({self.description} and {other.description})",
        )

    def __or__(self, other: "Predicate") -> "Predicate":
        return Predicate(
            lambda x: self.test(x) or other.test(x),
            f"({self.description} or {other.description})",
        )

    def __invert__(self) -> "Predicate":
        return Predicate(lambda x: not self.test(x), f"not {self.description}")

    def __repr__(self) -> str:
        return f"Predicate({self.description})"


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def lt(b: Any, comparator: Optional[Comparator] = None) -> Predicate:
    """Предикат x < b"""
    return Predicate(lambda x: compare(x, b, comparator) < 0, f"x < {b!r}")


def le(b: Any, comparator: Optional[Comparator] = None) -> Predicate:
    """Предикат x <= b"""
    return Predicate(lambda x: compare(x, b, comparator) <= 0, f"x <= {b!r}")


def gt(b: Any, comparator: Optional[Comparator] = None) -> Predicate:
    """Предикат x > b"""
    return Predicate(lambda x: compare(x, b, comparator) > 0, f"x > {b!r}")


def ge(b: Any, comparator: Optional[Comparator] = None) -> Predicate:
    """Предикат x >= b"""
    return Predicate(lambda x: compare(x, b, comparator) >= 0, f"x >= {b!r}")


def eq(b: Any, comparator: Optional[Comparator] = None) -> Predicate:
    """Предикат x == b по порядку (а не по __eq__)"""
    return Predicate(lambda x: compare(x, b, comparator) == 0, f"x == {b!r}")


def between(b: Any, c: Any, comparator: Optional[Comparator] = None) -> Predicate:
    """
    Предикат b <= x <= c.

    Границы не переупорядочиваются: при b > c предикат, как правило,
    ложен для любого x.

    Args:
        b: Нижняя граница (включительно)
        c: Верхняя граница (включительно)
        comparator: Функция (a, b) -> int (default: естественный порядок)

    Returns:
        Predicate

    Examples:
        >>> [v for v in [1, 5, 7, 10, 11] if between(5, 10)(v)]
        [5, 7, 10]
    """
    if bounds_inverted(b, c, comparator):
        logger.debug("between(%r, %r): lower bound is greater than upper bound", b, c)
    return Predicate(
        lambda x: compare(x, b, comparator) >= 0 and compare(x, c, comparator) <= 0,
        f"{b!r} <= x <= {c!r}",
    )


def between_exclusive(b: Any, c: Any, comparator: Optional[Comparator] = None) -> Predicate:
    """
    Предикат b < x < c.

    Args:
        b: Нижняя граница (не включается)
        c: Верхняя граница (не включается)
        comparator: Функция (a, b) -> int (default: естественный порядок)

    Returns:
        Predicate
    """
    if bounds_inverted(b, c, comparator):
        logger.debug("between_exclusive(%r, %r): lower bound is greater than upper bound", b, c)
    return Predicate(
        lambda x: compare(x, b, comparator) > 0 and compare(x, c, comparator) < 0,
        f"{b!r} < x < {c!r}",
    )
