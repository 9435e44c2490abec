"""
Ordering — трёхсторонние сравнения значений

Модуль задаёт единый способ сравнения двух значений:
- Естественный порядок Python (через __lt__)
- Пользовательский comparator (три значения: -1 / 0 / +1)
- Float-сравнение с толерантностью
- Null-safe max/min по тому же порядку (None пропускается)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. compare() всегда возвращает ровно -1, 0 или +1
2. Несравнимые типы → IncomparableValuesError (подкласс TypeError)
3. Все операции чистые, детерминированы и потокобезопасны
"""

import math
from abc import abstractmethod
from typing import Any, Callable, Final, Optional, Protocol, TypeVar

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для float-сравнений по умолчанию
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Относительная толерантность (для is_close-подобных проверок)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9


# =============================================================================
# ТИПЫ
# =============================================================================


class Comparable(Protocol):
    """Любой тип с естественным порядком"""

    @abstractmethod
    def __lt__(self, other: Any) -> bool: ...


ComparableT = TypeVar("ComparableT", bound=Comparable)

# Трёхстороннее сравнение: отрицательное / ноль / положительное
Comparator = Callable[[Any, Any], int]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IncomparableValuesError(TypeError):
    """
    Значения не имеют общего порядка (например, int и str).

    Наследуется от TypeError, поэтому существующий код, который ловит
    TypeError, продолжает работать.
    """

    def __init__(self, a: Any, b: Any):
        self.left_type = type(a)
        self.right_type = type(b)
        super().__init__(
            f"cannot compare {self.left_type.__name__!r} with {self.right_type.__name__!r}"
        )


# =============================================================================
# ТРЁХСТОРОННЕЕ СРАВНЕНИЕ
# =============================================================================


def _sign(value: int) -> int:
    if value < 0:
        return -1
    elif value > 0:
        return 1
    return 0


def natural_compare(a: Any, b: Any) -> int:
    """
    Сравнение по естественному порядку Python.

    Используется только __lt__, поэтому подходят любые типы с
    частичным порядком (Decimal, datetime, str, tuple, ...).
    Для частичного порядка несравнимые значения дают 0.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        -1 если a < b
         0 если ни a < b, ни b < a
        +1 если a > b

    Raises:
        IncomparableValuesError: Если типы несравнимы

    Examples:
        >>> natural_compare(1, 2)
        -1
        >>> natural_compare(Decimal("1.0"), Decimal("1"))
        0
    """
    try:
        if a < b:
            return -1
        if b < a:
            return 1
    except TypeError as e:
        raise IncomparableValuesError(a, b) from e
    return 0


def compare(a: Any, b: Any, comparator: Optional[Comparator] = None) -> int:
    """
    Трёхстороннее сравнение с опциональным comparator.

    Результат comparator нормализуется к знаку, так что вызывающий код
    может полагаться на значения -1 / 0 / +1.

    Args:
        a: Первое значение
        b: Второе значение
        comparator: Функция (a, b) -> int (default: natural_compare)

    Returns:
        -1, 0 или +1
    """
    if comparator is None:
        return natural_compare(a, b)
    return _sign(comparator(a, b))


# =============================================================================
# FLOAT-СРАВНЕНИЯ С ТОЛЕРАНТНОСТЬЮ
# =============================================================================


def _validate_tolerance(tol: float) -> None:
    if not math.isfinite(tol):
        raise ValueError(f"tol must be a valid float (not NaN/Inf), got {tol}")

    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_FLOAT_COMPARE_ABS)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Raises:
        ValueError: Если tol отрицательный или NaN/Inf, либо операнд NaN

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    _validate_tolerance(tol)

    # NaN не упорядочен: результат был бы +1 в обе стороны
    if math.isnan(a) or math.isnan(b):
        raise ValueError(f"operands must not be NaN, got a={a}, b={b}")

    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1


def tolerance_comparator(tol: float = EPS_FLOAT_COMPARE_ABS) -> Comparator:
    """
    Comparator для float, считающий равными значения в пределах tol.

    Толерантность проверяется сразу, а не при первом сравнении.

    Examples:
        >>> cmp = tolerance_comparator(0.01)
        >>> cmp(1.0, 1.005)
        0
    """
    _validate_tolerance(tol)

    def _compare(a: float, b: float) -> int:
        return compare_with_tolerance(a, b, tol)

    return _compare


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1e10, 1e10 + 1.0)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def close_comparator(
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> Comparator:
    """
    Comparator для float с относительной и абсолютной толерантностью.

    Близкие по is_close значения равны, остальные упорядочены как обычно.

    Raises:
        ValueError: Если толерантность невалидна (сразу) или операнд NaN (при сравнении)
    """
    _validate_tolerance(rel_tol)
    _validate_tolerance(abs_tol)

    def _compare(a: float, b: float) -> int:
        if math.isnan(a) or math.isnan(b):
            raise ValueError(f"operands must not be NaN, got a={a}, b={b}")
        if is_close(a, b, rel_tol, abs_tol):
            return 0
        return -1 if a < b else 1

    return _compare


def bounds_inverted(b: Any, c: Any, comparator: Optional[Comparator] = None) -> bool:
    """
    Проверка, что нижняя граница больше верхней (b > c).

    Используется только для диагностики и никогда не поднимает исключение.
    Пользовательский comparator может сравнивать значение с порогом
    другого типа, поэтому границы сравниваются только при естественном
    порядке; при comparator или несравнимых границах результат False.
    """
    if comparator is not None:
        return False
    try:
        return natural_compare(b, c) > 0
    except IncomparableValuesError:
        return False


# =============================================================================
# MAX / MIN
# =============================================================================


def max_of(a: Any, b: Any, comparator: Optional[Comparator] = None) -> Any:
    """
    Большее из двух значений.

    None считается отсутствующим значением: возвращается другой аргумент.
    При равенстве возвращается a.

    Examples:
        >>> max_of(1, 2)
        2
        >>> max_of(None, 0)
        0
    """
    if a is None:
        return b
    if b is None:
        return a
    return b if compare(a, b, comparator) < 0 else a


def min_of(a: Any, b: Any, comparator: Optional[Comparator] = None) -> Any:
    """
    Меньшее из двух значений.

    None считается отсутствующим значением: возвращается другой аргумент.
    При равенстве возвращается a.

    Examples:
        >>> min_of(None, 1)
        1
    """
    if a is None:
        return b
    if b is None:
        return a
    return b if compare(a, b, comparator) > 0 else a
