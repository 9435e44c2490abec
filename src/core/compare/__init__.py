"""
Core compare modules

Fluent-сравнения значений и предикаты для фильтрации коллекций.
"""

# Ordering
from src.core.compare.ordering import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    Comparable,
    ComparableT,
    Comparator,
    IncomparableValuesError,
    bounds_inverted,
    close_comparator,
    compare,
    compare_with_tolerance,
    is_close,
    max_of,
    min_of,
    natural_compare,
    tolerance_comparator,
)

# Fluent checks
from src.core.compare.checks import ComparisonCheck, is_

# Predicates
from src.core.compare.predicates import (
    Predicate,
    between,
    between_exclusive,
    eq,
    ge,
    gt,
    le,
    lt,
)

# Criteria
from src.core.compare.criteria import (
    ComparisonCriterion,
    ComparisonOp,
    criterion_from_dict,
)

__all__ = [
    # Ordering — Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Ordering — Types
    "Comparable",
    "ComparableT",
    "Comparator",
    # Ordering — Exceptions
    "IncomparableValuesError",
    # Ordering — Functions
    "bounds_inverted",
    "close_comparator",
    "compare",
    "compare_with_tolerance",
    "is_close",
    "max_of",
    "min_of",
    "natural_compare",
    "tolerance_comparator",
    # Fluent checks
    "ComparisonCheck",
    "is_",
    # Predicates
    "Predicate",
    "between",
    "between_exclusive",
    "eq",
    "ge",
    "gt",
    "le",
    "lt",
    # Criteria
    "ComparisonCriterion",
    "ComparisonOp",
    "criterion_from_dict",
]
