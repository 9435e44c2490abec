"""
Contract Validation Module

Модуль для валидации JSON контрактов (декларативных критериев сравнения).
"""

from .validators import (
    ComparisonCriterionValidator,
    ContractValidator,
    SchemaLoader,
    validate_comparison_criterion,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComparisonCriterionValidator",
    # Functions
    "validate_comparison_criterion",
]
