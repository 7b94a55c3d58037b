"""
Contract Validation Module

Модуль для валидации JSON контрактов экспорта результата.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SqrtResultValidator,
    get_schema_loader,
    validate_sqrt_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SqrtResultValidator",
    # Functions
    "get_schema_loader",
    "validate_sqrt_result",
]
