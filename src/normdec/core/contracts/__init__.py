"""
Contract Validation Module

Модуль для валидации JSON контрактов персистентности normdec.
"""

from .validators import (
    ContractValidator,
    DecimalRecordValidator,
    SchemaLoader,
    validate_decimal_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DecimalRecordValidator",
    # Functions
    "validate_decimal_record",
]
