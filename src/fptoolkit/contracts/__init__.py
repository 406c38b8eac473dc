"""
Contract Validation Module

Валидация сериализованных значений fptoolkit против JSON Schema контрактов.
"""

from .validators import (
    ContractValidator,
    DeferredValidator,
    SchemaLoader,
    validate_deferred,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DeferredValidator",
    # Functions
    "validate_deferred",
]
