"""
Contract Validation Module

Валидация JSON контрактов между движком сдачи и presentation layer.
"""

from .validators import (
    ChangeRequestValidator,
    ChangeResultValidator,
    ContractValidator,
    SchemaLoader,
    parse_change_request,
    validate_change_request,
    validate_change_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ChangeRequestValidator",
    "ChangeResultValidator",
    # Functions
    "validate_change_request",
    "validate_change_result",
    "parse_change_request",
]
