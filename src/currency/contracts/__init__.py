"""
Contract Validation Module

Валидация JSON контрактов валютных пар.
"""

from .validators import (
    ContractValidator,
    CurrencyPairValidator,
    PairFormatValidator,
    SchemaLoader,
    default_loader,
    validate_currency_pair,
    validate_pair_format,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CurrencyPairValidator",
    "PairFormatValidator",
    # Functions
    "default_loader",
    "validate_currency_pair",
    "validate_pair_format",
]
