"""
Domain models and value objects.

Contains CurrencyItem, CurrencyPair and pure functions over lists of pairs.
"""

from src.currency.domain.item import CurrencyItem
from src.currency.domain.pair import (
    DEFAULT_DELIMITERS,
    FIXED_FIRST_CURRENCY_LEN,
    CurrencyPair,
    MalformedPairError,
)
from src.currency.domain.pairs import (
    contains,
    contains_currency,
    copy_pair_format,
    find_pair_differences,
    format_pairs,
    pairs_to_strings,
    remove_pairs_by_filter,
)

__all__ = [
    # Constants
    "DEFAULT_DELIMITERS",
    "FIXED_FIRST_CURRENCY_LEN",
    # Models
    "CurrencyItem",
    "CurrencyPair",
    "MalformedPairError",
    # List operations
    "contains",
    "contains_currency",
    "copy_pair_format",
    "remove_pairs_by_filter",
    "format_pairs",
    "pairs_to_strings",
    "find_pair_differences",
]
