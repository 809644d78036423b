"""
Общие строковые утилиты.
"""

from src.currency.common.strings import is_present_case_insensitive, string_to_upper

__all__ = [
    "string_to_upper",
    "is_present_case_insensitive",
]
