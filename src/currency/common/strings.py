"""
Строковые утилиты, не зависящие от модели валютных пар.
"""

from collections.abc import Iterable


def string_to_upper(value: str) -> str:
    """Перевод строки в верхний регистр."""
    return value.upper()


def is_present_case_insensitive(haystack: Iterable[str], needle: str) -> bool:
    """
    Проверка наличия строки в наборе без учёта регистра.

    Args:
        haystack: Набор строк для поиска
        needle: Искомая строка

    Returns:
        True если хотя бы один элемент совпадает с needle без учёта регистра
    """
    target = string_to_upper(needle)
    return any(string_to_upper(item) == target for item in haystack)
