"""
CurrencyItem - код актива (base или quote) в составе валютной пары

Строковый value-тип без внутренней структуры ("BTC", "usd", "USDT").
Регистр хранится как есть; сравнение в доменной логике всегда
регистронезависимое.
"""

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


class CurrencyItem(str):
    """
    Код актива.

    Подкласс str: все операции смены регистра возвращают новый CurrencyItem,
    исходное значение не изменяется. Может использоваться как тип поля
    Pydantic модели (сериализуется как обычная JSON строка).
    """

    __slots__ = ()

    def upper(self) -> "CurrencyItem":
        """Код в верхнем регистре"""
        return CurrencyItem(str.upper(self))

    def lower(self) -> "CurrencyItem":
        """Код в нижнем регистре"""
        return CurrencyItem(str.lower(self))

    def matches(self, code: str) -> bool:
        """
        Регистронезависимое сравнение с произвольным кодом.

        Args:
            code: Код актива (например, "btc")

        Returns:
            True если коды совпадают без учёта регистра
        """
        return str.upper(self) == code.upper()

    def __repr__(self) -> str:
        return f"CurrencyItem({str.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(cls, core_schema.str_schema())
