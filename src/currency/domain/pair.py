"""
CurrencyPair - Модель валютной пары

Immutable Pydantic модель, представляющая идентификатор торгового инструмента
из двух активов: first_currency (base) и second_currency (quote), с
необязательным разделителем между ними.

Все преобразования (swap, display, смена регистра) создают новое значение.
Сравнение пар в доменном смысле выполняется через equal(): регистронезависимо
и без учёта разделителя.
"""

from typing import Any, Final

from pydantic import BaseModel, Field, field_validator, model_validator

from src.currency.domain.item import CurrencyItem


# =============================================================================
# CONSTANTS
# =============================================================================

# Разделители, которые from_string пробует по порядку
DEFAULT_DELIMITERS: Final[tuple[str, ...]] = ("_", "-")

# Длина первого актива при разборе строки без разделителя ("BTCUSD")
FIXED_FIRST_CURRENCY_LEN: Final[int] = 3


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedPairError(ValueError):
    """
    Строку невозможно разобрать в два непустых актива.

    Причины:
    - разделитель отсутствует или встречается больше одного раза
    - строка без разделителя короче FIXED_FIRST_CURRENCY_LEN
    - один из сегментов после разбиения пуст
    """

    pass


# =============================================================================
# CURRENCY PAIR MODEL
# =============================================================================


class CurrencyPair(BaseModel):
    """
    Валютная пара.

    Immutable модель (frozen=True). Инварианты:
    - first_currency и second_currency непустые
    - непустой delimiter не встречается внутри активов

    Прямое создание с нарушением инвариантов даёт pydantic.ValidationError;
    конструкторы from_* сообщают о некорректной строке через MalformedPairError.
    """

    delimiter: str = Field("", description="Разделитель между активами (может быть пустым)")
    first_currency: CurrencyItem = Field(..., description="Базовый актив (например, 'BTC')")
    second_currency: CurrencyItem = Field(..., description="Котируемый актив (например, 'USD')")

    model_config = {"frozen": True}

    @field_validator("first_currency", "second_currency")
    @classmethod
    def validate_not_empty(cls, v: CurrencyItem) -> CurrencyItem:
        """Актив не может быть пустым"""
        if not v:
            raise ValueError("currency code must not be empty")
        return v

    @model_validator(mode="after")
    def validate_delimiter_not_in_currencies(self) -> "CurrencyPair":
        """Разделитель не должен встречаться внутри активов"""
        if self.delimiter and (
            self.delimiter in self.first_currency or self.delimiter in self.second_currency
        ):
            raise ValueError(
                f"delimiter {self.delimiter!r} occurs inside "
                f"{self.first_currency!r}/{self.second_currency!r}"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_parts(cls, first: str, second: str, delimiter: str = "") -> "CurrencyPair":
        """
        Создание пары из двух активов.

        Args:
            first: Базовый актив
            second: Котируемый актив
            delimiter: Разделитель (по умолчанию пустой)

        Raises:
            MalformedPairError: Если один из активов пуст или содержит delimiter
        """
        if not first or not second:
            raise MalformedPairError(
                f"Currency pair requires two non-empty currencies, got {first!r} and {second!r}"
            )
        if delimiter and (delimiter in first or delimiter in second):
            raise MalformedPairError(
                f"Delimiter {delimiter!r} occurs inside {first!r}/{second!r}"
            )
        return cls(
            delimiter=delimiter,
            first_currency=CurrencyItem(first),
            second_currency=CurrencyItem(second),
        )

    @classmethod
    def from_delimited(cls, raw: str, delimiter: str) -> "CurrencyPair":
        """
        Разбор строки по разделителю ("BTC_USD", "_").

        Разделитель должен встречаться ровно один раз. Сохраняется как есть.

        Raises:
            MalformedPairError: Если разделитель пуст, отсутствует или
                даёт не два сегмента
        """
        if not delimiter:
            raise MalformedPairError(f"Empty delimiter for pair {raw!r}")

        parts = raw.split(delimiter)
        if len(parts) != 2:
            raise MalformedPairError(
                f"Pair {raw!r} split by {delimiter!r} gives {len(parts)} parts, expected 2"
            )
        return cls.from_parts(parts[0], parts[1], delimiter=delimiter)

    @classmethod
    def from_index(cls, raw: str, index: str) -> "CurrencyPair":
        """
        Разбор строки по известному активу ("XBTUSD", "XBT").

        Ищется первое вхождение index:
        - в позиции 0: первый актив = index, второй = остаток строки
        - в позиции i > 0: первый актив = raw[:i], второй = raw[i:]
          (вхождение попадает во второй актив)

        Raises:
            MalformedPairError: Если index пуст, не найден или один из
                активов получается пустым
        """
        if not index:
            raise MalformedPairError(f"Empty index token for pair {raw!r}")

        i = raw.find(index)
        if i < 0:
            raise MalformedPairError(f"Index token {index!r} not found in {raw!r}")
        if i == 0:
            return cls.from_parts(raw[: len(index)], raw[len(index) :])
        return cls.from_parts(raw[:i], raw[i:])

    @classmethod
    def from_string(cls, raw: str) -> "CurrencyPair":
        """
        Разбор строки с разделителем или без.

        Разделители из DEFAULT_DELIMITERS проверяются по порядку; если ни
        одного нет, первые FIXED_FIRST_CURRENCY_LEN символов считаются
        базовым активом.

        Examples:
            >>> CurrencyPair.from_string("btc_usd").pair()
            CurrencyItem('btc_usd')
            >>> CurrencyPair.from_string("BTCUSD").second_currency
            CurrencyItem('USD')

        Raises:
            MalformedPairError: Если пару невозможно разобрать
        """
        for delimiter in DEFAULT_DELIMITERS:
            if delimiter in raw:
                return cls.from_delimited(raw, delimiter)
        return cls.from_fixed_split(raw)

    @classmethod
    def from_fixed_split(cls, raw: str) -> "CurrencyPair":
        """
        Разбор строки без разделителя: raw[:3] и raw[3:].

        Raises:
            MalformedPairError: Если строка короче трёх символов или
                второй актив пуст
        """
        if len(raw) < FIXED_FIRST_CURRENCY_LEN:
            raise MalformedPairError(
                f"Pair {raw!r} shorter than {FIXED_FIRST_CURRENCY_LEN} characters"
            )
        return cls.from_parts(raw[:FIXED_FIRST_CURRENCY_LEN], raw[FIXED_FIRST_CURRENCY_LEN:])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CurrencyPair":
        """Десериализация из dict (ключи delimiter, first_currency, second_currency)"""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, str]:
        """Сериализация в dict с обычными строками"""
        return {
            "delimiter": self.delimiter,
            "first_currency": str(self.first_currency),
            "second_currency": str(self.second_currency),
        }

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def pair(self) -> CurrencyItem:
        """
        Строка пары с сохранённым разделителем и регистром.

        Returns:
            first_currency + delimiter + second_currency
        """
        return CurrencyItem(f"{self.first_currency}{self.delimiter}{self.second_currency}")

    def display(self, delimiter: str = "", uppercase: bool = True) -> CurrencyItem:
        """
        Строка пары в заданном формате, без изменения самой пары.

        Args:
            delimiter: Разделитель вместо сохранённого ("" - без разделителя)
            uppercase: True - верхний регистр, False - нижний

        Returns:
            Отформатированная пара
        """
        pair = CurrencyItem(f"{self.first_currency}{delimiter}{self.second_currency}")
        if uppercase:
            return pair.upper()
        return pair.lower()

    def __str__(self) -> str:
        return str(self.pair())

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equal(self, other: "CurrencyPair", exact: bool = False) -> bool:
        """
        Доменное сравнение пар.

        Регистр и разделитель не учитываются. При exact=False пары с
        переставленными активами (BTC/USD и USD/BTC) считаются равными.

        Args:
            other: Пара для сравнения
            exact: Учитывать ли порядок активов

        Returns:
            True если пары совпадают
        """
        same_order = self.first_currency.matches(
            other.first_currency
        ) and self.second_currency.matches(other.second_currency)
        if same_order or exact:
            return same_order
        return self.first_currency.matches(
            other.second_currency
        ) and self.second_currency.matches(other.first_currency)

    def swap(self) -> "CurrencyPair":
        """Новая пара с переставленными активами, разделитель сохраняется"""
        return self.model_copy(
            update={
                "first_currency": self.second_currency,
                "second_currency": self.first_currency,
            }
        )

    def contains_currency(self, code: str) -> bool:
        """
        Проверка, входит ли актив в пару (без учёта регистра).

        Args:
            code: Код актива (например, "usd")
        """
        return self.first_currency.matches(code) or self.second_currency.matches(code)
