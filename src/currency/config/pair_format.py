"""
PairFormat - формат представления пар для конкретного источника

Описывает, как пары записываются у источника данных (биржи, конфигурации):
разделитель, индексный актив для строк без разделителя и регистр.

Только этот модуль читает os.getenv; дальше по коду передаётся готовый
объект PairFormat.
"""

import os
from collections.abc import Iterable

from pydantic import BaseModel, Field, model_validator

from src.currency.domain.item import CurrencyItem
from src.currency.domain.pair import CurrencyPair
from src.currency.domain.pairs import format_pairs


_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class PairFormat(BaseModel):
    """
    Формат пар источника.

    Immutable модель (frozen=True).
    """

    uppercase: bool = Field(True, description="Выводить пары в верхнем регистре")
    delimiter: str = Field("", description="Разделитель между активами")
    index: str = Field("", description="Индексный актив для строк без разделителя")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_index_without_delimiter(self) -> "PairFormat":
        """Индексный актив не может содержать разделитель"""
        if self.delimiter and self.index and self.delimiter in self.index:
            raise ValueError(
                f"index {self.index!r} must not contain delimiter {self.delimiter!r}"
            )
        return self

    def format(self, pair: CurrencyPair) -> CurrencyItem:
        """Строка пары в формате источника"""
        return pair.display(self.delimiter, self.uppercase)

    def format_all(self, pairs: Iterable[CurrencyPair]) -> list[str]:
        """Строки пар в формате источника, порядок сохранён"""
        return [str(self.format(p)) for p in pairs]

    def parse(self, raw_pairs: Iterable[str]) -> list[CurrencyPair]:
        """
        Разбор строк источника в пары.

        Raises:
            MalformedPairError: Если непустую строку невозможно разобрать
        """
        return format_pairs(raw_pairs, self.delimiter, self.index)


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid bool value in env: {value!r}")


def load_pair_format(
    *,
    delimiter: str | None = None,
    index: str | None = None,
    uppercase: bool | None = None,
) -> PairFormat:
    """
    Собрать PairFormat из аргументов и переменных окружения.

    Порядок приоритета для каждого поля:
    1. Аргументы функции (если переданы явно).
    2. Переменные окружения PAIR_DELIMITER, PAIR_INDEX, PAIR_UPPERCASE.
    3. Значения по умолчанию из PairFormat.

    Raises:
        ValueError: Если значение в окружении некорректно
    """
    base = PairFormat()

    if delimiter is None:
        delimiter = os.getenv("PAIR_DELIMITER", base.delimiter)
    if index is None:
        index = os.getenv("PAIR_INDEX", base.index)
    if uppercase is None:
        uppercase = _parse_bool(os.getenv("PAIR_UPPERCASE"), base.uppercase)

    return PairFormat(uppercase=uppercase, delimiter=delimiter, index=index)
