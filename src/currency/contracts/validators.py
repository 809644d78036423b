"""
JSON Schema Contract Validators

Валидация сериализованных валютных пар и форматов пар согласно JSON Schema
контрактам (jsonschema, Draft 2020-12).

Схемы поставляются вместе с пакетом как ресурсы (schema/*.json рядом с этим
модулем) и читаются через importlib.resources, поэтому не зависят от
рабочего каталога и способа установки:
- currency_pair.json
- pair_format.json
"""

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Final, List

import jsonschema
from jsonschema import Draft202012Validator


SCHEMA_RESOURCE_DIR: Final[str] = "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик схем контрактов.

    По умолчанию читает ресурсы пакета; для тестов и внешних схем можно
    передать каталог на диске. Загруженные схемы проходят meta-validation
    и кэшируются по имени.
    """

    def __init__(self, schema_dir: Path | None = None):
        if schema_dir is None:
            self._root = resources.files(__package__) / SCHEMA_RESOURCE_DIR
        elif schema_dir.is_dir():
            self._root = schema_dir
        else:
            raise RuntimeError(f"Schema directory not found: {schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена доступных схем (без расширения), по алфавиту"""
        return sorted(
            entry.name[: -len(".json")]
            for entry in self._root.iterdir()
            if entry.is_file() and entry.name.endswith(".json")
        )

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'currency_pair')

        Raises:
            FileNotFoundError: Если схемы с таким именем нет
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        resource = self._root / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_name}.json in {self._root}")

        schema = json.loads(resource.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Общий загрузчик схем пакета, создаётся при первом обращении"""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор данных против одной схемы контракта.

    Подклассы задают schema_name; схема загружается при создании валидатора.
    """

    schema_name: str = ""

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or default_loader()).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения схемы в виде строк "<путь>: <сообщение>".

        Путь корня документа обозначается "$".
        """
        messages = []
        for error in self.validator.iter_errors(data):
            path = ".".join(str(p) for p in error.absolute_path) or "$"
            messages.append(f"{path}: {error.message}")
        return sorted(messages)


class CurrencyPairValidator(ContractValidator):
    """Валидатор для currency_pair контракта."""

    schema_name = "currency_pair"


class PairFormatValidator(ContractValidator):
    """Валидатор для pair_format контракта."""

    schema_name = "pair_format"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_currency_pair(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованной валютной пары (CurrencyPair.to_dict()).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurrencyPairValidator().validate(data)


def validate_pair_format(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного формата пар (PairFormat.model_dump()).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PairFormatValidator().validate(data)
