"""
Deferred Wire Contract

JSON-представление Deferred описано схемой fptoolkit/contracts/schema/deferred.json
(Draft 2020-12). Контракт строже Pydantic-моделей: лишние ключи запрещены
(additionalProperties: false), тогда как модель их молча отбрасывает. Поэтому
deferred.parse сначала проверяет payload здесь и только потом строит модель.

Ошибка валидации — jsonschema.ValidationError; из нескольких нарушений
(oneOf по трём вариантам) наружу выходит наиболее релевантное (best_match).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

logger = logging.getLogger(__name__)

DEFERRED_SCHEMA: Final[str] = "deferred"

_PACKAGE_SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Каталог JSON Schema файлов с кэшем скомпилированных валидаторов.

    По умолчанию — схемы, поставляемые с пакетом (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self.schema_dir = schema_dir or _PACKAGE_SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._validators: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если файл не проходит meta-validation
        """
        return self.validator_for(schema_name).schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Валидатор схемы; схема читается и проверяется один раз."""
        cached = self._validators.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self.schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        validator = Draft202012Validator(schema)
        self._validators[schema_name] = validator
        return validator


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def _error_path(error: jsonschema.ValidationError) -> str:
    return "$" + "".join(f"[{part!r}]" for part in error.absolute_path)


class ContractValidator:
    """Проверка данных против одной схемы каталога."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self._validator = (loader or _SCHEMA_LOADER).validator_for(schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self._validator.schema

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Наиболее релевантное нарушение контракта
        """
        error = best_match(self._validator.iter_errors(data))
        if error is None:
            return
        logger.debug("Contract %s violated at %s: %s", self.schema_name, _error_path(error), error.message)
        raise error

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)

    def describe_errors(self, data: Any) -> List[str]:
        """
        Все нарушения в виде "путь: сообщение", отсортированные по пути.

        Пустой список означает, что данные соответствуют контракту.
        """
        errors = sorted(self._validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [f"{_error_path(e)}: {e.message}" for e in errors]


class DeferredValidator(ContractValidator):
    """Контракт JSON-представления Deferred."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(DEFERRED_SCHEMA, loader)


_DEFERRED_VALIDATOR = DeferredValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_deferred(data: Any) -> None:
    """
    Проверка payload перед разбором в Deferred.

    Raises:
        jsonschema.ValidationError: Если payload нарушает контракт
    """
    _DEFERRED_VALIDATOR.validate(data)
