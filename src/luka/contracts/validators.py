"""
Operation Catalog Contract

Проверка экспортируемого каталога операций против JSON Schema
(schema/operation_catalog.json, поставляется внутри пакета).

OperatorCatalog.to_contract() вызывает validate_operation_catalog перед возвратом,
поэтому наружу уходит только payload, соответствующий контракту.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Схема читается один раз и проходит meta-validation (Draft 2020-12)
2. Нарушение контракта → CatalogContractViolation со всеми ошибками сразу
3. Сообщения об ошибках упорядочены по JSON-пути (детерминированы)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator

# Каталог со схемами контрактов
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

# Имя схемы каталога операций (без расширения)
CATALOG_SCHEMA_NAME: Final[str] = "operation_catalog"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CatalogContractViolation(ValueError):
    """
    Payload каталога не соответствует operation_catalog схеме.

    Attributes:
        violations: Сообщения вида "<json-path>: <ошибка>", упорядоченные по пути
    """

    def __init__(self, violations: list[str]):
        self.violations = violations
        super().__init__(
            f"operation catalog violates contract ({len(violations)} errors): "
            + "; ".join(violations)
        )


# =============================================================================
# SCHEMA
# =============================================================================


def read_schema(schema_path: Path) -> dict[str, Any]:
    """
    Чтение и meta-validation JSON Schema файла.

    Args:
        schema_path: Путь к .json файлу схемы

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной Draft 2020-12 схемой
    """
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

    return schema


@lru_cache(maxsize=None)
def catalog_validator() -> Draft202012Validator:
    """Валидатор operation_catalog (строится один раз на процесс)"""
    schema = read_schema(SCHEMA_DIR / f"{CATALOG_SCHEMA_NAME}.json")
    return Draft202012Validator(schema)


# =============================================================================
# VALIDATION
# =============================================================================


def _format_path(error: jsonschema.ValidationError) -> str:
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


def iter_violations(data: dict[str, Any]) -> Iterator[str]:
    """
    Все нарушения контракта в payload, упорядоченные по JSON-пути.

    Yields:
        Сообщения вида "operations/2/kind: 'ternary' is not one of [...]"
    """
    errors = sorted(
        catalog_validator().iter_errors(data),
        key=lambda error: [str(part) for part in error.absolute_path],
    )
    for error in errors:
        yield f"{_format_path(error)}: {error.message}"


def is_valid_operation_catalog(data: dict[str, Any]) -> bool:
    """Проверка payload без exception"""
    return catalog_validator().is_valid(data)


def validate_operation_catalog(data: dict[str, Any]) -> dict[str, Any]:
    """
    Валидация payload каталога операций.

    Args:
        data: JSON-совместимый dict (OperatorCatalog.model_dump(mode="json"))

    Returns:
        Тот же data (для использования в цепочке)

    Raises:
        CatalogContractViolation: Если есть хотя бы одно нарушение схемы
    """
    violations = list(iter_violations(data))
    if violations:
        raise CatalogContractViolation(violations)
    return data
