"""
OperationInfo — Модель описания операции namespace

Immutable Pydantic модели, описывающие каждую операцию `op`:
вид (unary/binary/comparison/fold), арность, тип результата, identity, алиасы.
Полная совместимость с JSON Schema (src/luka/contracts/schema/operation_catalog.json).
"""

import math
import re
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator

from src.luka.contracts import validate_operation_catalog

# Версия контракта каталога
CATALOG_SCHEMA_VERSION: Final[str] = "1"

# Имена операций и алиасов: lowercase идентификаторы
OPERATION_NAME_PATTERN: Final[str] = r"^[a-z][a-z_]*$"

_NAME_RE = re.compile(OPERATION_NAME_PATTERN)


# =============================================================================
# ENUMS
# =============================================================================


class OperationKind(str, Enum):
    """Вид операции"""

    UNARY = "unary"
    BINARY = "binary"
    COMPARISON = "comparison"
    FOLD = "fold"


class ResultType(str, Enum):
    """Тип результата операции"""

    NUMBER = "number"
    BOOLEAN = "boolean"


# Фиксированная арность по виду операции (fold — вариадическая)
_ARITY_BY_KIND: Final[dict] = {
    OperationKind.UNARY: 1,
    OperationKind.BINARY: 2,
    OperationKind.COMPARISON: 2,
    OperationKind.FOLD: None,
}


# =============================================================================
# OPERATION INFO
# =============================================================================


class OperationInfo(BaseModel):
    """
    Описание одной операции.

    Инварианты:
    - unary → arity == 1; binary/comparison → arity == 2; fold → arity is None
    - fold обязан иметь конечный identity, остальные — identity is None
    - comparison всегда возвращает boolean
    """

    name: str = Field(..., pattern=OPERATION_NAME_PATTERN, description="Каноническое имя")
    kind: OperationKind = Field(..., description="Вид операции")
    arity: Optional[int] = Field(..., description="Число операндов (None = вариадическая)")
    result: ResultType = Field(
        ResultType.NUMBER, validate_default=True, description="Тип результата"
    )
    identity: Optional[float] = Field(
        None, validate_default=True, description="Identity-элемент fold (nullable)"
    )
    aliases: tuple[str, ...] = Field((), description="Альтернативные имена")
    description: str = Field(..., min_length=1, description="Краткое описание")

    model_config = {"frozen": True}

    @field_validator("arity")
    @classmethod
    def validate_arity(cls, v: Optional[int], info) -> Optional[int]:
        """Арность должна соответствовать виду операции"""
        kind = info.data.get("kind")
        if kind is not None and v != _ARITY_BY_KIND[kind]:
            raise ValueError(f"{kind.value} operation must have arity {_ARITY_BY_KIND[kind]}, got {v}")
        return v

    @field_validator("result")
    @classmethod
    def validate_result(cls, v: ResultType, info) -> ResultType:
        """Сравнения возвращают boolean"""
        if info.data.get("kind") == OperationKind.COMPARISON and v != ResultType.BOOLEAN:
            raise ValueError(f"comparison must return boolean, got {v.value}")
        return v

    @field_validator("identity")
    @classmethod
    def validate_identity(cls, v: Optional[float], info) -> Optional[float]:
        """Identity обязателен для fold и запрещён для остальных"""
        kind = info.data.get("kind")
        if kind == OperationKind.FOLD:
            if v is None:
                raise ValueError("fold operation requires an identity element")
            if not math.isfinite(v):
                raise ValueError(f"identity must be finite, got {v}")
        elif v is not None:
            raise ValueError(f"only fold operations carry an identity, got {v}")
        return v

    @field_validator("aliases")
    @classmethod
    def validate_aliases(cls, v: tuple[str, ...], info) -> tuple[str, ...]:
        """Алиасы уникальны, валидны и не совпадают с каноническим именем"""
        for alias in v:
            if not _NAME_RE.match(alias):
                raise ValueError(f"invalid alias {alias!r}")
        if len(set(v)) != len(v):
            raise ValueError(f"duplicate aliases: {v}")
        if info.data.get("name") in v:
            raise ValueError(f"alias duplicates canonical name {info.data['name']!r}")
        return v

    @property
    def is_variadic(self) -> bool:
        """Вариадическая ли операция (fold)"""
        return self.arity is None


# =============================================================================
# OPERATOR CATALOG
# =============================================================================


class OperatorCatalog(BaseModel):
    """
    Каталог операций namespace.

    Порядок операций совпадает с порядком объявления в namespace.
    Имена и алиасы глобально уникальны в пределах каталога.
    """

    schema_version: str = Field(CATALOG_SCHEMA_VERSION, description="Версия контракта")
    operations: tuple[OperationInfo, ...] = Field(..., min_length=1, description="Операции")

    model_config = {"frozen": True}

    @field_validator("operations")
    @classmethod
    def validate_unique_names(cls, v: tuple[OperationInfo, ...]) -> tuple[OperationInfo, ...]:
        """Имена и алиасы не пересекаются"""
        seen: set[str] = set()
        for info in v:
            for key in (info.name, *info.aliases):
                if key in seen:
                    raise ValueError(f"duplicate operation name {key!r}")
                seen.add(key)
        return v

    def names(self) -> tuple[str, ...]:
        """Канонические имена в порядке объявления"""
        return tuple(info.name for info in self.operations)

    def aliases(self) -> dict[str, str]:
        """Отображение alias → каноническое имя"""
        return {alias: info.name for info in self.operations for alias in info.aliases}

    def get(self, name: str) -> OperationInfo:
        """
        Поиск операции по имени или алиасу.

        Raises:
            KeyError: Если операция не найдена
        """
        for info in self.operations:
            if name == info.name or name in info.aliases:
                return info
        raise KeyError(f"unknown operation {name!r}")

    def by_kind(self, kind: OperationKind) -> tuple[OperationInfo, ...]:
        """Операции заданного вида"""
        return tuple(info for info in self.operations if info.kind == kind)

    def to_contract(self) -> dict:
        """
        JSON-совместимое представление, проверенное против operation_catalog схемы.

        Raises:
            CatalogContractViolation: Если payload не соответствует контракту
                (например, неизвестная schema_version)
        """
        return validate_operation_catalog(self.model_dump(mode="json"))
