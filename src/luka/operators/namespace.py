"""
Operator Namespace — Функциональные замены арифметических операторов

Namespace `op` даёт именованные first-class функции вместо инфиксного синтаксиса:

    >>> from functools import reduce
    >>> from src.luka import op
    >>> reduce(op.mul, [1, 2, 3, 4])
    24.0
    >>> sorted([3, 1, 2], key=op.neg)
    [3, 2, 1]

Операции:
- Unary:      neg, not
- Binary:     add, sub, mul, div, pow (exp), rem
- Comparison: eq (equal), ne, lt, le, gt, ge
- Fold:       sum (identity 0), product (identity 1)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Namespace immutable после построения (frozen dataclass + MappingProxyType)
2. Операнды приводятся к double; числовые граничные случаи возвращаются как NaN/±inf
3. sub и div строго бинарные (нет fold с неявным identity)
4. Знаковый ноль сохраняется, если не задан NamespaceConfig(normalize_negative_zero=True)
5. Алиасы — тот же объект функции (op.exp is op.pow, op.equal is op.eq)
"""

import keyword
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Optional, SupportsFloat

from src.luka.domain.operation import (
    OperationInfo,
    OperationKind,
    OperatorCatalog,
    ResultType,
)
from src.luka.math.ieee754 import (
    ADDITIVE_IDENTITY,
    MULTIPLICATIVE_IDENTITY,
    normalize_zero,
    power,
    to_double,
    true_divide,
    truncating_remainder,
)
from src.luka.operators.factories import binary, monoid, unary


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NamespaceConfig:
    """Конфигурация построения namespace."""

    # -0.0 → +0.0 для всех числовых результатов (boolean не затрагиваются)
    normalize_negative_zero: bool = False


# =============================================================================
# CATALOG
# =============================================================================


OPERATION_CATALOG = OperatorCatalog(
    operations=(
        # Unary Operations
        OperationInfo(
            name="neg",
            kind=OperationKind.UNARY,
            arity=1,
            description="negation: changes sign of x",
        ),
        OperationInfo(
            name="not",
            kind=OperationKind.UNARY,
            arity=1,
            result=ResultType.BOOLEAN,
            description="boolean negation: returns not x",
        ),
        # Binary Operations
        OperationInfo(
            name="add",
            kind=OperationKind.BINARY,
            arity=2,
            description="addition: returns sum of x and y",
        ),
        OperationInfo(
            name="sub",
            kind=OperationKind.BINARY,
            arity=2,
            description="subtraction: returns difference of x and y",
        ),
        OperationInfo(
            name="mul",
            kind=OperationKind.BINARY,
            arity=2,
            description="multiplication: returns product of x and y",
        ),
        OperationInfo(
            name="div",
            kind=OperationKind.BINARY,
            arity=2,
            description="division: returns quotient of x and y, zero divisor yields inf or nan",
        ),
        OperationInfo(
            name="pow",
            kind=OperationKind.BINARY,
            arity=2,
            aliases=("exp",),
            description="exponent: returns base x to the power of y",
        ),
        OperationInfo(
            name="rem",
            kind=OperationKind.BINARY,
            arity=2,
            description="remainder: returns remainder of x divided by y with the sign of x",
        ),
        # Binary Boolean Operations
        OperationInfo(
            name="eq",
            kind=OperationKind.COMPARISON,
            arity=2,
            result=ResultType.BOOLEAN,
            aliases=("equal",),
            description="equal: checks whether x and y are equal",
        ),
        OperationInfo(
            name="ne",
            kind=OperationKind.COMPARISON,
            arity=2,
            result=ResultType.BOOLEAN,
            description="not equal: checks whether x and y differ",
        ),
        OperationInfo(
            name="lt",
            kind=OperationKind.COMPARISON,
            arity=2,
            result=ResultType.BOOLEAN,
            description="less: checks whether x is less than y",
        ),
        OperationInfo(
            name="le",
            kind=OperationKind.COMPARISON,
            arity=2,
            result=ResultType.BOOLEAN,
            description="less or equal: checks whether x is at most y",
        ),
        OperationInfo(
            name="gt",
            kind=OperationKind.COMPARISON,
            arity=2,
            result=ResultType.BOOLEAN,
            description="greater: checks whether x is greater than y",
        ),
        OperationInfo(
            name="ge",
            kind=OperationKind.COMPARISON,
            arity=2,
            result=ResultType.BOOLEAN,
            description="greater or equal: checks whether x is at least y",
        ),
        # Folding Operations
        OperationInfo(
            name="sum",
            kind=OperationKind.FOLD,
            arity=None,
            identity=ADDITIVE_IDENTITY,
            description="sum: returns the sum of n numbers, sum() is 0",
        ),
        OperationInfo(
            name="product",
            kind=OperationKind.FOLD,
            arity=None,
            identity=MULTIPLICATIVE_IDENTITY,
            description="product: returns the product of n numbers, product() is 1",
        ),
    )
)


# =============================================================================
# IMPLEMENTATIONS
# =============================================================================


def _neg(x: SupportsFloat) -> float:
    return -to_double(x)


def _not(x: Any) -> bool:
    return not x


def _add(x: SupportsFloat, y: SupportsFloat) -> float:
    return to_double(x) + to_double(y)


def _sub(x: SupportsFloat, y: SupportsFloat) -> float:
    return to_double(x) - to_double(y)


def _mul(x: SupportsFloat, y: SupportsFloat) -> float:
    return to_double(x) * to_double(y)


def _eq(x: SupportsFloat, y: SupportsFloat) -> bool:
    return to_double(x) == to_double(y)


def _ne(x: SupportsFloat, y: SupportsFloat) -> bool:
    return to_double(x) != to_double(y)


def _lt(x: SupportsFloat, y: SupportsFloat) -> bool:
    return to_double(x) < to_double(y)


def _le(x: SupportsFloat, y: SupportsFloat) -> bool:
    return to_double(x) <= to_double(y)


def _gt(x: SupportsFloat, y: SupportsFloat) -> bool:
    return to_double(x) > to_double(y)


def _ge(x: SupportsFloat, y: SupportsFloat) -> bool:
    return to_double(x) >= to_double(y)


# Каноническое имя → реализация (для fold — бинарная операция monoid)
_IMPLEMENTATIONS: Mapping[str, Callable] = MappingProxyType(
    {
        "neg": _neg,
        "not": _not,
        "add": _add,
        "sub": _sub,
        "mul": _mul,
        "div": true_divide,
        "pow": power,
        "rem": truncating_remainder,
        "eq": _eq,
        "ne": _ne,
        "lt": _lt,
        "le": _le,
        "gt": _gt,
        "ge": _ge,
        "sum": _add,
        "product": _mul,
    }
)


def attribute_name(name: str) -> str:
    """Имя атрибута namespace: ключевые слова Python получают суффикс '_' (not → not_)"""
    if keyword.iskeyword(name):
        return f"{name}_"
    return name


def _zero_normalized(operation: Callable) -> Callable:
    def apply(*operands: SupportsFloat) -> float:
        return normalize_zero(operation(*operands))

    return apply


def _build_operation(info: OperationInfo, implementation: Callable) -> Callable:
    name = attribute_name(info.name)
    if info.kind == OperationKind.UNARY:
        return unary(implementation, name=name, doc=info.description)
    if info.kind == OperationKind.FOLD:
        return monoid(implementation, info.identity, name=name, doc=info.description)
    return binary(implementation, name=name, doc=info.description)


# =============================================================================
# NAMESPACE
# =============================================================================


@dataclass(frozen=True, eq=False)
class OperatorNamespace:
    """
    Immutable namespace арифметических функций.

    Доступ по атрибуту (op.add) и по ключу (op["add"], op["not"], op["exp"]).
    Итерация и len() — по каноническим именам каталога.
    """

    # Unary Operations
    neg: Callable[[float], float]
    not_: Callable[[Any], bool]
    # Binary Operations
    add: Callable[[float, float], float]
    sub: Callable[[float, float], float]
    mul: Callable[[float, float], float]
    div: Callable[[float, float], float]
    pow: Callable[[float, float], float]
    rem: Callable[[float, float], float]
    # Binary Boolean Operations
    eq: Callable[[float, float], bool]
    ne: Callable[[float, float], bool]
    lt: Callable[[float, float], bool]
    le: Callable[[float, float], bool]
    gt: Callable[[float, float], bool]
    ge: Callable[[float, float], bool]
    # Folding Operations
    sum: Callable[..., float]
    product: Callable[..., float]

    config: NamespaceConfig = field(default_factory=NamespaceConfig, repr=False)

    # Aliases
    @property
    def exp(self) -> Callable[[float, float], float]:
        """Алиас pow"""
        return self.pow

    @property
    def equal(self) -> Callable[[float, float], bool]:
        """Алиас eq"""
        return self.eq

    @property
    def catalog(self) -> OperatorCatalog:
        """Описание всех операций namespace"""
        return OPERATION_CATALOG

    def __getitem__(self, name: str) -> Callable:
        info = OPERATION_CATALOG.get(name)
        return getattr(self, attribute_name(info.name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and (
            name in OPERATION_CATALOG.names() or name in OPERATION_CATALOG.aliases()
        )

    def __iter__(self) -> Iterator[str]:
        return iter(OPERATION_CATALOG.names())

    def __len__(self) -> int:
        return len(OPERATION_CATALOG.operations)

    def keys(self) -> tuple[str, ...]:
        """Канонические имена операций"""
        return OPERATION_CATALOG.names()

    def as_mapping(self) -> Mapping[str, Callable]:
        """
        Read-only отображение имя → функция, включая алиасы.

        Returns:
            MappingProxyType (присваивание бросает TypeError)
        """
        functions = {name: self[name] for name in OPERATION_CATALOG.names()}
        for alias, name in OPERATION_CATALOG.aliases().items():
            functions[alias] = functions[name]
        return MappingProxyType(functions)


def build_namespace(config: Optional[NamespaceConfig] = None) -> OperatorNamespace:
    """
    Построение namespace по каталогу операций.

    Args:
        config: Конфигурация (default: NamespaceConfig())

    Returns:
        Новый OperatorNamespace с новыми объектами функций
    """
    config = config or NamespaceConfig()

    functions = {}
    for info in OPERATION_CATALOG.operations:
        implementation = _IMPLEMENTATIONS[info.name]
        if config.normalize_negative_zero and info.result == ResultType.NUMBER:
            implementation = _zero_normalized(implementation)
        functions[attribute_name(info.name)] = _build_operation(info, implementation)

    return OperatorNamespace(config=config, **functions)


# Namespace по умолчанию: IEEE-754 семантика, знаковый ноль сохраняется
op = build_namespace()
