"""
Operator Factories — Unary, Binary, Monoid

Фабрики оборачивают операцию в новую именованную функцию:
- unary(operation)            → f(x)
- binary(operation)           → f(x, y)
- monoid(operation, identity) → f(*operands), fold с явным identity

Monoid: множество с ассоциативной бинарной операцией и identity-элементом.
Явный identity делает f() корректно определённой при нуле операндов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат фабрики не хранит изменяемого состояния
2. Ошибки фабрик (TypeError/ValueError) возникают только при построении, не при вызове
3. Каждый вызов фабрики возвращает новый объект функции
"""

import math
from functools import reduce
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Unary = Callable[[T], U]
Binary = Callable[[T, T], U]
Fold = Callable[..., U]


# =============================================================================
# HELPERS
# =============================================================================


def _require_callable(operation: Any) -> None:
    if not callable(operation):
        raise TypeError(f"operation must be callable, got {type(operation).__name__}")


def _label(function: Callable, name: Optional[str], doc: Optional[str]) -> Callable:
    """Проставляет __name__/__qualname__/__doc__ если заданы"""
    if name is not None:
        function.__name__ = name
        function.__qualname__ = name
    if doc is not None:
        function.__doc__ = doc
    return function


# =============================================================================
# FACTORIES
# =============================================================================


def unary(
    operation: Callable[[T], U],
    name: Optional[str] = None,
    doc: Optional[str] = None,
) -> Unary:
    """
    Фабрика унарных функций.

    Args:
        operation: Функция одного аргумента
        name: Имя результирующей функции (optional)
        doc: Docstring результирующей функции (optional)

    Returns:
        Новая функция f(x) = operation(x)

    Raises:
        TypeError: Если operation не callable

    Examples:
        >>> neg = unary(lambda x: -x, name="neg")
        >>> neg(7)
        -7
    """
    _require_callable(operation)

    def apply(x: T) -> U:
        return operation(x)

    return _label(apply, name, doc)


def binary(
    operation: Callable[[T, T], U],
    name: Optional[str] = None,
    doc: Optional[str] = None,
) -> Binary:
    """
    Фабрика бинарных функций.

    Результат строго бинарный: вызов с другим числом аргументов
    бросает обычный TypeError сигнатуры.

    Args:
        operation: Функция двух аргументов
        name: Имя результирующей функции (optional)
        doc: Docstring результирующей функции (optional)

    Returns:
        Новая функция f(x, y) = operation(x, y)

    Raises:
        TypeError: Если operation не callable
    """
    _require_callable(operation)

    def apply(x: T, y: T) -> U:
        return operation(x, y)

    return _label(apply, name, doc)


def monoid(
    operation: Callable[[float, float], float],
    identity: float,
    name: Optional[str] = None,
    doc: Optional[str] = None,
) -> Fold:
    """
    Фабрика вариадических fold-функций над monoid.

    Fold идёт слева направо, аккумулятор инициализируется identity:
        f()           == identity
        f(a)          == operation(identity, a)
        f(a, b, c)    == operation(operation(operation(identity, a), b), c)

    Args:
        operation: Ассоциативная бинарная операция
        identity: Identity-элемент операции (конечное число)
        name: Имя результирующей функции (optional)
        doc: Docstring результирующей функции (optional)

    Returns:
        Новая функция f(*operands)

    Raises:
        TypeError: Если operation не callable
        ValueError: Если identity не конечное число

    Examples:
        >>> total = monoid(lambda x, y: x + y, 0.0)
        >>> total(1, 2, 3)
        6.0
        >>> total()
        0.0
    """
    _require_callable(operation)

    seed = float(identity)
    if not math.isfinite(seed):
        raise ValueError(f"identity must be finite, got {identity}")

    def fold(*operands: float) -> float:
        return reduce(operation, operands, seed)

    return _label(fold, name, doc)
