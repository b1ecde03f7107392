"""
Тесты для модуля Operator Namespace

Проверяет:
1. Алгебраические свойства (коммутативность, ассоциативность, дистрибутивность, identity)
2. Деление, степень и остаток с IEEE-754 семантикой
3. Сравнения и дуальность компараторов, NaN
4. Fold-операции sum/product
5. Политики: строго бинарные sub/div, знаковый ноль
6. Immutability и доступ по атрибуту/ключу
"""

import math
from dataclasses import FrozenInstanceError
from functools import reduce

import pytest

from src.luka.math.ieee754 import is_negative_zero
from src.luka.operators.namespace import (
    OPERATION_CATALOG,
    NamespaceConfig,
    OperatorNamespace,
    attribute_name,
    build_namespace,
    op,
)

# Пары конечных операндов для проверки свойств
FINITE_PAIRS = [(7, 11), (-3, 5), (0.5, 0.25), (-2.5, -4.0), (0, 9)]


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestNegation:
    """Тесты для neg"""

    def test_distributive(self) -> None:
        """-(x + y) = -x + -y"""
        assert op.neg(7 + 11) == op.neg(7) + op.neg(11)

    def test_double_negation(self) -> None:
        """--x = x"""
        for x in (7, -7, 0.5, math.inf):
            assert op.neg(op.neg(x)) == x

    def test_returns_float(self) -> None:
        assert op.neg(7) == -7.0
        assert isinstance(op.neg(7), float)


class TestBooleanNegation:
    """Тесты для not"""

    def test_negates_truthiness(self) -> None:
        assert op.not_(7 == 11) is True
        assert op.not_(True) is False
        assert op.not_(0) is True

    def test_key_access(self) -> None:
        """Ключ 'not' соответствует атрибуту not_"""
        assert op["not"] is op.not_


class TestAddition:
    """Тесты для add"""

    @pytest.mark.parametrize("x,y", FINITE_PAIRS)
    def test_commutative(self, x: float, y: float) -> None:
        """x + y = y + x"""
        assert op.add(x, y) == op.add(y, x)

    def test_associative(self) -> None:
        """(x + y) + z = x + (y + z)"""
        assert op.add(1, op.add(2, 3)) == op.add(op.add(1, 2), 3)

    def test_distributive(self) -> None:
        """k * (x + y) = (k * x) + (k * y)"""
        assert op.mul(2, op.add(3, 4)) == op.add(op.mul(2, 3), op.mul(2, 4))

    def test_identity(self) -> None:
        """x + 0 = x"""
        assert op.add(7, 0) == 7

    def test_float_rounding_observed(self) -> None:
        """Двоичное округление: 0.1 + 0.3 == 0.4, но 0.4 - 0.3 != 0.1"""
        assert op.add(0.1, 0.3) == 0.4
        assert op.sub(0.4, 0.3) != 0.1
        assert op.sub(0.4, 0.3) == pytest.approx(0.1)


class TestSubtraction:
    """Тесты для sub"""

    def test_distributive(self) -> None:
        """x * (y - z) = (x * y) - (x * z)"""
        assert 2 * op.sub(11, 7) == op.sub(2 * 11, 2 * 7)

    def test_identity(self) -> None:
        """x - 0 = x"""
        assert op.sub(7, 0) == 7

    def test_strictly_binary(self) -> None:
        """sub не вариадическая: sub() и sub(x) — ошибка сигнатуры"""
        with pytest.raises(TypeError):
            op.sub()
        with pytest.raises(TypeError):
            op.sub(7)
        with pytest.raises(TypeError):
            op.sub(7, 1, 1)


class TestMultiplication:
    """Тесты для mul"""

    @pytest.mark.parametrize("x,y", FINITE_PAIRS)
    def test_commutative(self, x: float, y: float) -> None:
        """x * y = y * x"""
        assert op.mul(x, y) == op.mul(y, x)

    def test_associative(self) -> None:
        """(x * y) * z = x * (y * z)"""
        assert op.mul(op.mul(3, 4), 5) == op.mul(3, op.mul(4, 5))

    def test_distributive(self) -> None:
        """x * (y + z) = (x * y) + (x * z)"""
        assert op.mul(2, 7 + 11) == op.mul(2, 7) + op.mul(2, 11)

    def test_identity(self) -> None:
        """x * 1 = x"""
        assert op.mul(7, 1) == 7

    def test_huge_int_operands_are_values(self) -> None:
        """int вне диапазона double не приводит к OverflowError"""
        assert op.add(10**400, 1) == math.inf
        assert op.mul(-(10**400), 2) == -math.inf
        assert op.pow(2, 10**400) == math.inf
        assert op.sum(10**400, 1) == math.inf

    def test_infinity_times_zero_is_nan(self) -> None:
        assert math.isnan(op.mul(math.inf, 0))


class TestDivision:
    """Тесты для div"""

    def test_identity(self) -> None:
        """x / 1 = x"""
        assert op.div(7, 1) == 7

    @pytest.mark.parametrize("x", [7, -7, 0.1, 1e300, -1e-300])
    def test_divide_by_self(self, x: float) -> None:
        """x / x = 1 для x != 0"""
        assert op.div(x, x) == 1

    def test_division_by_zero_is_value(self) -> None:
        """Деление на ноль не бросает исключение"""
        assert op.div(1, 0) == math.inf
        assert op.div(-1, 0) == -math.inf
        assert op.div(1, -0.0) == -math.inf
        assert math.isnan(op.div(0, 0))

    def test_strictly_binary(self) -> None:
        with pytest.raises(TypeError):
            op.div()
        with pytest.raises(TypeError):
            op.div(7)


class TestExponent:
    """Тесты для pow / exp"""

    def test_right_associative(self) -> None:
        """pow(2, pow(3, 4)) == 2 ** 3 ** 4 (справа налево)"""
        assert op.pow(2, op.pow(3, 4)) == 2 ** 3 ** 4

    def test_power(self) -> None:
        assert op.pow(2, 7) == 128

    def test_alias(self) -> None:
        """exp — тот же объект функции, что и pow"""
        assert op.exp is op.pow
        assert op["exp"] is op.pow

    def test_edge_cases_are_values(self) -> None:
        assert op.pow(10, 400) == math.inf
        assert op.pow(0, -1) == math.inf
        assert math.isnan(op.pow(-8, 1 / 3))


class TestRemainder:
    """Тесты для rem"""

    def test_positive_dividend(self) -> None:
        assert op.rem(11, -5) == 1

    def test_negative_dividend(self) -> None:
        assert op.rem(-11, 5) == -1

    def test_regular(self) -> None:
        assert op.rem(15, 7) == 1

    def test_zero_divisor_is_nan(self) -> None:
        assert math.isnan(op.rem(7, 0))


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ
# =============================================================================


class TestEquality:
    """Тесты для eq / equal / ne"""

    def test_reflexive_symmetric_transitive(self) -> None:
        x, y, z = 7, 7, 7
        assert op.eq(x, x)
        assert op.eq(x, y) and op.eq(y, x)
        assert op.eq(x, y) and op.eq(y, z) and op.eq(x, z)

    def test_ne_irreflexive(self) -> None:
        assert op.ne(7, 7) is False
        assert op.ne(7, 11) is True

    def test_nan_equals_nothing(self) -> None:
        """NaN не равен ничему, включая себя"""
        assert op.eq(math.nan, math.nan) is False
        assert op.ne(math.nan, math.nan) is True
        assert op.eq(math.nan, 0) is False

    def test_signed_zeros_equal(self) -> None:
        assert op.eq(0.0, -0.0)

    def test_alias(self) -> None:
        assert op.equal is op.eq
        assert op["equal"] is op.eq

    def test_returns_bool(self) -> None:
        assert isinstance(op.eq(1, 1), bool)


class TestOrdering:
    """Тесты для lt / le / gt / ge"""

    def test_examples(self) -> None:
        assert op.lt(7, 11) is True
        assert op.le(11, 11) is True
        assert op.gt(7, 11) is False
        assert op.ge(11, 11) is True

    @pytest.mark.parametrize("x,y", FINITE_PAIRS + [(3, 3), (-math.inf, 1)])
    def test_duality(self, x: float, y: float) -> None:
        """Для не-NaN операндов: lt(x,y) == gt(y,x), le(x,y) == not gt(x,y)"""
        assert op.lt(x, y) == op.gt(y, x)
        assert op.le(x, y) == op.ge(y, x)
        assert op.le(x, y) == (not op.gt(x, y))
        assert op.lt(x, y) == (not op.ge(x, y))

    def test_consistent_with_eq(self) -> None:
        assert op.le(5, 5) and op.ge(5, 5) and op.eq(5, 5)
        assert not op.lt(5, 5) and not op.gt(5, 5)

    def test_huge_int_operands(self) -> None:
        """int вне диапазона double сравнивается как ±inf и не бросает OverflowError"""
        assert op.lt(1, 10**400) is True
        assert op.gt(-(10**400), -1e308) is False
        assert op.eq(10**400, math.inf) is True

    def test_nan_unordered(self) -> None:
        """Все порядковые сравнения с NaN ложны"""
        for compare in (op.lt, op.le, op.gt, op.ge):
            assert compare(math.nan, 1) is False
            assert compare(1, math.nan) is False


# =============================================================================
# ТЕСТЫ FOLD
# =============================================================================


class TestSum:
    """Тесты для sum"""

    def test_literal_inputs(self) -> None:
        assert op.sum(1, 2, 3, 4) == 10
        assert op.sum(1, 2, 3, 4, 5, 6, 7, 8, 9, 10) == 55

    def test_identity(self) -> None:
        assert op.sum() == 0
        assert op.sum(7) == 7

    def test_order_independent(self) -> None:
        assert op.sum(1, 2, 3) == op.sum(3, 2, 1)

    def test_nan_propagates(self) -> None:
        assert math.isnan(op.sum(1, math.nan, 2))


class TestProduct:
    """Тесты для product"""

    def test_literal_inputs(self) -> None:
        assert op.product(1, 2, 3, 4) == 24
        assert op.product(10, 10, 10) == 1000

    def test_identity(self) -> None:
        assert op.product() == 1
        assert op.product(7) == 7

    def test_order_independent(self) -> None:
        assert op.product(2, 3, 4) == op.product(4, 3, 2)


class TestHigherOrderUse:
    """Операции как first-class значения"""

    def test_reduce(self) -> None:
        assert reduce(op.add, range(1, 11)) == 55
        assert reduce(op.mul, [1, 2, 3, 4]) == 24

    def test_map_and_sort(self) -> None:
        assert list(map(op.neg, [1, 2, 3])) == [-1.0, -2.0, -3.0]
        assert sorted([3, 1, 2], key=op.neg) == [3, 2, 1]

    def test_repeated_calls_stable(self) -> None:
        """Операции без состояния: повторный вызов даёт тот же результат"""
        assert [op.div(22, 7) for _ in range(3)] == [22 / 7] * 3


# =============================================================================
# ТЕСТЫ ЗНАКОВОГО НУЛЯ
# =============================================================================


class TestNegativeZeroPolicy:
    """Знаковый ноль сохраняется по умолчанию и нормализуется по конфигурации"""

    def test_preserved_by_default(self) -> None:
        assert op.config.normalize_negative_zero is False
        assert is_negative_zero(op.neg(0))
        assert is_negative_zero(op.mul(-1, 0))
        assert is_negative_zero(op.div(0, -5))
        assert is_negative_zero(op.product(-1, 0))

    def test_normalized_when_configured(self) -> None:
        normalized = build_namespace(NamespaceConfig(normalize_negative_zero=True))
        assert not is_negative_zero(normalized.neg(0))
        assert not is_negative_zero(normalized.mul(-1, 0))
        assert not is_negative_zero(normalized.div(0, -5))
        assert not is_negative_zero(normalized.rem(-4, 2))
        assert not is_negative_zero(normalized.product(-1, 0))

    def test_normalization_keeps_other_values(self) -> None:
        normalized = build_namespace(NamespaceConfig(normalize_negative_zero=True))
        assert normalized.neg(7) == -7
        assert normalized.div(1, -0.0) == -math.inf
        assert math.isnan(normalized.div(0, 0))
        assert normalized.eq(1, 1) is True
        assert normalized.not_(0) is True


# =============================================================================
# ТЕСТЫ NAMESPACE
# =============================================================================


class TestNamespace:
    """Immutability, доступ по атрибуту и ключу"""

    def test_default_instance(self) -> None:
        assert isinstance(op, OperatorNamespace)

    def test_attribute_assignment_rejected(self) -> None:
        with pytest.raises(FrozenInstanceError):
            op.add = op.sub

    def test_mapping_is_read_only(self) -> None:
        mapping = op.as_mapping()
        with pytest.raises(TypeError):
            mapping["add"] = op.sub

    def test_mapping_includes_aliases(self) -> None:
        mapping = op.as_mapping()
        assert mapping["exp"] is mapping["pow"]
        assert mapping["equal"] is mapping["eq"]
        assert mapping["not"] is op.not_
        assert len(mapping) == len(op) + 2

    def test_iteration_over_canonical_names(self) -> None:
        assert list(op) == list(OPERATION_CATALOG.names())
        assert len(op) == 16
        assert set(dict(op)) == set(OPERATION_CATALOG.names())

    def test_contains(self) -> None:
        assert "add" in op
        assert "exp" in op
        assert "not" in op
        assert "modulo" not in op
        assert 7 not in op

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(KeyError, match="unknown operation"):
            op["modulo"]

    def test_function_metadata(self) -> None:
        """Функции именованы и документированы по каталогу"""
        assert op.add.__name__ == "add"
        assert op.not_.__name__ == "not_"
        assert op.sum.__doc__ == OPERATION_CATALOG.get("sum").description

    def test_build_returns_fresh_functions(self) -> None:
        other = build_namespace()
        assert other.add is not op.add
        assert other.add(1, 6) == op.add(1, 6)

    def test_catalog(self) -> None:
        assert op.catalog is OPERATION_CATALOG

    def test_attribute_name(self) -> None:
        assert attribute_name("not") == "not_"
        assert attribute_name("add") == "add"
