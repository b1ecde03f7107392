"""
Operators — namespace арифметических функций и фабрики для их построения.
"""

from src.luka.operators.factories import binary, monoid, unary
from src.luka.operators.namespace import (
    OPERATION_CATALOG,
    NamespaceConfig,
    OperatorNamespace,
    attribute_name,
    build_namespace,
    op,
)

__all__ = [
    # Factories
    "unary",
    "binary",
    "monoid",
    # Namespace
    "NamespaceConfig",
    "OperatorNamespace",
    "OPERATION_CATALOG",
    "attribute_name",
    "build_namespace",
    "op",
]
