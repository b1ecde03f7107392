"""
luka — functional replacements for arithmetic and comparison operators.

The default namespace `op` exposes each operator as a first-class function:

    >>> from src.luka import op
    >>> op.add(1, 6)
    7.0
    >>> op.sum()
    0.0
"""

from src.luka.domain import OperationInfo, OperationKind, OperatorCatalog, ResultType
from src.luka.operators import (
    OPERATION_CATALOG,
    NamespaceConfig,
    OperatorNamespace,
    build_namespace,
    op,
)

__version__ = "0.1.0"

__all__ = [
    "op",
    "build_namespace",
    "NamespaceConfig",
    "OperatorNamespace",
    "OPERATION_CATALOG",
    "OperationInfo",
    "OperationKind",
    "OperatorCatalog",
    "ResultType",
]
