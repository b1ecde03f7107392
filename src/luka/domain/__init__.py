"""
Domain models.

Contains immutable descriptions of the operations exposed by the namespace.
"""

from src.luka.domain.operation import (
    CATALOG_SCHEMA_VERSION,
    OPERATION_NAME_PATTERN,
    OperationInfo,
    OperationKind,
    OperatorCatalog,
    ResultType,
)

__all__ = [
    "CATALOG_SCHEMA_VERSION",
    "OPERATION_NAME_PATTERN",
    "OperationInfo",
    "OperationKind",
    "OperatorCatalog",
    "ResultType",
]
