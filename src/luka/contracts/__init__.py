"""
Contract Validation Module

Валидация JSON контрактов luka (operation_catalog).
"""

from .validators import (
    CATALOG_SCHEMA_NAME,
    SCHEMA_DIR,
    CatalogContractViolation,
    catalog_validator,
    is_valid_operation_catalog,
    iter_violations,
    read_schema,
    validate_operation_catalog,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "CATALOG_SCHEMA_NAME",
    # Exceptions
    "CatalogContractViolation",
    # Functions
    "read_schema",
    "catalog_validator",
    "iter_violations",
    "is_valid_operation_catalog",
    "validate_operation_catalog",
]
