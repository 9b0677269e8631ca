"""Kernel – error hierarchy and name normalisation shared by every layer."""

from feature_control.kernel.errors import (
    BaseError,
    DependencyCycleError,
    DuplicateNameError,
    IndexOutOfRangeError,
    InvalidAttributeError,
    InvalidCategoryError,
    InvalidFlagNameError,
    InvalidSessionError,
    QueryError,
    RegistryError,
    RegistryFrozenError,
    UnknownFlagError,
)
from feature_control.kernel.naming import from_camel_case, is_alternate_form, to_camel_case

__all__ = [
    "BaseError",
    "DependencyCycleError",
    "DuplicateNameError",
    "IndexOutOfRangeError",
    "InvalidAttributeError",
    "InvalidCategoryError",
    "InvalidFlagNameError",
    "InvalidSessionError",
    "QueryError",
    "RegistryError",
    "RegistryFrozenError",
    "UnknownFlagError",
    "from_camel_case",
    "is_alternate_form",
    "to_camel_case",
]
