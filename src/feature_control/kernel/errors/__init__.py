"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── RegistryError            (registry.py)  construction-time defects
    │   ├── DuplicateNameError
    │   ├── UnknownFlagError
    │   ├── InvalidFlagNameError
    │   ├── InvalidCategoryError
    │   ├── DependencyCycleError
    │   └── RegistryFrozenError
    └── QueryError               (query.py)     caller mistakes at query time
        ├── InvalidSessionError
        ├── IndexOutOfRangeError
        └── InvalidAttributeError
"""

from feature_control.kernel.errors.base import BaseError
from feature_control.kernel.errors.query import (
    IndexOutOfRangeError,
    InvalidAttributeError,
    InvalidSessionError,
    QueryError,
)
from feature_control.kernel.errors.registry import (
    DependencyCycleError,
    DuplicateNameError,
    InvalidCategoryError,
    InvalidFlagNameError,
    RegistryError,
    RegistryFrozenError,
    UnknownFlagError,
)

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
]
