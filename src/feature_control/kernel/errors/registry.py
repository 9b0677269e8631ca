"""Registry errors — defects found while a feature registry is being built.

These surface at session initialisation and are never seen by a query caller.
"""

from __future__ import annotations

from typing import Any, Sequence

from feature_control.kernel.errors.base import BaseError


class RegistryError(BaseError):
    """The feature registry was constructed incorrectly."""

    default_code = "registry_error"


class DuplicateNameError(RegistryError):
    """A flag with the same canonical name is already registered."""

    default_code = "duplicate_name"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Flag '{name}' is already registered", detail={"name": name}, **kwargs)
        self.name = name


class UnknownFlagError(RegistryError):
    """A flag name does not exist in the registry."""

    default_code = "unknown_flag"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Flag '{name}' is not registered", detail={"name": name}, **kwargs)
        self.name = name


class InvalidFlagNameError(RegistryError):
    """A flag name is empty or not a string."""

    default_code = "invalid_flag_name"

    def __init__(self, name: object, **kwargs: Any) -> None:
        super().__init__(f"Invalid flag name {name!r}", **kwargs)
        self.name = name


class InvalidCategoryError(RegistryError):
    """A flag category is not one of the known reporting groups."""

    default_code = "invalid_category"

    def __init__(self, name: str, category: object, **kwargs: Any) -> None:
        super().__init__(
            f"Flag '{name}' has unknown category {category!r}",
            detail={"name": name, "category": repr(category)},
            **kwargs,
        )
        self.name = name
        self.category = category


class DependencyCycleError(RegistryError):
    """Declaring a dependency would make the ``requires`` graph cyclic.

    ``path`` lists the flags forming the cycle, starting and ending with the
    same name.
    """

    default_code = "dependency_cycle"

    def __init__(self, path: Sequence[str], **kwargs: Any) -> None:
        cycle = " -> ".join(path)
        super().__init__(f"Dependency cycle: {cycle}", detail={"path": list(path)}, **kwargs)
        self.path = tuple(path)


class RegistryFrozenError(RegistryError):
    """The registry was modified after resolution completed."""

    default_code = "registry_frozen"


__all__ = [
    "DependencyCycleError",
    "DuplicateNameError",
    "InvalidCategoryError",
    "InvalidFlagNameError",
    "RegistryError",
    "RegistryFrozenError",
    "UnknownFlagError",
]
