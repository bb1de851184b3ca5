"""Errors raised while building the meta-model.

Every error aborts the whole build; no partial graph is ever returned.
"""

from __future__ import annotations

from typing import Any


class MetaModelError(Exception):
    """Base class for meta-model construction failures."""

    pass


class MissingPackageError(MetaModelError):
    """Raised when a required API or implementation package is absent."""

    def __init__(self, package: str, kind: str) -> None:
        super().__init__(f"Declaration model is missing {kind} package {package}")
        self.package = package
        self.kind = kind


class UnresolvableSupertypeError(MetaModelError):
    """Raised when a supertype cannot be resolved and is not expected to be missing."""

    def __init__(self, supertype: str, subtype: str) -> None:
        super().__init__(
            f"Cannot create meta-model. The type {supertype} (supertype of {subtype}) "
            f"is missing from the declaration model"
        )
        self.supertype = supertype
        self.subtype = subtype


class UnexpectedDeclarationKindError(MetaModelError):
    """Raised when a declaration is neither the expected interface nor class."""

    def __init__(self, qualified_name: str, kind: Any) -> None:
        super().__init__(f"Unexpected model type {qualified_name} of kind {kind}")
        self.qualified_name = qualified_name
        self.kind = kind


class InvalidImplementationNamingError(MetaModelError):
    """Raised when a qualified name breaks the package/suffix naming convention."""

    def __init__(self, qualified_name: str, reason: str) -> None:
        super().__init__(f"Unexpected model type name {qualified_name}: {reason}")
        self.qualified_name = qualified_name
        self.reason = reason


class MissingInterfaceError(InvalidImplementationNamingError):
    """Raised when an implementation class has no governing interface."""

    def __init__(self, qualified_name: str, interface_name: str) -> None:
        super().__init__(qualified_name, f"governing interface {interface_name} not found")
        self.interface_name = interface_name


class InconsistentFieldShapeError(MetaModelError):
    """Raised when accessors of one role disagree on the container shape."""

    def __init__(self, owner: str, role: Any, detail: str) -> None:
        super().__init__(f"Inconsistent value type of {owner}#{role}: {detail}")
        self.owner = owner
        self.role = role
