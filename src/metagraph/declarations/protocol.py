"""Declaration model protocol consumed by the meta-model builder.

The declaration model is built upstream (by a source parser or by hand) and is
only ever queried here. Any object graph exposing this surface can be handed to
SpoonMetaModel:
- an in-memory model (default, see declarations.memory)
- an adapter over a compiler/IDE symbol table (future)

Usage:
    model = InMemoryDeclarationModel()
    model.add_type(TypeDeclaration.interface("spoon.reflect.declaration.CtNamedElement"))
    meta = SpoonMetaModel(model)
"""

from __future__ import annotations

from collections.abc import Collection, Iterator, Sequence
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class DeclarationKind(Enum):
    """Kind of a type declaration."""

    INTERFACE = auto()
    CLASS = auto()
    ENUM = auto()
    ANNOTATION = auto()


@runtime_checkable
class TypeRef(Protocol):
    """Reference to a type as written in a signature or supertype list."""

    @property
    def qualified_name(self) -> str: ...

    @property
    def simple_name(self) -> str: ...

    @property
    def type_arguments(self) -> Sequence[TypeRef]: ...

    @property
    def is_type_variable(self) -> bool: ...


class AnnotationLike(Protocol):
    """Annotation instance attached to a declaration."""

    @property
    def type_name(self) -> str: ...

    def get(self, key: str, default: Any = None) -> Any:
        """Value of an annotation attribute."""
        ...


class MethodDeclarationLike(Protocol):
    """Method signature plus its annotations."""

    @property
    def name(self) -> str: ...

    @property
    def declaring_type(self) -> TypeDeclarationLike: ...

    @property
    def return_type(self) -> TypeRef | None:
        """Declared return type, None for void."""
        ...

    @property
    def parameter_types(self) -> Sequence[TypeRef]: ...

    @property
    def uid(self) -> str:
        """Stable identifier, unique within one declaration model."""
        ...

    def get_annotation(self, type_name: str) -> AnnotationLike | None:
        """Directly declared annotation of the given qualified type name."""
        ...


class TypeDeclarationLike(Protocol):
    """Interface, class or other type declaration."""

    @property
    def kind(self) -> DeclarationKind: ...

    @property
    def simple_name(self) -> str: ...

    @property
    def qualified_name(self) -> str: ...

    @property
    def package_name(self) -> str: ...

    @property
    def superclass(self) -> TypeRef | None: ...

    @property
    def super_interfaces(self) -> Sequence[TypeRef]: ...

    @property
    def methods(self) -> Sequence[MethodDeclarationLike]:
        """Methods declared directly on this type, in declaration order."""
        ...


class DeclarationModel(Protocol):
    """Read-only query interface over an already built declaration model."""

    def has_package(self, qualified_name: str) -> bool:
        """Check if a package exists in the model."""
        ...

    def get_type(self, qualified_name: str) -> TypeDeclarationLike | None:
        """Look up a type declaration by qualified name."""
        ...

    def resolve(self, ref: TypeRef) -> TypeDeclarationLike | None:
        """Resolve a type reference to its declaration, None if not in the model."""
        ...

    def interfaces(self, packages: Collection[str]) -> Iterator[TypeDeclarationLike]:
        """Iterate interface declarations whose package is one of `packages`."""
        ...

    def same_signature(self, a: MethodDeclarationLike, b: MethodDeclarationLike) -> bool:
        """Check if `a` and `b` are signature-compatible (override/implement each other)."""
        ...
