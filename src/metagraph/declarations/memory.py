"""In-memory declaration model.

Plain dataclasses for types, methods, references and annotations, plus a
registry resolving qualified names. Declarations compare and hash by identity,
so two structurally equal methods declared on different types never collapse.

Usage:
    model = InMemoryDeclarationModel()
    iface = TypeDeclaration.interface("spoon.reflect.declaration.CtNamedElement")
    iface.add_method(
        MethodDeclaration.getter("getSimpleName", TypeReference("java.lang.String"), role="NAME")
    )
    model.add_type(iface)
"""

from __future__ import annotations

from collections.abc import Collection, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from metagraph.declarations.protocol import DeclarationKind

GETTER_ANNOTATION = "spoon.reflect.annotations.PropertyGetter"
SETTER_ANNOTATION = "spoon.reflect.annotations.PropertySetter"


@dataclass(frozen=True, slots=True)
class TypeReference:
    """Type as written in a signature, e.g. ``java.util.List<CtElement>``."""

    qualified_name: str
    type_arguments: tuple[TypeReference, ...] = ()
    is_type_variable: bool = False

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rpartition(".")[2]

    @classmethod
    def variable(cls, name: str) -> TypeReference:
        """Reference to a type parameter such as ``T``."""
        return cls(name, is_type_variable=True)

    def __str__(self) -> str:
        if not self.type_arguments:
            return self.qualified_name
        args = ", ".join(str(arg) for arg in self.type_arguments)
        return f"{self.qualified_name}<{args}>"


@dataclass(frozen=True, eq=False, slots=True)
class AnnotationUsage:
    """Annotation attached to a declaration, with its attribute values."""

    type_name: str
    values: Mapping[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


@dataclass(eq=False, slots=True)
class MethodDeclaration:
    """Method signature owned by exactly one TypeDeclaration."""

    name: str
    return_type: TypeReference | None = None
    parameter_types: tuple[TypeReference, ...] = ()
    annotations: tuple[AnnotationUsage, ...] = ()
    _declaring_type: TypeDeclaration | None = field(default=None, repr=False)

    @classmethod
    def getter(
        cls,
        name: str,
        returns: TypeReference,
        role: Any,
        annotation_type: str = GETTER_ANNOTATION,
    ) -> MethodDeclaration:
        """Create a method annotated as property getter for `role`."""
        return cls(name, returns, (), (AnnotationUsage(annotation_type, {"role": role}),))

    @classmethod
    def setter(
        cls,
        name: str,
        param: TypeReference,
        role: Any,
        returns: TypeReference | None = None,
        annotation_type: str = SETTER_ANNOTATION,
    ) -> MethodDeclaration:
        """Create a method annotated as property setter for `role`."""
        return cls(name, returns, (param,), (AnnotationUsage(annotation_type, {"role": role}),))

    @property
    def declaring_type(self) -> TypeDeclaration:
        if self._declaring_type is None:
            raise RuntimeError(f"Method {self.name} is not attached to a type")
        return self._declaring_type

    @property
    def uid(self) -> str:
        params = ",".join(str(p) for p in self.parameter_types)
        owner = self._declaring_type.qualified_name if self._declaring_type else "?"
        return f"{owner}#{self.name}({params})"

    def get_annotation(self, type_name: str) -> AnnotationUsage | None:
        for annotation in self.annotations:
            if annotation.type_name == type_name:
                return annotation
        return None


@dataclass(eq=False, slots=True)
class TypeDeclaration:
    """Interface or class declaration with its supertypes and methods."""

    qualified_name: str
    kind: DeclarationKind = DeclarationKind.CLASS
    superclass: TypeReference | None = None
    super_interfaces: tuple[TypeReference, ...] = ()
    _methods: list[MethodDeclaration] = field(default_factory=list, repr=False)

    @classmethod
    def interface(
        cls, qualified_name: str, extends: tuple[TypeReference, ...] = ()
    ) -> TypeDeclaration:
        return cls(qualified_name, DeclarationKind.INTERFACE, None, extends)

    @classmethod
    def klass(
        cls,
        qualified_name: str,
        superclass: TypeReference | None = None,
        implements: tuple[TypeReference, ...] = (),
    ) -> TypeDeclaration:
        return cls(qualified_name, DeclarationKind.CLASS, superclass, implements)

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rpartition(".")[2]

    @property
    def package_name(self) -> str:
        return self.qualified_name.rpartition(".")[0]

    @property
    def methods(self) -> tuple[MethodDeclaration, ...]:
        return tuple(self._methods)

    def add_method(self, method: MethodDeclaration) -> MethodDeclaration:
        """Attach `method` to this type and return it.

        Raises:
            ValueError: If the method already belongs to another type.
        """
        if method._declaring_type is not None and method._declaring_type is not self:
            raise ValueError(
                f"Method {method.name} already declared on {method._declaring_type.qualified_name}"
            )
        method._declaring_type = self
        self._methods.append(method)
        return method

    def reference(self, *type_arguments: TypeReference) -> TypeReference:
        """Reference to this declaration, optionally parameterized."""
        return TypeReference(self.qualified_name, tuple(type_arguments))


class InMemoryDeclarationModel:
    """Dict-backed DeclarationModel.

    Packages are created implicitly for every type added (including all
    enclosing packages) or explicitly via add_package.
    """

    def __init__(self, types: Collection[TypeDeclaration] = ()) -> None:
        self._types: dict[str, TypeDeclaration] = {}
        self._packages: set[str] = set()
        for type_decl in types:
            self.add_type(type_decl)

    def add_package(self, qualified_name: str) -> None:
        parts = qualified_name.split(".")
        for i in range(1, len(parts) + 1):
            self._packages.add(".".join(parts[:i]))

    def add_type(self, type_decl: TypeDeclaration) -> TypeDeclaration:
        """Register a type declaration.

        Raises:
            ValueError: If another declaration already uses the qualified name.
        """
        existing = self._types.get(type_decl.qualified_name)
        if existing is not None and existing is not type_decl:
            raise ValueError(f"Duplicate type declaration {type_decl.qualified_name}")
        self._types[type_decl.qualified_name] = type_decl
        if type_decl.package_name:
            self.add_package(type_decl.package_name)
        return type_decl

    @property
    def types(self) -> Mapping[str, TypeDeclaration]:
        return MappingProxyType(self._types)

    def has_package(self, qualified_name: str) -> bool:
        return qualified_name in self._packages

    def get_type(self, qualified_name: str) -> TypeDeclaration | None:
        return self._types.get(qualified_name)

    def resolve(self, ref: TypeReference) -> TypeDeclaration | None:
        if ref.is_type_variable:
            return None
        return self._types.get(ref.qualified_name)

    def interfaces(self, packages: Collection[str]) -> Iterator[TypeDeclaration]:
        for type_decl in self._types.values():
            if type_decl.kind is DeclarationKind.INTERFACE and type_decl.package_name in packages:
                yield type_decl

    def same_signature(self, a: MethodDeclaration, b: MethodDeclaration) -> bool:
        """Name and arity match, and each parameter has the same erasure.

        A type variable on either side matches any parameter type, which covers
        generic supertypes specialized by their subtypes.
        """
        if a.name != b.name or len(a.parameter_types) != len(b.parameter_types):
            return False
        for pa, pb in zip(a.parameter_types, b.parameter_types, strict=True):
            if pa.is_type_variable or pb.is_type_variable:
                continue
            if pa.qualified_name != pb.qualified_name:
                return False
        return True
