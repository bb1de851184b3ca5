"""Role classifier: decides which property a method reads or writes.

A method is an accessor if it carries the getter or setter annotation itself,
or if any signature-compatible method anywhere in its declaring type's
supertype closure carries one. Supertype closures are computed once per type
and memoized, so repeated lookups never rewalk the hierarchy.

Usage:
    classifier = RoleClassifier(model, settings)
    role = classifier.role_of(method)        # Role.NAME or None
    accessor = classifier.classify(method)   # Accessor(method, role, kind) or None
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from metagraph.config import MetaModelSettings
from metagraph.core.roles.models import Accessor, AccessorKind, RoleId, as_role
from metagraph.declarations.protocol import (
    DeclarationModel,
    MethodDeclarationLike,
    TypeDeclarationLike,
    TypeRef,
)


class RoleClassifier:
    """Pure query over a declaration model; caches closures and results.

    Args:
        model: Declaration model used to resolve supertypes and compare signatures.
        settings: Annotation names and role attribute. Defaults to MetaModelSettings().
    """

    def __init__(self, model: DeclarationModel, settings: MetaModelSettings | None = None) -> None:
        self._model = model
        self._settings = settings or MetaModelSettings()
        self._closures: dict[str, tuple[TypeDeclarationLike, ...]] = {}
        self._results: dict[str, Accessor | None] = {}

    def role_of(self, method: MethodDeclarationLike) -> RoleId | None:
        """Role of `method`, looking through all overridden/implemented methods.

        Returns:
            The role identifier, or None if the method is not an accessor.
        """
        accessor = self.classify(method)
        return accessor.role if accessor is not None else None

    def classify(self, method: MethodDeclarationLike) -> Accessor | None:
        """Classify `method` as getter or setter of a role.

        Direct annotations win: getter first, then setter. Otherwise the first
        signature-compatible method in the supertype closure carrying either
        annotation decides.
        """
        key = method.uid
        if key in self._results:
            return self._results[key]

        accessor = self._direct_accessor(method, method)
        if accessor is None:
            for candidate in self._hierarchy_methods(method.declaring_type):
                if candidate is method or not self._model.same_signature(method, candidate):
                    continue
                accessor = self._direct_accessor(candidate, method)
                if accessor is not None:
                    break

        self._results[key] = accessor
        return accessor

    def supertype_closure(self, type_decl: TypeDeclarationLike) -> tuple[TypeDeclarationLike, ...]:
        """All resolvable superclasses and super-interfaces, breadth-first.

        The type itself is not included. Unresolvable references are skipped;
        cycles are cut by qualified name.

        Args:
            type_decl: Type whose ancestors are collected.

        Returns:
            Ancestors ordered by distance, nearest first.
        """
        key = type_decl.qualified_name
        cached = self._closures.get(key)
        if cached is not None:
            return cached

        seen = {key}
        result: list[TypeDeclarationLike] = []
        queue = deque([type_decl])
        while queue:
            current = queue.popleft()
            for ref in _direct_supertypes(current):
                if ref.qualified_name in seen:
                    continue
                seen.add(ref.qualified_name)
                resolved = self._model.resolve(ref)
                if resolved is None:
                    continue
                result.append(resolved)
                queue.append(resolved)

        closure = tuple(result)
        self._closures[key] = closure
        return closure

    def depth_of(self, type_decl: TypeDeclarationLike) -> int:
        """Number of resolvable ancestors. Subtypes are always deeper than their supertypes."""
        return len(self.supertype_closure(type_decl))

    def _hierarchy_methods(self, type_decl: TypeDeclarationLike) -> Iterator[MethodDeclarationLike]:
        yield from type_decl.methods
        for ancestor in self.supertype_closure(type_decl):
            yield from ancestor.methods

    def _direct_accessor(
        self, annotated: MethodDeclarationLike, method: MethodDeclarationLike
    ) -> Accessor | None:
        """Accessor for `method` from annotations declared directly on `annotated`."""
        settings = self._settings
        for annotation_type, kind in (
            (settings.getter_annotation, AccessorKind.GETTER),
            (settings.setter_annotation, AccessorKind.SETTER),
        ):
            annotation = annotated.get_annotation(annotation_type)
            if annotation is None:
                continue
            role = as_role(annotation.get(settings.role_attribute))
            if role is not None:
                return Accessor(method=method, role=role, kind=kind)
        return None


def _direct_supertypes(type_decl: TypeDeclarationLike) -> Iterator[TypeRef]:
    if type_decl.superclass is not None:
        yield type_decl.superclass
    yield from type_decl.super_interfaces
