"""Value type operations: container shape detection from declared types."""

from __future__ import annotations

from metagraph.config import MetaModelSettings
from metagraph.core.values.models import ContainerKind, ValueType
from metagraph.declarations.protocol import TypeRef


def container_kind_of(ref: TypeRef, settings: MetaModelSettings) -> ContainerKind:
    """Classify a declared type by its erasure against the configured container names.

    Args:
        ref: Declared type to classify.
        settings: Provides list_types, set_types and map_types.

    Returns:
        LIST, SET or MAP for recognized containers, SINGLE for anything else.
    """
    name = ref.qualified_name
    if name in settings.list_types:
        return ContainerKind.LIST
    if name in settings.set_types:
        return ContainerKind.SET
    if name in settings.map_types:
        return ContainerKind.MAP
    return ContainerKind.SINGLE


def value_type_of_reference(ref: TypeRef, settings: MetaModelSettings) -> ValueType:
    """Build the ValueType of a declared type, extracting container type arguments."""
    kind = container_kind_of(ref, settings)
    args = tuple(ref.type_arguments)
    if kind is ContainerKind.SINGLE:
        return ValueType(kind, ref, ref)
    if kind is ContainerKind.MAP:
        if len(args) == 2:
            return ValueType(kind, ref, args[1], args[0])
        return ValueType(kind, ref, None, None)
    return ValueType(kind, ref, args[0] if args else None)
