"""Value type models: the semantic shape of a property's value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from metagraph.declarations.protocol import TypeRef


class ContainerKind(Enum):
    """How many values a property holds and how they are organized."""

    SINGLE = auto()  # One value of the type
    LIST = auto()  # Ordered sequence of items
    SET = auto()  # Unordered set of items
    MAP = auto()  # Keyed mapping of items


@dataclass(frozen=True, slots=True)
class ValueType:
    """Resolved value type of a field.

    Attributes:
        kind: Container shape of the value.
        type_ref: The declared type, e.g. ``java.util.List<CtStatement>``.
        item_type: Element type for LIST/SET, value type for MAP, `type_ref` for SINGLE.
            None for a raw container without type arguments.
        key_type: Key type for MAP, None otherwise.
    """

    kind: ContainerKind
    type_ref: TypeRef
    item_type: TypeRef | None
    key_type: TypeRef | None = None

    @property
    def is_container(self) -> bool:
        return self.kind is not ContainerKind.SINGLE

    def __str__(self) -> str:
        if self.kind is ContainerKind.SINGLE:
            return f"single {self.type_ref}"
        if self.kind is ContainerKind.MAP:
            return f"map {self.key_type} -> {self.item_type}"
        return f"{self.kind.name.lower()} of {self.item_type}"
