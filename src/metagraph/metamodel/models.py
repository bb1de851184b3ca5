"""Meta-model graph nodes: logical types and their fields.

Both are mutable only while SpoonMetaModel builds them. Once the build returns
every MMType and MMField is sealed, and mutators raise RuntimeError.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Mapping
from enum import Enum, auto
from types import MappingProxyType

from metagraph.config import MetaModelSettings
from metagraph.core.roles import Accessor, AccessorKind, RoleId, role_field_name
from metagraph.core.values import ValueType, value_type_of_reference
from metagraph.declarations.protocol import (
    MethodDeclarationLike,
    TypeDeclarationLike,
    TypeRef,
)
from metagraph.metamodel.errors import InconsistentFieldShapeError


class TypeState(Enum):
    """Construction state of an MMType."""

    REGISTERED = auto()  # Name reserved and cached, fields not populated yet
    INITIALIZED = auto()  # Fields populated and value types resolved


def accessor_value_ref(accessor: Accessor) -> TypeRef | None:
    """Declared value type of an accessor.

    Getters yield their return type, setters their last parameter type. None
    when the accessor does not declare one (void getter, parameterless setter).
    """
    method = accessor.method
    if accessor.kind is AccessorKind.GETTER:
        return method.return_type
    params = method.parameter_types
    return params[-1] if params else None


def _is_element_of(single: ValueType, container: ValueType) -> bool:
    """Whether `single` is one item of `container` (map values count as items).

    Type variables and raw containers match any item.
    """
    if single.is_container or not container.is_container:
        return False
    item = container.item_type
    if item is None or item.is_type_variable or single.type_ref.is_type_variable:
        return True
    return item.qualified_name == single.type_ref.qualified_name


class MMField:
    """One logical property of an MMType, with all its accessors.

    Args:
        role: Role identifier, the key of this field in its owner.
        owner: The MMType this field belongs to.
    """

    def __init__(self, role: RoleId, owner: MMType) -> None:
        self._role = role
        self._owner = owner
        self._accessors: list[Accessor] = []
        self._method_uids: set[str] = set()
        self._value_type: ValueType | None = None
        self._sealed = False

    @property
    def role(self) -> RoleId:
        return self._role

    @property
    def name(self) -> str:
        return role_field_name(self._role)

    @property
    def owner(self) -> MMType:
        return self._owner

    @property
    def accessors(self) -> tuple[Accessor, ...]:
        return tuple(self._accessors)

    @property
    def methods(self) -> tuple[MethodDeclarationLike, ...]:
        """Accessor methods, best match first once the field is initialized."""
        return tuple(a.method for a in self._accessors)

    @property
    def getters(self) -> tuple[MethodDeclarationLike, ...]:
        return tuple(a.method for a in self._accessors if a.kind is AccessorKind.GETTER)

    @property
    def setters(self) -> tuple[MethodDeclarationLike, ...]:
        return tuple(a.method for a in self._accessors if a.kind is AccessorKind.SETTER)

    @property
    def value_type(self) -> ValueType | None:
        """Resolved value type, None until the owner is initialized."""
        return self._value_type

    @property
    def item_value_type(self) -> TypeRef | None:
        return self._value_type.item_type if self._value_type is not None else None

    def add_method(self, accessor: Accessor) -> bool:
        """Add an accessor of this field's role.

        Returns:
            False if the same method was already added, True otherwise.
        """
        self._check_mutable()
        if accessor.role != self._role:
            raise ValueError(f"Accessor of role {accessor.role} added to field {self._role}")
        uid = accessor.method.uid
        if uid in self._method_uids:
            return False
        self._method_uids.add(uid)
        self._accessors.append(accessor)
        return True

    def sort_by_best_match(
        self,
        specificity: Callable[[TypeRef], int],
        depth: Callable[[TypeDeclarationLike], int],
    ) -> None:
        """Move the accessor that best describes the value type to the front.

        Ordering: most specific value type first, then getters before setters,
        then the most derived declaring type. Accessors without a value type
        go last. Otherwise discovery order is kept.

        Args:
            specificity: Score of a declared type, higher means more specific.
            depth: Derivation depth of a declaring type, higher means more derived.
        """
        self._check_mutable()

        def rank(accessor: Accessor) -> tuple[int, int, int]:
            ref = accessor_value_ref(accessor)
            type_score = specificity(ref) if ref is not None else -1
            kind_score = 0 if accessor.kind is AccessorKind.GETTER else 1
            return (-type_score, kind_score, -depth(accessor.method.declaring_type))

        self._accessors.sort(key=rank)

    def detect_value_type(self, settings: MetaModelSettings) -> ValueType:
        """Derive the value type from the best-matching accessor.

        Element accessors (``addX(X)``/``removeX(X)`` next to a ``List<X>``
        getter) never decide the shape: when the best match is single-valued
        and a later accessor is a container of that type, the container wins.
        Every other accessor must either share the container kind or be an
        element accessor of it.

        Raises:
            InconsistentFieldShapeError: On shapes that cannot be reconciled, or
                if no accessor declares a value type at all.
        """
        typed: list[tuple[Accessor, ValueType]] = []
        for accessor in self._accessors:
            ref = accessor_value_ref(accessor)
            if ref is not None:
                typed.append((accessor, value_type_of_reference(ref, settings)))
        if not typed:
            raise InconsistentFieldShapeError(
                self._owner.name, self._role, "no accessor declares a value type"
            )

        best, best_type = typed[0]
        if not best_type.is_container:
            for accessor, value_type in typed[1:]:
                if value_type.is_container and _is_element_of(best_type, value_type):
                    best, best_type = accessor, value_type
                    break

        for accessor, value_type in typed:
            if value_type.kind is best_type.kind or _is_element_of(value_type, best_type):
                continue
            raise InconsistentFieldShapeError(
                self._owner.name,
                self._role,
                f"{best.method.uid} declares {best_type.kind.name} "
                f"but {accessor.method.uid} declares {value_type.kind.name}",
            )
        return best_type

    def set_value_type(self, value_type: ValueType) -> None:
        """Set the resolved value type. Allowed exactly once."""
        self._check_mutable()
        if self._value_type is not None:
            raise RuntimeError(f"Value type of {self._owner.name}#{self._role} already set")
        self._value_type = value_type

    def _seal(self) -> None:
        self._sealed = True

    def _check_mutable(self) -> None:
        if self._sealed:
            raise RuntimeError(f"Field {self._owner.name}#{self._role} is read-only")

    def __repr__(self) -> str:
        return f"MMField({self._owner.name}#{self._role}, {self._value_type})"


class MMType:
    """Logical entity type backed by a model interface and its implementation class.

    Identity matters: exactly one MMType exists per name within one meta-model,
    and super types are compared by identity.

    Args:
        name: Logical name, the interface simple name.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._state = TypeState.REGISTERED
        self._model_interface: TypeDeclarationLike | None = None
        self._model_class: TypeDeclarationLike | None = None
        self._role2field: dict[RoleId, MMField] = {}
        self._super_types: list[MMType] = []
        self._other_methods: list[MethodDeclarationLike] = []
        self._sealed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> TypeState:
        return self._state

    @property
    def model_interface(self) -> TypeDeclarationLike | None:
        return self._model_interface

    @property
    def model_class(self) -> TypeDeclarationLike | None:
        return self._model_class

    @property
    def fields(self) -> Mapping[RoleId, MMField]:
        return MappingProxyType(self._role2field)

    @property
    def super_types(self) -> tuple[MMType, ...]:
        return tuple(self._super_types)

    @property
    def other_methods(self) -> tuple[MethodDeclarationLike, ...]:
        return tuple(self._other_methods)

    def set_model_interface(self, iface: TypeDeclarationLike | None) -> None:
        self._check_mutable()
        if self._model_interface is not None and self._model_interface is not iface:
            raise RuntimeError(f"Model interface of {self._name} already set")
        self._model_interface = iface

    def set_model_class(self, cls: TypeDeclarationLike | None) -> None:
        self._check_mutable()
        if self._model_class is not None and self._model_class is not cls:
            raise RuntimeError(f"Model class of {self._name} already set")
        self._model_class = cls

    def get_field(self, role: RoleId) -> MMField | None:
        return self._role2field.get(role)

    def get_or_create_field(self, role: RoleId) -> MMField:
        """Return the field of `role`, creating it on first request."""
        field = self._role2field.get(role)
        if field is None:
            self._check_mutable()
            field = MMField(role, self)
            self._role2field[role] = field
        return field

    def add_super_type(self, other: MMType) -> bool:
        """Add a generalization edge. Self-loops and duplicates are ignored.

        Returns:
            True if the edge was added.
        """
        self._check_mutable()
        if other is self or any(t is other for t in self._super_types):
            return False
        self._super_types.append(other)
        return True

    def add_other_method(self, method: MethodDeclarationLike) -> bool:
        """Record a method that is not a property accessor."""
        self._check_mutable()
        if any(m is method for m in self._other_methods):
            return False
        self._other_methods.append(method)
        return True

    def all_super_types(self) -> Iterator[MMType]:
        """Transitive super types, nearest first, each exactly once."""
        seen = {id(self)}
        queue = deque(self._super_types)
        while queue:
            current = queue.popleft()
            if id(current) in seen:
                continue
            seen.add(id(current))
            yield current
            queue.extend(current._super_types)

    def is_subtype_of(self, other: MMType) -> bool:
        return any(t is other for t in self.all_super_types())

    def _mark_initialized(self) -> None:
        self._state = TypeState.INITIALIZED

    def _seal(self) -> None:
        self._sealed = True
        for field in self._role2field.values():
            field._seal()

    def _check_mutable(self) -> None:
        if self._sealed:
            raise RuntimeError(f"MMType {self._name} is read-only")

    def __repr__(self) -> str:
        return f"MMType({self._name}, {self._state.name})"
