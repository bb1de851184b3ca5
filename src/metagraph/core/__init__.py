"""Core functionalities: stateless queries and value objects.

Architecture Note:
    core/ contains pure functionalities with no graph-building state.
    The classifier only memoizes query results over the immutable declaration
    model. For the stateful graph construction, see metamodel/.
"""

from metagraph.core.roles import (
    Accessor,
    AccessorKind,
    Role,
    RoleClassifier,
    RoleId,
    as_role,
    role_field_name,
)
from metagraph.core.values import (
    ContainerKind,
    ValueType,
    container_kind_of,
    value_type_of_reference,
)

__all__ = [
    # Roles
    "RoleClassifier",
    "Role",
    "RoleId",
    "Accessor",
    "AccessorKind",
    "as_role",
    "role_field_name",
    # Values
    "ContainerKind",
    "ValueType",
    "container_kind_of",
    "value_type_of_reference",
]
