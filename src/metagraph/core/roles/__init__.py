"""Role classification: which logical property an accessor method belongs to."""

from metagraph.core.roles.classifier import RoleClassifier
from metagraph.core.roles.models import (
    Accessor,
    AccessorKind,
    Role,
    RoleId,
    as_role,
    role_field_name,
)

__all__ = [
    "RoleClassifier",
    "Role",
    "RoleId",
    "Accessor",
    "AccessorKind",
    "as_role",
    "role_field_name",
]
