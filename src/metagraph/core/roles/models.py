"""Role models: property role tokens and accessor classification results.

A role identifier names one logical property. It is read from accessor
annotations and used as the merge key for getters and setters across a type
hierarchy. Known Spoon roles are members of `Role`; unknown tokens are kept as
interned strings, which compare and hash equal to a `Role` of the same name.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, StrEnum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from metagraph.declarations.protocol import MethodDeclarationLike


class Role(StrEnum):
    """Property roles of the Spoon model. Values equal the member names."""

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> str:
        return name

    NAME = auto()
    TYPE = auto()
    DECLARING_TYPE = auto()
    DECLARED_TYPE = auto()
    BOUNDING_TYPE = auto()
    IS_FINAL = auto()
    IS_STATIC = auto()
    IS_UPPER = auto()
    IS_IMPLICIT = auto()
    IS_DEFAULT = auto()
    IS_VARARGS = auto()
    IS_SHADOW = auto()
    DEFAULT_EXPRESSION = auto()
    THEN = auto()
    ELSE = auto()
    PACKAGE_REF = auto()
    SUB_PACKAGE = auto()
    CONDITION = auto()
    RIGHT_OPERAND = auto()
    LEFT_OPERAND = auto()
    LABEL = auto()
    CASE = auto()
    OPERATOR_KIND = auto()
    PARAMETER = auto()
    EXPRESSION = auto()
    TARGET = auto()
    VARIABLE = auto()
    FINALIZER = auto()
    THROWN = auto()
    ASSIGNMENT = auto()
    ASSIGNED = auto()
    MODIFIER = auto()
    COMMENT = auto()
    ANNOTATION_TYPE = auto()
    INTERFACE = auto()
    ANNOTATION = auto()
    STATEMENT = auto()
    ARGUMENT = auto()
    SUPER_TYPE = auto()
    TYPE_MEMBER = auto()
    NESTED_TYPE = auto()
    CONSTRUCTOR = auto()
    EXECUTABLE_REF = auto()
    METHOD = auto()
    FIELD = auto()
    BODY = auto()
    VALUE = auto()
    POSITION = auto()
    SNIPPET = auto()
    TYPE_ARGUMENT = auto()
    TYPE_PARAMETER = auto()
    COMMENT_TAG = auto()
    COMMENT_CONTENT = auto()
    COMMENT_TYPE = auto()


RoleId = Role | str
"""Role identifier: a known Role or an interned unknown token."""


def as_role(value: Any) -> RoleId | None:
    """Normalize an annotation attribute value to a role identifier.

    Args:
        value: Raw attribute value (Role, str, or any Enum member).

    Returns:
        Role member when known, interned string otherwise, None for a missing value.
    """
    if value is None:
        return None
    if isinstance(value, Role):
        return value
    if isinstance(value, Enum):
        value = value.name
    token = str(value)
    try:
        return Role(token)
    except ValueError:
        return sys.intern(token)


def role_field_name(role: RoleId) -> str:
    """Camel-case property name of a role, e.g. TYPE_MEMBER -> typeMember."""
    head, *rest = str(role).lower().split("_")
    return head + "".join(part.capitalize() for part in rest)


class AccessorKind(Enum):
    """Whether an accessor reads or writes its property."""

    GETTER = auto()
    SETTER = auto()


@dataclass(frozen=True, slots=True)
class Accessor:
    """Classification of one method as property accessor."""

    method: MethodDeclarationLike
    role: RoleId
    kind: AccessorKind

    @property
    def is_getter(self) -> bool:
        return self.kind is AccessorKind.GETTER
