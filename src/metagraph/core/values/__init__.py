"""Value types: container shape and element types of logical properties."""

from metagraph.core.values.models import ContainerKind, ValueType
from metagraph.core.values.operations import container_kind_of, value_type_of_reference

__all__ = [
    "ContainerKind",
    "ValueType",
    "container_kind_of",
    "value_type_of_reference",
]
