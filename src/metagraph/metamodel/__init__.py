"""Meta-model graph: logical types, their fields, and the builder deriving them."""

from metagraph.metamodel.builder import SpoonMetaModel
from metagraph.metamodel.errors import (
    InconsistentFieldShapeError,
    InvalidImplementationNamingError,
    MetaModelError,
    MissingInterfaceError,
    MissingPackageError,
    UnexpectedDeclarationKindError,
    UnresolvableSupertypeError,
)
from metagraph.metamodel.models import MMField, MMType, TypeState, accessor_value_ref
from metagraph.metamodel.naming import (
    api_to_impl_package,
    impl_to_api_name,
    implementation_of,
    interface_of,
    mm_type_name,
)

__all__ = [
    # Builder
    "SpoonMetaModel",
    # Models
    "MMType",
    "MMField",
    "TypeState",
    "accessor_value_ref",
    # Naming
    "mm_type_name",
    "api_to_impl_package",
    "impl_to_api_name",
    "implementation_of",
    "interface_of",
    # Errors
    "MetaModelError",
    "MissingPackageError",
    "UnresolvableSupertypeError",
    "UnexpectedDeclarationKindError",
    "InvalidImplementationNamingError",
    "MissingInterfaceError",
    "InconsistentFieldShapeError",
]
