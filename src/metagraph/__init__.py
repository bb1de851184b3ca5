"""metagraph: infer a property meta-model from annotated accessor declarations.

Usage:
    from metagraph import (
        InMemoryDeclarationModel, MethodDeclaration, Role, SpoonMetaModel,
        TypeDeclaration, TypeReference,
    )

    model = InMemoryDeclarationModel()
    iface = model.add_type(TypeDeclaration.interface("spoon.reflect.declaration.CtNamedElement"))
    iface.add_method(
        MethodDeclaration.getter("getSimpleName", TypeReference("java.lang.String"), Role.NAME)
    )
    ...

    meta = SpoonMetaModel(model)
    for mm_type in meta.mm_types:
        print(mm_type.name, [str(f.value_type) for f in mm_type.fields.values()])
"""

__version__ = "0.1.0"

# Configuration
from metagraph.config import EnvMetaModelSettings, MetaModelSettings

# Core primitives
from metagraph.core import (
    Accessor,
    AccessorKind,
    ContainerKind,
    Role,
    RoleClassifier,
    RoleId,
    ValueType,
)

# Declaration model
from metagraph.declarations import (
    AnnotationUsage,
    DeclarationKind,
    DeclarationModel,
    InMemoryDeclarationModel,
    MethodDeclaration,
    TypeDeclaration,
    TypeReference,
)

# Meta-model
from metagraph.metamodel import (
    InconsistentFieldShapeError,
    InvalidImplementationNamingError,
    MetaModelError,
    MissingInterfaceError,
    MissingPackageError,
    MMField,
    MMType,
    SpoonMetaModel,
    TypeState,
    UnexpectedDeclarationKindError,
    UnresolvableSupertypeError,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "EnvMetaModelSettings",
    "MetaModelSettings",
    # Core
    "Role",
    "RoleId",
    "RoleClassifier",
    "Accessor",
    "AccessorKind",
    "ContainerKind",
    "ValueType",
    # Declarations
    "DeclarationModel",
    "DeclarationKind",
    "InMemoryDeclarationModel",
    "TypeDeclaration",
    "MethodDeclaration",
    "TypeReference",
    "AnnotationUsage",
    # Meta-model
    "SpoonMetaModel",
    "MMType",
    "MMField",
    "TypeState",
    "MetaModelError",
    "MissingPackageError",
    "UnresolvableSupertypeError",
    "UnexpectedDeclarationKindError",
    "InvalidImplementationNamingError",
    "MissingInterfaceError",
    "InconsistentFieldShapeError",
]
