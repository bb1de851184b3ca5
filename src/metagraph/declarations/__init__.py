"""Declaration model: the typed source model the meta-model is inferred from."""

from metagraph.declarations.memory import (
    GETTER_ANNOTATION,
    SETTER_ANNOTATION,
    AnnotationUsage,
    InMemoryDeclarationModel,
    MethodDeclaration,
    TypeDeclaration,
    TypeReference,
)
from metagraph.declarations.protocol import (
    AnnotationLike,
    DeclarationKind,
    DeclarationModel,
    MethodDeclarationLike,
    TypeDeclarationLike,
    TypeRef,
)

__all__ = [
    # Protocol
    "DeclarationModel",
    "DeclarationKind",
    "TypeDeclarationLike",
    "MethodDeclarationLike",
    "TypeRef",
    "AnnotationLike",
    # In-memory
    "InMemoryDeclarationModel",
    "TypeDeclaration",
    "MethodDeclaration",
    "TypeReference",
    "AnnotationUsage",
    "GETTER_ANNOTATION",
    "SETTER_ANNOTATION",
]
