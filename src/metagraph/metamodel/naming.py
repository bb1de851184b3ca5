"""Naming conventions pairing API interfaces with implementation classes.

    spoon.reflect.code.CtInvocation  <->  spoon.support.reflect.code.CtInvocationImpl

Both directions are pure functions of the qualified name and the settings; the
declaration model is only used to look the counterpart up.
"""

from __future__ import annotations

from metagraph.config import MetaModelSettings
from metagraph.declarations.protocol import (
    DeclarationKind,
    DeclarationModel,
    TypeDeclarationLike,
)
from metagraph.metamodel.errors import (
    InvalidImplementationNamingError,
    UnexpectedDeclarationKindError,
)


def mm_type_name(type_decl: TypeDeclarationLike, settings: MetaModelSettings) -> str:
    """Logical name of a type: its simple name without the implementation suffix."""
    name = type_decl.simple_name
    suffix = settings.class_suffix
    if name.endswith(suffix):
        name = name[: -len(suffix)]
    return name


def api_to_impl_package(qualified_name: str, settings: MetaModelSettings) -> str:
    """Replace the API root package prefix with the implementation root.

    Raises:
        InvalidImplementationNamingError: If `qualified_name` is not under the API root.
    """
    if not settings.is_api_name(qualified_name):
        raise InvalidImplementationNamingError(
            qualified_name,
            f"does not belong to model API package {settings.api_root_package}",
        )
    return settings.impl_root_package + qualified_name[len(settings.api_root_package) :]


def impl_to_api_name(qualified_name: str, settings: MetaModelSettings) -> str:
    """Inverse of the implementation naming rule: package swapped, suffix stripped.

    Raises:
        InvalidImplementationNamingError: If the name lacks the suffix or impl root.
    """
    if not qualified_name.endswith(settings.class_suffix) or not settings.is_impl_name(
        qualified_name
    ):
        raise InvalidImplementationNamingError(
            qualified_name,
            f"expected {settings.impl_root_package}.*{settings.class_suffix}",
        )
    stripped = qualified_name[: -len(settings.class_suffix)]
    return settings.api_root_package + stripped[len(settings.impl_root_package) :]


def implementation_of(
    iface: TypeDeclarationLike, model: DeclarationModel, settings: MetaModelSettings
) -> TypeDeclarationLike | None:
    """Implementation class of a model interface, None if there is none.

    Raises:
        InvalidImplementationNamingError: If the interface is outside the API root.
        UnexpectedDeclarationKindError: If the counterpart exists but is not a class.
    """
    impl_name = api_to_impl_package(iface.qualified_name, settings) + settings.class_suffix
    impl = model.get_type(impl_name)
    if impl is not None and impl.kind is not DeclarationKind.CLASS:
        raise UnexpectedDeclarationKindError(impl.qualified_name, impl.kind)
    return impl


def interface_of(
    impl: TypeDeclarationLike, model: DeclarationModel, settings: MetaModelSettings
) -> TypeDeclarationLike | None:
    """Interface governing an implementation class, None if it is not in the model.

    Raises:
        InvalidImplementationNamingError: If the class breaks the naming convention.
        UnexpectedDeclarationKindError: If the counterpart exists but is not an interface.
    """
    iface = model.get_type(impl_to_api_name(impl.qualified_name, settings))
    if iface is not None and iface.kind is not DeclarationKind.INTERFACE:
        raise UnexpectedDeclarationKindError(iface.qualified_name, iface.kind)
    return iface
