"""SpoonMetaModel: builds the meta-model graph from a declaration model.

Usage:
    model = InMemoryDeclarationModel(...)   # already built upstream
    meta = SpoonMetaModel(model)

    named = meta.get_mm_type("CtNamedElement")
    field = named.fields[Role.NAME]
    print(field.value_type)            # single java.lang.String
    print([t.name for t in named.super_types])

Construction is a single depth-first pass. Each MMType is reserved (cached
under its name, REGISTERED) before it is populated, so cyclic references
between types terminate: re-entering a reserved type returns it as is.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from metagraph.config import MetaModelSettings
from metagraph.core.roles import RoleClassifier
from metagraph.declarations.protocol import (
    DeclarationKind,
    DeclarationModel,
    TypeDeclarationLike,
    TypeRef,
)
from metagraph.metamodel.errors import (
    MissingInterfaceError,
    MissingPackageError,
    UnexpectedDeclarationKindError,
    UnresolvableSupertypeError,
)
from metagraph.metamodel.models import MMType, TypeState
from metagraph.metamodel.naming import (
    api_to_impl_package,
    impl_to_api_name,
    implementation_of,
    interface_of,
    mm_type_name,
)

logger = logging.getLogger(__name__)


class SpoonMetaModel:
    """Meta-model of all model interfaces in the configured API packages.

    The graph is complete and read-only once the constructor returns. Any
    failure aborts construction with a MetaModelError subclass.

    Args:
        model: Already built declaration model holding API and implementation types.
        settings: Naming conventions. Defaults to MetaModelSettings().

    Raises:
        MissingPackageError: If an API package or its implementation package is absent.
        UnresolvableSupertypeError: If a supertype is missing and not expected to be.
        UnexpectedDeclarationKindError: If a model type is neither interface nor class.
        InvalidImplementationNamingError: If a type breaks the naming convention.
        InconsistentFieldShapeError: If accessors of one role disagree on container shape.
    """

    def __init__(
        self, model: DeclarationModel, settings: MetaModelSettings | None = None
    ) -> None:
        self._model = model
        self._settings = settings or MetaModelSettings()
        self._classifier = RoleClassifier(model, self._settings)
        self._name2mm_type: dict[str, MMType] = {}

        self._check_packages()
        for iface in model.interfaces(self._settings.api_packages):
            self._get_or_create_mm_type(iface)

        for mm_type in self._name2mm_type.values():
            mm_type._seal()
        logger.info("Built meta-model with %d types", len(self._name2mm_type))

    @property
    def declaration_model(self) -> DeclarationModel:
        return self._model

    @property
    def settings(self) -> MetaModelSettings:
        return self._settings

    @property
    def classifier(self) -> RoleClassifier:
        return self._classifier

    @property
    def mm_types(self) -> tuple[MMType, ...]:
        """All MMTypes of the meta-model."""
        return tuple(self._name2mm_type.values())

    def get_mm_type(self, name: str) -> MMType | None:
        """MMType with logical name `name`, None if there is none."""
        return self._name2mm_type.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._name2mm_type

    def __iter__(self) -> Iterator[MMType]:
        return iter(self.mm_types)

    def __len__(self) -> int:
        return len(self._name2mm_type)

    def _check_packages(self) -> None:
        for api_package in self._settings.api_packages:
            if not self._model.has_package(api_package):
                raise MissingPackageError(api_package, "API")
            impl_package = api_to_impl_package(api_package, self._settings)
            if not self._model.has_package(impl_package):
                raise MissingPackageError(impl_package, "implementation")

    def _get_or_create_mm_type(self, type_decl: TypeDeclarationLike) -> MMType:
        """Existing or newly reserved and populated MMType of a class or interface."""
        name = mm_type_name(type_decl, self._settings)
        mm_type = self._name2mm_type.get(name)
        if mm_type is None:
            mm_type = self._reserve(name)
            self._populate(mm_type, type_decl)
        return mm_type

    def _reserve(self, name: str) -> MMType:
        mm_type = MMType(name)
        self._name2mm_type[name] = mm_type
        logger.debug("Reserved meta-model type %s", name)
        return mm_type

    def _populate(self, mm_type: MMType, type_decl: TypeDeclarationLike) -> None:
        """Initialize a reserved MMType. Called exactly once per MMType."""
        if mm_type.state is not TypeState.REGISTERED:
            raise RuntimeError(f"MMType {mm_type.name} is already initialized")

        if type_decl.kind is DeclarationKind.INTERFACE:
            mm_type.set_model_class(implementation_of(type_decl, self._model, self._settings))
            mm_type.set_model_interface(type_decl)
        elif type_decl.kind is DeclarationKind.CLASS:
            iface = interface_of(type_decl, self._model, self._settings)
            if iface is None:
                raise MissingInterfaceError(
                    type_decl.qualified_name,
                    impl_to_api_name(type_decl.qualified_name, self._settings),
                )
            mm_type.set_model_class(type_decl)
            mm_type.set_model_interface(iface)
        else:
            raise UnexpectedDeclarationKindError(type_decl.qualified_name, type_decl.kind)

        # Class first, then interface: both contribute to the same fields
        if mm_type.model_class is not None:
            self._add_fields_of_type(mm_type, mm_type.model_class)
        if mm_type.model_interface is not None:
            self._add_fields_of_type(mm_type, mm_type.model_interface)

        for field in mm_type.fields.values():
            field.sort_by_best_match(self._specificity, self._classifier.depth_of)
            field.set_value_type(field.detect_value_type(self._settings))

        mm_type._mark_initialized()
        logger.debug(
            "Initialized meta-model type %s: %d fields, %d super types",
            mm_type.name,
            len(mm_type.fields),
            len(mm_type.super_types),
        )

    def _add_fields_of_type(self, mm_type: MMType, type_decl: TypeDeclarationLike) -> None:
        """Add accessors declared on `type_decl` and inherited by it, then link supertypes.

        Non-accessor methods are recorded only when declared directly on `type_decl`.
        """
        for method in type_decl.methods:
            accessor = self._classifier.classify(method)
            if accessor is not None:
                mm_type.get_or_create_field(accessor.role).add_method(accessor)
            else:
                mm_type.add_other_method(method)

        for ancestor in self._classifier.supertype_closure(type_decl):
            for method in ancestor.methods:
                accessor = self._classifier.classify(method)
                if accessor is not None:
                    mm_type.get_or_create_field(accessor.role).add_method(accessor)

        if type_decl.superclass is not None:
            self._add_super_type(mm_type, type_decl, type_decl.superclass)
        for super_iface in type_decl.super_interfaces:
            self._add_super_type(mm_type, type_decl, super_iface)

    def _add_super_type(
        self, mm_type: MMType, type_decl: TypeDeclarationLike, super_ref: TypeRef
    ) -> None:
        super_decl = self._model.resolve(super_ref)
        if super_decl is None:
            if super_ref.qualified_name not in self._settings.expected_unresolvable:
                raise UnresolvableSupertypeError(super_ref.qualified_name, type_decl.qualified_name)
            logger.debug(
                "Skipping unavailable supertype %s of %s",
                super_ref.qualified_name,
                type_decl.qualified_name,
            )
            return
        super_mm_type = self._get_or_create_mm_type(super_decl)
        if super_mm_type is not mm_type:
            mm_type.add_super_type(super_mm_type)

    def _specificity(self, ref: TypeRef) -> int:
        """Score how specific a declared type is: resolvable ancestors, recursively over arguments."""
        score = 0
        resolved = self._model.resolve(ref)
        if resolved is not None:
            score += 1 + self._classifier.depth_of(resolved)
        for arg in ref.type_arguments:
            score += self._specificity(arg)
        return score
