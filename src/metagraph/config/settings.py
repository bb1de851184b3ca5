"""Configuration settings using Pydantic Settings.

Holds the naming conventions the meta-model is inferred from. Defaults describe
the Spoon model (``spoon.reflect.*`` interfaces, ``spoon.support.reflect.*Impl``
classes), so ``MetaModelSettings()`` needs no environment at all.

Usage:
    from metagraph.config import MetaModelSettings

    # Built-in Spoon conventions, never read from the environment
    settings = MetaModelSettings()

    # Override with explicit values
    settings = MetaModelSettings(class_suffix="Implementation")

    # Opt in to environment variables (METAMODEL_*) and a .env file
    settings = MetaModelSettings.from_env()
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class MetaModelSettings(BaseSettings):
    """Conventions linking API interfaces, implementation classes and accessors.

    Attributes:
        class_suffix: Suffix appended to an interface name to get its implementation.
        api_packages: Packages whose interfaces form the model surface.
        api_root_package: Common prefix of all API packages.
        impl_root_package: Replacement for api_root_package in implementation names.
        expected_unresolvable: Supertypes known to be absent from the declaration model.
        getter_annotation: Qualified name of the property getter annotation.
        setter_annotation: Qualified name of the property setter annotation.
        role_attribute: Annotation attribute holding the role identifier.
        list_types: Type names classified as ordered sequences.
        set_types: Type names classified as unordered sets.
        map_types: Type names classified as keyed mappings.

    Environment Variables (only through `from_env`):
        METAMODEL_CLASS_SUFFIX
        METAMODEL_API_PACKAGES (JSON list)
        METAMODEL_API_ROOT_PACKAGE
        METAMODEL_IMPL_ROOT_PACKAGE
        METAMODEL_EXPECTED_UNRESOLVABLE (JSON list)
        ...
    """

    model_config = SettingsConfigDict(
        env_prefix="METAMODEL_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    class_suffix: str = "Impl"
    api_packages: tuple[str, ...] = (
        "spoon.reflect.code",
        "spoon.reflect.declaration",
        "spoon.reflect.reference",
    )
    api_root_package: str = "spoon.reflect"
    impl_root_package: str = "spoon.support.reflect"
    expected_unresolvable: frozenset[str] = frozenset(
        {
            "java.lang.Cloneable",
            "spoon.processing.FactoryAccessor",
            "spoon.reflect.visitor.CtVisitable",
            "spoon.reflect.visitor.chain.CtQueryable",
            "spoon.template.TemplateParameter",
            "java.lang.Iterable",
            "java.io.Serializable",
        }
    )
    getter_annotation: str = "spoon.reflect.annotations.PropertyGetter"
    setter_annotation: str = "spoon.reflect.annotations.PropertySetter"
    role_attribute: str = "role"
    list_types: frozenset[str] = frozenset(
        {"java.util.List", "java.util.ArrayList", "java.util.LinkedList", "java.util.Collection"}
    )
    set_types: frozenset[str] = frozenset(
        {"java.util.Set", "java.util.HashSet", "java.util.LinkedHashSet", "java.util.TreeSet"}
    )
    map_types: frozenset[str] = frozenset(
        {"java.util.Map", "java.util.HashMap", "java.util.LinkedHashMap", "java.util.TreeMap"}
    )

    @field_validator("class_suffix")
    @classmethod
    def check_suffix_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("class_suffix must not be empty")
        return value

    @model_validator(mode="after")
    def check_conventions(self) -> Self:
        for package in self.api_packages:
            if not self.is_api_name(package):
                raise ValueError(
                    f"API package {package} is not under root package {self.api_root_package}"
                )
        if (
            self.list_types & self.set_types
            or self.list_types & self.map_types
            or self.set_types & self.map_types
        ):
            raise ValueError("list_types, set_types and map_types must be disjoint")
        return self

    def is_api_name(self, qualified_name: str) -> bool:
        """Check if `qualified_name` lies under the API root package."""
        root = self.api_root_package
        return qualified_name == root or qualified_name.startswith(root + ".")

    def is_impl_name(self, qualified_name: str) -> bool:
        """Check if `qualified_name` lies under the implementation root package."""
        root = self.impl_root_package
        return qualified_name == root or qualified_name.startswith(root + ".")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Constructor arguments only; defaults are the fixed conventions
        return (init_settings,)

    @classmethod
    def from_env(cls, env_file: str | None = ".env", **overrides: Any) -> MetaModelSettings:
        """Load settings from METAMODEL_* variables and an optional .env file.

        Explicit `overrides` win over the environment, which wins over defaults.
        """
        return EnvMetaModelSettings(_env_file=env_file, **overrides)


class EnvMetaModelSettings(MetaModelSettings):
    """MetaModelSettings that also reads the environment and a dotenv file."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings, dotenv_settings
