"""Configuration module using Pydantic Settings.

Provides the naming conventions used to pair interfaces with implementation
classes and to recognize accessor annotations.

Usage:
    from metagraph.config import MetaModelSettings

    settings = MetaModelSettings(class_suffix="Impl")
"""

from metagraph.config.settings import EnvMetaModelSettings, MetaModelSettings

__all__ = [
    "EnvMetaModelSettings",
    "MetaModelSettings",
]
