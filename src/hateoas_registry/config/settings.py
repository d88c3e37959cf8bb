"""Configuration settings using Pydantic Settings.

Usage:
    from hateoas_registry.config import RegistrySettings

    # Load from environment variables (HATEOAS_REGISTRY_*)
    settings = RegistrySettings()

    # Or override with explicit values
    settings = RegistrySettings(warn_on_overwrite=False)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class RegistrySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a TypeRegistry.

    Attributes:
        warn_on_overwrite: Warn when a key is re-registered for a different type.
        validate_relation_types: Require projection relation types to inherit
            from BaseResource.

    Environment Variables:
        HATEOAS_REGISTRY_WARN_ON_OVERWRITE
        HATEOAS_REGISTRY_VALIDATE_RELATION_TYPES
    """

    model_config = SettingsConfigDict(
        env_prefix="HATEOAS_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    warn_on_overwrite: bool = True
    validate_relation_types: bool = False
