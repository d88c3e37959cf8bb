"""Configuration module using Pydantic Settings.

Usage:
    from hateoas_registry.config import RegistrySettings

    settings = RegistrySettings(warn_on_overwrite=False)
"""

from hateoas_registry.config.settings import RegistrySettings

__all__ = [
    "RegistrySettings",
]
