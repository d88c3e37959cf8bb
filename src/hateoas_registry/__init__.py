"""hateoas-registry: type metadata for HAL resource deserialization.

Usage:
    from hateoas_registry import Resource, get_registry, resource

    @resource("books")
    class Book(Resource):
        pass

    get_registry().lookup_resource_type("books")  # -> Book
"""

__version__ = "0.1.0"

# Configuration
from hateoas_registry.config import RegistrySettings

# Core primitives
from hateoas_registry.core import (
    BaseResource,
    ConfigurationError,
    EmbeddedResource,
    ProjectionDescriptor,
    ProjectionRelation,
    Resource,
    TypeRegistry,
    embedded_resource,
    get_projection_name,
    get_registry,
    get_resource_name,
    is_descendant,
    projection_relation,
    projection_resource,
    resource,
)

__all__ = [
    # Version
    "__version__",
    # Resource
    "BaseResource",
    "Resource",
    "EmbeddedResource",
    # Registry
    "TypeRegistry",
    "get_registry",
    "ConfigurationError",
    "ProjectionDescriptor",
    "ProjectionRelation",
    "is_descendant",
    "get_resource_name",
    "get_projection_name",
    "resource",
    "embedded_resource",
    "projection_resource",
    "projection_relation",
    # Config
    "RegistrySettings",
]
