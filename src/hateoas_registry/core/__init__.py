"""Core functionalities: resource base types and the type registry.

Architecture Note:
    resource/ holds the base classes registration checks against.
    registry/ holds the tables and the functions that fill them.
"""

from hateoas_registry.core.registry import (
    ConfigurationError,
    ProjectionDescriptor,
    ProjectionRelation,
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
from hateoas_registry.core.resource import BaseResource, EmbeddedResource, Resource

__all__ = [
    # Resource
    "BaseResource",
    "Resource",
    "EmbeddedResource",
    # Registry
    "ConfigurationError",
    "ProjectionDescriptor",
    "ProjectionRelation",
    "TypeRegistry",
    "get_registry",
    "is_descendant",
    "get_resource_name",
    "get_projection_name",
    "resource",
    "embedded_resource",
    "projection_resource",
    "projection_relation",
]
