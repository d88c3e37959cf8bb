"""Registry functionality: models, store, decorators, and ancestry check."""

from hateoas_registry.core.registry.core import (
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
from hateoas_registry.core.registry.models import ConfigurationError, ProjectionDescriptor

__all__ = [
    # Models
    "ConfigurationError",
    "ProjectionDescriptor",
    # Core
    "TypeRegistry",
    "get_registry",
    "is_descendant",
    "get_resource_name",
    "get_projection_name",
    "resource",
    "embedded_resource",
    "projection_resource",
    "projection_relation",
    "ProjectionRelation",
]
