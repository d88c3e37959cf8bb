"""Resource base types checked by registration."""

from hateoas_registry.core.resource.models import BaseResource, EmbeddedResource, Resource

__all__ = [
    "BaseResource",
    "Resource",
    "EmbeddedResource",
]
