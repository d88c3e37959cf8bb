"""Registry models: errors and projection metadata."""

from __future__ import annotations

from dataclasses import dataclass

RESOURCE_NAME_ATTR = "__resource_name__"
PROJECTION_NAME_ATTR = "__projection_name__"


class ConfigurationError(Exception):
    """Raised when a resource declaration cannot be registered."""

    pass


@dataclass(slots=True, frozen=True)
class ProjectionDescriptor:
    """Explicit projection value: which resource, which view, which class to build.

    Attributes:
        resource_name: Name shared with the projected resource.
        projection_name: Value sent as the ``projection`` request param.
        resource_type: The projected Resource subclass.
        projection_type: Class the deserializer should instantiate.
    """

    resource_name: str
    projection_name: str
    resource_type: type
    projection_type: type
