"""Type registry, registration decorators, and ancestry check.

Usage:
    @resource("books")
    class Book(Resource):
        pass

    @embedded_resource("address", "billingAddress")
    class Address(EmbeddedResource):
        pass

    @projection_resource(Book, "withAuthor")
    class BookWithAuthor(Resource):
        author = projection_relation(Author)

    # Later, from the deserializer:
    get_registry().lookup_resource_type("books")  # -> Book
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from hateoas_registry.config.settings import RegistrySettings
from hateoas_registry.core.registry.models import (
    PROJECTION_NAME_ATTR,
    RESOURCE_NAME_ATTR,
    ConfigurationError,
    ProjectionDescriptor,
)
from hateoas_registry.core.resource.models import BaseResource, EmbeddedResource, Resource

C = TypeVar("C", bound=type)
K = TypeVar("K")
V = TypeVar("V")


def is_descendant(candidate: object, ancestor: type) -> bool:
    """Check whether candidate inherits, directly or transitively, from ancestor.

    Walks the MRO instead of calling issubclass, so virtual subclasses declared
    through ``ABC.register`` are not accepted.

    Args:
        candidate: Value to check, usually a class.
        ancestor: Required base class.

    Returns:
        True if ancestor appears among candidate's parents, False otherwise
        (including when candidate is ancestor itself or not a class at all).
    """
    if not isinstance(candidate, type):
        return False
    for base in candidate.__mro__[1:]:
        if base is ancestor:
            return True
    return False


def get_resource_name(cls: type) -> str | None:
    """Read the resource name attached at registration, if any."""
    return getattr(cls, RESOURCE_NAME_ATTR, None)


def get_projection_name(cls: type) -> str | None:
    """Read the projection name attached at registration, if any."""
    return getattr(cls, PROJECTION_NAME_ATTR, None)


def _type_name(value: object) -> str:
    return getattr(value, "__qualname__", None) or repr(value)


def _describe_parents(candidate: object) -> str:
    if not isinstance(candidate, type):
        return f"non-class value {candidate!r}"
    return "subclass of " + ", ".join(base.__qualname__ for base in candidate.__bases__)


def _require_descendant(candidate: object, ancestor: type, kind: str) -> None:
    if not is_descendant(candidate, ancestor):
        raise ConfigurationError(
            f"Init {kind} '{_type_name(candidate)}' error. "
            f"Only {ancestor.__name__} subclasses can be registered as {kind}, "
            f"got {_describe_parents(candidate)}."
        )


class TypeRegistry:
    """Tables the deserializer uses to pick concrete resource types.

    Holds four independent tables:
        resource name -> Resource subclass
        embedded property name -> EmbeddedResource subclass
        relation property name -> relation type
        (resource name, projection name) -> ProjectionDescriptor

    Every key is last-writer-wins. Writes are expected while declarations are
    evaluated, before any lookup, and are not synchronized.
    """

    def __init__(self, settings: RegistrySettings | None = None) -> None:
        """Initialize empty registry.

        Args:
            settings: Registry settings. Loaded from the environment if None.
        """
        self._settings = settings if settings is not None else RegistrySettings()
        self._resource_types: dict[str, type] = {}
        self._embedded_types: dict[str, type] = {}
        self._relation_types: dict[str, type] = {}
        self._projections: dict[tuple[str, str], ProjectionDescriptor] = {}

    @property
    def settings(self) -> RegistrySettings:
        """Settings this registry was built with.

        Returns:
            The RegistrySettings instance, never None.
        """
        return self._settings

    def _warn_overwrites(
        self, table: dict[K, V], entries: Iterable[tuple[K, V]], kind: str
    ) -> None:
        # Must run before any write. Always called from _register_*, which sits one
        # frame below user code (public method, decorator or __set_name__).
        if not self._settings.warn_on_overwrite:
            return
        for key, value in entries:
            existing = table.get(key)
            if existing is not None and existing != value:
                warnings.warn(
                    f"{kind} {key!r} was registered for {existing!r}, {value!r} replaces it.",
                    stacklevel=4,
                )

    def register_resource(self, cls: C, resource_name: str) -> C:
        """Register a Resource subclass under a resource name.

        Args:
            cls: Resource subclass to register.
            resource_name: Name used to build resource URLs and to find the
                type again from a payload.

        Returns:
            The same class, with ``__resource_name__`` attached.

        Raises:
            ConfigurationError: If resource_name is empty or cls is not a Resource.
        """
        return self._register_resource(cls, resource_name)

    def _register_resource(self, cls: C, resource_name: str) -> C:
        if not isinstance(resource_name, str) or not resource_name:
            raise ConfigurationError(
                f"Init resource '{_type_name(cls)}' error. resource_name can not be "
                f"None or empty, got {resource_name!r}."
            )
        _require_descendant(cls, Resource, "resource")
        self._warn_overwrites(self._resource_types, [(resource_name, cls)], "Resource name")

        setattr(cls, RESOURCE_NAME_ATTR, resource_name)
        self._resource_types[resource_name] = cls
        return cls

    def register_embedded_resource(self, cls: C, property_names: Iterable[str]) -> C:
        """Register an EmbeddedResource subclass under one or more property names.

        Args:
            cls: EmbeddedResource subclass to register.
            property_names: Names of the parent properties holding this type.

        Returns:
            The same class.

        Raises:
            ConfigurationError: If property_names is empty or holds an empty name,
                or cls is not an EmbeddedResource.
        """
        return self._register_embedded_resource(cls, property_names)

    def _register_embedded_resource(self, cls: C, property_names: Iterable[str]) -> C:
        if property_names is None or isinstance(property_names, str):
            names: tuple[Any, ...] = ()
        else:
            try:
                names = tuple(property_names)
            except TypeError as e:
                raise ConfigurationError(
                    f"Init embedded resource '{_type_name(cls)}' error. "
                    f"property_names must be a sequence of names, got {property_names!r}."
                ) from e
        if not names:
            raise ConfigurationError(
                f"Init embedded resource '{_type_name(cls)}' error. property_names can "
                f"not be None or empty, got {property_names!r}."
            )
        invalid = [name for name in names if not isinstance(name, str) or not name]
        if invalid:
            raise ConfigurationError(
                f"Init embedded resource '{_type_name(cls)}' error. property_names must "
                f"be non-empty strings, got {invalid!r}."
            )
        _require_descendant(cls, EmbeddedResource, "embedded resource")
        entries = [(name, cls) for name in dict.fromkeys(names)]
        self._warn_overwrites(self._embedded_types, entries, "Embedded property")

        self._embedded_types.update(entries)
        return cls

    def register_projection(self, cls: C, resource_type: type, projection_name: str) -> C:
        """Register a projection view of an already registered resource.

        The resource-name table is left untouched: a projection shares its
        resource's name and is told apart only by projection name.

        Args:
            cls: Resource subclass declaring the projection's fields.
            resource_type: Registered Resource subclass being projected.
            projection_name: Value sent as the ``projection`` request param.

        Returns:
            A subclass of cls carrying both names, with the same name and module.

        Raises:
            ConfigurationError: If resource_type is None or unregistered,
                projection_name is empty, or cls is not a Resource.
        """
        return self._register_projection(cls, resource_type, projection_name)

    def _register_projection(self, cls: C, resource_type: type, projection_name: str) -> C:
        if resource_type is None:
            raise ConfigurationError(
                f"Init resource projection '{_type_name(cls)}' error. resource_type can "
                f"not be None, pass the projected Resource subclass."
            )
        if not isinstance(projection_name, str) or not projection_name:
            raise ConfigurationError(
                f"Init resource projection '{_type_name(cls)}' error. projection_name "
                f"can not be None or empty, got {projection_name!r}."
            )
        _require_descendant(cls, Resource, "resource projection")
        resource_name = get_resource_name(resource_type)
        if resource_name is None:
            raise ConfigurationError(
                f"Init resource projection '{_type_name(cls)}' error. resource_type "
                f"'{_type_name(resource_type)}' has no resource name, register it first."
            )

        projection_type = type(cls)(
            cls.__name__,
            (cls,),
            {
                "__module__": cls.__module__,
                "__qualname__": cls.__qualname__,
                "__doc__": cls.__doc__,
            },
        )
        descriptor = ProjectionDescriptor(
            resource_name=resource_name,
            projection_name=projection_name,
            resource_type=resource_type,
            projection_type=projection_type,
        )
        key = (resource_name, projection_name)
        self._warn_overwrites(self._projections, [(key, descriptor)], "Projection")

        setattr(cls, RESOURCE_NAME_ATTR, resource_name)
        setattr(cls, PROJECTION_NAME_ATTR, projection_name)
        self._projections[key] = descriptor
        return projection_type  # type: ignore[return-value]

    def register_relation(self, owner: type, property_name: str, relation_type: type) -> None:
        """Record the type a projection property deserializes into.

        Keyed by property name alone, so the same name on two projections shares
        one entry.

        Args:
            owner: Class declaring the property.
            property_name: Name of the property.
            relation_type: Related resource type.

        Raises:
            ConfigurationError: If relation_type is None, or, with
                ``validate_relation_types`` enabled, not a BaseResource.
        """
        self._register_relation(owner, property_name, relation_type)

    def _register_relation(self, owner: type, property_name: str, relation_type: type) -> None:
        if relation_type is None:
            raise ConfigurationError(
                f"Init resource projection '{_type_name(owner)}' relation type error. "
                f"relation_type of '{property_name}' can not be None, pass a valid "
                f"relation type."
            )
        if self._settings.validate_relation_types:
            _require_descendant(relation_type, BaseResource, "relation type")

        self._warn_overwrites(
            self._relation_types, [(property_name, relation_type)], "Relation property"
        )

        self._relation_types[property_name] = relation_type

    def lookup_resource_type(self, resource_name: str) -> type | None:
        """Get the Resource subclass registered under a resource name.

        Args:
            resource_name: Resource name to look up.

        Returns:
            Registered class if found, None otherwise.
        """
        return self._resource_types.get(resource_name)

    def lookup_embedded_type(self, property_name: str) -> type | None:
        """Get the EmbeddedResource subclass registered for a property name.

        Args:
            property_name: Embedded property name to look up.

        Returns:
            Registered class if found, None otherwise.
        """
        return self._embedded_types.get(property_name)

    def lookup_relation_type(self, property_name: str) -> type | None:
        """Get the relation type recorded for a projection property name."""
        return self._relation_types.get(property_name)

    def lookup_projection(
        self, resource_name: str, projection_name: str
    ) -> ProjectionDescriptor | None:
        """Get the projection registered for a resource under a projection name."""
        return self._projections.get((resource_name, projection_name))


# Module-level registry instance
_registry = TypeRegistry()


def get_registry() -> TypeRegistry:
    """Access the global type registry.

    Returns:
        The process-local TypeRegistry instance.
    """
    return _registry


def _resolve(registry: TypeRegistry | None) -> TypeRegistry:
    return registry if registry is not None else _registry


def resource(resource_name: str, *, registry: TypeRegistry | None = None) -> Callable[[C], C]:
    """Register the decorated Resource subclass under a resource name.

    Args:
        resource_name: Name used to build resource URLs.
        registry: Target registry, the global one if None.

    Returns:
        Class decorator.
    """

    def decorator(cls: C) -> C:
        return _resolve(registry)._register_resource(cls, resource_name)

    return decorator


def embedded_resource(
    *property_names: str, registry: TypeRegistry | None = None
) -> Callable[[C], C]:
    """Register the decorated EmbeddedResource subclass under property names.

    Args:
        *property_names: Names of parent properties holding this type.
        registry: Target registry, the global one if None.

    Returns:
        Class decorator.
    """

    def decorator(cls: C) -> C:
        return _resolve(registry)._register_embedded_resource(cls, property_names)

    return decorator


def projection_resource(
    resource_type: type, projection_name: str, *, registry: TypeRegistry | None = None
) -> Callable[[C], C]:
    """Declare the decorated class as a named projection of resource_type.

    Note:
        The decorator returns a new subclass; the name bound in the module is
        that subclass, not the class body as written.

    Args:
        resource_type: Registered Resource subclass being projected.
        projection_name: Value sent as the ``projection`` request param.
        registry: Target registry, the global one if None.

    Returns:
        Class decorator.
    """

    def decorator(cls: C) -> C:
        return _resolve(registry)._register_projection(cls, resource_type, projection_name)

    return decorator


class ProjectionRelation:
    """Class attribute marking a projection property as a related resource.

    Registers itself when the owning class body is evaluated. On instances it
    yields None until the deserializer stores a value under the same name.
    """

    def __init__(self, relation_type: type, registry: TypeRegistry | None = None) -> None:
        """Initialize relation marker.

        Args:
            relation_type: Type the property deserializes into.
            registry: Target registry, the global one if None.
        """
        self.relation_type = relation_type
        self.name: str | None = None
        self._registry = registry

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        _resolve(self._registry)._register_relation(owner, name, self.relation_type)

    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return None


def projection_relation(
    relation_type: type, *, registry: TypeRegistry | None = None
) -> Any:
    """Mark a projection class attribute as a relation of the given type.

    >>> class BookWithAuthor(Resource):
    ...     author = projection_relation(Author)
    """
    return ProjectionRelation(relation_type, registry=registry)
