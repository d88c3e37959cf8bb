"""Resource base types.

Every class handed to the registry must inherit from one of these. They carry no
field semantics beyond the raw HAL ``_links`` section, which keeps its payload
name so no other field can shadow it. Populating attributes from a payload is the
deserializer's job.

Usage:
    class Book(Resource):
        pass

    book = Book(title="Dune", _links={"self": {"href": "/books/1"}})
"""

from __future__ import annotations

from typing import Any


class BaseResource:
    """Common ancestor of every client-side HAL representation."""

    def __init__(self, **fields: Any) -> None:
        """Initialize from already-decoded payload fields.

        Args:
            **fields: Payload fields. ``_links`` is consumed into the ``_links``
                attribute, every other field becomes a plain attribute.
        """
        self._links: dict[str, Any] = dict(fields.pop("_links", None) or {})
        for name, value in fields.items():
            setattr(self, name, value)

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in vars(self).items() if k != "_links")
        return f"{type(self).__name__}({attrs})"


class Resource(BaseResource):
    """Server entity reachable through its own self link."""


class EmbeddedResource(BaseResource):
    """Entity that only appears nested inside a parent resource payload."""
