"""Tests for resource base types."""

from hateoas_registry import BaseResource, EmbeddedResource, Resource


def test_fields_become_attributes():
    class Book(Resource):
        pass

    book = Book(title="Dune", pages=412)

    assert book.title == "Dune"
    assert book.pages == 412
    assert book._links == {}


def test_links_are_kept_apart():
    links = {"self": {"href": "http://localhost/books/1"}}

    book = Resource(_links=links, title="Dune")

    assert book._links == links
    assert "_links" not in repr(book)
    assert "title='Dune'" in repr(book)


def test_links_field_does_not_replace_hal_links():
    """A payload field called "links" is ordinary data, not the HAL section."""
    hal_links = {"self": {"href": "http://localhost/pages/1"}}

    page = Resource(_links=hal_links, links=["http://example.com"])

    assert page._links == hal_links
    assert page.links == ["http://example.com"]


def test_base_types_share_common_ancestor():
    assert issubclass(Resource, BaseResource)
    assert issubclass(EmbeddedResource, BaseResource)
    assert not issubclass(EmbeddedResource, Resource)
