from hateoas_registry import (
    EmbeddedResource,
    Resource,
    embedded_resource,
    get_registry,
    get_projection_name,
    get_resource_name,
    projection_relation,
    projection_resource,
    resource,
)


@resource("people")
class Person(Resource):
    pass


@resource("pets")
class Pet(Resource):
    """A pet as returned by GET /pets/{id}."""


@embedded_resource("address", "homeAddress")
class Address(EmbeddedResource):
    pass


@projection_resource(Pet, "withOwner")
class PetWithOwner(Resource):
    """Pet with its owner inlined, requested with ?projection=withOwner."""

    owner = projection_relation(Person)


def main() -> None:
    registry = get_registry()
    print(f"'pets' resolves to {registry.lookup_resource_type('pets').__name__}")
    print(f"'homeAddress' resolves to {registry.lookup_embedded_type('homeAddress').__name__}")
    print(f"'owner' resolves to {registry.lookup_relation_type('owner').__name__}")
    print(
        f"{PetWithOwner.__name__}: resource={get_resource_name(PetWithOwner)!r}, "
        f"projection={get_projection_name(PetWithOwner)!r}"
    )

    pet = PetWithOwner(name="Rex", owner=Person(name="Ann"))
    print(pet, pet.owner)


if __name__ == "__main__":
    main()
