"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from hateoas_registry import RegistrySettings, TypeRegistry


@pytest.fixture
def registry():
    """Fresh TypeRegistry, isolated from the global one and from the environment."""
    return TypeRegistry(RegistrySettings(warn_on_overwrite=True, validate_relation_types=False))


@pytest.fixture
def quiet_registry():
    """Fresh TypeRegistry that does not warn on overwrites."""
    return TypeRegistry(RegistrySettings(warn_on_overwrite=False))
