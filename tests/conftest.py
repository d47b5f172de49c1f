"""Global fixtures for fakegen tests."""

import itertools

import pytest

from fakegen.providers.registry import ProviderRegistry


def counter(prefix):
    """Zero-argument generator yielding prefix-0, prefix-1, ..."""
    count = itertools.count()
    return lambda: f"{prefix}-{next(count)}"


@pytest.fixture
def static_graph():
    """A small capability graph with predictable values."""
    return {
        "person": {
            "name": counter("name"),
            "first_name": lambda: "Ada",
            "title": "Dr",  # not callable
        },
        "address": {
            "city": counter("city"),
            "items": lambda: "not-a-dict-method",
        },
    }


@pytest.fixture
def static_registry(static_graph):
    """Registry over the static graph, locale 'en' only."""
    return ProviderRegistry.from_mapping({"en": static_graph})


@pytest.fixture(scope="session")
def faker_registry():
    """Registry backed by real Faker providers, shared across tests."""
    return ProviderRegistry(seed=1234)
