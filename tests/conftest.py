"""Pytest configuration and shared fixtures for openapi-client-runtime tests."""

from dataclasses import dataclass, field
from types import SimpleNamespace

import pytest

from openapi_client_runtime import ApiClient, AuthLocation, AuthScheme, Configuration, ModelField, ModelRegistry
from openapi_client_runtime.testing import StubTransport


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing environment-based configuration.
    """
    import os

    test_prefixes = ("TEST_", "API_", "CLIENT_", "OPENAPI_", "PETSTORE_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@dataclass
class Category:
    id: int | None = None
    name: str | None = None


@dataclass
class Tag:
    id: int | None = None
    name: str | None = None


@dataclass
class Pet:
    id: int | None = None
    category: Category | None = None
    name: str | None = None
    photo_urls: list[str] | None = None
    tags: list[Tag] | None = None
    status: str | None = None
    nickname: str = "unnamed"


@dataclass
class Order:
    id: int | None = None
    pet_id: int | None = None
    quantity: int | None = None
    ship_date: object = None
    complete: bool | None = None
    metadata: dict = field(default_factory=dict)


def build_petstore_registry() -> ModelRegistry:
    registry = ModelRegistry()
    registry.register("Category", Category, [ModelField("id", "Integer"), ModelField("name", "String")])
    registry.register("Tag", Tag, [ModelField("id", "Integer"), ModelField("name", "String")])
    registry.register(
        "Pet",
        Pet,
        [
            ModelField("id", "Integer"),
            ModelField("category", "Category"),
            ModelField("name", "String"),
            ModelField("photo_urls", "Array<String>", json_key="photoUrls"),
            ModelField("tags", "Array<Tag>"),
            ModelField("status", "String"),
            ModelField("nickname", "String"),
        ],
    )
    registry.register(
        "Order",
        Order,
        [
            ModelField("id", "Integer"),
            ModelField("pet_id", "Integer", json_key="petId"),
            ModelField("quantity", "Integer"),
            ModelField("ship_date", "DateTime", json_key="shipDate"),
            ModelField("complete", "Boolean"),
            ModelField("metadata", "Hash<String, Object>"),
        ],
    )
    return registry


PETSTORE_AUTH_SCHEMES = [
    AuthScheme("api_key", AuthLocation.HEADER, "api_key"),
    AuthScheme("api_key_query", AuthLocation.QUERY, "api_key"),
    AuthScheme("basic", AuthLocation.BASIC),
    AuthScheme("petstore_auth", AuthLocation.BEARER),
]


@pytest.fixture
def registry():
    return build_petstore_registry()


@pytest.fixture
def models():
    """Petstore model classes, for building and checking instances."""
    return SimpleNamespace(Category=Category, Tag=Tag, Pet=Pet, Order=Order)


@pytest.fixture
def configuration():
    return Configuration(host="petstore.example.com", base_path="/v2")


@pytest.fixture
def stub_transport():
    return StubTransport()


@pytest.fixture
def api_client(configuration, registry, stub_transport):
    return ApiClient(
        configuration,
        transport=stub_transport,
        registry=registry,
        auth_schemes=PETSTORE_AUTH_SCHEMES,
    )
