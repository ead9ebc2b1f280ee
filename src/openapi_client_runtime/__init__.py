"""OpenAPI Client Runtime - shared runtime for generated REST/JSON API clients.

Generated endpoint methods delegate to this library for:
- Configuration (host/base path normalization, credentials, default headers)
- Auth parameter injection (header key, query key, basic, bearer)
- Collection parameter encoding and content negotiation
- Response deserialization into primitives, containers and registered models

Example:
    ```python
    from openapi_client_runtime import ApiClient, Configuration, ModelRegistry

    registry = ModelRegistry()
    client = ApiClient(Configuration(host="api.example.com", base_path="v1"), registry=registry)

    pets = client.call_api("GET", "/pets", accepts=["application/json"], return_type="Array<Pet>")
    ```
"""

__version__ = "0.1.0"

from openapi_client_runtime.auth import AuthLocation, AuthScheme, Authenticator, CredentialResolver  # noqa: E402
from openapi_client_runtime.client import ApiClient, ApiResult  # noqa: E402
from openapi_client_runtime.collection import CollectionFormat, build_collection_param  # noqa: E402
from openapi_client_runtime.configuration import Configuration  # noqa: E402
from openapi_client_runtime.descriptors import parse_type_descriptor  # noqa: E402
from openapi_client_runtime.deserializer import Deserializer  # noqa: E402
from openapi_client_runtime.models import ModelField, ModelRegistry  # noqa: E402
from openapi_client_runtime.negotiation import (  # noqa: E402
    is_json_mime,
    select_header_accept,
    select_header_content_type,
)
from openapi_client_runtime.transport import ApiRequest, ApiResponse, HttpxTransport, Transport  # noqa: E402

__all__ = [
    "ApiClient",
    "ApiRequest",
    "ApiResponse",
    "ApiResult",
    "AuthLocation",
    "AuthScheme",
    "Authenticator",
    "CollectionFormat",
    "Configuration",
    "CredentialResolver",
    "Deserializer",
    "HttpxTransport",
    "ModelField",
    "ModelRegistry",
    "Transport",
    "__version__",
    "build_collection_param",
    "is_json_mime",
    "parse_type_descriptor",
    "select_header_accept",
    "select_header_content_type",
]
