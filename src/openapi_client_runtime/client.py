"""API client facade used by generated endpoint methods.

Generated endpoint methods are thin: they collect their parameters and call
:meth:`ApiClient.call_api`, which builds the request, injects credentials,
sends it through the transport and deserializes the response.

Example:
    ```python
    from openapi_client_runtime import ApiClient, AuthLocation, AuthScheme, Configuration

    client = ApiClient(
        Configuration(host="petstore.example.com", base_path="/v2", api_key={"api_key": "special-key"}),
        registry=registry,
        auth_schemes=[AuthScheme("api_key", AuthLocation.HEADER, "api_key")],
    )

    pet = client.call_api(
        "GET",
        "/pet/{petId}",
        path_params={"petId": 1},
        auth_names=["api_key"],
        accepts=["application/json", "application/xml"],
        return_type="Pet",
    )
    ```
"""

import json
import logging
from collections.abc import Iterable, Mapping, MutableMapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx

from openapi_client_runtime.auth.schemes import AuthScheme, Authenticator
from openapi_client_runtime.collection import CollectionFormat, build_collection_param
from openapi_client_runtime.configuration import Configuration
from openapi_client_runtime.descriptors import TypeDescriptor
from openapi_client_runtime.deserializer import Deserializer
from openapi_client_runtime.errors.exceptions import MissingParameterError, TypeMismatchError
from openapi_client_runtime.errors.handler import raise_for_status
from openapi_client_runtime.models import ModelRegistry
from openapi_client_runtime.negotiation import is_json_mime, select_header_accept, select_header_content_type
from openapi_client_runtime.transport.base import ApiRequest, ApiResponse, Transport, merge_headers
from openapi_client_runtime.transport.httpx_transport import HttpxTransport

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class ApiResult:
    """Deserialized data together with the response status and headers."""

    data: Any
    status_code: int
    headers: httpx.Headers


def _param_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class ApiClient:
    """Single request-execution path for generated endpoint methods.

    Args:
        configuration: Settings for every request. A default Configuration is
            created when omitted.
        transport: Executes requests. Defaults to :class:`HttpxTransport`
            using the configured timeout.
        registry: Model registry used to deserialize and serialize models.
        auth_schemes: The API's static auth-scheme table.
    """

    build_collection_param = staticmethod(build_collection_param)
    select_header_accept = staticmethod(select_header_accept)
    select_header_content_type = staticmethod(select_header_content_type)
    json_mime = staticmethod(is_json_mime)

    def __init__(
        self,
        configuration: Configuration | None = None,
        *,
        transport: Transport | None = None,
        registry: ModelRegistry | None = None,
        auth_schemes: Iterable[AuthScheme] = (),
    ) -> None:
        self.configuration = configuration or Configuration()
        self.transport = transport or HttpxTransport(timeout=self.configuration.timeout)
        self.registry = registry or ModelRegistry()
        self.authenticator = Authenticator(self.configuration, auth_schemes)
        self.deserializer = Deserializer(self.registry)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.transport.close()

    @property
    def default_headers(self) -> httpx.Headers:
        return merge_headers({"User-Agent": self.configuration.user_agent}, self.configuration.default_headers)

    def update_params_for_auth(
        self,
        header_params: MutableMapping[str, Any],
        query_params: MutableMapping[str, Any],
        auth_names: Iterable[str] | None,
    ) -> None:
        self.authenticator.update_params_for_auth(header_params, query_params, auth_names)

    def deserialize(self, response: ApiResponse, return_type: "str | TypeDescriptor") -> Any:
        return self.deserializer.deserialize(response, return_type)

    def object_to_hash(self, model: Any) -> dict[str, Any]:
        """Shallow ``{json_key: value}`` projection of a model, omitting None fields."""
        return self.registry.object_to_hash(model)

    def sanitize_for_serialization(self, value: Any) -> Any:
        """Recursively convert ``value`` into JSON-compatible data.

        Registered models are projected with :meth:`object_to_hash` and then
        sanitized themselves, so nested models are expanded here.
        """
        if value is None or isinstance(value, str | int | float | bool):
            return value
        if isinstance(value, datetime | date):
            return value.isoformat()
        if isinstance(value, Enum):
            return self.sanitize_for_serialization(value.value)
        if isinstance(value, list | tuple):
            return [self.sanitize_for_serialization(item) for item in value]
        if isinstance(value, Mapping):
            return {str(key): self.sanitize_for_serialization(item) for key, item in value.items()}
        if self.registry.is_model(value):
            return self.sanitize_for_serialization(self.object_to_hash(value))
        raise TypeMismatchError(f"cannot serialize {type(value).__name__}", value=value)

    def _encode_param(self, name: str, value: Any, collection_formats: Mapping[str, Any]) -> str | list[str]:
        if isinstance(value, list | tuple):
            return build_collection_param(
                [_param_to_str(item) for item in value],
                collection_formats.get(name, CollectionFormat.CSV),
            )
        return _param_to_str(value)

    def build_request(
        self,
        method: str,
        path: str,
        *,
        path_params: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        header_params: Mapping[str, Any] | None = None,
        form_params: Mapping[str, Any] | None = None,
        body: Any = None,
        auth_names: Iterable[str] | None = None,
        accepts: Sequence[str] | None = None,
        content_types: Sequence[str] | None = None,
        collection_formats: Mapping[str, Any] | None = None,
    ) -> ApiRequest:
        """Assemble an :class:`ApiRequest` without sending it.

        ``None`` parameter values are dropped. List values are encoded with
        the parameter's entry in ``collection_formats`` (default ``csv``);
        ``multi`` is honoured for query parameters only. Header names are
        case-insensitive: a header param replaces a default or negotiated
        header of the same name. ``str`` and ``bytes`` bodies are sent as-is.

        Raises:
            UnsupportedFormatError: If a collection format is unknown.
            MissingParameterError: If a path parameter is None.
            TypeMismatchError: If ``body`` cannot be serialized.
        """
        formats = collection_formats or {}

        for name, value in (path_params or {}).items():
            if value is None:
                raise MissingParameterError(f"path parameter '{name}' is None", param_name=name)
            if isinstance(value, list | tuple):
                value = build_collection_param([_param_to_str(item) for item in value], formats.get(name, "csv"))
            path = path.replace(f"{{{name}}}", quote(_param_to_str(value), safe=""))

        query: dict[str, str | list[str]] = {}
        for name, value in (query_params or {}).items():
            if value is not None:
                query[name] = self._encode_param(name, value, formats)

        headers = self.default_headers
        accept = select_header_accept(accepts)
        if accept:
            headers["Accept"] = accept
        headers["Content-Type"] = select_header_content_type(content_types)
        for name, value in (header_params or {}).items():
            if value is None:
                continue
            encoded = self._encode_param(name, value, formats)
            headers[name] = ",".join(encoded) if isinstance(encoded, list) else encoded

        self.update_params_for_auth(headers, query, auth_names)

        content: str | bytes | None = None
        data: dict[str, str] | None = None
        if form_params:
            data = {name: _param_to_str(value) for name, value in form_params.items() if value is not None}
            if is_json_mime(headers["Content-Type"]):
                headers["Content-Type"] = FORM_CONTENT_TYPE
        elif body is not None:
            if isinstance(body, str | bytes):
                content = body
            else:
                content = json.dumps(self.sanitize_for_serialization(body))

        request = ApiRequest(
            method=method.upper(),
            url=f"{self.configuration.base_url}{path}",
            headers=headers,
            params=query,
            content=content,
            data=data,
            timeout=self.configuration.timeout,
        )
        logger.debug(f"Calling API: {request.method} {request.url}")
        if self.configuration.debugging and (content or data):
            logger.debug(f"HTTP request body param ~BEGIN~\n{content or data}\n~END~")
        return request

    def call_api_with_http_info(
        self,
        method: str,
        path: str,
        *,
        return_type: "str | TypeDescriptor | None" = None,
        **request_options: Any,
    ) -> ApiResult:
        """Send a request and return data, status code and headers.

        Raises:
            APIError: For non-2xx responses (status-specific subclasses).
            TransportError: Passed through from the transport.
            ParseError, TypeMismatchError: From deserialization.
        """
        request = self.build_request(method, path, **request_options)
        response = self.transport.send(request)
        if self.configuration.debugging:
            logger.debug(f"HTTP response body ~BEGIN~\n{response.body}\n~END~")

        raise_for_status(response)
        data = self.deserialize(response, return_type) if return_type is not None else None
        return ApiResult(data=data, status_code=response.status_code, headers=response.headers)

    def call_api(
        self,
        method: str,
        path: str,
        *,
        return_type: "str | TypeDescriptor | None" = None,
        **request_options: Any,
    ) -> Any:
        """Send a request and return the deserialized response data."""
        return self.call_api_with_http_info(method, path, return_type=return_type, **request_options).data
