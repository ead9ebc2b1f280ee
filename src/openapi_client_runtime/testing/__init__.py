"""Testing utilities for generated clients.

Provides an in-memory transport and response factories so endpoint code can
be exercised without a network.

Example:
    ```python
    from openapi_client_runtime import ApiClient
    from openapi_client_runtime.testing import StubTransport, create_error_response, create_mock_response


    def test_get_pet_handles_404():
        transport = StubTransport([create_error_response(404)])
        client = ApiClient(transport=transport)
        ...
        assert transport.requests[0].method == "GET"
    ```
"""

import json
from collections.abc import Callable, Iterable
from typing import Any

from openapi_client_runtime.transport.base import ApiRequest, ApiResponse

__all__ = ["StubTransport", "create_error_response", "create_mock_response"]


def create_mock_response(
    data: Any = None,
    *,
    status_code: int = 200,
    body: str | None = None,
    content_type: str | None = "application/json",
    headers: dict[str, str] | None = None,
) -> ApiResponse:
    """Build an :class:`ApiResponse`; ``data`` is JSON-encoded unless ``body`` is given."""
    response_headers = dict(headers or {})
    if content_type is not None:
        response_headers.setdefault("Content-Type", content_type)
    if body is None:
        body = "" if data is None else json.dumps(data)
    return ApiResponse(status_code=status_code, headers=response_headers, body=body)


def create_error_response(status_code: int, detail: str | None = None, **problem: Any) -> ApiResponse:
    """Build an RFC 7807 error response for ``status_code``."""
    payload = {"status": status_code, **problem}
    if detail is not None:
        payload["detail"] = detail
    return create_mock_response(payload, status_code=status_code, content_type="application/problem+json")


class StubTransport:
    """Transport that records requests and replays canned responses.

    Args:
        responses: Responses returned in order, one per request.
        handler: Callable producing a response for each request. Used once
            ``responses`` is exhausted.
    """

    def __init__(
        self,
        responses: Iterable[ApiResponse] = (),
        handler: Callable[[ApiRequest], ApiResponse] | None = None,
    ) -> None:
        self._responses = list(responses)
        self._handler = handler
        self.requests: list[ApiRequest] = []
        self.closed = False

    def enqueue(self, *responses: ApiResponse) -> None:
        self._responses.extend(responses)

    def send(self, request: ApiRequest) -> ApiResponse:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        if self._handler is not None:
            return self._handler(request)
        raise AssertionError(f"unexpected request: {request.method} {request.url}")

    def close(self) -> None:
        self.closed = True
