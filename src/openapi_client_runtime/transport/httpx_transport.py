"""Default transport backed by ``httpx.Client``.

The adapter only moves bytes: it performs no retries and configures no TLS or
pooling policy of its own. Pass a pre-built ``httpx.Client`` to control those,
or an ``httpx.BaseTransport`` (e.g. ``httpx.MockTransport``) for tests.

Example:
    ```python
    import httpx

    from openapi_client_runtime.transport import HttpxTransport

    transport = HttpxTransport(transport=httpx.MockTransport(handler))
    ```
"""

import logging

import httpx

from openapi_client_runtime.errors.exceptions import TransportError
from openapi_client_runtime.transport.base import ApiRequest, ApiResponse, response_from_httpx

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Execute :class:`ApiRequest` objects with a synchronous ``httpx.Client``.

    Args:
        client: Existing client to use. When given, the caller owns its
            lifetime and :meth:`close` leaves it open.
        transport: Low-level httpx transport for a client created here.
        timeout: Default timeout for a client created here.
    """

    def __init__(
        self,
        *,
        client: httpx.Client | None = None,
        transport: httpx.BaseTransport | None = None,
        timeout: float | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(transport=transport, timeout=timeout)

    def send(self, request: ApiRequest) -> ApiResponse:
        kwargs = {}
        if request.timeout is not None:
            kwargs["timeout"] = request.timeout
        try:
            response = self._client.request(
                request.method,
                request.url,
                params=request.params or None,
                headers=request.headers,
                content=request.content,
                data=request.data,
                **kwargs,
            )
        except httpx.TransportError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

        logger.debug(f"{request.method} {response.request.url} -> {response.status_code}")
        return response_from_httpx(response)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
