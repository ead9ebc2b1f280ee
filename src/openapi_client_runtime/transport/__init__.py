"""Transport contract and the default httpx-backed implementation.

The runtime never performs I/O itself. The facade builds an ``ApiRequest``
and hands it to any object implementing the ``Transport`` protocol:

Modules:
    base: Request/response value types and the ``Transport`` protocol
    httpx_transport: ``HttpxTransport``, a thin adapter over ``httpx.Client``

Example:
    ```python
    from openapi_client_runtime import ApiClient
    from openapi_client_runtime.transport import HttpxTransport

    client = ApiClient(transport=HttpxTransport(timeout=10.0))
    ```
"""

from openapi_client_runtime.transport.base import ApiRequest, ApiResponse, Transport
from openapi_client_runtime.transport.httpx_transport import HttpxTransport

__all__ = ["ApiRequest", "ApiResponse", "HttpxTransport", "Transport"]
