"""Request/response value types and the transport contract.

The facade assembles an :class:`ApiRequest`, hands it to a :class:`Transport`
and receives an :class:`ApiResponse` back. Anything that implements ``send``
and ``close`` can act as the transport; :class:`HttpxTransport` is the default.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import httpx


@dataclass
class ApiRequest:
    """A fully assembled HTTP request, ready for a transport.

    Headers are held in :class:`httpx.Headers`, so setting ``content-type``
    replaces an existing ``Content-Type``.
    """

    method: str
    url: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    params: dict[str, str | list[str]] = field(default_factory=dict)
    content: str | bytes | None = None
    data: dict[str, str] | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            self.headers = httpx.Headers(self.headers or {})


@dataclass(frozen=True)
class ApiResponse:
    """Read-only view of a transport response.

    Headers are stored as :class:`httpx.Headers` so lookups such as
    ``response.headers["content-type"]`` are case-insensitive.
    """

    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    body: str = ""
    content: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, httpx.Headers):
            object.__setattr__(self, "headers", httpx.Headers(self.headers or {}))
        if not self.content and self.body:
            object.__setattr__(self, "content", self.body.encode("utf-8"))

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")


@runtime_checkable
class Transport(Protocol):
    """Anything able to execute an :class:`ApiRequest`."""

    def send(self, request: ApiRequest) -> ApiResponse: ...

    def close(self) -> None: ...


def response_from_httpx(response: httpx.Response) -> ApiResponse:
    """Build an :class:`ApiResponse` from an ``httpx.Response``."""
    return ApiResponse(
        status_code=response.status_code,
        headers=response.headers,
        body=response.text,
        content=response.content,
    )


def merge_headers(*sources: Mapping[str, str] | None) -> httpx.Headers:
    """Merge header mappings left to right, later sources winning regardless of case."""
    merged = httpx.Headers()
    for source in sources:
        if source:
            merged.update(source)
    return merged
