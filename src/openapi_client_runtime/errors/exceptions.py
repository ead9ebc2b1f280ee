"""Structured exceptions raised by the client runtime."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from openapi_client_runtime.errors.models import ProblemDetail
    from openapi_client_runtime.transport.base import ApiResponse


class ApiClientError(Exception):
    """Base exception for every error raised by the runtime."""

    pass


class ConfigurationError(ApiClientError):
    """Raised when a Configuration is constructed with invalid settings."""

    pass


class UnsupportedFormatError(ApiClientError, ValueError):
    """Raised for an unknown collection format name."""

    def __init__(self, message: str, collection_format: Any = None):
        super().__init__(message)
        self.collection_format = collection_format


class MissingParameterError(ApiClientError, ValueError):
    """Raised when a path parameter has no value."""

    def __init__(self, message: str, param_name: str | None = None):
        super().__init__(message)
        self.param_name = param_name


class InvalidTypeDescriptorError(ApiClientError, ValueError):
    """Raised when a type descriptor string cannot be parsed."""

    pass


class ParseError(ApiClientError):
    """Raised when a JSON response body cannot be decoded."""

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class TypeMismatchError(ApiClientError, TypeError):
    """Raised when decoded data does not match the declared type descriptor."""

    def __init__(self, message: str, descriptor: Any = None, value: Any = None):
        super().__init__(message)
        self.descriptor = descriptor
        self.value = value


class UnknownModelError(ApiClientError, LookupError):
    """Raised when a model name or instance is not in the model registry."""

    def __init__(self, message: str, model_name: str | None = None):
        super().__init__(message)
        self.model_name = model_name


class TransportError(ApiClientError):
    """Raised by a transport when the request could not be completed."""

    pass


class APIError(ApiClientError):
    """Base exception for non-2xx API responses."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "ApiResponse | None" = None,
        problem_detail: "ProblemDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.problem_detail = problem_detail


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, validation_errors: list[dict] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
