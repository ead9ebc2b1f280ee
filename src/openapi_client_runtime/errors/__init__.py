"""Error taxonomy and HTTP status mapping for the client runtime."""

from openapi_client_runtime.errors.exceptions import (
    APIError,
    ApiClientError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    InvalidTypeDescriptorError,
    MissingParameterError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
    TransportError,
    TypeMismatchError,
    UnauthorizedError,
    UnknownModelError,
    UnsupportedFormatError,
    ValidationError,
)
from openapi_client_runtime.errors.handler import raise_for_status
from openapi_client_runtime.errors.models import ProblemDetail

__all__ = [
    "APIError",
    "ApiClientError",
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "ConflictError",
    "ForbiddenError",
    "InvalidTypeDescriptorError",
    "MissingParameterError",
    "NotFoundError",
    "ParseError",
    "ProblemDetail",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "TypeMismatchError",
    "UnauthorizedError",
    "UnknownModelError",
    "UnsupportedFormatError",
    "ValidationError",
    "raise_for_status",
]
