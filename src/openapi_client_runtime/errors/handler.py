"""Map non-2xx responses to exceptions."""

from openapi_client_runtime.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from openapi_client_runtime.errors.models import ProblemDetail
from openapi_client_runtime.transport.base import ApiResponse

STATUS_EXCEPTIONS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def exception_class_for(status_code: int) -> type[APIError]:
    if status_code in STATUS_EXCEPTIONS:
        return STATUS_EXCEPTIONS[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def raise_for_status(response: ApiResponse) -> None:
    """Raise the exception matching ``response``'s status code.

    RFC 7807 problem details are used for the message when present; otherwise
    the message is the status code plus the first 200 characters of the body.

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    status_code = response.status_code
    exc_class = exception_class_for(status_code)
    problem_detail = ProblemDetail.from_response(response)

    if problem_detail:
        message = problem_detail.to_exception_message()
    else:
        response_text = response.body[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    kwargs = {"status_code": status_code, "response": response, "problem_detail": problem_detail}

    if exc_class is RateLimitError:
        retry_after = None
        try:
            retry_after = int(response.headers["retry-after"])
        except (KeyError, ValueError):
            pass
        raise RateLimitError(message, retry_after=retry_after, **kwargs)

    if exc_class is ValidationError:
        validation_errors = None
        if problem_detail and problem_detail.extensions:
            if "errors" in problem_detail.extensions:
                validation_errors = problem_detail.extensions["errors"]
            else:
                validation_errors = problem_detail.extensions.get("validation_errors")
        raise ValidationError(message, validation_errors=validation_errors, **kwargs)

    raise exc_class(message, **kwargs)
