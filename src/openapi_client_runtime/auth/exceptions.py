"""Exceptions for credential resolution.

Example:
    ```python
    from openapi_client_runtime.auth.exceptions import CredentialNotFoundError

    if not api_key:
        raise CredentialNotFoundError("API key not found", env_var_name="OPENAPI_API_KEY_API_KEY")
    ```
"""

from openapi_client_runtime.errors.exceptions import ApiClientError


class CredentialError(ApiClientError):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name
