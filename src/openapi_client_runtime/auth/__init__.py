"""Authentication components for generated API clients.

This module provides:
- A static auth-scheme table (header key, query key, basic, bearer)
- Credential injection into outgoing header/query parameters
- Multi-source credential resolution (value → env → .env → default)

Example:
    ```python
    from openapi_client_runtime.auth import AuthLocation, AuthScheme, Authenticator

    authenticator = Authenticator(configuration, [AuthScheme("api_key", AuthLocation.HEADER, "api_key")])
    authenticator.update_params_for_auth(headers, query, ["api_key"])
    ```
"""

from openapi_client_runtime.auth.credentials import CredentialResolver
from openapi_client_runtime.auth.exceptions import CredentialError, CredentialNotFoundError
from openapi_client_runtime.auth.schemes import AuthLocation, AuthScheme, Authenticator

__all__ = [
    "AuthLocation",
    "AuthScheme",
    "Authenticator",
    "CredentialError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
