"""Auth scheme table and request parameter injection.

Each API declares its security schemes once, as a static table of
:class:`AuthScheme` entries. Endpoint methods then list the scheme names they
accept, and :meth:`Authenticator.update_params_for_auth` adds whatever
credentials the :class:`~openapi_client_runtime.configuration.Configuration`
holds for those schemes.

Example:
    ```python
    AUTH_SCHEMES = [
        AuthScheme("api_key", AuthLocation.HEADER, "api_key"),
        AuthScheme("basic", AuthLocation.BASIC),
    ]

    authenticator = Authenticator(configuration, AUTH_SCHEMES)
    headers, query = {}, {}
    authenticator.update_params_for_auth(headers, query, ["api_key", "unknown"])
    ```
"""

import logging
from collections.abc import Iterable, MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from openapi_client_runtime.configuration import Configuration

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"


class AuthLocation(str, Enum):
    """Where a scheme places its credential."""

    HEADER = "header"
    QUERY = "query"
    BASIC = "basic"
    BEARER = "bearer"


@dataclass(frozen=True)
class AuthScheme:
    """A named security scheme.

    Attributes:
        name: Scheme name used by endpoints and as the key into the
            Configuration's ``api_key``/``api_key_prefix`` maps.
        location: Header key, query key, HTTP basic or bearer token.
        param_name: Header or query parameter name. Basic and bearer schemes
            always use ``Authorization``.
    """

    name: str
    location: AuthLocation
    param_name: str = AUTHORIZATION_HEADER


class Authenticator:
    """Inject credentials for named auth schemes into request parameters."""

    def __init__(self, configuration: "Configuration", schemes: Iterable[AuthScheme] = ()) -> None:
        self.configuration = configuration
        self.schemes: dict[str, AuthScheme] = {scheme.name: scheme for scheme in schemes}

    def credential_for(self, scheme: AuthScheme) -> str | None:
        """Return the header/query value for ``scheme``, or None if unconfigured."""
        config = self.configuration
        if scheme.location in (AuthLocation.HEADER, AuthLocation.QUERY):
            return config.api_key_with_prefix(scheme.name)
        if scheme.location is AuthLocation.BASIC:
            return config.basic_auth_token()
        if scheme.location is AuthLocation.BEARER:
            return f"Bearer {config.access_token}" if config.access_token else None
        return None

    def update_params_for_auth(
        self,
        header_params: MutableMapping[str, Any],
        query_params: MutableMapping[str, Any],
        auth_names: Iterable[str] | None,
    ) -> None:
        """Add credentials for ``auth_names`` to the given mappings in place.

        Unknown scheme names and schemes without a configured credential are
        skipped.
        """
        for name in auth_names or ():
            scheme = self.schemes.get(name)
            if scheme is None:
                logger.debug(f"Skipping unknown auth scheme '{name}'")
                continue

            value = self.credential_for(scheme)
            if value is None:
                logger.debug(f"No credential configured for auth scheme '{name}'")
                continue

            if scheme.location is AuthLocation.QUERY:
                query_params[scheme.param_name] = value
            elif scheme.location is AuthLocation.HEADER:
                header_params[scheme.param_name] = value
            else:
                header_params[AUTHORIZATION_HEADER] = value
