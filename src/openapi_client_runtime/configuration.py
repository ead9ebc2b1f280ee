"""Client configuration: endpoint location, credentials and defaults.

A :class:`Configuration` is created once and held by the
:class:`~openapi_client_runtime.client.ApiClient` for its whole lifetime.
It is plain shared state: concurrent requests may read it freely, but
changing it while requests are being built is the caller's responsibility to
guard (nothing here takes a lock).

Example:
    ```python
    from openapi_client_runtime import Configuration

    config = Configuration(host="https://petstore.example.com/ignored", base_path="v2")
    config.host  # "petstore.example.com"
    config.base_url  # "https://petstore.example.com/v2"

    config.api_key["api_key"] = "special-key"
    config.api_key_prefix["api_key"] = "Token"

    # Or from OPENAPI_* environment variables / .env
    config = Configuration.from_env(auth_names=["api_key"])
    ```
"""

import base64
import logging
import re
from collections.abc import Iterable, Mapping

from openapi_client_runtime import __version__
from openapi_client_runtime.auth.credentials import DEFAULT_ENV_PREFIX, CredentialResolver
from openapi_client_runtime.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = frozenset(["http", "https"])

DEFAULT_USER_AGENT = f"openapi-client-runtime/{__version__}/python"

_SCHEME_PREFIX = re.compile(r"^https?://")


def set_host(raw: str | None) -> str:
    """Normalize a host: drop a leading ``http://``/``https://`` and any path."""
    host = _SCHEME_PREFIX.sub("", raw or "", count=1)
    return host.split("/", 1)[0]


def set_base_path(raw: str | None) -> str:
    """Normalize a base path: ``None`` becomes ``""``, otherwise ensure a leading ``/``."""
    if raw is None:
        return ""
    return raw if raw.startswith("/") else f"/{raw}"


class Configuration:
    """Settings shared by every request made through one client.

    Args:
        host: Host name, optionally with port. Scheme prefixes and paths are
            stripped.
        base_path: Path prefix for every endpoint.
        scheme: ``http`` or ``https``.
        api_key: Auth scheme name to API key.
        api_key_prefix: Auth scheme name to key prefix (e.g. ``Token``).
        username: Username for HTTP basic auth.
        password: Password for HTTP basic auth.
        access_token: Token for bearer auth.
        default_headers: Headers added to every request.
        timeout: Request timeout in seconds, None for no timeout.
        user_agent: Value of the ``User-Agent`` header.
        debugging: Log request and response bodies at DEBUG level.

    Raises:
        ConfigurationError: If ``scheme`` or ``timeout`` is invalid.
    """

    def __init__(
        self,
        *,
        host: str = "localhost",
        base_path: str | None = None,
        scheme: str = "https",
        api_key: Mapping[str, str] | None = None,
        api_key_prefix: Mapping[str, str | None] | None = None,
        username: str | None = None,
        password: str | None = None,
        access_token: str | None = None,
        default_headers: Mapping[str, str] | None = None,
        timeout: float | None = 30.0,
        user_agent: str = DEFAULT_USER_AGENT,
        debugging: bool = False,
    ) -> None:
        if scheme not in SUPPORTED_SCHEMES:
            raise ConfigurationError(f"unsupported scheme {scheme!r}, expected one of {sorted(SUPPORTED_SCHEMES)}")
        if timeout is not None and timeout < 0:
            raise ConfigurationError(f"timeout must be non-negative, got {timeout}")

        self.scheme = scheme
        self.host = host
        self.base_path = base_path
        self.api_key: dict[str, str] = dict(api_key or {})
        self.api_key_prefix: dict[str, str | None] = dict(api_key_prefix or {})
        self.username = username
        self.password = password
        self.access_token = access_token
        self.default_headers: dict[str, str] = dict(default_headers or {})
        self.timeout = timeout
        self.user_agent = user_agent
        self.debugging = debugging

    @property
    def host(self) -> str:
        return self._host

    @host.setter
    def host(self, value: str | None) -> None:
        self._host = set_host(value)

    @property
    def base_path(self) -> str:
        return self._base_path

    @base_path.setter
    def base_path(self, value: str | None) -> None:
        self._base_path = set_base_path(value)

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}{self.base_path}"

    def api_key_with_prefix(self, name: str) -> str | None:
        """Return the API key for scheme ``name``, prefixed when a prefix is set."""
        key = self.api_key.get(name)
        if key is None:
            return None
        prefix = self.api_key_prefix.get(name)
        return f"{prefix} {key}" if prefix else key

    def basic_auth_token(self) -> str | None:
        """Return the ``Authorization`` value for HTTP basic auth."""
        if self.username is None and self.password is None:
            return None
        credentials = f"{self.username or ''}:{self.password or ''}".encode()
        return "Basic " + base64.b64encode(credentials).decode("ascii")

    @classmethod
    def from_env(
        cls,
        *,
        prefix: str = DEFAULT_ENV_PREFIX,
        auth_names: Iterable[str] = (),
        resolver: CredentialResolver | None = None,
        **overrides,
    ) -> "Configuration":
        """Build a Configuration from ``{prefix}*`` environment variables.

        Keyword ``overrides`` take priority over the environment. API keys are
        read for every scheme in ``auth_names`` from
        ``{prefix}API_KEY_{SCHEME}`` and ``{prefix}API_KEY_PREFIX_{SCHEME}``.
        """
        resolver = resolver or CredentialResolver(prefix=prefix)

        settings = {}
        for option, suffix in (("host", "HOST"), ("base_path", "BASE_PATH"), ("scheme", "SCHEME")):
            value = resolver.resolve_setting(suffix)
            if value is not None:
                settings[option] = value
        for option, suffix in (("username", "USERNAME"), ("password", "PASSWORD"), ("access_token", "ACCESS_TOKEN")):
            value = resolver.resolve(env_var_name=resolver.env_var_name(suffix))
            if value is not None:
                settings[option] = value

        timeout = resolver.resolve_setting("TIMEOUT")
        if timeout is not None:
            try:
                settings["timeout"] = float(timeout)
            except ValueError:
                raise ConfigurationError(f"invalid {resolver.env_var_name('TIMEOUT')}: {timeout!r}") from None

        api_key, api_key_prefix = resolver.resolve_api_keys(tuple(auth_names))
        settings["api_key"] = api_key
        settings["api_key_prefix"] = api_key_prefix

        settings.update(overrides)
        logger.debug(f"Built configuration from environment (prefix {prefix!r})")
        return cls(**settings)

    def __repr__(self) -> str:
        return (
            f"Configuration(base_url={self.base_url!r}, api_key_schemes={sorted(self.api_key)}, "
            f"timeout={self.timeout!r})"
        )
