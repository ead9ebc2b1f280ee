"""Credential and setting resolution from the environment.

Values used to build a :class:`~openapi_client_runtime.configuration.Configuration`
can come from several places. The resolver checks them in priority order:

1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment once)
4. Default value

Environment variable names are derived from a prefix and, for per-scheme API
keys, the auth scheme name::

    resolver = CredentialResolver(prefix="PETSTORE_")
    resolver.env_var_name("HOST")  # "PETSTORE_HOST"
    resolver.scheme_env_var_name("api_key")  # "PETSTORE_API_KEY_API_KEY"
    resolver.scheme_env_var_name("api_key", prefix=True)  # "PETSTORE_API_KEY_PREFIX_API_KEY"

Credential values are never logged; only their source is.
"""

import logging
import os
import re
from threading import Lock

from dotenv import load_dotenv

from openapi_client_runtime.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_ENV_PREFIX = "OPENAPI_"

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


class CredentialResolver:
    """Resolve settings and credentials with priority ordering.

    Args:
        prefix: Prefix for every environment variable name.
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load a .env file at all.
    """

    def __init__(
        self,
        prefix: str = DEFAULT_ENV_PREFIX,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ):
        self.prefix = prefix
        self._dotenv_path = dotenv_path
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            # Existing environment variables are not overridden.
            load_dotenv(dotenv_path=self._dotenv_path)
            self._dotenv_loaded = True
            logger.debug("Loaded .env file for credential resolution")

    def env_var_name(self, suffix: str) -> str:
        return f"{self.prefix}{suffix}"

    def scheme_env_var_name(self, scheme_name: str, *, prefix: bool = False) -> str:
        """Environment variable holding the API key (or its prefix) for a scheme."""
        normalized = _NON_ALNUM.sub("_", scheme_name).strip("_").upper()
        kind = "API_KEY_PREFIX" if prefix else "API_KEY"
        return self.env_var_name(f"{kind}_{normalized}")

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Resolve a single value.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Full environment variable name to check.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None when unresolved.
            secret: Mask the value in log messages.

        Raises:
            CredentialNotFoundError: If ``required`` and nothing was found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if secret else result
            logger.debug(f"Resolved {env_var_name or 'value'} from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_setting(self, suffix: str, value: str | None = None, default: str | None = None) -> str | None:
        """Resolve a non-secret setting such as ``HOST`` or ``BASE_PATH``."""
        return self.resolve(value=value, env_var_name=self.env_var_name(suffix), default=default, secret=False)

    def resolve_api_keys(self, scheme_names: list[str] | tuple[str, ...]) -> tuple[dict[str, str], dict[str, str]]:
        """Resolve API keys and key prefixes for each named auth scheme.

        Returns:
            ``(api_key, api_key_prefix)`` mappings containing only the schemes
            for which a value was found.
        """
        api_key: dict[str, str] = {}
        api_key_prefix: dict[str, str] = {}
        for name in scheme_names:
            key = self.resolve(env_var_name=self.scheme_env_var_name(name))
            if key is not None:
                api_key[name] = key
            key_prefix = self.resolve(env_var_name=self.scheme_env_var_name(name, prefix=True), secret=False)
            if key_prefix is not None:
                api_key_prefix[name] = key_prefix
        return api_key, api_key_prefix
