"""Configuration providers for per-realm credentials.

Basic credentials are looked up by key:

- ``http.auth.basic.<realm>.user``
- ``http.auth.basic.<realm>.password``

Any object with a ``get(key) -> str | None`` method can serve as a provider,
so a plain ``dict`` works out of the box. This module adds providers backed
by the environment (with optional ``.env`` loading via python-dotenv) and a
chain that combines several sources with priority ordering.

Example:
    ```python
    from http_auth_core.auth.config import ChainedConfigProvider, EnvConfigProvider

    config = ChainedConfigProvider(
        {"http.auth.basic.intranet.user": "alice"},
        EnvConfigProvider(dotenv_path="/app/.env"),
    )
    config.get("http.auth.basic.intranet.password")
    ```

Security Considerations:
    - Values are never logged, only the key and the source
    - Thread-safe dotenv loading with lock
"""

import logging
import os
from collections.abc import Mapping
from threading import Lock
from typing import Protocol, runtime_checkable

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BASIC_KEY_PREFIX = "http.auth.basic"


def user_key(realm: str) -> str:
    """Return the configuration key holding the username for ``realm``."""
    return f"{BASIC_KEY_PREFIX}.{realm}.user"


def password_key(realm: str) -> str:
    """Return the configuration key holding the password for ``realm``."""
    return f"{BASIC_KEY_PREFIX}.{realm}.password"


@runtime_checkable
class ConfigProvider(Protocol):
    """Key-value string lookup. Returns ``None`` for missing keys, never raises."""

    def get(self, key: str) -> str | None: ...


class MappingConfigProvider:
    """Serve configuration values from an in-memory mapping."""

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)


class EnvConfigProvider:
    """Serve configuration values from environment variables.

    Keys are translated to variable names by replacing dots and dashes with
    underscores and upper-casing, so ``http.auth.basic.intranet.user`` is read
    from ``HTTP_AUTH_BASIC_INTRANET_USER``. An optional ``prefix`` is prepended
    verbatim (``prefix="MYAPP_"`` gives ``MYAPP_HTTP_AUTH_BASIC_...``).

    Attributes:
        _dotenv_loaded: Whether .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True, prefix: str = ""):
        """Initialize the environment provider.

        Args:
            dotenv_path: Path to .env file. If None, searches parent directories
                for .env file (default behavior of python-dotenv).
            load_dotenv: Whether to load .env file. Set to False to read only
                the process environment.
            prefix: String prepended to every translated variable name.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv
        self.prefix = prefix

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        """Load the .env file once (thread-safe)."""
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            # Double-check pattern for thread safety
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential configuration")
            except Exception as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def env_var_name(self, key: str) -> str:
        """Translate a dotted configuration key into an environment variable name."""
        return self.prefix + key.replace(".", "_").replace("-", "_").upper()

    def get(self, key: str) -> str | None:
        name = self.env_var_name(key)
        value = os.environ.get(name)
        if value is not None:
            logger.debug(f"Resolved '{key}' from environment variable '{name}'")
        return value


class ChainedConfigProvider:
    """Query several providers in order; the first non-``None`` value wins."""

    def __init__(self, *providers: ConfigProvider):
        self.providers = list(providers)

    def get(self, key: str) -> str | None:
        for provider in self.providers:
            value = provider.get(key)
            if value is not None:
                return value
        return None
