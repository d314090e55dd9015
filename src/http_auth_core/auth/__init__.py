"""Authentication components for HTTP clients.

This module provides:
- RFC 2617 Basic credentials resolved from ``WWW-Authenticate`` challenges
- Per-realm configuration lookup (mapping, environment, .env, chains)
- A scheme abstraction and dispatcher for plugging in further schemes

Example:
    ```python
    from http_auth_core.auth import BasicAuthResolver, EnvConfigProvider

    resolver = BasicAuthResolver(config=EnvConfigProvider())
    creds = resolver.resolve('Basic realm="intranet"')
    if creds is not None:
        print(creds.credential_header)
    ```
"""

from http_auth_core.auth.basic import (
    BASIC_CHALLENGE_PATTERN,
    BasicAuthResolver,
    BasicCredentials,
    parse_realm,
)
from http_auth_core.auth.config import (
    ChainedConfigProvider,
    ConfigProvider,
    EnvConfigProvider,
    MappingConfigProvider,
    password_key,
    user_key,
)
from http_auth_core.auth.exceptions import (
    CredentialError,
    CredentialNotFoundError,
    MalformedChallengeError,
)
from http_auth_core.auth.scheme import AuthHandle, AuthScheme, AuthSchemeDispatcher

__all__ = [
    "BASIC_CHALLENGE_PATTERN",
    "AuthHandle",
    "AuthScheme",
    "AuthSchemeDispatcher",
    "BasicAuthResolver",
    "BasicCredentials",
    "ChainedConfigProvider",
    "ConfigProvider",
    "CredentialError",
    "CredentialNotFoundError",
    "EnvConfigProvider",
    "MalformedChallengeError",
    "MappingConfigProvider",
    "parse_realm",
    "password_key",
    "user_key",
]
