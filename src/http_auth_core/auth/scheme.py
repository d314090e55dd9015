"""Authentication scheme abstraction and dispatch.

An :class:`AuthScheme` knows how to recognise one kind of
``WWW-Authenticate`` challenge and turn it into an :class:`AuthHandle`
carrying a ready-to-send ``Authorization`` header. The
:class:`AuthSchemeDispatcher` asks each registered scheme in turn whether it
matches a challenge and resolves through the first one that does.

Example:
    ```python
    from http_auth_core.auth import AuthSchemeDispatcher, BasicAuthResolver

    dispatcher = AuthSchemeDispatcher([BasicAuthResolver()])
    handle = dispatcher.authorize('Basic realm="intranet"', config)
    if handle is not None:
        headers["Authorization"] = handle.header_value
    ```
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Protocol

from http_auth_core.auth.config import ConfigProvider

logger = logging.getLogger(__name__)


class AuthHandle(Protocol):
    """Resolved credentials for one realm."""

    @property
    def realm(self) -> str: ...

    @property
    def credential_header(self) -> str:
        """Full header line, e.g. ``Authorization: Basic QWxh...``."""
        ...

    @property
    def header_value(self) -> str:
        """Header value only, e.g. ``Basic QWxh...``."""
        ...


class AuthScheme(ABC):
    """Base class for authentication schemes.

    Subclasses provide:

    1. A :attr:`scheme` property naming the scheme (``"basic"``, ``"digest"``...).
    2. :meth:`matches`, a pure predicate on the challenge string.
    3. :meth:`resolve`, which returns a handle or ``None`` when credentials
       cannot be produced. It must not raise for malformed challenges or
       missing configuration.
    """

    @property
    @abstractmethod
    def scheme(self) -> str:
        """Return the lowercase scheme name this implementation handles."""
        ...

    @abstractmethod
    def matches(self, challenge: str | None) -> bool:
        """Return True if this scheme can handle ``challenge``."""
        ...

    @abstractmethod
    def resolve(self, challenge: str | None, config: ConfigProvider | None = None) -> AuthHandle | None:
        """Resolve ``challenge`` into a handle, or ``None`` if unavailable."""
        ...


class AuthSchemeDispatcher:
    """Pick the first registered scheme matching a challenge."""

    def __init__(self, schemes: Iterable[AuthScheme] | None = None):
        self._schemes: list[AuthScheme] = list(schemes or [])

    @property
    def schemes(self) -> list[AuthScheme]:
        return list(self._schemes)

    def register(self, scheme: AuthScheme) -> None:
        self._schemes.append(scheme)

    def select(self, challenge: str | None) -> AuthScheme | None:
        for scheme in self._schemes:
            if scheme.matches(challenge):
                return scheme
        return None

    def authorize(self, challenge: str | None, config: ConfigProvider | None = None) -> AuthHandle | None:
        """Resolve ``challenge`` through the first matching scheme.

        A matching scheme that cannot produce credentials ends the search;
        the caller proceeds without an ``Authorization`` header.

        Args:
            challenge: Contents of a ``WWW-Authenticate`` header.
            config: Configuration passed through to the scheme.

        Returns:
            The scheme's handle, or None.
        """
        scheme = self.select(challenge)
        if scheme is None:
            logger.debug(f"No authentication scheme matches challenge {challenge!r}")
            return None

        handle = scheme.resolve(challenge, config)
        if handle is None:
            logger.debug(f"Scheme '{scheme.scheme}' could not provide credentials for {challenge!r}")
        else:
            logger.debug(f"Scheme '{scheme.scheme}' provided credentials for realm '{handle.realm}'")
        return handle

    def authorize_any(
        self, challenges: Iterable[str], config: ConfigProvider | None = None
    ) -> AuthHandle | None:
        """Try each challenge in order (one per ``WWW-Authenticate`` header)."""
        for challenge in challenges:
            handle = self.authorize(challenge, config)
            if handle is not None:
                return handle
        return None
