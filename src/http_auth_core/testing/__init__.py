"""Testing utilities for code that resolves HTTP credentials.

Example:
    ```python
    from http_auth_core.auth import BasicAuthResolver
    from http_auth_core.testing import RecordingConfigProvider, basic_challenge


    def test_realm_is_looked_up_once():
        config = RecordingConfigProvider.for_realm("intranet", "alice", "s3cret")
        resolver = BasicAuthResolver()

        resolver.resolve(basic_challenge("intranet"), config)
        resolver.resolve(basic_challenge("intranet"), config)

        assert config.lookups == 2  # user + password, once
    ```
"""

from collections.abc import Mapping

from http_auth_core.auth.config import password_key, user_key


def basic_challenge(realm: str) -> str:
    """Build a ``WWW-Authenticate`` value for a Basic realm."""
    return f'Basic realm="{realm}"'


class RecordingConfigProvider:
    """Mapping-backed config provider that records every key it is asked for."""

    def __init__(self, values: Mapping[str, str] | None = None):
        self.values = dict(values or {})
        self.requested_keys: list[str] = []

    @classmethod
    def for_realm(cls, realm: str, username: str | None, password: str | None) -> "RecordingConfigProvider":
        values = {}
        if username is not None:
            values[user_key(realm)] = username
        if password is not None:
            values[password_key(realm)] = password
        return cls(values)

    @property
    def lookups(self) -> int:
        return len(self.requested_keys)

    def get(self, key: str) -> str | None:
        self.requested_keys.append(key)
        return self.values.get(key)


__all__ = ["RecordingConfigProvider", "basic_challenge"]
