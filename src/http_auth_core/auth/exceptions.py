"""Custom exceptions for challenge parsing and credential resolution.

These exceptions are raised by the low-level helpers (``parse_realm`` and
``BasicCredentials.from_config``). The resolver itself catches them and
answers "unavailable" (``None``) so an authentication scheme chain can fall
through to the next scheme.

Example:
    ```python
    from http_auth_core.auth.basic import BasicCredentials
    from http_auth_core.auth.exceptions import CredentialNotFoundError

    try:
        creds = BasicCredentials.from_config("intranet", config)
    except CredentialNotFoundError as e:
        print(f"Missing configuration key: {e.key}")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a realm has no username or password configured.

    Attributes:
        realm: The realm whose credentials were looked up.
        key: The configuration key that had no value.
    """

    def __init__(self, message: str, realm: str | None = None, key: str | None = None):
        """Initialize CredentialNotFoundError.

        Args:
            message: Error message describing what credential is missing.
            realm: Realm the lookup was made for.
            key: Configuration key that was missing.
        """
        super().__init__(message)
        self.realm = realm
        self.key = key


class MalformedChallengeError(CredentialError):
    """Raised when a challenge is empty or not of the form ``Basic realm="..."``."""

    def __init__(self, message: str, challenge: str | None = None):
        super().__init__(message)
        self.challenge = challenge
