"""HTTP Auth Core - client-side credentials for HTTP authentication challenges.

This library provides:
- RFC 2617 Basic authentication resolved from ``WWW-Authenticate`` challenges
- Per-realm credential lookup from mappings, the environment or .env files
- A pluggable authentication scheme dispatcher
- An httpx transport that answers 401 challenges

Example:
    ```python
    from http_auth_core.auth import BasicAuthResolver

    resolver = BasicAuthResolver()
    creds = resolver.resolve(
        'Basic realm="intranet"',
        {"http.auth.basic.intranet.user": "alice", "http.auth.basic.intranet.password": "s3cret"},
    )
    headers = {"Authorization": creds.header_value}
    ```
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
