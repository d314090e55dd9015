"""Transport layer components for composable HTTP middleware.

Transport layers wrap an httpx async transport to add behaviour around
each request.

Modules:
    auth: Answers ``WWW-Authenticate`` challenges with configured credentials

Example:
    ```python
    import httpx

    from http_auth_core.auth import AuthSchemeDispatcher, BasicAuthResolver
    from http_auth_core.transport import ChallengeAuthTransport

    transport = ChallengeAuthTransport(
        wrapped_transport=httpx.AsyncHTTPTransport(),
        dispatcher=AuthSchemeDispatcher([BasicAuthResolver()]),
        config={"http.auth.basic.intranet.user": "alice", "http.auth.basic.intranet.password": "s3cret"},
    )
    ```
"""

from http_auth_core.transport.auth import ChallengeAuthTransport

__all__ = ["ChallengeAuthTransport"]
