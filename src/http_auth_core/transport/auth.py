"""Authentication transport that answers ``WWW-Authenticate`` challenges.

``ChallengeAuthTransport`` wraps another httpx transport. When a request
comes back ``401`` with a ``WWW-Authenticate`` header, the challenge is
handed to an :class:`~http_auth_core.auth.scheme.AuthSchemeDispatcher`; if a
scheme produces credentials the request is sent once more with the
``Authorization`` header. The header is remembered per origin and attached
up front to later requests to the same host.

## Example

```python
import httpx

from http_auth_core.auth import AuthSchemeDispatcher, BasicAuthResolver, EnvConfigProvider
from http_auth_core.transport.auth import ChallengeAuthTransport

transport = ChallengeAuthTransport(
    wrapped_transport=httpx.AsyncHTTPTransport(),
    dispatcher=AuthSchemeDispatcher([BasicAuthResolver()]),
    config=EnvConfigProvider(),
)

async with httpx.AsyncClient(transport=transport) as client:
    response = await client.get("https://intranet.example.com/reports")
```
"""

import logging

import httpx

from http_auth_core.auth.basic import AUTHORIZATION_HEADER
from http_auth_core.auth.config import ConfigProvider
from http_auth_core.auth.scheme import AuthHandle, AuthSchemeDispatcher

logger = logging.getLogger(__name__)


class ChallengeAuthTransport(httpx.AsyncHTTPTransport):
    """Transport that resolves server challenges into ``Authorization`` headers.

    Requests that already carry an ``Authorization`` header are passed
    through untouched. At most one extra request is made per call.

    Args:
        wrapped_transport: The underlying transport to wrap
        dispatcher: Schemes to consult for each challenge
        config: Configuration handed to the schemes
        preemptive: Attach remembered credentials to later requests for the
            same origin (default: True)
    """

    CHALLENGE_HEADER = "WWW-Authenticate"

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        dispatcher: AuthSchemeDispatcher,
        config: ConfigProvider | None = None,
        preemptive: bool = True,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.dispatcher = dispatcher
        self.config = config
        self.preemptive = preemptive
        self._origin_handles: dict[tuple[str, str, int | None], AuthHandle] = {}

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    @staticmethod
    def _origin(url: httpx.URL) -> tuple[str, str, int | None]:
        return (url.scheme, url.host, url.port)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request, answering a 401 challenge once if credentials exist.

        Args:
            request: The HTTP request to send

        Returns:
            HTTP response (the authenticated one if a challenge was answered)
        """
        if AUTHORIZATION_HEADER in request.headers:
            return await self._wrapped_transport.handle_async_request(request)

        origin = self._origin(request.url)
        sent_header = None
        if self.preemptive and origin in self._origin_handles:
            sent_header = self._origin_handles[origin].header_value
            request.headers[AUTHORIZATION_HEADER] = sent_header
            logger.debug(f"Attaching remembered credentials to {request.method} {request.url}")

        # Buffer the body so the request can be sent a second time
        await request.aread()
        response = await self._wrapped_transport.handle_async_request(request)

        if response.status_code != 401:
            return response

        challenges = response.headers.get_list(self.CHALLENGE_HEADER)
        if not challenges:
            return response

        handle = self.dispatcher.authorize_any(challenges, self.config)
        if handle is None or handle.header_value == sent_header:
            return response

        logger.debug(f"Answering challenge for realm '{handle.realm}' on {request.method} {request.url}")
        await response.aclose()

        request.headers[AUTHORIZATION_HEADER] = handle.header_value
        response = await self._wrapped_transport.handle_async_request(request)

        if response.status_code != 401:
            self._origin_handles[origin] = handle
        else:
            logger.warning(f"Credentials for realm '{handle.realm}' were rejected by {request.url.host}")
            self._origin_handles.pop(origin, None)
        return response
