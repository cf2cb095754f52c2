"""Pterodactyl Application API client.

Provides the HTTP transport shared by all resource modules: bearer
authentication, JSON request bodies, response decoding into pydantic
envelopes, mapping of failures onto :mod:`pterodactyl_client.errors`, and
bookkeeping of the panel's rate-limit headers.
"""

import time
from collections.abc import Mapping
from typing import Any, TypeVar, overload

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from .application import Application
from .errors import DecodeError, HttpError, NetworkError, PanelError
from .ratelimit import RateLimit, RateLimitState
from .types import ErrorEnvelope

logger = structlog.get_logger(__name__)

API_PATH = "api/application/"

# Prefix of client (account) API keys, which the Application API rejects.
CLIENT_KEY_PREFIX = "ptlc_"

E = TypeVar("E", bound=BaseModel)


def normalize_base_url(url: str) -> str:
    """Return the panel URL with a trailing ``api/application/`` path.

    Args:
        url: Panel URL, with or without the API path and trailing slash.

    Returns:
        URL ending in ``api/application/``.
    """
    url = url.strip()
    if not url.endswith("/"):
        url += "/"
    if not url.endswith(API_PATH):
        url += API_PATH
    return url


def check_api_key(api_key: str) -> None:
    """Warn when the key looks like a client API key.

    The Application API only accepts application keys. Keys are not
    rejected here since older panels issue keys without a prefix.

    Args:
        api_key: The API key as configured.
    """
    if api_key.startswith(CLIENT_KEY_PREFIX):
        logger.warning(
            "API key looks like a client API key, the Application API "
            "expects an application key",
            key_prefix=CLIENT_KEY_PREFIX,
        )


def _decode(response: httpx.Response, response_type: type[E]) -> E:
    try:
        return response_type.model_validate_json(response.content)
    except ValidationError as exc:
        msg = f"Failed to decode {response_type.__name__}: {exc}"
        raise DecodeError(msg) from exc


def _error_from_response(response: httpx.Response) -> PanelError | HttpError:
    """Map a non-success response onto the error taxonomy."""
    try:
        envelope = ErrorEnvelope.model_validate_json(response.content)
    except ValidationError:
        return HttpError(response.status_code, response.text)
    return PanelError(response.status_code, envelope.errors)


class Client:
    """HTTP client for the Pterodactyl Application API.

    Instances are created through :class:`ClientBuilder`. All requests are
    asynchronous and independent of each other; the only state shared
    between concurrent calls is the rate-limit snapshot.

    Can be used as an async context manager for automatic cleanup.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        http_client: httpx.AsyncClient,
        owns_http_client: bool,
    ):
        self._base_url = base_url
        self._api_key = api_key
        self._http_client = http_client
        self._owns_http_client = owns_http_client
        self._rate_limit = RateLimitState()
        self._application = Application(self)

    @property
    def base_url(self) -> str:
        """Normalized base URL, ending in ``api/application/``."""
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Underlying httpx client."""
        return self._http_client

    @property
    def application(self) -> Application:
        """Resource operations bound to this client."""
        return self._application

    @property
    def rate_limit(self) -> RateLimit | None:
        """Last rate-limit snapshot reported by the panel, if any."""
        return self._rate_limit.get()

    async def __aenter__(self) -> "Client":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager and cleanup resources."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this client owns it."""
        if self._owns_http_client and not self._http_client.is_closed:
            await self._http_client.aclose()

    @overload
    async def request(self, method: str, path: str, response_type: type[E]) -> E: ...

    @overload
    async def request(
        self, method: str, path: str, response_type: None = None
    ) -> None: ...

    async def request(
        self,
        method: str,
        path: str,
        response_type: type[E] | None = None,
    ) -> E | None:
        """Send a request without a body.

        Args:
            method: HTTP method (e.g., "GET").
            path: Path relative to the base URL (e.g., "locations/5").
            response_type: Envelope model to decode the body into, or None
                when no payload is expected.

        Returns:
            The decoded envelope, or None if response_type is None.

        Raises:
            NetworkError: If no response was obtained (connection, timeout,
                redirect loop).
            DecodeError: If the success body does not match response_type.
            PanelError: If the panel returned a structured error.
            HttpError: If the panel returned an unstructured error.
        """
        return await self._send(method, path, response_type)

    @overload
    async def request_with_body(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any],
        response_type: type[E],
    ) -> E: ...

    @overload
    async def request_with_body(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any],
        response_type: None = None,
    ) -> None: ...

    async def request_with_body(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any],
        response_type: type[E] | None = None,
    ) -> E | None:
        """Send a request with a JSON body.

        Args:
            method: HTTP method (e.g., "POST").
            path: Path relative to the base URL.
            body: JSON-serializable request body, sent as given.
            response_type: Envelope model to decode the body into, or None
                when no payload is expected.

        Returns:
            The decoded envelope, or None if response_type is None.

        Raises:
            NetworkError: If no response was obtained (connection, timeout,
                redirect loop).
            DecodeError: If the success body does not match response_type.
            PanelError: If the panel returned a structured error.
            HttpError: If the panel returned an unstructured error.
        """
        return await self._send(method, path, response_type, body=body)

    async def _send(
        self,
        method: str,
        path: str,
        response_type: type[E] | None,
        body: Mapping[str, Any] | None = None,
    ) -> E | None:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }
        if body is not None:
            headers["Content-Type"] = "application/json"

        start_time = time.time()
        logger.debug("Making API request", method=method, path=path)
        try:
            response = await self._http_client.request(
                method,
                self._base_url + path,
                headers=headers,
                json=body,
            )
        except httpx.DecodingError as exc:
            msg = f"{method} {path} returned an undecodable body: {exc}"
            raise DecodeError(msg) from exc
        except httpx.RequestError as exc:
            logger.debug(
                "API request failed",
                method=method,
                path=path,
                duration_seconds=round(time.time() - start_time, 3),
                error=str(exc),
            )
            msg = f"{method} {path} failed: {exc}"
            raise NetworkError(msg) from exc

        logger.debug(
            "API request completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_seconds=round(time.time() - start_time, 3),
        )
        self._rate_limit.update_from_headers(response.headers)

        if not response.is_success:
            raise _error_from_response(response)
        if response_type is None:
            return None
        return _decode(response, response_type)


class ClientBuilder:
    """Builder for :class:`Client`.

    Example:
        client = (
            ClientBuilder("https://panel.example.com", "ptla_...")
            .http_client(httpx.AsyncClient(timeout=10.0))
            .build()
        )
    """

    def __init__(self, url: str, api_key: str):
        """Initialize the builder.

        Args:
            url: Panel URL (e.g., "https://panel.example.com").
            api_key: Application API key.

        Raises:
            ValueError: If url or api_key is empty.
        """
        if not url or not url.strip():
            msg = "url cannot be empty"
            raise ValueError(msg)
        if not api_key:
            msg = "api_key cannot be empty"
            raise ValueError(msg)

        self._url = normalize_base_url(url)
        self._api_key = api_key
        self._http_client: httpx.AsyncClient | None = None
        self._owns_http_client = False

    def http_client(
        self, client: httpx.AsyncClient, owned: bool = False
    ) -> "ClientBuilder":
        """Use the given httpx client (e.g., to set proxies or timeouts).

        Args:
            client: The httpx client to send requests with.
            owned: Whether :meth:`Client.aclose` should close it.
        """
        self._http_client = client
        self._owns_http_client = owned
        return self

    def build(self) -> Client:
        """Build the client.

        Without an injected httpx client a new one is created with no
        timeout; timeouts are the caller's concern.
        """
        check_api_key(self._api_key)
        if self._http_client is not None:
            return Client(
                self._url, self._api_key, self._http_client, self._owns_http_client
            )
        return Client(self._url, self._api_key, httpx.AsyncClient(timeout=None), True)
