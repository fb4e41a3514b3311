"""Async client for the Butterfly API.

``Client.get`` resolves a path or an endpoint into a URL, performs a single
GET through an injected ``httpx.AsyncClient`` and classifies the outcome:

- transport failures (connect errors, timeouts, cancellation) -> ``NetworkError``
- an ``errors`` entry with a 3xx status -> ``RedirectError``
- any other ``errors`` entry, or a non-2xx status -> ``ApiError``

Usage errors (bad path, missing endpoint) raise ``UsageError`` before any
network I/O.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable, Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from butterfly_client.config import ClientSettings, get_settings
from butterfly_client.errors import ApiError, NetworkError, RedirectError, UsageError
from butterfly_client.pagination import link_to_path
from butterfly_client.query import encode_query
from butterfly_client.schemas.jsonapi import ApiErrorObject, ApiResponse, RawApiResponse
from butterfly_client.schemas.query import Query

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Butterfly-Key"
UNKNOWN_ERROR = "Unknown error"

Intercept = Callable[[httpx.Response], None]


def raise_for_api_error(body: Any, status_code: int) -> None:
    """Raise the failure described by a parsed response body, if any.

    The body's ``errors`` array takes precedence over the HTTP status, 2xx
    responses included.

    Args:
        body: Parsed JSON body.
        status_code: HTTP status of the response.

    Raises:
        RedirectError: If the first error entry carries a 3xx status.
        ApiError: If the first error entry carries any other status, if it
            has no numeric ``status``, or if there is no error entry and the
            HTTP status is not 2xx.
    """
    errors = body.get("errors") if isinstance(body, Mapping) else None
    if isinstance(errors, list) and errors:
        try:
            error = ApiErrorObject.model_validate(errors[0])
        except ValidationError as exc:
            raise ApiError(status_code, UNKNOWN_ERROR) from exc
        if 300 <= error.status < 400:
            raise RedirectError(error.status, error.detail or "")
        raise ApiError(error.status, error.title or UNKNOWN_ERROR, error.detail or "")

    if not 200 <= status_code < 300:
        raise ApiError(status_code, UNKNOWN_ERROR)


class Client:
    """Client for the Butterfly API.

    The HTTP transport is injected as an ``httpx.AsyncClient``. When none is
    given the client creates its own and closes it in ``aclose()``; use the
    client as an async context manager to get that for free::

        async with Client("https://api.example.com", public_key="...") as client:
            posts = await client.get(endpoint="posts", query={"page": {"size": 10}})

    Args:
        domain: Base URL of the API. A trailing slash is removed.
        public_key: Optional key sent as the ``X-Butterfly-Key`` header.
        version: API version segment (``v1``).
        http_client: Transport shared by every request of this client.
        timeout: Timeout in seconds of the transport created when
            ``http_client`` is not given.
    """

    def __init__(
        self,
        domain: str,
        public_key: str | None = None,
        version: str = "v1",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.domain = domain.rstrip("/")
        self.public_key = public_key
        self.version = version
        self._owns_http_client = http_client is None
        self._http_client = (
            httpx.AsyncClient(timeout=timeout) if http_client is None else http_client
        )

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> Client:
        """Build a client from ``ClientSettings`` (environment by default)."""
        settings = settings or get_settings()
        return cls(
            domain=settings.domain,
            public_key=settings.public_key,
            version=settings.version,
            http_client=http_client,
            timeout=settings.timeout,
        )

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _build_url(
        self,
        path: str | None,
        endpoint: str | None,
        id: int | str | None,
        query: Query | Mapping[str, Any] | None,
    ) -> str:
        if path:
            if not path.startswith(f"/{self.version}"):
                raise UsageError(
                    f"Invalid path: must start with '/{self.version}', got '{path}'"
                )
            return f"{self.domain}{path}"

        if not endpoint:
            raise UsageError("You must provide either a path or an endpoint")

        url = f"{self.domain}/{self.version}/{endpoint}"
        if id is not None and id != "":
            url = f"{url}/{id}"
        return url + encode_query(query)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.public_key:
            headers[API_KEY_HEADER] = self.public_key
        return headers

    async def _send(
        self,
        http_client: httpx.AsyncClient,
        url: str,
        headers: dict[str, str],
        cancel: asyncio.Event | None,
    ) -> httpx.Response:
        """Perform the GET, racing it against the caller's cancel event."""
        if cancel is None:
            return await http_client.get(url, headers=headers)
        if cancel.is_set():
            raise NetworkError(asyncio.CancelledError("Request cancelled before sending"))

        request = asyncio.ensure_future(http_client.get(url, headers=headers))
        cancelled = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait(
                {request, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            request.cancel()
            raise
        finally:
            cancelled.cancel()

        if request.done():
            return request.result()

        request.cancel()
        try:
            return await request
        except asyncio.CancelledError as exc:
            logger.warning("Butterfly API request cancelled: GET %s", url)
            raise NetworkError(exc) from exc

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def get(
        self,
        *,
        path: str | None = None,
        endpoint: str | None = None,
        id: int | str | None = None,
        query: Query | Mapping[str, Any] | None = None,
        http_client: httpx.AsyncClient | None = None,
        cancel: asyncio.Event | None = None,
        intercept: Intercept | None = None,
        data_type: Any = Any,
        validate_included: bool = True,
    ) -> ApiResponse[Any]:
        """Perform a GET request against the API.

        Args:
            path: Full API path starting with ``/{version}``, such as a
                ``links.next`` value. Takes precedence over ``endpoint``.
            endpoint: Endpoint name (``posts``, ``categories``, ...).
            id: Resource id appended to ``endpoint``.
            query: Filters, pagination, sorting and includes for ``endpoint``.
            http_client: Transport for this call only.
            cancel: Event that aborts the request when set.
            intercept: Called with the raw response before its body is
                parsed, whatever the outcome.
            data_type: Type ``data`` is validated against (``Post``,
                ``list[Post]``, ...). Defaults to no validation.
            validate_included: Validate ``included`` into ``Resource`` models.
                When ``False`` the side-loaded resources stay plain dicts.

        Returns:
            The response envelope.

        Raises:
            UsageError: If the path is invalid or neither path nor endpoint
                is given.
            NetworkError: If the request could not complete.
            RedirectError: If the API answers with a redirect.
            ApiError: If the API answers with an error, or if a 2xx body does
                not fit the envelope. With ``validate_included`` on, a single
                side-loaded resource that does not match its model is enough.
        """
        url = self._build_url(path, endpoint, id, query)
        http_client = http_client or self._http_client

        logger.debug("GET %s", url)
        try:
            response = await self._send(http_client, url, self._headers(), cancel)
        except httpx.TransportError as exc:
            logger.warning("Butterfly API request failed: GET %s -> %s", url, exc)
            raise NetworkError(exc) from exc
        logger.debug("GET %s -> %d", url, response.status_code)

        if intercept is not None:
            intercept(response)

        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError(response.status_code, "Invalid JSON response", str(exc)) from exc

        raise_for_api_error(body, response.status_code)

        try:
            envelope = ApiResponse if validate_included else RawApiResponse
            return envelope[data_type].model_validate(body)
        except ValidationError as exc:
            raise ApiError(response.status_code, "Invalid response body", str(exc)) from exc

    async def get_next(
        self,
        response: ApiResponse[Any],
        **kwargs: Any,
    ) -> ApiResponse[Any] | None:
        """Fetch the page after ``response``, or return ``None`` on the last page.

        Keyword arguments are forwarded to ``get``.
        """
        next_link = response.links.get("next")
        if not next_link:
            return None
        return await self.get(path=link_to_path(next_link), **kwargs)

    async def iter_pages(
        self,
        *,
        path: str | None = None,
        endpoint: str | None = None,
        query: Query | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> AsyncIterator[ApiResponse[Any]]:
        """Yield the first page then every page reachable through ``links.next``."""
        response = await self.get(path=path, endpoint=endpoint, query=query, **kwargs)
        while response is not None:
            yield response
            response = await self.get_next(response, **kwargs)
