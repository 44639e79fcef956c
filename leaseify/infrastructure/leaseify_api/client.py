"""Leaseify REST client — implements the Transport port.

Talks to the Express/Mongo-style backend over httpx. Every call is one
request: no retries, no caching. Failures of any kind surface as
``ApiError`` so the stores only ever deal with one exception type.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from leaseify.application.interfaces.transport import Transport
from leaseify.domain.exceptions import ApiError

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network Error"
MALFORMED_BODY_MESSAGE = "Malformed response body"


class LeaseifyApiClient(Transport):
    """Infrastructure adapter — connects to the Leaseify REST API.

    An injected ``httpx.AsyncClient`` is shared by every call and closed by
    ``aclose()``; without one, a short-lived client is created and closed per
    call, and ``aclose()`` has nothing to release.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._token = token or None
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _build_url(self, path: str) -> str:
        return self._base_url + path.lstrip("/")

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        url = self._build_url(path)
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.request(
                    method.upper(),
                    url,
                    headers=self._get_headers(),
                    json=json,
                    params=dict(params) if params else None,
                )
            except httpx.TimeoutException as exc:
                logger.warning("%s %s timed out: %s", method.upper(), url, exc)
                raise ApiError(
                    f"timeout of {int(self._timeout * 1000)}ms exceeded"
                ) from exc
            except httpx.TransportError as exc:
                logger.warning("%s %s failed: %s", method.upper(), url, exc)
                raise ApiError(NETWORK_ERROR_MESSAGE) from exc

            if not response.is_success:
                self._raise_api_error(response)

            return self._decode(response)
        finally:
            if should_close:
                await client.aclose()

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Decode a 2xx body; an empty body (e.g. 204) decodes to None."""
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(MALFORMED_BODY_MESSAGE, response.status_code) from exc

    @staticmethod
    def _raise_api_error(response: httpx.Response) -> None:
        """Raise ApiError from a non-2xx response, preferring the server's message."""
        message = f"Request failed with status code {response.status_code}"
        errors: list[str] = []
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            server_message = body.get("message") or body.get("detail")
            if isinstance(server_message, str) and server_message:
                message = server_message
            raw_errors = body.get("errors")
            if isinstance(raw_errors, list):
                errors = [_describe_error(e) for e in raw_errors]

        logger.debug(
            "%s %s → %d: %s",
            response.request.method,
            response.request.url,
            response.status_code,
            message,
        )
        raise ApiError(message, response.status_code, errors)


def _describe_error(item: Any) -> str:
    """Flatten one entry of an ``errors`` array into a display string."""
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        msg = item.get("msg") or item.get("message")
        field = item.get("path") or item.get("param") or item.get("field")
        if msg and field:
            return f"{field}: {msg}"
        if msg:
            return str(msg)
    return str(item)
