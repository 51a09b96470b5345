"""Base client and request building for RGS API SDK."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

import httpx

from .exceptions import RgsAPIError, RgsBadRequestError, RgsInternalError
from .params import RgsApiParams
from .types import LogContext

# Protocol version literal of the RGS partner integration. Not sent: httpx picks
# the wire protocol from client settings.
HTTP_VERSION = "2.0"

JSON_HEADERS: Mapping[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# Transport error messages that mean the configured host is malformed
HOST_ERROR_MARKERS = ("IDNA_ERROR_EMPTY_LABEL", "Invalid IDNA hostname")

MESSAGE_SENT = "Request sent to RGS partner"
MESSAGE_NO_RESPONSE = "RGS service sent no response"
MESSAGE_4XX = "4xx error on request to RGS partner"
MESSAGE_5XX = "5xx error on request to RGS partner"
MESSAGE_UNKNOWN = "Critical unknown error on request to RGS partner"
MESSAGE_CRITICAL = "Critical error on request to RGS partner"


@dataclass(frozen=True)
class RgsRequest:
    """Fully built request to the RGS partner.

    The body is kept in memory as text, so it can be read for sending and
    again for logging.

    `http_version` is metadata only and is not sent on the wire; the
    protocol is chosen by the httpx client (e.g. `http2=True`).
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))
    body: str = ""
    http_version: str = HTTP_VERSION

    @property
    def content(self) -> bytes:
        """Body encoded for the transport."""
        return self.body.encode("utf-8")


@dataclass
class BaseRgsClient:
    """Base async client for RGS API.

    Sends JSON requests to the partner host, maps transport failures to
    RgsBadRequestError / RgsInternalError and logs every attempt.

    No retries are made: configure timeouts and limits on the httpx client.

    Attributes:
        api_params: Partner id and host.
        client: httpx client used as transport. If omitted, one is created
            and closed together with this client. An injected client is
            never closed or reconfigured.
        logger: Logger receiving request/response context via `extra`.
        timeout: Timeout for the owned httpx client, in seconds. The owned
            client follows redirects.
    """

    api_params: RgsApiParams
    client: httpx.AsyncClient | None = None
    logger: logging.Logger | logging.LoggerAdapter = field(
        default_factory=lambda: logging.getLogger(__name__)
    )
    timeout: float = 30.0

    _client: httpx.AsyncClient = field(init=False, repr=False)
    _owns_client: bool = field(init=False, repr=False, default=False)

    def __post_init__(self) -> None:
        if self.client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            )
            self._owns_client = True
        else:
            self._client = self.client

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the httpx client if it was created by this client."""
        if self._owns_client:
            await self._client.aclose()

    def build_request(self, method: str, url: str, body: str = "") -> RgsRequest:
        """Build request to the partner host.

        Slashes between host and url are collapsed to exactly one. The url
        is used as is, query strings must already be encoded.
        """
        return RgsRequest(
            method=method,
            url=f"{self.api_params.host.rstrip('/')}/{url.lstrip('/')}",
            headers=dict(JSON_HEADERS),
            body=body,
        )

    def _check_host(self, url: str) -> None:
        """Reject hosts with empty labels, e.g. "rgs..example.com"."""
        host = httpx.URL(url).host
        if "" in host.split("."):
            raise httpx.InvalidURL(f"IDNA_ERROR_EMPTY_LABEL: {host!r}")

    def _request_context(self, request: RgsRequest) -> LogContext:
        return {
            "partnerId": self.api_params.partner_id,
            "url": request.url,
            "request": request.body,
        }

    def _error_context(
        self,
        request: RgsRequest,
        response: httpx.Response | None,
        exc: BaseException,
    ) -> LogContext:
        return {
            **self._request_context(request),
            "responseBody": response.text if response is not None else None,
            "exception": exc,
        }

    async def send(self, request: RgsRequest) -> httpx.Response:
        """Send request and log the outcome.

        Successful requests are logged at INFO, failures at ERROR with the
        response body. Errors are always re-raised unchanged.

        Raises:
            RgsBadRequestError: Partner responded with 4xx.
            RgsInternalError: Partner failed or could not be reached.
        """
        try:
            response = await self.send_request(request)
        except RgsAPIError as e:
            self.logger.error(
                e.message,
                extra=self._error_context(request, e.response, e),
                exc_info=e,
            )
            raise

        self.logger.info(MESSAGE_SENT, extra=self._request_context(request))
        return response

    async def send_request(self, request: RgsRequest) -> httpx.Response:
        """Send request and map transport errors to SDK exceptions.

        Raises:
            RgsBadRequestError: Partner responded with 4xx.
            RgsInternalError: 5xx, no response, invalid host or any other
                transport failure.
        """
        try:
            self._check_host(request.url)
            http_request = self._client.build_request(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.content,
            )
            response = await self._client.send(http_request)
            if response is None:
                raise RgsInternalError(MESSAGE_NO_RESPONSE)
            # 1xx-3xx are returned to the caller as is
            if response.is_error:
                response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            response = e.response
            status = response.status_code

            if response.is_client_error:
                raise RgsBadRequestError(
                    MESSAGE_4XX, status_code=status, response=response
                ) from e

            self.logger.error(
                MESSAGE_5XX,
                extra=self._error_context(request, response, e),
                exc_info=e,
            )
            raise RgsInternalError(
                MESSAGE_5XX, status_code=status, response=response
            ) from e

        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            message = str(e)
            if any(marker in message for marker in HOST_ERROR_MARKERS):
                message = f"RGS service host ({self.api_params.host}) is invalid"

            self.logger.error(
                message,
                extra=self._error_context(request, None, e),
                exc_info=e,
            )
            raise RgsInternalError(message) from e

        except httpx.HTTPError as e:
            self.logger.error(
                MESSAGE_UNKNOWN,
                extra=self._error_context(request, None, e),
                exc_info=e,
            )
            raise RgsInternalError(MESSAGE_CRITICAL) from e
