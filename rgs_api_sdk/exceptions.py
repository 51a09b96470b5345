"""Exceptions for RGS API SDK."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class RgsAPIError(Exception):
    """Base exception for RGS API errors.

    Every error may carry the response that triggered it (if the partner
    answered at all). The underlying transport error is chained via
    ``raise ... from`` and available as ``cause``.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response

    @property
    def cause(self) -> BaseException | None:
        """Transport error this one was raised from, if any."""
        return self.__cause__

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class RgsBadRequestError(RgsAPIError):
    """Partner rejected the request (4xx).

    The request has to be fixed on the caller side, repeating it won't help.
    """

    pass


class RgsInternalError(RgsAPIError):
    """Partner or configuration failure.

    Raised when:
    - Partner responded with 5xx
    - Transport returned no response at all
    - Configured host is invalid
    - Any other transport failure (timeouts, connection errors)
    """

    pass
