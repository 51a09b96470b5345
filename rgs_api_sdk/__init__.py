"""RGS API SDK - Python client for RGS chronic monitoring statistics API."""

from .base import HTTP_VERSION, BaseRgsClient, RgsRequest
from .endpoints import StatisticsEndpoints
from .exceptions import RgsAPIError, RgsBadRequestError, RgsInternalError
from .params import RgsApiParams
from .statistics import StatisticsRgsClient
from .types import LogContext, QueryDict, QueryValue

__all__ = [
    # Clients
    "BaseRgsClient",
    "StatisticsRgsClient",
    "RgsRequest",
    "RgsApiParams",
    "HTTP_VERSION",
    # Endpoints
    "StatisticsEndpoints",
    # Exceptions
    "RgsAPIError",
    "RgsBadRequestError",
    "RgsInternalError",
    # Types
    "LogContext",
    "QueryDict",
    "QueryValue",
]

__version__ = "0.1.0"
