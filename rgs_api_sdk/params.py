"""Connection parameters for RGS API."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RgsApiParams:
    """Static parameters of an RGS partner integration.

    Attributes:
        partner_id: Partner identifier, used to correlate log entries.
        host: Base URL for all requests, e.g. "https://rgs.example.com".
    """

    partner_id: str
    host: str
