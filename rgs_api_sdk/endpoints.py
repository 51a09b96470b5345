"""Endpoint path templates for RGS API.

Paths are relative to the partner host configured in RgsApiParams.

See https://chronicmonitor.docs.apiary.io/#reference/
"""


class StatisticsEndpoints:
    """Endpoint paths for RGS monitoring statistics."""

    PRODUCT = "/api/v1/statistics/{product_id}"
    PATIENTS = "/api/v1/statistics/{product_id}/patients"
