"""Statistics API client."""

from datetime import date, datetime

import httpx

from rgs_api_sdk.base import BaseRgsClient
from rgs_api_sdk.endpoints import StatisticsEndpoints
from rgs_api_sdk.types import QueryDict, QueryValue


class StatisticsRgsClient(BaseRgsClient):
    """Client for RGS monitoring statistics.

    Responses are returned as is, parse them with `response.json()`.

    Usage:
        params = RgsApiParams(partner_id="42", host="https://rgs.example.com")
        async with StatisticsRgsClient(api_params=params) as client:
            response = await client.get_statistics_by_product(7)
    """

    def _format_date(self, value: date | datetime | str) -> str:
        """Format date/datetime to ISO string."""
        if isinstance(value, datetime):
            return value.strftime("%Y-%m-%dT%H:%M:%S")
        if isinstance(value, date):
            return value.strftime("%Y-%m-%d")
        return value

    def _is_empty(self, value: QueryValue) -> bool:
        """Empty in the partner's sense: falsy or the string "0"."""
        return not value or value == "0"

    def _build_query(self, params: dict[str, QueryValue]) -> str:
        """Encode non-empty params, keeping their order."""
        query: QueryDict = {
            key: self._format_date(value)
            for key, value in params.items()
            if not self._is_empty(value)
        }
        return str(httpx.QueryParams(query))

    async def get_statistics_by_product(self, product_id: int) -> httpx.Response:
        """Get statistics for a monitoring product.

        Args:
            product_id: Monitoring product id.

        Returns:
            Raw partner response.
        """
        url = StatisticsEndpoints.PRODUCT.format(product_id=product_id)
        request = self.build_request("GET", url)
        return await self.send(request)

    async def get_patients_statistics_by_product_and_dates(
        self,
        product_id: int,
        period: str | None = None,
        from_date: date | datetime | str | None = None,
        to_date: date | datetime | str | None = None,
    ) -> httpx.Response:
        """Get patients statistics for a monitoring product.

        Empty arguments are left out of the query string.

        Args:
            product_id: Monitoring product id.
            period: Aggregation period as understood by the partner.
            from_date: Period start (date or "YYYY-MM-DD").
            to_date: Period end (date or "YYYY-MM-DD").

        Returns:
            Raw partner response.
        """
        url = StatisticsEndpoints.PATIENTS.format(product_id=product_id)
        query = self._build_query(
            {
                "period": period,
                "fromDate": from_date,
                "toDate": to_date,
            }
        )
        if query:
            url = f"{url}?{query}"

        request = self.build_request("GET", url)
        return await self.send(request)
