"""Example usage of RGS API SDK."""

import asyncio
import logging

from rgs_api_sdk import (
    RgsApiParams,
    RgsBadRequestError,
    RgsInternalError,
    StatisticsRgsClient,
)


async def main() -> None:
    """Example: Fetch product and patients statistics."""
    logging.basicConfig(level=logging.INFO)
    params = RgsApiParams(partner_id="your-partner-id", host="https://rgs.example.com")

    async with StatisticsRgsClient(api_params=params) as client:
        try:
            response = await client.get_statistics_by_product(42)
            print(f"Product statistics: {response.json()}")

            # Empty arguments are left out of the query string
            response = await client.get_patients_statistics_by_product_and_dates(
                42,
                from_date="2024-01-01",
            )
            print(f"Patients statistics: {response.json()}")

        except RgsBadRequestError as e:
            print(f"Request rejected: {e}, partner said: {e.response.text if e.response is not None else None}")
        except RgsInternalError as e:
            print(f"Partner unavailable: {e}")


if __name__ == "__main__":
    asyncio.run(main())
