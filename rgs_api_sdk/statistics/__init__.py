"""Statistics API client."""

from .client import StatisticsRgsClient

__all__ = ["StatisticsRgsClient"]
