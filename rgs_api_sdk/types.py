"""Type definitions for RGS API SDK."""

from datetime import date, datetime
from typing import Any

# Structured context passed to the logger via `extra`
LogContext = dict[str, Any]

# Query string values accepted by endpoint methods
QueryValue = date | datetime | str | None
QueryDict = dict[str, str]
