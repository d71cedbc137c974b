"""Value types passed to the dashboard client."""

from .date_range import DateRange

__all__ = ["DateRange"]
