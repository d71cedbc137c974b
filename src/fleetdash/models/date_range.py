from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, List, Mapping, Optional, Tuple, Union

DateValue = Union[date, str]


def _format(value: DateValue) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class DateRange:
    """Optional start/end bounds for report queries.

    Either end may be missing; only the bounds that are set become
    ``start_date`` / ``end_date`` query parameters.
    """
    start: Optional[DateValue] = None
    end: Optional[DateValue] = None

    @classmethod
    def from_value(cls, value: Union["DateRange", Mapping[str, Any], None]) -> "DateRange":
        if value is None:
            return cls()
        if isinstance(value, DateRange):
            return value
        return cls(start=value.get("start"), end=value.get("end"))

    def to_params(self) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = []
        if self.start:
            params.append(("start_date", _format(self.start)))
        if self.end:
            params.append(("end_date", _format(self.end)))
        return params
