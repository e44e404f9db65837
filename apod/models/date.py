"""Date parameter for APOD requests.

A request targets either the current picture (``Today``) or the picture
published on an explicit calendar day (``ExplicitDate``).
"""

from __future__ import annotations

import datetime
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class Today(BaseModel):
    """The picture of the current day, as decided by the server."""

    model_config = ConfigDict(frozen=True)

    def as_param(self) -> Optional[str]:
        return None


class ExplicitDate(BaseModel):
    """A calendar day.

    Fields are not range-checked; ``ExplicitDate(day=31, month=2, year=2020)``
    is accepted and the server decides what to do with it.
    """

    model_config = ConfigDict(frozen=True)

    day: int
    month: int
    year: int

    @classmethod
    def from_date(cls, value: datetime.date) -> ExplicitDate:
        return cls(day=value.day, month=value.month, year=value.year)

    def as_param(self) -> Optional[str]:
        """Format as ``YYYY-MM-DD`` with month and day zero-padded."""
        return f"{self.year}-{self.month:02d}-{self.day:02d}"


Date = Union[Today, ExplicitDate]

#: Shared "today" value.
TODAY: Today = Today()


def as_param(date: Date) -> Optional[str]:
    """Return the ``date`` query value for *date*, or ``None`` for today."""
    return date.as_param()
