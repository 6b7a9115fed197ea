"""Shared domain models for festivals."""

from __future__ import annotations

import functools
from datetime import date, timedelta
from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field

from festivals.config import get_date_format


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)

    @staticmethod
    def from_date(value: date) -> Month:
        return Month(value.month)


@functools.total_ordering
class Style(Enum):
    # Declared alphabetically: the declared order is the sort order.
    BLUES = "BLUES"
    ELECTRONIC = "ELECTRONIC"
    FLAMENCO = "FLAMENCO"
    HIPHOP = "HIPHOP"
    INDIE = "INDIE"
    JAZZ = "JAZZ"
    METAL = "METAL"
    POP = "POP"
    PUNK = "PUNK"
    RAP = "RAP"
    REGGAE = "REGGAE"
    ROCK = "ROCK"
    TECHNO = "TECHNO"

    def __str__(self) -> str:
        return self.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Style):
            return NotImplemented
        return _STYLE_ORDER[self] < _STYLE_ORDER[other]


_STYLE_ORDER = {style: position for position, style in enumerate(Style)}


class Festival(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Festival name. Agendas order festivals by it, ignoring case.")
    place: str = Field("", description="Where the festival is held.")
    start: date = Field(description="First day of the festival.")
    duration: int = Field(1, ge=1, description="Length in days, first day included.")
    styles: frozenset[Style] = Field(default_factory=frozenset, description="Musical styles played.")

    @property
    def month(self) -> Month:
        return Month.from_date(self.start)

    @property
    def end(self) -> date:
        return self.start + timedelta(days=self.duration - 1)

    def __str__(self) -> str:
        fmt = get_date_format()
        styles = ", ".join(str(s) for s in sorted(self.styles))
        lines = [f"{self.name.upper()}\t[{styles}]"]
        if self.place:
            lines.append(self.place)
        if self.duration == 1:
            lines.append(self.start.strftime(fmt))
        else:
            lines.append(f"{self.start.strftime(fmt)} - {self.end.strftime(fmt)}")
        return "\n".join(lines)
