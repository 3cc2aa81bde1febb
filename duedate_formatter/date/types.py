from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NamedTuple, Union

# Index 0 = Sunday.
WEEKDAYS: tuple[str, ...] = (
    "日曜日",
    "月曜日",
    "火曜日",
    "水曜日",
    "木曜日",
    "金曜日",
    "土曜日",
)

# yesterday, today, tomorrow
RELATIVE_DAYS: tuple[str, ...] = ("昨日", "今日", "明日")


@dataclass(frozen=True)
class ResolvedDate:
    """A concrete calendar date resolved from a due-date label."""

    d: date

    @property
    def year(self) -> int:
        return self.d.year

    @property
    def month(self) -> int:
        return self.d.month

    @property
    def day(self) -> int:
        return self.d.day

    @property
    def weekday_index(self) -> int:
        # date.weekday() is Monday=0; WEEKDAYS starts at Sunday.
        return self.d.isoweekday() % 7

    @property
    def weekday_name(self) -> str:
        return WEEKDAYS[self.weekday_index]


@dataclass(frozen=True)
class PassThrough:
    """Label that could not be resolved; rendered unchanged."""

    text: str


ParseOutcome = Union[ResolvedDate, PassThrough]


class ScanToken(NamedTuple):
    text: str
    is_range_continuation: bool = False


@dataclass(frozen=True)
class ScanEntry:
    token: ScanToken
    outcome: ParseOutcome
    output: str
