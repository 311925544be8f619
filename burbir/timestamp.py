"""Calendar date and clock time of a post."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


def _parse_fields(text: str, separator: str) -> tuple[int, int, int]:
    fields = [0, 0, 0]
    index = 0
    for char in text:
        if char == separator:
            index += 1
        elif index < 3:
            fields[index] = fields[index] * 10 + (ord(char) - ord("0"))
    return fields[0], fields[1], fields[2]


def parse_date(text: str) -> tuple[int, int, int]:
    """Parse "dd/mm/yyyy" into (day, month, year)."""
    return _parse_fields(text, "/")


def parse_time(text: str) -> tuple[int, int, int]:
    """Parse "hh:mm:ss" into (hour, minute, second)."""
    return _parse_fields(text, ":")


@dataclass
class Timestamp:
    """A date and a time of day."""

    day: int = 0
    month: int = 0
    year: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def now(cls) -> "Timestamp":
        """The current local date and time."""
        moment = datetime.now()
        return cls(
            moment.day, moment.month, moment.year,
            moment.hour, moment.minute, moment.second,
        )

    def set_date(self, text: str) -> None:
        """Set the date part from "dd/mm/yyyy"."""
        self.day, self.month, self.year = parse_date(text)

    def set_time(self, text: str) -> None:
        """Set the time part from "hh:mm:ss"."""
        self.hour, self.minute, self.second = parse_time(text)

    def to_word(self) -> str:
        """Storage form: "d/m/yyyy hh:mm:ss" with the time padded to two digits."""
        return (
            f"{self.day}/{self.month}/{self.year} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

    def render(self) -> str:
        """Display form: "dd/mm/yyyy hh:mm:ss"."""
        return (
            f"{self.day:02d}/{self.month:02d}/{self.year} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )