"""The highscore table: a short list of best scores kept in a plain text file."""

from __future__ import annotations

import datetime as _dt
import os
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass, field, fields

USERNAME_MAX_SIZE = 10
"""Longest username a highscore may carry."""
NUMBER_HIGHSCORES = 5
"""Number of entries kept in the table."""
HIGHSCORES_FILE = "highscores.txt"
"""Default name of the file the table is stored in."""

_MAX_SCORE = 0xFFFFFFFF
_BYTE = 0xFF


@dataclass(frozen=True)
class Timestamp:
    """Moment a highscore was set, as kept by the real-time clock (year counts from 2000)."""

    year: int = 0
    month: int = 0
    day: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if not 0 <= value <= _BYTE:
                raise ValueError(f"{item.name} must fit in a byte, got {value}")

    @classmethod
    def from_datetime(cls, moment: _dt.datetime) -> Timestamp:
        """Timestamp for ``moment``, which must lie in the years 2000 to 2255."""
        return cls(
            moment.year - 2000,
            moment.month,
            moment.day,
            moment.hour,
            moment.minute,
            moment.second,
        )


@dataclass(frozen=True)
class Highscore:
    """One entry of the table."""

    username: str
    score: int
    timestamp: Timestamp = field(default_factory=Timestamp)

    def __post_init__(self) -> None:
        if len(self.username) > USERNAME_MAX_SIZE:
            raise ValueError(
                f"username longer than {USERNAME_MAX_SIZE} characters: {self.username!r}"
            )
        if "@" in self.username or "\n" in self.username:
            raise ValueError(f"username may not hold '@' or a newline: {self.username!r}")
        if not 0 <= self.score <= _MAX_SCORE:
            raise ValueError(f"score out of range: {self.score}")


def _parse_line(line: str) -> Highscore:
    username, separator, rest = line.partition("@")
    if not separator:
        raise ValueError(f"highscore line lacks '@': {line!r}")
    values = rest.split()
    if len(values) != 7:
        raise ValueError(f"highscore line needs seven numbers: {line!r}")
    numbers = [int(value) for value in values]
    timestamp = Timestamp(*(number & _BYTE for number in numbers[1:]))
    return Highscore(username, numbers[0] & _MAX_SCORE, timestamp)


def load_highscores(path: str | os.PathLike[str]) -> list[Highscore]:
    """Read up to NUMBER_HIGHSCORES entries from ``path``, best first."""
    scores: list[Highscore] = []
    with open(path, encoding="latin-1") as stream:
        for line in stream:
            if len(scores) == NUMBER_HIGHSCORES:
                break
            line = line.rstrip("\n")
            if not line.strip():
                continue
            scores.append(_parse_line(line))
    return scores


def store_highscores(scores: Iterable[Highscore], path: str | os.PathLike[str]) -> None:
    """Write the table to ``path``, one ``name@score y m d h m s`` line per entry."""
    with open(path, "w", encoding="latin-1", newline="\n") as stream:
        for count, entry in enumerate(scores):
            if count == NUMBER_HIGHSCORES:
                break
            stamp = entry.timestamp
            stream.write(
                f"{entry.username}@{entry.score} {stamp.year} {stamp.month} {stamp.day} "
                f"{stamp.hours} {stamp.minutes} {stamp.seconds}\n"
            )


def insert_new_highscore(
    scores: MutableSequence[Highscore],
    username: str,
    score: int,
    timestamp: Timestamp,
) -> None:
    """Insert a new entry into the table, shifting lower entries down.

    When the table is full its last entry drops out.
    """
    if len(scores) > NUMBER_HIGHSCORES:
        raise ValueError(f"table holds more than {NUMBER_HIGHSCORES} entries")
    entry = Highscore(username, score, timestamp)
    slots: list[Highscore | None] = list(scores)
    slots.extend([None] * (NUMBER_HIGHSCORES - len(slots)))

    for index in range(NUMBER_HIGHSCORES - 1, -1, -1):
        if index == 0:
            slots[0] = entry
            break
        below, above = slots[index], slots[index - 1]
        if above is None:
            continue
        if below is None:
            if score < above.score:
                slots[index] = entry
                break
            slots[index] = above
        elif score > above.score:
            slots[index] = above
        else:
            slots[index] = entry
            break

    scores[:] = [slot for slot in slots if slot is not None]


def lowest_highscore(scores: Iterable[Highscore]) -> int:
    """Score of the last entry of a full table, or 0 while the table has room."""
    table = list(scores)
    if len(table) < NUMBER_HIGHSCORES:
        return 0
    return table[NUMBER_HIGHSCORES - 1].score