"""Player statistics, the highscore username, the helper's board and the letter queues."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from .highscores import USERNAME_MAX_SIZE
from .letter_queue import CharQueue
from .vector import XorShift32

DEFAULT_PLAYER_LIFE = 6
"""Life points the player starts a game with."""

BACKSPACE = "\b"


def _check_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


@dataclass
class GameStats:
    """Counters gathered during one game and the figures derived from them."""

    time_sec: int = 0
    total_typed_letters: int = 0
    total_hit_letters: int = 0
    total_enemies_killed: int = 0
    total_powerups: int = 0
    default_player_life: int = DEFAULT_PLAYER_LIFE
    player_life: int = field(default=DEFAULT_PLAYER_LIFE)

    def score(self) -> int:
        """Points earned: a tenth of the seconds played plus 25 per kill, hit and power-up."""
        return self.time_sec // 10 + (
            self.total_enemies_killed + self.total_hit_letters + self.total_powerups
        ) * 25

    def cpm(self) -> int:
        """Letters hit per minute of play; 0 before the first second has passed."""
        if self.time_sec == 0:
            return 0
        return self.total_hit_letters * 60 // self.time_sec

    def accuracy(self) -> int:
        """Percentage of typed letters that hit, rounded down; 100 when nothing was typed."""
        if self.total_typed_letters == 0:
            return 100
        return math.floor(self.total_hit_letters / self.total_typed_letters * 100)

    def summary_lines(self) -> list[str]:
        """Lines shown on the game-over screens."""
        minutes, seconds = divmod(self.time_sec, 60)
        return [
            f"Score: {self.score()}",
            f"Chars/minute: {self.cpm()}",
            f"Accuracy: {self.accuracy()}%",
            f"Game time: {minutes}'{seconds}\"",
        ]

    def reset(self) -> None:
        """Clear every counter and restore the player's life to its default."""
        self.time_sec = 0
        self.total_typed_letters = 0
        self.total_hit_letters = 0
        self.total_enemies_killed = 0
        self.total_powerups = 0
        self.default_player_life = DEFAULT_PLAYER_LIFE
        self.player_life = self.default_player_life


class Username:
    """Name typed in by a player who set a highscore."""

    def __init__(self, max_size: int = USERNAME_MAX_SIZE) -> None:
        self.max_size = max_size
        self._chars: list[str] = []

    def add(self, char: str) -> None:
        """Append ``char``; a backspace removes the last character instead.

        Characters beyond ``max_size`` are ignored.
        """
        _check_char(char)
        if char == BACKSPACE:
            if self._chars:
                self._chars.pop()
        elif len(self._chars) < self.max_size:
            self._chars.append(char)

    def reset(self) -> None:
        self._chars.clear()

    def __str__(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)


class HelperBoard:
    """Characters of the host's enemies, as seen by the helping player."""

    def __init__(self) -> None:
        self._chars: list[str] = []

    def add(self, char: str) -> None:
        self._chars.append(_check_char(char))

    def remove(self, char: str) -> None:
        """Remove the first occurrence of ``char``; nothing happens if it is absent."""
        try:
            self._chars.remove(char)
        except ValueError:
            pass

    def clear(self) -> None:
        self._chars.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __len__(self) -> int:
        return len(self._chars)


def _shuffled_queue(
    rng: XorShift32, first: str, start: int, stop: int, excluded: frozenset[int]
) -> CharQueue:
    queue = CharQueue(first)
    for code in range(start, stop):
        if code in excluded:
            continue
        queue.insert(chr(code), rng.between(0, len(queue)))
    return queue


def build_letter_queues(rng: XorShift32) -> tuple[CharQueue, CharQueue, CharQueue, CharQueue]:
    """Shuffled letter queues for difficulties 1 to 4, in that order.

    Level 1 holds lower-case letters, level 2 adds upper case, level 3 adds digits
    and level 4 adds punctuation. The queues are drawn from ``rng`` starting with
    level 4.
    """
    level4 = _shuffled_queue(rng, "!", 34, 123, frozenset({60, 62, 64, 91, 92, 93, 94, 96}))
    level3 = _shuffled_queue(
        rng, "0", 49, 123, frozenset({*range(58, 65), *range(91, 97)})
    )
    level2 = _shuffled_queue(rng, "A", 66, 123, frozenset(range(91, 97)))
    level1 = _shuffled_queue(rng, "a", 98, 123, frozenset())
    return level1, level2, level3, level4