"""An ordered queue of characters with positional insertion and removal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _check_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


class CharQueue:
    """Sequence of single characters, popped from the front."""

    def __init__(self, chars: Iterable[str] = ()) -> None:
        self._items: list[str] = [_check_char(c) for c in chars]

    def insert(self, char: str, position: int) -> None:
        """Insert ``char`` so that it ends up at index ``position``."""
        _check_char(char)
        if not 0 <= position <= len(self._items):
            raise IndexError(f"insert position {position} out of range")
        self._items.insert(position, char)

    def delete(self, position: int) -> None:
        """Remove the character at ``position``."""
        if not 0 <= position < len(self._items):
            raise IndexError(f"delete position {position} out of range")
        del self._items[position]

    def pop(self) -> str:
        """Remove and return the character at the front."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.pop(0)

    def retrieve(self, position: int) -> str:
        """Character at ``position``, or the NUL character if there is none."""
        if 0 <= position < len(self._items):
            return self._items[position]
        return "\0"

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CharQueue({''.join(self._items)!r})"