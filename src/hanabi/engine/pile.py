from __future__ import annotations

from random import Random
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class Pile(Generic[T]):
    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def append(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T | None:
        if not self._items:
            return None
        return self._items.pop()

    def top(self) -> T | None:
        if not self._items:
            return None
        return self._items[-1]

    def take(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"Pile index {index} out of range for size {len(self._items)}.")
        return self._items.pop(index)

    def shuffle(self, rng: Random) -> None:
        rng.shuffle(self._items)

    def size(self) -> int:
        return len(self._items)

    def snapshot(self) -> tuple[T, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pile):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Pile({self._items!r})"
