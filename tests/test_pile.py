from collections import Counter
from random import Random

import pytest

from hanabi.engine.pile import Pile


def test_pop_and_top_are_lifo() -> None:
    pile = Pile([1, 2])
    pile.append(3)

    assert pile.top() == 3
    assert pile.pop() == 3
    assert pile.pop() == 2
    assert pile.size() == 1


def test_empty_pile_returns_none() -> None:
    pile: Pile[int] = Pile()

    assert pile.pop() is None
    assert pile.top() is None
    assert len(pile) == 0


def test_take_shifts_later_items() -> None:
    pile = Pile(["a", "b", "c", "d"])

    assert pile.take(1) == "b"
    assert list(pile) == ["a", "c", "d"]
    assert pile[1] == "c"


def test_take_out_of_range() -> None:
    pile = Pile(["a"])
    with pytest.raises(IndexError):
        pile.take(1)
    with pytest.raises(IndexError):
        pile.take(-1)
    assert pile.size() == 1


def test_duplicates_are_kept() -> None:
    pile = Pile([1, 1, 1])
    assert pile.size() == 3


def test_shuffle_uses_given_random_source() -> None:
    first = Pile(range(20))
    second = Pile(range(20))
    first.shuffle(Random(3))
    second.shuffle(Random(3))

    assert first == second
    assert Counter(first) == Counter(range(20))


def test_snapshot_is_detached() -> None:
    pile = Pile([1, 2])
    snapshot = pile.snapshot()
    pile.append(3)

    assert snapshot == (1, 2)
