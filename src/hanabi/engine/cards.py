from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    BLUE = "blue"
    RED = "red"
    YELLOW = "yellow"
    WHITE = "white"
    GREEN = "green"


COLORS: tuple[Color, ...] = tuple(Color)

VALUES: tuple[int, ...] = (1, 2, 3, 4, 5)

VALUE_COUNTS: dict[int, int] = {
    1: 3,
    2: 2,
    3: 2,
    4: 2,
    5: 1,
}

FINAL_VALUE = 5

DECK_SIZE = len(COLORS) * sum(VALUE_COUNTS.values())


@dataclass(frozen=True)
class Card:
    color: Color
    # 0 is only used for the sentinel at the bottom of each firework
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= FINAL_VALUE:
            raise ValueError(f"Card value must be between 0 and {FINAL_VALUE}, got {self.value}.")


def card_name(card: Card) -> str:
    return f"{card.color.value} {card.value}"


def all_cards() -> list[Card]:
    cards: list[Card] = []
    for color in COLORS:
        for value, count in VALUE_COUNTS.items():
            cards.extend([Card(color, value)] * count)
    return cards
