from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .cards import COLORS, VALUES, Color

if TYPE_CHECKING:
    from .state import Hint, PlayerState


class CardKnowledge(Protocol):
    # get_view deep-copies slots; define __deepcopy__ for slots holding locks or handles
    ...


class HintHandler(Protocol):
    def __call__(self, hint: Hint, target: PlayerState) -> None:
        ...


@dataclass
class CardInfo:
    colors: set[Color] = field(default_factory=lambda: set(COLORS))
    values: set[int] = field(default_factory=lambda: set(VALUES))

    @property
    def color(self) -> Color | None:
        if len(self.colors) == 1:
            return next(iter(self.colors))
        return None

    @property
    def value(self) -> int | None:
        if len(self.values) == 1:
            return next(iter(self.values))
        return None

    def is_unknown(self) -> bool:
        return self.colors == set(COLORS) and self.values == set(VALUES)
