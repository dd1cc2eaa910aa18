from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union

from pydantic import BaseModel, ConfigDict, PositiveInt

from .cards import Card, Color
from .knowledge import CardInfo, CardKnowledge, HintHandler
from .pile import Pile


class GameOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    num_players: PositiveInt
    hand_size: PositiveInt
    # when this hits 0, nobody can hint
    num_hints: PositiveInt
    # when this hits 0, the game is lost
    num_lives: PositiveInt


@dataclass(frozen=True)
class Hint:
    target: int | None = None
    color: Color | None = None
    value: int | None = None


@dataclass(frozen=True)
class Discard:
    index: int


@dataclass(frozen=True)
class Play:
    index: int


TurnChoice = Union[Hint, Discard, Play]


@dataclass(frozen=True)
class Turn:
    player: int
    choice: TurnChoice


@dataclass
class PlayerState:
    hand: Pile[Card] = field(default_factory=Pile)
    # common knowledge about each card in hand, same order as hand
    info: Pile[CardKnowledge] = field(default_factory=Pile)


@dataclass
class BoardState:
    deck: Pile[Card]
    fireworks: dict[Color, Pile[Card]]
    num_players: int
    hints_total: int
    hints_remaining: int
    lives_total: int
    lives_remaining: int
    # only relevant once the deck runs out
    deckless_turns_remaining: int
    discard: Pile[Card] = field(default_factory=Pile)
    turn: int = 1
    player: int = 0

    @property
    def deck_size(self) -> int:
        return self.deck.size()

    def firework_top(self, color: Color) -> Card:
        top = self.fireworks[color].top()
        assert top is not None, f"{color.value} firework lost its sentinel"
        return top


@dataclass
class GameState:
    player_states: dict[int, PlayerState]
    board: BoardState
    knowledge_factory: Callable[[], CardKnowledge] = CardInfo
    hint_handler: HintHandler | None = None
