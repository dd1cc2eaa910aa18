from __future__ import annotations

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .cards import Card, Color
from .knowledge import CardKnowledge
from .rules import RulesError
from .state import BoardState, GameState, PlayerState


@dataclass(frozen=True)
class PlayerView:
    hand: tuple[Card, ...]
    info: tuple[CardKnowledge, ...]


@dataclass(frozen=True)
class BoardView:
    deck_size: int
    discard: tuple[Card, ...]
    fireworks: Mapping[Color, tuple[Card, ...]]
    num_players: int
    turn: int
    player: int
    hints_total: int
    hints_remaining: int
    lives_total: int
    lives_remaining: int
    deckless_turns_remaining: int

    def firework_top(self, color: Color) -> Card:
        return self.fireworks[color][-1]

    def is_playable(self, card: Card) -> bool:
        return card.value == self.firework_top(card.color).value + 1

    @property
    def score(self) -> int:
        return sum(len(firework) - 1 for firework in self.fireworks.values())


@dataclass(frozen=True)
class GameStateView:
    # the viewer only knows their own cards through info
    player: int
    info: tuple[CardKnowledge, ...]
    other_player_states: Mapping[int, PlayerView]
    board: BoardView

    @property
    def hand_size(self) -> int:
        return len(self.info)

    @property
    def is_my_turn(self) -> bool:
        return self.board.player == self.player

    def can_hint(self) -> bool:
        return self.board.hints_remaining > 0


def get_view(game_state: GameState, player: int) -> GameStateView:
    if player not in game_state.player_states:
        raise RulesError("Player not found.")

    others = {
        other: _player_view(state)
        for other, state in game_state.player_states.items()
        if other != player
    }
    return GameStateView(
        player=player,
        info=copy.deepcopy(game_state.player_states[player].info.snapshot()),
        other_player_states=MappingProxyType(others),
        board=_board_view(game_state.board),
    )


def _player_view(state: PlayerState) -> PlayerView:
    return PlayerView(hand=state.hand.snapshot(), info=copy.deepcopy(state.info.snapshot()))


def _board_view(board: BoardState) -> BoardView:
    return BoardView(
        deck_size=board.deck_size,
        discard=board.discard.snapshot(),
        fireworks=MappingProxyType({color: pile.snapshot() for color, pile in board.fireworks.items()}),
        num_players=board.num_players,
        turn=board.turn,
        player=board.player,
        hints_total=board.hints_total,
        hints_remaining=board.hints_remaining,
        lives_total=board.lives_total,
        lives_remaining=board.lives_remaining,
        deckless_turns_remaining=board.deckless_turns_remaining,
    )
