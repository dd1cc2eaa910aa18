from __future__ import annotations

import logging
from random import Random
from typing import Callable

from .cards import COLORS, DECK_SIZE, FINAL_VALUE, VALUES, Card, Color, all_cards, card_name
from .knowledge import CardInfo, CardKnowledge, HintHandler
from .pile import Pile
from .state import BoardState, Discard, GameOptions, GameState, Hint, Play, PlayerState, Turn, TurnChoice

logger = logging.getLogger(__name__)

HAND_SIZE_BY_PLAYERS: dict[int, int] = {
    2: 5,
    3: 5,
    4: 4,
    5: 4,
}

DEFAULT_HINTS = 8
DEFAULT_LIVES = 3


class RulesError(ValueError):
    pass


class ConstructionError(RulesError):
    pass


class IllegalHintError(RulesError):
    pass


class HandIndexOutOfRange(RulesError, IndexError):
    pass


class GameAlreadyOver(RulesError):
    pass


class TurnSequenceViolation(RuntimeError):
    pass


def default_options(num_players: int) -> GameOptions:
    if num_players not in HAND_SIZE_BY_PLAYERS:
        raise ConstructionError("Hanabi supports 2-5 players.")
    return GameOptions(
        num_players=num_players,
        hand_size=HAND_SIZE_BY_PLAYERS[num_players],
        num_hints=DEFAULT_HINTS,
        num_lives=DEFAULT_LIVES,
    )


def build_deck(rng: Random) -> Pile[Card]:
    deck = Pile(all_cards())
    deck.shuffle(rng)
    logger.debug("Created deck: %s", ", ".join(card_name(card) for card in deck))
    return deck


def build_fireworks() -> dict[Color, Pile[Card]]:
    return {color: Pile([Card(color, 0)]) for color in COLORS}


def new_game(
    options: GameOptions,
    rng: Random,
    knowledge_factory: Callable[[], CardKnowledge] = CardInfo,
    hint_handler: HintHandler | None = None,
) -> GameState:
    if options.num_players * options.hand_size > DECK_SIZE:
        raise ConstructionError(
            f"Cannot deal {options.hand_size} cards to {options.num_players} players from a {DECK_SIZE}-card deck."
        )

    deck = build_deck(rng)
    player_states: dict[int, PlayerState] = {}
    for player in range(options.num_players):
        state = PlayerState()
        for _ in range(options.hand_size):
            card = deck.pop()
            assert card is not None
            state.hand.append(card)
            state.info.append(knowledge_factory())
        player_states[player] = state

    board = BoardState(
        deck=deck,
        fireworks=build_fireworks(),
        num_players=options.num_players,
        hints_total=options.num_hints,
        hints_remaining=options.num_hints,
        lives_total=options.num_lives,
        lives_remaining=options.num_lives,
        deckless_turns_remaining=options.num_players + 1,
    )
    return GameState(
        player_states=player_states,
        board=board,
        knowledge_factory=knowledge_factory,
        hint_handler=hint_handler,
    )


def get_players(game_state: GameState) -> list[int]:
    return list(range(game_state.board.num_players))


def is_over(game_state: GameState) -> bool:
    board = game_state.board
    return board.lives_remaining == 0 or board.deckless_turns_remaining == 0


def score(game_state: GameState) -> int:
    # each firework starts with a sentinel that is not worth a point
    return sum(firework.size() - 1 for firework in game_state.board.fireworks.values())


def validate_choice(game_state: GameState, choice: TurnChoice) -> str | None:
    try:
        _check_choice(game_state, choice)
    except RulesError as exc:
        return str(exc)
    return None


def legal_choices(game_state: GameState) -> list[TurnChoice]:
    # empty hand with no hint tokens is a dead end even while the game is not over
    if is_over(game_state):
        return []
    choices: list[TurnChoice] = []
    if game_state.board.hints_remaining > 0:
        choices.append(Hint())
    hand_size = _current_player_state(game_state).hand.size()
    choices.extend(Discard(index) for index in range(hand_size))
    choices.extend(Play(index) for index in range(hand_size))
    return choices


def process_choice(game_state: GameState, choice: TurnChoice) -> Turn:
    _check_choice(game_state, choice)

    turn = Turn(player=game_state.board.player, choice=choice)
    if isinstance(choice, Hint):
        _resolve_hint(game_state, choice)
    elif isinstance(choice, Discard):
        _resolve_discard(game_state, choice.index)
    else:
        _resolve_play(game_state, choice.index)

    _end_turn(game_state)
    return turn


def _check_choice(game_state: GameState, choice: TurnChoice) -> None:
    if is_over(game_state):
        raise GameAlreadyOver("The game is over.")
    if isinstance(choice, Hint):
        _check_hint(game_state, choice)
    elif isinstance(choice, (Discard, Play)):
        hand = _current_player_state(game_state).hand
        if not 0 <= choice.index < hand.size():
            raise HandIndexOutOfRange(
                f"Hand index {choice.index} is out of range for a hand of {hand.size()} cards."
            )
    else:
        raise RulesError(f"Unknown turn choice: {choice!r}.")


def _check_hint(game_state: GameState, hint: Hint) -> None:
    board = game_state.board
    if board.hints_remaining <= 0:
        raise IllegalHintError("No hint tokens remaining.")
    if hint.target is None:
        if hint.color is not None or hint.value is not None:
            raise IllegalHintError("A hint about a color or value needs a target player.")
        return
    if hint.target == board.player or hint.target not in game_state.player_states:
        raise IllegalHintError("Hints must target another player.")
    if (hint.color is None) == (hint.value is None):
        raise IllegalHintError("A hint names exactly one color or one value.")
    if hint.color is not None and not isinstance(hint.color, Color):
        raise IllegalHintError(f"Unknown color: {hint.color!r}.")
    if hint.value is not None and hint.value not in VALUES:
        raise IllegalHintError(f"Unknown value: {hint.value!r}.")


def _resolve_hint(game_state: GameState, hint: Hint) -> None:
    board = game_state.board
    # knowledge is only updated when a collaborator knows what the hint means
    if hint.target is not None and game_state.hint_handler is not None:
        game_state.hint_handler(hint, game_state.player_states[hint.target])
    board.hints_remaining -= 1
    logger.debug("Player %d gives a hint. Hints remaining: %d", board.player, board.hints_remaining)


def _resolve_discard(game_state: GameState, index: int) -> None:
    board = game_state.board
    card = _take_from_hand(game_state, index)
    board.discard.append(card)
    logger.debug("Player %d discards %s.", board.player, card_name(card))
    _try_add_hint(board)


def _resolve_play(game_state: GameState, index: int) -> None:
    board = game_state.board
    card = _take_from_hand(game_state, index)
    if card.value == board.firework_top(card.color).value + 1:
        board.fireworks[card.color].append(card)
        logger.debug("Player %d plays %s.", board.player, card_name(card))
        if card.value == FINAL_VALUE:
            _try_add_hint(board)
    else:
        board.discard.append(card)
        board.lives_remaining -= 1
        logger.info(
            "Player %d misplays %s. Lives remaining: %d", board.player, card_name(card), board.lives_remaining
        )


def _take_from_hand(game_state: GameState, index: int) -> Card:
    state = _current_player_state(game_state)
    card = state.hand.take(index)
    state.info.take(index)
    replacement = game_state.board.deck.pop()
    if replacement is not None:
        state.hand.append(replacement)
        state.info.append(game_state.knowledge_factory())
    return card


def _try_add_hint(board: BoardState) -> None:
    if board.hints_remaining < board.hints_total:
        board.hints_remaining += 1


def _end_turn(game_state: GameState) -> None:
    board = game_state.board
    if board.deck.size() == 0 and board.deckless_turns_remaining > 0:
        board.deckless_turns_remaining -= 1
    board.turn += 1
    board.player = (board.player + 1) % board.num_players
    if (board.turn - 1) % board.num_players != board.player:
        raise TurnSequenceViolation(f"Turn {board.turn} does not belong to player {board.player}.")
    if is_over(game_state):
        logger.info("Game over after %d turns. Score: %d", board.turn - 1, score(game_state))


def _current_player_state(game_state: GameState) -> PlayerState:
    return game_state.player_states[game_state.board.player]
