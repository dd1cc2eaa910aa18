from io import StringIO
from random import Random

from rich.console import Console

from hanabi.engine.cards import Card, Color
from hanabi.engine.knowledge import CardInfo
from hanabi.engine.rules import new_game
from hanabi.engine.state import Discard, GameOptions, Hint, Play, Turn
from hanabi.engine.view import get_view
from hanabi.render import render_card, render_hand, render_knowledge, render_turn, render_view


def _export(renderable) -> str:
    console = Console(file=StringIO(), width=120, record=True)
    console.print(renderable)
    return console.export_text()


def test_render_card() -> None:
    text = render_card(Card(Color.RED, 3))
    assert text.plain == "red 3"
    assert text.style == "bright_red"


def test_render_hand() -> None:
    hand = [Card(Color.RED, 3), Card(Color.BLUE, 1)]
    assert render_hand(hand).plain == "1:red 3, 2:blue 1"


def test_render_knowledge() -> None:
    info = [CardInfo(), CardInfo(colors={Color.GREEN}), CardInfo(values={4})]
    assert render_knowledge(info).plain == "1:? ?, 2:green ?, 3:? 4"


def test_render_turn() -> None:
    assert render_turn(Turn(player=0, choice=Hint())) == "Player 1 gives a hint."
    assert render_turn(Turn(player=0, choice=Hint(target=1, color=Color.RED))) == "Player 1 tells Player 2 about red."
    assert render_turn(Turn(player=1, choice=Hint(target=0, value=2))) == "Player 2 tells Player 1 about 2s."
    assert render_turn(Turn(player=1, choice=Discard(0))) == "Player 2 discards card 1."
    assert render_turn(Turn(player=0, choice=Play(3))) == "Player 1 plays card 4."


def test_render_view() -> None:
    options = GameOptions(num_players=2, hand_size=2, num_hints=8, num_lives=3)
    game_state = new_game(options, Random(0))
    view = get_view(game_state, 0)

    output = _export(render_view(view))

    assert "Turn 1 - Player 1's view" in output
    assert "8/8" in output
    assert "3/3" in output
    assert "1:? ?, 2:? ?" in output
    assert render_hand(view.other_player_states[1].hand).plain in output
    assert "blue 0" in output


class _PlainSlot:
    def __init__(self, color: str | None, value: int | None) -> None:
        self.color = color
        self.value = value


def test_render_knowledge_with_plain_string_colors() -> None:
    info = [_PlainSlot("red", None), _PlainSlot("purple", 2), object()]
    assert render_knowledge(info).plain == "1:red ?, 2:purple 2, 3:? ?"
