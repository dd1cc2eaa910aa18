from __future__ import annotations

from typing import Any, Iterable

from rich import box
from rich.table import Table
from rich.text import Text

from hanabi.engine.cards import COLORS, Card, Color, card_name
from hanabi.engine.state import Discard, Hint, Turn
from hanabi.engine.view import GameStateView

CARD_STYLES: dict[Color, str] = {
    Color.BLUE: "bright_blue",
    Color.RED: "bright_red",
    Color.YELLOW: "bright_yellow",
    Color.WHITE: "white",
    Color.GREEN: "bright_green",
}


def render_card(card: Card) -> Text:
    return Text(card_name(card), style=CARD_STYLES[card.color])


def render_hand(hand: Iterable[Card]) -> Text:
    return Text(", ").join(
        Text.assemble(f"{idx + 1}:", render_card(card)) for idx, card in enumerate(hand)
    )


def render_knowledge(info: Iterable[Any]) -> Text:
    # slots that do not expose color/value render as fully unknown
    parts = []
    for idx, slot in enumerate(info):
        color = getattr(slot, "color", None)
        value = getattr(slot, "value", None)
        color_label = getattr(color, "value", color) if color is not None else "?"
        label = f"{color_label} {value if value is not None else '?'}"
        parts.append(Text(f"{idx + 1}:{label}", style=CARD_STYLES.get(color, "dim")))
    return Text(", ").join(parts)


def render_turn(turn: Turn) -> str:
    player_name = f"Player {turn.player + 1}"
    choice = turn.choice
    if isinstance(choice, Hint):
        if choice.target is None:
            return f"{player_name} gives a hint."
        subject = choice.color.value if choice.color is not None else f"{choice.value}s"
        return f"{player_name} tells Player {choice.target + 1} about {subject}."
    if isinstance(choice, Discard):
        return f"{player_name} discards card {choice.index + 1}."
    return f"{player_name} plays card {choice.index + 1}."


def render_view(view: GameStateView) -> Table:
    board = view.board
    table = Table(
        title=f"Turn {board.turn} - Player {view.player + 1}'s view",
        box=box.SIMPLE,
        show_header=False,
    )
    table.add_column(style="bold")
    table.add_column()

    table.add_row("Fireworks", Text("  ").join(render_card(board.firework_top(color)) for color in COLORS))
    table.add_row("Score", str(board.score))
    table.add_row("Hints", f"{board.hints_remaining}/{board.hints_total}")
    table.add_row("Lives", f"{board.lives_remaining}/{board.lives_total}")
    table.add_row("Deck", str(board.deck_size))
    table.add_row("Discard", render_hand(board.discard) if board.discard else Text("-", style="dim"))
    table.add_row(f"Player {view.player + 1} (you)", render_knowledge(view.info))
    for other, state in sorted(view.other_player_states.items()):
        table.add_row(f"Player {other + 1}", render_hand(state.hand))
    return table
