"""Human-readable explanation of a showdown."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Sequence

from .card import Card, Rank
from .hand import WHEEL_ACE, HandCategory, HandResult

if TYPE_CHECKING:
    from .evaluator import PlayerEvaluation

HERO_ID = "You"


def format_cards(cards: Sequence[Card]) -> str:
    """Render cards as codes, spelling the ten as '10'."""
    return ", ".join(c.code.replace("T", "10") for c in cards)


def with_article(category: HandCategory) -> str:
    """'a Flush', but plain 'Two Pair'."""
    if category in (HandCategory.HIGH_CARD, HandCategory.ONE_PAIR, HandCategory.TWO_PAIR):
        return str(category)
    return f"a {category}"


def join_names(names: Sequence[str]) -> str:
    """'A', 'A and B', 'A, B and C'."""
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} and {names[-1]}"


def _rank_label(value: int) -> str:
    if value == WHEEL_ACE:
        return Rank.ACE.symbol
    return Rank(value + 2).symbol


def _deciding_values(winner: HandResult, loser: HandResult) -> tuple[int, int, int]:
    """Position and values of the first key element that differs."""
    for i, (w, l) in enumerate(zip(winner.key, loser.key)):
        if w != l:
            return i, w, l
    raise ValueError("Hands are tied; nothing decides between them")


def _is_kicker(result: HandResult, position: int) -> bool:
    if result.category in (
        HandCategory.STRAIGHT,
        HandCategory.STRAIGHT_FLUSH,
        HandCategory.ROYAL_FLUSH,
    ):
        return False
    counts = Counter(c.rank.index for c in result.cards)
    made = sum(1 for v in result.key if counts[v] >= 2)
    if made == 0:
        return position > 0
    return position >= made


def compare_sentence(winner: PlayerEvaluation, runner_up: PlayerEvaluation) -> str:
    """One sentence on why the winning hand beats the next-best player."""
    best, other = winner.best, runner_up.best
    if best.category != other.category:
        return f"{best.name} beats {runner_up.player_id}'s {other.name}."

    position, won, lost = _deciding_values(best, other)
    reason = "on kickers" if _is_kicker(best, position) else "on higher card values"
    return (
        f"{runner_up.player_id} also has {with_article(other.category)}, "
        f"but loses {reason} ({_rank_label(won)} over {_rank_label(lost)}): "
        f"{format_cards(best.cards)} beats {format_cards(other.cards)}."
    )


def explain(
    ranked: Sequence[PlayerEvaluation],
    winners: Sequence[PlayerEvaluation],
) -> str:
    """Build the explanation text.

    Args:
        ranked: Every player, best hand first
        winners: The players sharing the best hand, in ranked order

    Returns:
        A headline, a comparison against the next-best player and the
        full ranking, one line per player.
    """
    if not ranked or not winners:
        raise ValueError("Cannot explain a showdown with no players")

    top = winners[0]
    names = join_names([w.player_id for w in winners])
    hand_name = with_article(top.best.category)
    if len(winners) > 1:
        lines = [f"{names} split the pot with {hand_name}."]
    else:
        verb = "win" if top.player_id == HERO_ID else "wins"
        lines = [f"{names} {verb} with {hand_name}."]

    winner_ids = {w.player_id for w in winners}
    runner_up = next((p for p in ranked if p.player_id not in winner_ids), None)
    if runner_up is None:
        lines.append("All players hold hands of equal value.")
    else:
        lines.append(compare_sentence(top, runner_up))

    lines.append("")
    lines.append("Full ranking:")
    for i, player in enumerate(ranked, 1):
        lines.append(f"{i}. {player.player_id}: {player.best.name} ({format_cards(player.best.cards)})")

    return "\n".join(lines)
