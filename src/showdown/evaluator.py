"""Showdown evaluation - comparing players' hands and determining winners."""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from .card import Card, as_card, duplicate_codes
from .errors import ArityError, DuplicateCardError, InputError
from .explanation import HERO_ID, explain, join_names
from .hand import HandResult, best_hand

logger = logging.getLogger(__name__)

MAX_OPPONENTS = 5


def opponent_id(n: int) -> str:
    """Identifier of the n-th opponent, counting from 1."""
    return f"Opponent {n}"


@dataclass(frozen=True)
class PlayerEvaluation:
    """A player's hole cards and the best hand they make with the board."""

    player_id: str
    hole_cards: tuple[Card, ...]
    best: HandResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "playerId": self.player_id,
            "handName": self.best.name,
            "handRank": int(self.best.category),
            "handValue": list(self.best.key),
            "handCards": [c.code for c in self.best.cards],
        }


@dataclass(frozen=True)
class EvaluationOutcome:
    """Result of evaluating a showdown."""

    winner: str
    winners: tuple[str, ...]
    ranked: tuple[PlayerEvaluation, ...]
    explanation: str
    community: tuple[Card, ...] = field(default=())

    @property
    def is_split(self) -> bool:
        return len(self.winners) > 1

    def to_dict(self) -> dict[str, Any]:
        """The response shape handed back to callers of evaluate_request()."""
        return {
            "winner": self.winner,
            "rankedResults": [p.to_dict() for p in self.ranked],
            "explanation": self.explanation,
        }


def winner_descriptor(winner_ids: Sequence[str]) -> str:
    """Single id, or a split-pot description naming every tied player."""
    if len(winner_ids) == 1:
        return winner_ids[0]
    return f"Split Pot between {join_names(winner_ids)}"


def _parse_hand(cards: Iterable[Card | str]) -> list[Card]:
    return [as_card(c) for c in cards]


def _validate(
    hands: list[tuple[str, list[Card]]],
    community: list[Card],
    max_opponents: int,
) -> None:
    """Reject the whole call on any arity or duplicate problem."""
    opponents = len(hands) - 1
    if opponents < 1:
        raise ArityError("At least one opponent hand is required")
    if opponents > max_opponents:
        raise ArityError(f"At most {max_opponents} opponents are supported, got {opponents}")

    for player_id, cards in hands:
        if len(cards) != 2:
            owner = "Your" if player_id == HERO_ID else f"{player_id}'s"
            raise ArityError(f"{owner} hand must contain exactly 2 cards, got {len(cards)}")

    if not 3 <= len(community) <= 5:
        raise ArityError(f"Community cards must contain 3 to 5 cards, got {len(community)}")

    all_cards = [c for _, cards in hands for c in cards] + community
    dupes = duplicate_codes(all_cards)
    if dupes:
        raise DuplicateCardError(dupes)


def evaluate_hands(
    my_hand: Iterable[Card | str],
    opponent_hands: Iterable[Iterable[Card | str]],
    community_cards: Iterable[Card | str],
    *,
    max_opponents: int = MAX_OPPONENTS,
) -> EvaluationOutcome:
    """Evaluate all players and determine winner(s).

    Args:
        my_hand: Your two hole cards
        opponent_hands: Two hole cards per opponent, in seat order
        community_cards: 3 to 5 shared cards (flop, turn, river)
        max_opponents: Largest number of opponents accepted

    Returns:
        EvaluationOutcome with the winner, every player ranked best to
        worst, and an explanation

    Raises:
        ArityError: a hand isn't 2 cards, or the board isn't 3 to 5 cards
        DuplicateCardError: a card appears more than once anywhere
        CardParseError: a card code is malformed
    """
    hands = [(HERO_ID, _parse_hand(my_hand))]
    hands += [(opponent_id(i), _parse_hand(h)) for i, h in enumerate(opponent_hands, 1)]
    community = _parse_hand(community_cards)
    _validate(hands, community, max_opponents)

    evaluations = [
        PlayerEvaluation(player_id, tuple(cards), best_hand(cards, community))
        for player_id, cards in hands
    ]
    for ev in evaluations:
        logger.debug(f"{ev.player_id}: {ev.best.name} {[c.code for c in ev.best.cards]}")

    # Sort by hand value (highest first); sorted() is stable so ties keep seat order
    ranked = sorted(evaluations, key=lambda p: p.best, reverse=True)

    # Find all players with the best hand (handles ties)
    best_value = ranked[0].best
    winners = [p for p in ranked if p.best == best_value]
    winner_ids = tuple(p.player_id for p in winners)
    logger.debug(f"Winner(s): {', '.join(winner_ids)} with {best_value.name}")

    return EvaluationOutcome(
        winner=winner_descriptor(winner_ids),
        winners=winner_ids,
        ranked=tuple(ranked),
        explanation=explain(ranked, winners),
        community=tuple(community),
    )


def evaluate_request(
    request: Mapping[str, Any],
    *,
    max_opponents: int = MAX_OPPONENTS,
) -> dict[str, Any]:
    """Evaluate a request mapping and return the response mapping.

    Request: {"myHand": [...], "opponentHands": [[...], ...], "communityCards": [...]}
    Response: {"winner": str, "rankedResults": [...], "explanation": str}
    """
    missing = [k for k in ("myHand", "opponentHands", "communityCards") if k not in request]
    if missing:
        raise InputError(f"Request is missing: {', '.join(missing)}")

    for key in ("myHand", "opponentHands", "communityCards"):
        if isinstance(request[key], str) or not isinstance(request[key], Sequence):
            raise InputError(f"{key} must be a list")
    for hand in request["opponentHands"]:
        if isinstance(hand, str) or not isinstance(hand, Sequence):
            raise InputError("opponentHands must be a list of card lists")

    outcome = evaluate_hands(
        request["myHand"],
        request["opponentHands"],
        request["communityCards"],
        max_opponents=max_opponents,
    )
    return outcome.to_dict()
