"""Showdown - Texas Hold'em hand evaluator and winner explainer."""

__version__ = "0.1.0"

from .card import Card, Rank, Suit, card, full_deck
from .config import Config, get_config
from .errors import ArityError, CardParseError, DuplicateCardError, InputError
from .evaluator import (
    EvaluationOutcome,
    PlayerEvaluation,
    evaluate_hands,
    evaluate_request,
)
from .explanation import explain
from .hand import HandCategory, HandResult, best_hand, classify, compare_results

__all__ = [
    "ArityError",
    "Card",
    "CardParseError",
    "Config",
    "DuplicateCardError",
    "EvaluationOutcome",
    "HandCategory",
    "HandResult",
    "InputError",
    "PlayerEvaluation",
    "Rank",
    "Suit",
    "best_hand",
    "card",
    "classify",
    "compare_results",
    "evaluate_hands",
    "evaluate_request",
    "explain",
    "full_deck",
    "get_config",
]
