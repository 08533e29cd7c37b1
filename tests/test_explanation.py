"""Tests for showdown explanations."""

import pytest
from showdown.card import card
from showdown.evaluator import evaluate_hands
from showdown.explanation import HERO_ID, explain, format_cards, join_names, with_article
from showdown.hand import HandCategory


def cards(s: str):
    return [card(c) for c in s.split()]


class TestHelpers:
    def test_join_names(self):
        assert join_names(["You"]) == "You"
        assert join_names(["You", "Opponent 1"]) == "You and Opponent 1"
        assert join_names(["You", "Opponent 1", "Opponent 2"]) == "You, Opponent 1 and Opponent 2"

    def test_with_article(self):
        assert with_article(HandCategory.FLUSH) == "a Flush"
        assert with_article(HandCategory.TWO_PAIR) == "Two Pair"
        assert with_article(HandCategory.ONE_PAIR) == "One Pair"

    def test_format_cards_spells_ten(self):
        assert format_cards(cards("Ts 9h")) == "10S, 9H"

    def test_explain_needs_players(self):
        with pytest.raises(ValueError):
            explain([], [])


class TestExplanation:
    def test_category_beats_category(self):
        result = evaluate_hands(cards("2s 3s"), [cards("9d 8c")], cards("As Ks 7s 6h 5d"))
        lines = result.explanation.splitlines()

        assert lines[0] == "You win with a Flush."
        assert lines[1] == "Flush beats Opponent 1's Straight."
        assert "Full ranking:" in lines
        assert lines[-2] == "1. You: Flush (AS, KS, 7S, 3S, 2S)"
        assert lines[-1] == "2. Opponent 1: Straight (9D, 8C, 7S, 6H, 5D)"

    def test_opponent_headline(self):
        result = evaluate_hands(cards("9d 8c"), [cards("2s 3s")], cards("As Ks 7s 6h 5d"))
        assert result.explanation.startswith("Opponent 1 wins with a Flush.")

    def test_kickers(self):
        result = evaluate_hands(cards("As Kd"), [cards("Ac Qd")], cards("Ad 5h 7c 9s 2h"))
        lines = result.explanation.splitlines()

        assert lines[0] == "You win with One Pair."
        assert lines[1] == (
            "Opponent 1 also has One Pair, but loses on kickers (K over Q): "
            "AS, AD, KD, 9S, 7C beats AC, AD, QD, 9S, 7C."
        )

    def test_higher_made_rank(self):
        result = evaluate_hands(cards("Ks Kd"), [cards("As Ad")], cards("2h 5c 9s Jd 3h"))
        assert "loses on higher card values (A over K)" in result.explanation
        assert result.explanation.startswith("Opponent 1 wins with One Pair.")

    def test_wheel_loses_on_top_card(self):
        result = evaluate_hands(cards("6s 7d"), [cards("As 2d")], cards("3h 4c 5s Kd Qh"))
        assert "loses on higher card values (7 over 5)" in result.explanation

    def test_runner_up_skips_tied_winners(self):
        result = evaluate_hands(
            cards("As 2d"),
            [cards("9c 9d"), cards("Ac 3d")],
            cards("Kh Qh Jh Th 4s"),
        )
        lines = result.explanation.splitlines()

        assert lines[0] == "You and Opponent 2 split the pot with a Straight."
        assert lines[1].startswith("Opponent 1 also has a Straight, but loses on higher card values (A over K)")

    def test_everyone_ties(self):
        result = evaluate_hands(
            cards("2c 2d"),
            [cards("3c 3d"), cards("4c 4d")],
            cards("2h 3h 4h 5h 6h"),
        )
        lines = result.explanation.splitlines()

        assert lines[0] == "You, Opponent 1 and Opponent 2 split the pot with a Straight Flush."
        assert lines[1] == "All players hold hands of equal value."
        assert lines[-3:] == [
            "1. You: Straight Flush (6H, 5H, 4H, 3H, 2H)",
            "2. Opponent 1: Straight Flush (6H, 5H, 4H, 3H, 2H)",
            "3. Opponent 2: Straight Flush (6H, 5H, 4H, 3H, 2H)",
        ]

    def test_ranking_has_every_player(self):
        result = evaluate_hands(
            cards("2s 3d"),
            [cards("As Ad"), cards("Ks Kd"), cards("Qs Qd")],
            cards("5h 7c 9s Jd 2h"),
        )
        ranking = result.explanation.split("Full ranking:\n")[1].splitlines()
        assert [line.split(":")[0] for line in ranking] == [
            "1. Opponent 1",
            "2. Opponent 2",
            "3. Opponent 3",
            "4. You",
        ]

    def test_headline_verb_follows_hero_id(self):
        result = evaluate_hands(cards("As Ad"), [cards("Ks Kd")], cards("2h 5c 9s"))
        assert result.winner == HERO_ID
        assert result.explanation.startswith(f"{HERO_ID} win with One Pair.")

        result = evaluate_hands(cards("Ks Kd"), [cards("As Ad")], cards("2h 5c 9s"))
        assert result.explanation.startswith("Opponent 1 wins with One Pair.")
