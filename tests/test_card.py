"""Tests for card module."""

import pytest
from showdown.card import Card, Rank, Suit, card, duplicate_codes, full_deck, sort_cards
from showdown.errors import CardParseError, InputError


class TestCard:
    def test_card_creation(self):
        c = Card(Rank.ACE, Suit.SPADES)
        assert c.rank == Rank.ACE
        assert c.suit == Suit.SPADES

    def test_card_str(self):
        c = Card(Rank.ACE, Suit.SPADES)
        assert str(c) == "A♠"

        c = Card(Rank.TEN, Suit.HEARTS)
        assert str(c) == "10♥"

    def test_card_code(self):
        assert Card(Rank.TEN, Suit.DIAMONDS).code == "TD"
        assert Card(Rank.TWO, Suit.CLUBS).code == "2C"
        assert repr(Card(Rank.KING, Suit.HEARTS)) == "Card(KH)"

    def test_card_from_code(self):
        assert Card.from_code("AS") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_code("kh") == Card(Rank.KING, Suit.HEARTS)
        assert Card.from_code("TC") == Card(Rank.TEN, Suit.CLUBS)

    def test_from_code_is_strict(self):
        with pytest.raises(CardParseError):
            Card.from_code("10D")
        with pytest.raises(CardParseError):
            Card.from_code(" AS")
        with pytest.raises(CardParseError):
            Card.from_code("A")

    def test_card_from_str(self):
        assert Card.from_str("As") == Card(Rank.ACE, Suit.SPADES)
        assert Card.from_str("10d") == Card(Rank.TEN, Suit.DIAMONDS)
        assert Card.from_str(" 2c ") == Card(Rank.TWO, Suit.CLUBS)

    def test_card_shorthand(self):
        assert card("As") == Card(Rank.ACE, Suit.SPADES)

    def test_invalid_card(self):
        with pytest.raises(CardParseError):
            Card.from_str("Xx")
        with pytest.raises(CardParseError):
            Card.from_str("1s")
        with pytest.raises(CardParseError):
            Card.from_str("AX")
        with pytest.raises(CardParseError):
            Card.from_str(None)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            card("ZZ")
        assert issubclass(CardParseError, InputError)

    def test_rank_comparison(self):
        assert Rank.ACE > Rank.KING
        assert Rank.TWO < Rank.THREE

    def test_rank_index(self):
        assert Rank.TWO.index == 0
        assert Rank.ACE.index == 12

    def test_card_hashable(self):
        # Cards should be usable in sets/dicts
        cards = {card("As"), card("Kh"), card("As")}
        assert len(cards) == 2


class TestCodes:
    def test_round_trip_all_codes(self):
        codes = [r + s for r in "23456789TJQKA" for s in "SHDC"]
        assert len(codes) == 52
        for code in codes:
            assert Card.from_code(code).code == code

    def test_full_deck(self):
        deck = list(full_deck())
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_sort_cards(self):
        cards = [card("2c"), card("As"), card("Td"), card("Kh")]
        assert [c.code for c in sort_cards(cards)] == ["AS", "KH", "TD", "2C"]

    def test_duplicate_codes(self):
        cards = [card("As"), card("Kd"), card("As"), card("Kd"), card("2c"), card("As")]
        assert duplicate_codes(cards) == ["AS", "KD"]
        assert duplicate_codes([card("As"), card("Ks")]) == []
