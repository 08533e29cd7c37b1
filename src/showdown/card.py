"""Card representations and the two-character card code."""

from collections import Counter
from enum import IntEnum
from dataclasses import dataclass
from typing import Iterator, Self

from .errors import CardParseError


class Suit(IntEnum):
    """Card suits. Values don't affect poker hand ranking."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        """Unicode symbol for the suit."""
        return ["♣", "♦", "♥", "♠"][self.value]

    @property
    def char(self) -> str:
        """Single-letter code used on the wire."""
        return "CDHS"[self.value]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    def __str__(self) -> str:
        return self.symbol


class Rank(IntEnum):
    """Card ranks. Higher value = higher rank."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        """Single-character code, 'T' for ten."""
        return "23456789TJQKA"[self.index]

    @property
    def index(self) -> int:
        """Zero-based position among ranks: two is 0, ace is 12."""
        return self.value - 2

    @property
    def symbol(self) -> str:
        """Short display symbol for the rank."""
        if self.value <= 10:
            return str(self.value)
        return self.char

    def __str__(self) -> str:
        return self.symbol


_RANK_CHARS = {r.char: r for r in Rank}
_SUIT_CHARS = {s.char: s for s in Suit}


@dataclass(frozen=True, slots=True)
class Card:
    """A playing card with rank and suit."""

    rank: Rank
    suit: Suit

    @property
    def code(self) -> str:
        """Canonical two-character code, e.g. 'AS' or 'TD'."""
        return f"{self.rank.char}{self.suit.char}"

    def __str__(self) -> str:
        return f"{self.rank.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.code})"

    @classmethod
    def from_code(cls, code: str) -> Self:
        """Parse a strict two-character code like 'AS', 'TD', '2c'.

        Rank: 2-9, T, J, Q, K, A
        Suit: C(lubs), D(iamonds), H(earts), S(pades)
        """
        if not isinstance(code, str) or len(code) != 2:
            raise CardParseError(f"Invalid card code: {code!r}")
        rank_char, suit_char = code.upper()
        if rank_char not in _RANK_CHARS:
            raise CardParseError(f"Invalid rank: {rank_char}")
        if suit_char not in _SUIT_CHARS:
            raise CardParseError(f"Invalid suit: {suit_char}")
        return cls(rank=_RANK_CHARS[rank_char], suit=_SUIT_CHARS[suit_char])

    @classmethod
    def from_str(cls, s: str) -> Self:
        """Parse a card from looser input like 'As', 'Kh', '10d', '2c'."""
        if not isinstance(s, str):
            raise CardParseError(f"Invalid card code: {s!r}")
        s = s.strip().upper()
        if s.startswith("10"):
            s = "T" + s[2:]
        return cls.from_code(s)


def card(s: str) -> Card:
    """Shorthand for Card.from_str()."""
    return Card.from_str(s)


def as_card(value: Card | str) -> Card:
    """Accept either a Card or its code."""
    if isinstance(value, Card):
        return value
    return Card.from_str(value)


def full_deck() -> Iterator[Card]:
    """All 52 cards, suit by suit."""
    for suit in Suit:
        for rank in Rank:
            yield Card(rank, suit)


def sort_cards(cards: list[Card]) -> list[Card]:
    """Order cards by rank, highest first."""
    return sorted(cards, key=lambda c: c.rank, reverse=True)


def duplicate_codes(cards: list[Card]) -> list[str]:
    """Codes of cards that appear more than once, in first-seen order."""
    counts = Counter(cards)
    return list(dict.fromkeys(c.code for c in cards if counts[c] > 1))
