"""Card, Rank, and Suit - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random


class Suit(Enum):
    """Card suits."""

    SPADES = auto()
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Return the suit symbol."""
        return {
            Suit.SPADES: "♠",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
        }[self]

    @property
    def color(self) -> str:
        """Return the display color ("black" or "red")."""
        if self in (Suit.SPADES, Suit.CLUBS):
            return "black"
        return "red"


class Rank(Enum):
    """Card ranks with blackjack values."""

    ACE = 1
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

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the point value before Ace reduction (Ace = 11, faces = 10)."""
        if self == Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        return self == Rank.ACE


_RANK_LABELS = {str(rank): rank for rank in Rank}
_RANK_LABELS["T"] = Rank.TEN

_SUIT_LABELS = {
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value (Ace counted as 11)."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10♦', 'kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str, suit_str = s[:-1], s[-1]
        if rank_str not in _RANK_LABELS:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_LABELS:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_LABELS[rank_str], _SUIT_LABELS[suit_str])


def standard_deck() -> list[Card]:
    """Return the 52 cards of one deck, suit by suit, in rank order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def build_cards(deck_count: int, rng: Random | None = None) -> list[Card]:
    """
    Build and shuffle the cards for a shoe.

    Args:
        deck_count: Number of 52-card decks to combine
        rng: Random number generator for shuffling

    Returns:
        deck_count * 52 cards in uniformly random order
    """
    if deck_count < 1:
        raise ValueError("Shoe must have at least 1 deck")

    cards = [card for _ in range(deck_count) for card in standard_deck()]
    (rng or Random()).shuffle(cards)
    return cards
