"""The multi-deck shoe cards are dealt from."""

from random import Random
from typing import Iterable, Iterator

from table.cards import Card, build_cards
from table.errors import ShoeEmptyError


class Shoe:
    """
    Ordered pool of undealt cards.

    The top of the shoe is the end of the sequence; every draw removes
    exactly one card from there, so no card is ever dealt twice.
    """

    def __init__(self, cards: Iterable[Card], num_decks: int = 1) -> None:
        """
        Initialize a shoe from an already ordered sequence of cards.

        Args:
            cards: Cards in shoe order (last card is drawn first)
            num_decks: Number of decks the cards were built from
        """
        self._cards: list[Card] = list(cards)
        self._num_decks = num_decks
        self._total_cards = len(self._cards)

    @classmethod
    def build(cls, num_decks: int = 6, rng: Random | None = None) -> "Shoe":
        """Build a freshly shuffled shoe of num_decks standard decks."""
        return cls(build_cards(num_decks, rng), num_decks=num_decks)

    def draw(self) -> Card:
        """Draw the top card of the shoe."""
        if not self._cards:
            raise ShoeEmptyError("Cannot draw from empty shoe")
        return self._cards.pop()

    @property
    def cards_remaining(self) -> int:
        """Return the number of undealt cards."""
        return len(self._cards)

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards drawn since the shoe was built."""
        return self._total_cards - len(self._cards)

    @property
    def total_cards(self) -> int:
        return self._total_cards

    @property
    def num_decks(self) -> int:
        return self._num_decks

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)


def build_shoe(num_decks: int = 6, rng: Random | None = None) -> Shoe:
    """Build a freshly shuffled shoe."""
    return Shoe.build(num_decks, rng)
