"""Hand evaluation for blackjack."""

from typing import Iterable

from table.cards import Card

BLACKJACK = 21


def _raw_total(cards: Iterable[Card]) -> tuple[int, int]:
    """Return the total with every Ace as 11, and the number of Aces."""
    total = 0
    aces = 0
    for card in cards:
        if card.is_ace:
            aces += 1
        total += card.value
    return total, aces


def score(cards: Iterable[Card]) -> int:
    """
    Calculate the blackjack value of a hand.

    Aces start at 11 and are reduced to 1, one at a time, while the total
    is over 21. An empty hand scores 0.
    """
    total, aces = _raw_total(cards)

    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total


def is_soft(cards: Iterable[Card]) -> bool:
    """Check if the hand still counts an Ace as 11."""
    total, aces = _raw_total(cards)

    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return aces > 0


def is_busted(cards: Iterable[Card]) -> bool:
    """Check if the hand has busted (value > 21)."""
    return score(cards) > BLACKJACK
