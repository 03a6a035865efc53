"""Pytest fixtures for blackjack table tests."""

import pytest
from random import Random

from config import TableConfig
from table.cards import Card
from table.game import BlackjackTable, FixedPolicy, Phase
from table.seats import SeatAction
from table.shoe import Shoe


def stacked_shoe(cards: list[str]) -> Shoe:
    """A shoe that deals the given cards in list order."""
    return Shoe([Card.from_string(c) for c in reversed(cards)])


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def make_shoe():
    """Factory for stacked shoes."""
    return stacked_shoe


@pytest.fixture
def table_config():
    """Default eight-seat, six-deck table settings."""
    return TableConfig(num_decks=6, seat_count=8, min_bet=5, tick_interval=0.01, seed=None)


@pytest.fixture
def table(table_config, rng):
    """A new table in the betting phase."""
    return BlackjackTable(table_config, rng=rng, policy=FixedPolicy(SeatAction.STAND))


@pytest.fixture
def place_bets():
    """Submit a bet for every seat in order."""

    def _place_bets(table: BlackjackTable, amount: str = "10") -> None:
        for seat in list(table.round.seats):
            table.submit_bet(seat.id, amount)

    return _place_bets


@pytest.fixture
def dealing_table(table, place_bets):
    """A table whose bets are all in."""
    place_bets(table)
    assert table.phase == Phase.DEALING
    return table


@pytest.fixture
def deal_hands():
    """
    Stack the shoe of a dealing table and deal the initial cards.

    Each seat receives its (first, second) pair, the dealer receives one
    card, and `extra` cards are left in the shoe for later hits.
    """

    def _deal_hands(
        table: BlackjackTable,
        seat_hands: list[tuple[str, str]],
        dealer_card: str = "9C",
        extra: list[str] | None = None,
    ) -> BlackjackTable:
        order = (
            [first for first, _ in seat_hands]
            + [dealer_card]
            + [second for _, second in seat_hands]
            + list(extra or [])
        )
        table.round.shoe = stacked_shoe(order)
        while table.phase == Phase.DEALING:
            table.deal_next_card()
        return table

    return _deal_hands


@pytest.fixture
def decisions_table(dealing_table, deal_hands):
    """A table in decisions where every seat holds a hard 16 (10-6)."""
    return deal_hands(
        dealing_table,
        [("10S", "6H")] * 8,
        dealer_card="9C",
        extra=["2D", "3D", "KD", "5C", "KC", "4H", "QH", "2S"] * 4,
    )
