"""Core eight-seat blackjack engine - 100% UI-agnostic."""

from table.cards import Card, Rank, Suit
from table.errors import InvalidBetAmount, InvalidSeatTurn, ShoeEmptyError, TableError
from table.hand import score
from table.seats import Dealer, Seat, SeatAction, SeatStatus
from table.shoe import Shoe, build_shoe

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Shoe",
    "build_shoe",
    "score",
    "Seat",
    "Dealer",
    "SeatStatus",
    "SeatAction",
    "TableError",
    "InvalidSeatTurn",
    "InvalidBetAmount",
    "ShoeEmptyError",
]
