"""Pydantic schemas for intents and table snapshots."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from table.cards import Card
from table.game.engine import BlackjackTable
from table.seats import Dealer, Seat


# Snapshot schemas
class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(frozen=True)

    rank: str
    suit: str
    color: Literal["black", "red"]
    value: int

    @classmethod
    def from_card(cls, card: Card) -> "CardResponse":
        return cls(
            rank=str(card.rank),
            suit=str(card.suit),
            color=card.suit.color,
            value=card.value,
        )


class SeatResponse(BaseModel):
    """One seat as the presentation layer sees it."""

    model_config = ConfigDict(frozen=True)

    id: str
    hand: list[CardResponse]
    bet: int
    score: int
    status: Literal["ACTIVE", "STANDING", "BUSTED", "BLACKJACK"]
    actions: list[Literal["hit", "stand", "double", "bust"]]
    is_soft: bool
    is_active: bool

    @classmethod
    def from_seat(cls, seat: Seat, is_active: bool) -> "SeatResponse":
        return cls(
            id=seat.id,
            hand=[CardResponse.from_card(c) for c in seat.hand],
            bet=seat.bet,
            score=seat.score,
            status=seat.status.name,
            actions=[str(a) for a in seat.actions],
            is_soft=seat.is_soft,
            is_active=is_active,
        )


class DealerResponse(BaseModel):
    """Dealer hand."""

    model_config = ConfigDict(frozen=True)

    id: str
    hand: list[CardResponse]
    score: int

    @classmethod
    def from_dealer(cls, dealer: Dealer) -> "DealerResponse":
        return cls(
            id=dealer.id,
            hand=[CardResponse.from_card(c) for c in dealer.hand],
            score=dealer.score,
        )


class TableSnapshot(BaseModel):
    """Everything the presentation layer reads on each render."""

    model_config = ConfigDict(frozen=True)

    phase: Literal["BETTING", "DEALING", "DECISIONS"]
    seats: list[SeatResponse]
    dealer: DealerResponse
    active_seat_index: int
    deal_cursor: int
    dealing_active: bool
    auto_play_active: bool
    is_complete: bool
    aborted: bool
    shoe_remaining: int

    @classmethod
    def from_table(cls, table: BlackjackTable) -> "TableSnapshot":
        round_ = table.round
        return cls(
            phase=round_.phase.name,
            seats=[
                SeatResponse.from_seat(seat, i == round_.active_seat_index)
                for i, seat in enumerate(round_.seats)
            ],
            dealer=DealerResponse.from_dealer(round_.dealer),
            active_seat_index=round_.active_seat_index,
            deal_cursor=round_.deal_cursor,
            dealing_active=table.dealing_active,
            auto_play_active=table.auto_play_active,
            is_complete=round_.is_complete,
            aborted=round_.aborted,
            shoe_remaining=round_.shoe.cards_remaining,
        )


# Intent schemas
class SubmitBetIntent(BaseModel):
    """Bet for the seat at the betting cursor; the amount is raw input text."""

    type: Literal["submit_bet"]
    seat_id: str
    amount: str | int = Field(default="", description="Bet amount as typed")


class SeatIntent(BaseModel):
    """Decision for the seat at the decision cursor."""

    type: Literal["hit", "stand", "double"]
    seat_id: str


class TableIntent(BaseModel):
    """Intent that addresses the whole table."""

    type: Literal[
        "start_dealing",
        "stop_dealing",
        "deal_next_card",
        "start_auto_play",
        "stop_auto_play",
        "restart",
        "get_state",
    ]


Intent = Annotated[
    Union[SubmitBetIntent, SeatIntent, TableIntent],
    Field(discriminator="type"),
]


class IntentResult(BaseModel):
    """Outcome of one dispatched intent."""

    model_config = ConfigDict(frozen=True)

    type: str
    accepted: bool
    state: TableSnapshot
