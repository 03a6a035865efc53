"""Seat and dealer state for one round."""

from dataclasses import dataclass, field
from enum import Enum, auto

from table.cards import Card
from table.hand import BLACKJACK, is_soft, score


class SeatStatus(Enum):
    """Where a seat stands in the decision loop."""

    ACTIVE = auto()
    STANDING = auto()
    BUSTED = auto()
    BLACKJACK = auto()

    def __str__(self) -> str:
        return self.name.title()


class SeatAction(Enum):
    """Seat decisions; all but DOUBLE also appear in action logs."""

    HIT = auto()
    STAND = auto()
    DOUBLE = auto()
    BUST = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Statuses that still allow hit, stand or double
ACTING_STATUSES = frozenset({SeatStatus.ACTIVE, SeatStatus.BLACKJACK})


@dataclass
class Seat:
    """A player position at the table."""

    id: str
    hand: list[Card] = field(default_factory=list)
    bet: int = 0
    status: SeatStatus = SeatStatus.ACTIVE
    actions: list[SeatAction] = field(default_factory=list)

    @property
    def score(self) -> int:
        """Hand value, always derived from the cards held."""
        return score(self.hand)

    @property
    def is_soft(self) -> bool:
        return is_soft(self.hand)

    @property
    def is_busted(self) -> bool:
        return self.status == SeatStatus.BUSTED

    @property
    def has_blackjack(self) -> bool:
        """Check if the hand is worth exactly 21."""
        return self.score == BLACKJACK

    @property
    def can_act(self) -> bool:
        """Check if the seat may still hit, stand or double."""
        return self.status in ACTING_STATUSES

    def receive(self, card: Card) -> None:
        """Add a card to the hand and re-derive the status."""
        self.hand.append(card)
        if not self.can_act:
            return

        value = self.score
        if value > BLACKJACK:
            self.status = SeatStatus.BUSTED
        elif value == BLACKJACK:
            self.status = SeatStatus.BLACKJACK
        else:
            self.status = SeatStatus.ACTIVE

    def record(self, action: SeatAction) -> None:
        """Append an action tag to the seat's log."""
        self.actions.append(action)

    def clear_hand(self) -> None:
        """Remove all cards and reset status and log; the bet is kept."""
        self.hand.clear()
        self.status = SeatStatus.ACTIVE
        self.actions.clear()

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.hand)
        return f"{self.id} [{self.bet}] {cards_str} ({self.score}, {self.status})"


@dataclass
class Dealer:
    """The dealer's hand. The dealer never acts during decisions."""

    id: str = "dealer-1"
    hand: list[Card] = field(default_factory=list)

    @property
    def score(self) -> int:
        return score(self.hand)

    def receive(self, card: Card) -> None:
        self.hand.append(card)

    def clear_hand(self) -> None:
        self.hand.clear()


def seat_id(index: int) -> str:
    """Return the stable identifier of the seat at a 0-based index."""
    return f"player-{index + 1}"


def make_seats(count: int) -> list[Seat]:
    """Create count empty seats in table order."""
    return [Seat(id=seat_id(i)) for i in range(count)]
