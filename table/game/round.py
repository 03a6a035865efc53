"""One round at the table, driven by a phase state machine."""

import logging
import re
from random import Random

from transitions import Machine

from table.cards import Card
from table.errors import InvalidBetAmount, InvalidSeatTurn, ShoeEmptyError
from table.game.events import EventEmitter, EventType
from table.game.state import Phase
from table.seats import Dealer, Seat, SeatAction, SeatStatus, make_seats
from table.shoe import Shoe

logger = logging.getLogger(__name__)

DEALER = "dealer"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def build_deal_order(seat_count: int) -> tuple[int | str, ...]:
    """
    Return the fixed initial deal order.

    One card to every seat in order, one card to the dealer, then a second
    card to every seat. The dealer only gets a single card.
    """
    seats = tuple(range(seat_count))
    return seats + (DEALER,) + seats


def parse_bet(amount: str | int) -> int:
    """
    Parse a bet amount as the leading integer of its text.

    Raises:
        InvalidBetAmount: if no integer can be read or it is not positive
    """
    if isinstance(amount, int) and not isinstance(amount, bool):
        value = amount
    else:
        match = _LEADING_INT.match(str(amount))
        if match is None:
            raise InvalidBetAmount(amount)
        try:
            value = int(match.group(1))
        except ValueError as exc:
            # Digit strings past the interpreter conversion limit
            raise InvalidBetAmount(amount) from exc

    if value <= 0:
        raise InvalidBetAmount(amount)
    return value


class Round:
    """
    A single round: betting, the initial deal, then seat decisions.

    The round owns its seats, dealer and shoe. Intents addressed to a seat
    that may not act raise InvalidSeatTurn; a draw from an exhausted shoe
    aborts the round and raises ShoeEmptyError. Neither leaves a partial
    update behind.
    """

    # State machine states
    STATES = [p.name.lower() for p in Phase]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "close_betting", "source": "betting", "dest": "dealing"},
        {"trigger": "finish_dealing", "source": "dealing", "dest": "decisions"},
    ]

    def __init__(
        self,
        seat_count: int = 8,
        num_decks: int = 6,
        min_bet: int = 5,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a fresh round in the betting phase.

        Args:
            seat_count: Number of seats at the table
            num_decks: Number of decks in every shoe built for this round
            min_bet: Bet stored when a submitted amount is invalid
            rng: Random number generator for shuffling
            events: Emitter that receives this round's events
        """
        self.num_decks = num_decks
        self.min_bet = min_bet
        self._rng = rng or Random()
        self.events = events or EventEmitter()

        self.seats: list[Seat] = make_seats(seat_count)
        self.dealer = Dealer()
        self.shoe = Shoe.build(num_decks, self._rng)
        self.deal_order = build_deal_order(seat_count)

        self.active_seat_index = 0
        self.deal_cursor = 0
        self.aborted = False

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="betting",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def phase(self) -> Phase:
        """Get current phase as enum."""
        return Phase[self._machine_state.upper()]  # type: ignore

    @property
    def active_seat(self) -> Seat | None:
        """The seat at the cursor, or None once every seat has had its turn."""
        if 0 <= self.active_seat_index < len(self.seats):
            return self.seats[self.active_seat_index]
        return None

    @property
    def is_complete(self) -> bool:
        """Check if every seat has finished its decisions."""
        return self.phase == Phase.DECISIONS and self.active_seat is None

    # -- Betting ---------------------------------------------------------

    def submit_bet(self, seat_id: str, amount: str | int) -> int:
        """
        Record the bet of the seat at the cursor.

        Invalid amounts are replaced by the minimum bet. After the last
        seat bets, the round moves on to dealing.

        Returns:
            The bet stored for the seat
        """
        seat = self._require_turn(seat_id, Phase.BETTING)

        try:
            seat.bet = parse_bet(amount)
        except InvalidBetAmount as exc:
            seat.bet = self.min_bet
            logger.debug("%s; %s bets the minimum %d", exc, seat.id, self.min_bet)
            self.events.emit_new(
                EventType.BET_COERCED,
                seat_id=seat.id,
                raw=str(amount),
                amount=seat.bet,
            )

        self.events.emit_new(EventType.BET_PLACED, seat_id=seat.id, amount=seat.bet)
        self.active_seat_index += 1

        if self.active_seat is None:
            self._start_dealing_phase()

        return seat.bet

    def _start_dealing_phase(self) -> None:
        """Build a fresh shoe and clear every hand; bets are kept."""
        self.shoe = Shoe.build(self.num_decks, self._rng)
        for seat in self.seats:
            seat.clear_hand()
        self.dealer.clear_hand()
        self.deal_cursor = 0

        self.close_betting()  # Trigger state transition

        logger.info("Betting closed, dealing from a %d-deck shoe", self.num_decks)
        self.events.emit_new(
            EventType.BETTING_COMPLETE,
            bets={seat.id: seat.bet for seat in self.seats},
        )
        self.events.emit_new(
            EventType.SHOE_BUILT,
            num_decks=self.num_decks,
            cards=self.shoe.cards_remaining,
        )

    # -- Dealing ---------------------------------------------------------

    @property
    def dealing_finished(self) -> bool:
        return self.deal_cursor >= len(self.deal_order)

    def deal_next_card(self) -> Card | None:
        """
        Deal the card at the deal cursor.

        Returns:
            The dealt card, or None when the round is not dealing
        """
        if self.aborted or self.phase != Phase.DEALING or self.dealing_finished:
            return None

        target = self.deal_order[self.deal_cursor]
        card = self._draw()

        if target == DEALER:
            self.dealer.receive(card)
            holder_id, holder_score = self.dealer.id, self.dealer.score
        else:
            seat = self.seats[target]
            seat.receive(card)
            holder_id, holder_score = seat.id, seat.score
            if seat.status == SeatStatus.BLACKJACK:
                self.events.emit_new(EventType.SEAT_BLACKJACK, seat_id=seat.id)

        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            holder=holder_id,
            score=holder_score,
            deal_cursor=self.deal_cursor,
        )
        self.deal_cursor += 1

        if self.dealing_finished:
            self.active_seat_index = 0
            self.finish_dealing()  # Trigger state transition
            logger.info("Initial deal complete, %d cards left", self.shoe.cards_remaining)
            self.events.emit_new(
                EventType.DEALING_COMPLETE,
                cards_remaining=self.shoe.cards_remaining,
            )

        return card

    # -- Decisions -------------------------------------------------------

    def hit(self, seat_id: str) -> Seat:
        """Seat at the cursor takes another card; a bust ends its turn."""
        seat = self._require_turn(seat_id, Phase.DECISIONS)
        card = self._draw()

        seat.receive(card)
        seat.record(SeatAction.HIT)
        self.events.emit_new(
            EventType.SEAT_HIT,
            seat_id=seat.id,
            card=str(card),
            score=seat.score,
        )

        if self._check_bust_or_blackjack(seat):
            self._advance_turn()
        return seat

    def stand(self, seat_id: str) -> Seat:
        """Seat at the cursor keeps its hand and ends its turn."""
        seat = self._require_turn(seat_id, Phase.DECISIONS)

        seat.record(SeatAction.STAND)
        seat.status = SeatStatus.STANDING
        self.events.emit_new(EventType.SEAT_STOOD, seat_id=seat.id, score=seat.score)

        self._advance_turn()
        return seat

    def double(self, seat_id: str) -> Seat:
        """Seat at the cursor doubles its bet and takes exactly one final card."""
        seat = self._require_turn(seat_id, Phase.DECISIONS)
        card = self._draw()

        seat.bet *= 2
        seat.receive(card)
        seat.record(SeatAction.HIT)
        self.events.emit_new(
            EventType.SEAT_DOUBLED,
            seat_id=seat.id,
            card=str(card),
            score=seat.score,
            new_bet=seat.bet,
        )

        self._check_bust_or_blackjack(seat)
        self._advance_turn()
        return seat

    def _check_bust_or_blackjack(self, seat: Seat) -> bool:
        """Report the seat's status after a card; True if it busted."""
        if seat.status == SeatStatus.BUSTED:
            seat.record(SeatAction.BUST)
            self.events.emit_new(EventType.SEAT_BUSTED, seat_id=seat.id, score=seat.score)
            return True
        if seat.status == SeatStatus.BLACKJACK:
            self.events.emit_new(EventType.SEAT_BLACKJACK, seat_id=seat.id)
        return False

    def _advance_turn(self) -> None:
        """Move the cursor to the next seat."""
        self.active_seat_index += 1

        if self.active_seat is None:
            logger.info("All %d seats have acted", len(self.seats))
            self.events.emit_new(EventType.DECISIONS_COMPLETE)
        else:
            self.events.emit_new(
                EventType.TURN_ADVANCED,
                seat_id=self.active_seat.id,
                active_seat_index=self.active_seat_index,
            )

    # -- Helpers ---------------------------------------------------------

    def seat_index(self, seat_id: str) -> int:
        """Return the index of a seat, or raise InvalidSeatTurn if unknown."""
        for i, seat in enumerate(self.seats):
            if seat.id == seat_id:
                return i
        raise InvalidSeatTurn(seat_id, "no such seat")

    def _require_turn(self, seat_id: str, phase: Phase) -> Seat:
        """Return the seat if it may act in the given phase right now."""
        if self.aborted:
            raise InvalidSeatTurn(seat_id, "round was aborted")
        if self.phase != phase:
            raise InvalidSeatTurn(seat_id, f"not accepted during {self.phase}")

        index = self.seat_index(seat_id)
        if index != self.active_seat_index:
            raise InvalidSeatTurn(seat_id, "not this seat's turn")

        seat = self.seats[index]
        if phase == Phase.DECISIONS and not seat.can_act:
            raise InvalidSeatTurn(seat_id, f"seat is {seat.status}")
        return seat

    def _draw(self) -> Card:
        """Draw from the shoe; exhaustion aborts the round."""
        try:
            return self.shoe.draw()
        except ShoeEmptyError:
            self.aborted = True
            logger.error("Shoe exhausted during %s, round aborted", self.phase)
            self.events.emit_new(EventType.SHOE_EXHAUSTED, phase=self.phase.name)
            self.events.emit_new(EventType.ROUND_ABORTED, reason="shoe_exhausted")
            raise
