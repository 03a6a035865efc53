"""Eight-seat blackjack table: rounds, intents and automatic modes."""

import logging
from random import Random
from typing import Callable

from config import TableConfig
from table.cards import Card
from table.errors import InvalidSeatTurn, ShoeEmptyError
from table.game.events import EventEmitter, EventType, GameEvent
from table.game.policy import DecisionPolicy, RandomPolicy
from table.game.round import Round
from table.game.state import Phase
from table.seats import SeatAction

logger = logging.getLogger(__name__)


class BlackjackTable:
    """
    Blackjack table holding the current round.

    This is the core game logic, completely UI-agnostic. Every intent is
    applied synchronously and returns whether it took effect; rejected
    intents and shoe exhaustion are reported through events only.

    At most one automatic mode runs at a time: dealing (one card per tick)
    or auto play (one policy decision per tick). A timer driver calls
    tick(), which re-checks the phase and mode before changing anything.
    """

    def __init__(
        self,
        table_config: TableConfig | None = None,
        rng: Random | None = None,
        policy: DecisionPolicy | None = None,
    ) -> None:
        """
        Initialize a table with a fresh round in the betting phase.

        Args:
            table_config: Table settings (uses defaults if not provided)
            rng: Random number generator for reproducible shoes
            policy: Decision policy for automated play
        """
        self.config = table_config or TableConfig()
        self._rng = rng or Random(self.config.seed)
        self.policy = policy or RandomPolicy(self._rng)
        self.events = EventEmitter()

        self.dealing_active = False
        self.auto_play_active = False
        self.round = self._new_round()

    def _new_round(self) -> Round:
        round_ = Round(
            seat_count=self.config.seat_count,
            num_decks=self.config.num_decks,
            min_bet=self.config.min_bet,
            rng=self._rng,
            events=self.events,
        )
        logger.info("New round with %d seats", self.config.seat_count)
        self.events.emit_new(EventType.ROUND_STARTED, seats=self.config.seat_count)
        return round_

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to table events."""
        self.events.subscribe(handler, event_type)

    @property
    def phase(self) -> Phase:
        return self.round.phase

    @property
    def timer_active(self) -> bool:
        """Check if either automatic mode wants ticks."""
        return self.dealing_active or self.auto_play_active

    # -- Intents ---------------------------------------------------------

    def submit_bet(self, seat_id: str, amount: str | int) -> bool:
        """Place a bet for the seat at the betting cursor."""
        return self._apply(seat_id, self.round.submit_bet, amount)

    def hit(self, seat_id: str) -> bool:
        """User-driven hit for the seat at the decision cursor."""
        if not self._check_user_turn(seat_id):
            return False
        return self._apply(seat_id, self.round.hit)

    def stand(self, seat_id: str) -> bool:
        """User-driven stand for the seat at the decision cursor."""
        if not self._check_user_turn(seat_id):
            return False
        return self._apply(seat_id, self.round.stand)

    def double(self, seat_id: str) -> bool:
        """User-driven double for the seat at the decision cursor."""
        if not self._check_user_turn(seat_id):
            return False
        return self._apply(seat_id, self.round.double)

    def deal_next_card(self) -> Card | None:
        """Deal one card of the initial deal (manual or timer driven)."""
        try:
            card = self.round.deal_next_card()
        except ShoeEmptyError:
            self.stop_timers()
            return None

        if self.phase != Phase.DEALING and self.dealing_active:
            self.dealing_active = False
            self.events.emit_new(EventType.DEALING_STOPPED, reason="complete")
        return card

    def start_dealing(self) -> bool:
        """Turn on automatic dealing; only valid while dealing."""
        if self.round.aborted or self.phase != Phase.DEALING or self.round.dealing_finished:
            return False
        if self.dealing_active:
            return True

        self.stop_auto_play()
        self.dealing_active = True
        logger.debug("Automatic dealing started at cursor %d", self.round.deal_cursor)
        self.events.emit_new(EventType.DEALING_STARTED, deal_cursor=self.round.deal_cursor)
        return True

    def stop_dealing(self) -> bool:
        """Turn off automatic dealing immediately."""
        if not self.dealing_active:
            return False
        self.dealing_active = False
        self.events.emit_new(EventType.DEALING_STOPPED, reason="stopped")
        return True

    def start_auto_play(self) -> bool:
        """Turn on automated decisions; only valid while seats are deciding."""
        if self.round.aborted or self.phase != Phase.DECISIONS or self.round.is_complete:
            return False
        if self.auto_play_active:
            return True

        self.stop_dealing()
        self.auto_play_active = True
        logger.debug("Auto play started at seat %d", self.round.active_seat_index)
        self.events.emit_new(
            EventType.AUTO_PLAY_STARTED,
            active_seat_index=self.round.active_seat_index,
        )
        return True

    def stop_auto_play(self) -> bool:
        """Turn off automated decisions immediately."""
        if not self.auto_play_active:
            return False
        self.auto_play_active = False
        self.events.emit_new(EventType.AUTO_PLAY_STOPPED, reason="stopped")
        return True

    def auto_decide(self) -> SeatAction | None:
        """
        Let the policy act for the seat at the cursor.

        Returns:
            The action applied, or None if no seat could act
        """
        seat = self.round.active_seat
        if self.round.aborted or self.phase != Phase.DECISIONS or seat is None:
            return None

        action = self.policy.choose(seat)
        handler = self.round.hit if action == SeatAction.HIT else self.round.stand
        if not self._apply(seat.id, handler):
            return None

        if self.round.is_complete and self.auto_play_active:
            self.auto_play_active = False
            self.events.emit_new(EventType.AUTO_PLAY_STOPPED, reason="complete")
        return action

    def restart(self) -> None:
        """Discard the current round and start a fresh one in betting."""
        self.stop_timers()
        self.events.clear_history()
        self.round = self._new_round()

    # -- Timer -----------------------------------------------------------

    def tick(self) -> bool:
        """
        Apply one timer tick for whichever automatic mode is running.

        Returns:
            True if the tick changed the round
        """
        if self.dealing_active:
            if self.phase != Phase.DEALING:
                self.dealing_active = False
                return False
            return self.deal_next_card() is not None

        if self.auto_play_active:
            if self.phase != Phase.DECISIONS or self.round.is_complete:
                self.auto_play_active = False
                return False
            return self.auto_decide() is not None

        return False

    # -- Helpers ---------------------------------------------------------

    def _check_user_turn(self, seat_id: str) -> bool:
        if not self.auto_play_active:
            return True
        self._reject(InvalidSeatTurn(seat_id, "automated play is running"))
        return False

    def _apply(self, seat_id: str, operation: Callable, *args) -> bool:
        """Run a round operation, absorbing turn errors and shoe exhaustion."""
        try:
            operation(seat_id, *args)
        except InvalidSeatTurn as exc:
            self._reject(exc)
            return False
        except ShoeEmptyError:
            self.stop_timers()
            return False
        return True

    def _reject(self, exc: InvalidSeatTurn) -> None:
        logger.debug("Ignored intent: %s", exc)
        self.events.emit_new(
            EventType.INVALID_SEAT_TURN,
            seat_id=exc.seat_id,
            reason=exc.reason,
            phase=self.phase.name,
        )

    def stop_timers(self) -> None:
        """Switch off both automatic modes."""
        self.stop_dealing()
        self.stop_auto_play()
