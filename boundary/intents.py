"""Intent dispatch from the presentation layer into the table."""

import logging
from typing import Any

from pydantic import TypeAdapter

from boundary.schemas import (
    Intent,
    IntentResult,
    SeatIntent,
    SubmitBetIntent,
    TableIntent,
    TableSnapshot,
)
from table.game.clock import TableClock
from table.game.engine import BlackjackTable

logger = logging.getLogger(__name__)

_intent_adapter = TypeAdapter(Intent)


def parse_intent(message: dict[str, Any]) -> Intent:
    """
    Validate a raw message into an intent model.

    Raises:
        pydantic.ValidationError: for unknown intent types or missing fields
    """
    return _intent_adapter.validate_python(message)


class IntentDispatcher:
    """
    Route presentation intents to a table and answer with a fresh snapshot.

    Messages from the presentation layer:
    - {"type": "submit_bet", "seat_id": "player-1", "amount": "25"}
    - {"type": "hit" | "stand" | "double", "seat_id": "player-3"}
    - {"type": "start_dealing" | "stop_dealing" | "deal_next_card"}
    - {"type": "start_auto_play" | "stop_auto_play"}
    - {"type": "restart"}
    - {"type": "get_state"}

    With a clock, the automatic modes tick on their own; without one the
    flags are set and the caller drives table.tick() itself.
    """

    def __init__(self, table: BlackjackTable, clock: TableClock | None = None) -> None:
        self.table = table
        self.clock = clock

    def snapshot(self) -> TableSnapshot:
        return TableSnapshot.from_table(self.table)

    def dispatch(self, message: Intent | dict[str, Any]) -> IntentResult:
        """Apply one intent and return whether it was accepted."""
        intent = parse_intent(message) if isinstance(message, dict) else message

        if isinstance(intent, SubmitBetIntent):
            accepted = self.table.submit_bet(intent.seat_id, intent.amount)
        elif isinstance(intent, SeatIntent):
            actions = {
                "hit": self.table.hit,
                "stand": self.table.stand,
                "double": self.table.double,
            }
            accepted = actions[intent.type](intent.seat_id)
        elif isinstance(intent, TableIntent):
            accepted = self._dispatch_table(intent.type)
        else:
            raise TypeError(f"Unsupported intent: {intent!r}")

        if not accepted:
            logger.debug("Intent %s was not accepted", intent.type)
        return IntentResult(type=intent.type, accepted=accepted, state=self.snapshot())

    def _dispatch_table(self, intent_type: str) -> bool:
        driver = self.clock or self.table

        if intent_type == "start_dealing":
            return driver.start_dealing()
        if intent_type == "stop_dealing":
            return driver.stop_dealing()
        if intent_type == "start_auto_play":
            return driver.start_auto_play()
        if intent_type == "stop_auto_play":
            return driver.stop_auto_play()
        if intent_type == "restart":
            driver.restart()
            return True
        if intent_type == "deal_next_card":
            return self.table.deal_next_card() is not None
        # get_state
        return True
