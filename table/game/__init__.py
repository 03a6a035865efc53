"""Round state machine, table engine and timer driver."""

from table.game.events import GameEvent, EventType
from table.game.state import Phase
from table.game.policy import DecisionPolicy, RandomPolicy, FixedPolicy
from table.game.round import Round
from table.game.engine import BlackjackTable
from table.game.clock import TableClock

__all__ = [
    "GameEvent",
    "EventType",
    "Phase",
    "DecisionPolicy",
    "RandomPolicy",
    "FixedPolicy",
    "Round",
    "BlackjackTable",
    "TableClock",
]
