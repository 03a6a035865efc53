"""Round phase enumeration."""

from enum import Enum, auto


class Phase(Enum):
    """
    Round state machine phases.

    Flow: BETTING → DEALING → DECISIONS
    """

    # Seats submit bets one at a time
    BETTING = auto()

    # Initial cards go out in the fixed deal order
    DEALING = auto()

    # Seats hit, stand or double in turn
    DECISIONS = auto()

    def __str__(self) -> str:
        return self.name.title()

