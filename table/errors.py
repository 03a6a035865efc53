"""Table error types."""


class TableError(Exception):
    """Base class for all table errors."""


class InvalidSeatTurn(TableError):
    """An intent addressed a seat that may not act right now."""

    def __init__(self, seat_id: str, reason: str) -> None:
        super().__init__(f"{seat_id}: {reason}")
        self.seat_id = seat_id
        self.reason = reason


class InvalidBetAmount(TableError, ValueError):
    """A bet amount that is non-numeric or not positive."""

    def __init__(self, raw: object) -> None:
        super().__init__(f"Invalid bet amount: {raw!r}")
        self.raw = raw


class ShoeEmptyError(TableError, IndexError):
    """A card was drawn from an exhausted shoe."""
