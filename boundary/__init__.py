"""Presentation boundary: table snapshots in, intents out."""

from boundary.intents import IntentDispatcher, parse_intent
from boundary.schemas import IntentResult, TableSnapshot

__all__ = [
    "IntentDispatcher",
    "IntentResult",
    "TableSnapshot",
    "parse_intent",
]
