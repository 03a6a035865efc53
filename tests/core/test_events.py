"""Tests for the table event system."""

from table.game.events import EventEmitter, EventType, GameEvent


class TestEventEmitter:
    """Tests for the EventEmitter class."""

    def test_typed_and_catch_all_handlers(self):
        emitter = EventEmitter()
        typed, everything = [], []
        emitter.subscribe(typed.append, EventType.BET_PLACED)
        emitter.subscribe(everything.append)

        emitter.emit_new(EventType.BET_PLACED, seat_id="player-1", amount=10)
        emitter.emit_new(EventType.CARD_DEALT, card="A♠")

        assert [e.event_type for e in typed] == [EventType.BET_PLACED]
        assert [e.event_type for e in everything] == [EventType.BET_PLACED, EventType.CARD_DEALT]

    def test_unsubscribe(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.SEAT_HIT)
        emitter.unsubscribe(received.append, EventType.SEAT_HIT)
        emitter.unsubscribe(received.append, EventType.SEAT_STOOD)

        emitter.emit_new(EventType.SEAT_HIT, seat_id="player-1")

        assert received == []
        assert len(emitter.history) == 1

    def test_history_and_filter(self):
        emitter = EventEmitter()
        emitter.emit_new(EventType.TURN_ADVANCED, active_seat_index=1)
        emitter.emit_new(EventType.SEAT_STOOD, seat_id="player-2")
        emitter.emit_new(EventType.TURN_ADVANCED, active_seat_index=2)

        advanced = emitter.of_type(EventType.TURN_ADVANCED)
        assert [e.data["active_seat_index"] for e in advanced] == [1, 2]

        emitter.clear_history()
        assert emitter.history == []

    def test_event_str(self):
        event = GameEvent(EventType.BET_COERCED, {"amount": 5})
        assert str(event) == "BET_COERCED: {'amount': 5}"


class TestTableEvents:
    """Tests for events emitted while a round is played."""

    def test_table_subscription_sees_deal(self, dealing_table):
        dealt = []
        dealing_table.subscribe(dealt.append, EventType.CARD_DEALT)

        while dealing_table.deal_next_card() is not None:
            pass

        assert len(dealt) == 17
        assert dealt[8].data["holder"] == "dealer-1"
        assert [e.data["deal_cursor"] for e in dealt] == list(range(17))
