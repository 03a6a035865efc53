"""Tests for intent dispatch and table snapshots."""

import asyncio

import pytest
from pydantic import ValidationError

from boundary import IntentDispatcher, TableSnapshot, parse_intent
from boundary.schemas import SeatIntent, SubmitBetIntent, TableIntent
from table.game import TableClock


@pytest.fixture
def dispatcher(table):
    return IntentDispatcher(table)


class TestParseIntent:
    """Tests for intent validation."""

    def test_parse_bet(self):
        intent = parse_intent({"type": "submit_bet", "seat_id": "player-1", "amount": "25"})
        assert isinstance(intent, SubmitBetIntent)
        assert intent.amount == "25"

    def test_parse_seat_actions(self):
        for action in ("hit", "stand", "double"):
            intent = parse_intent({"type": action, "seat_id": "player-2"})
            assert isinstance(intent, SeatIntent)
            assert intent.type == action

    def test_parse_table_intent(self):
        assert isinstance(parse_intent({"type": "restart"}), TableIntent)

    def test_unknown_intent_rejected(self):
        with pytest.raises(ValidationError):
            parse_intent({"type": "split", "seat_id": "player-1"})

    def test_seat_intent_needs_seat(self):
        with pytest.raises(ValidationError):
            parse_intent({"type": "hit"})


class TestSnapshot:
    """Tests for the snapshot the presentation layer reads."""

    def test_initial_snapshot(self, dispatcher):
        state = dispatcher.snapshot()

        assert state.phase == "BETTING"
        assert len(state.seats) == 8
        assert state.seats[0].is_active
        assert not state.seats[1].is_active
        assert state.dealer.id == "dealer-1"
        assert state.dealer.hand == []
        assert state.active_seat_index == 0
        assert state.deal_cursor == 0
        assert state.shoe_remaining == 312

    def test_snapshot_after_deal(self, decisions_table):
        state = TableSnapshot.from_table(decisions_table)

        assert state.phase == "DECISIONS"
        seat = state.seats[0]
        assert [c.rank for c in seat.hand] == ["10", "6"]
        assert [c.color for c in seat.hand] == ["black", "red"]
        assert seat.score == 16
        assert seat.status == "ACTIVE"
        assert seat.bet == 10
        assert state.dealer.score == 9
        assert len(state.dealer.hand) == 1
        assert state.deal_cursor == 17

    def test_snapshot_is_serialisable(self, decisions_table):
        decisions_table.hit("player-1")
        data = TableSnapshot.from_table(decisions_table).model_dump()

        assert data["seats"][0]["actions"] == ["hit"]
        assert data["seats"][0]["hand"][2] == {"rank": "2", "suit": "♦", "color": "red", "value": 2}

    def test_snapshot_is_frozen(self, dispatcher):
        state = dispatcher.snapshot()
        with pytest.raises(ValidationError):
            state.phase = "DEALING"


class TestDispatch:
    """Tests for routing intents into the table."""

    def test_bets_then_manual_deal(self, dispatcher):
        for i in range(1, 9):
            result = dispatcher.dispatch({"type": "submit_bet", "seat_id": f"player-{i}", "amount": "abc"})
            assert result.accepted

        assert result.state.phase == "DEALING"
        assert all(seat.bet == 5 for seat in result.state.seats)

        for _ in range(17):
            result = dispatcher.dispatch({"type": "deal_next_card"})
        assert result.state.phase == "DECISIONS"

    def test_out_of_turn_bet_not_accepted(self, dispatcher):
        result = dispatcher.dispatch({"type": "submit_bet", "seat_id": "player-4", "amount": "20"})
        assert not result.accepted
        assert result.state.seats[3].bet == 0

    def test_integer_amount(self, dispatcher):
        result = dispatcher.dispatch({"type": "submit_bet", "seat_id": "player-1", "amount": 30})
        assert result.state.seats[0].bet == 30

    def test_seat_actions(self, decisions_table):
        dispatcher = IntentDispatcher(decisions_table)

        assert dispatcher.dispatch({"type": "hit", "seat_id": "player-1"}).accepted
        assert dispatcher.dispatch({"type": "stand", "seat_id": "player-1"}).accepted
        result = dispatcher.dispatch({"type": "double", "seat_id": "player-2"})

        assert result.accepted
        assert result.state.seats[1].bet == 20
        assert result.state.active_seat_index == 2
        assert result.state.seats[2].is_active

    def test_flags_without_clock(self, dealing_table):
        dispatcher = IntentDispatcher(dealing_table)

        result = dispatcher.dispatch({"type": "start_dealing"})
        assert result.accepted
        assert result.state.dealing_active

        result = dispatcher.dispatch({"type": "stop_dealing"})
        assert not result.state.dealing_active

    def test_restart(self, decisions_table):
        dispatcher = IntentDispatcher(decisions_table)
        result = dispatcher.dispatch({"type": "restart"})

        assert result.accepted
        assert result.state.phase == "BETTING"
        assert all(seat.hand == [] and seat.bet == 0 for seat in result.state.seats)

    def test_get_state(self, dispatcher):
        result = dispatcher.dispatch({"type": "get_state"})
        assert result.accepted
        assert result.type == "get_state"

    @pytest.mark.asyncio
    async def test_auto_play_through_clock(self, decisions_table):
        clock = TableClock(decisions_table, interval=0.001)
        dispatcher = IntentDispatcher(decisions_table, clock)

        result = dispatcher.dispatch({"type": "start_auto_play"})
        assert result.accepted
        assert result.state.auto_play_active

        await asyncio.wait_for(clock.wait(), timeout=5)
        state = dispatcher.snapshot()
        assert state.is_complete
        assert not state.auto_play_active
