"""Tests for ListViewState (counts, lookups and the overlay state machine)."""

import pytest

from movieBrowser.gui.list_state import ListViewState
from movieBrowser.metadata.core.errors import IndexOutOfRange
from movieBrowser.metadata.core.models import (
    Closed, ErrorKind, Failure, Open, Pending, Success,
)


class _StubController:
    """Stands in for FetchController: a settable result + single-shot callbacks."""

    def __init__(self, result=None):
        self.result = result or Pending()
        self.callbacks = []

    def current_result(self):
        return self.result

    def on_result_changed(self, callback):
        if isinstance(self.result, Pending):
            self.callbacks.append(callback)
        else:
            callback(self.result)

    def resolve(self, result):
        self.result = result
        callbacks, self.callbacks = self.callbacks, []
        for cb in callbacks:
            cb(result)


@pytest.fixture
def loaded_state(movies, qtbot):
    return ListViewState(_StubController(Success(movies)))


class TestCounts:

    def test_pending_is_empty(self, qtbot):
        state = ListViewState(_StubController())
        assert state.item_count() == 0
        assert state.overlay_item() is None

    def test_failure_is_empty(self, qtbot):
        state = ListViewState(_StubController(Failure(ErrorKind.NETWORK, "down")))
        assert state.item_count() == 0
        with pytest.raises(IndexOutOfRange):
            state.item_at(0)

    def test_success_matches_collection_in_order(self, loaded_state, movies):
        assert loaded_state.item_count() == len(movies)
        for i, movie in enumerate(movies):
            assert loaded_state.item_at(i) == movie

    def test_count_follows_controller_result(self, movies, qtbot):
        controller = _StubController()
        state = ListViewState(controller)
        controller.resolve(Success(movies))
        assert state.item_count() == 3

    @pytest.mark.parametrize("index", [-1, 3, 99])
    def test_item_at_out_of_range(self, loaded_state, index):
        with pytest.raises(IndexOutOfRange) as exc:
            loaded_state.item_at(index)
        assert exc.value.index == index
        assert exc.value.count == 3

    def test_index_out_of_range_is_an_index_error(self, loaded_state):
        with pytest.raises(IndexError):
            loaded_state.item_at(3)


class TestOverlay:

    def test_scenario_abc(self, loaded_state, movies):
        assert loaded_state.item_count() == 3

        loaded_state.open_overlay(1)
        assert loaded_state.overlay_item() == movies[1]
        assert loaded_state.overlay_state() == Open(1)

        loaded_state.close_overlay()
        assert loaded_state.overlay_item() is None

        with pytest.raises(IndexOutOfRange):
            loaded_state.open_overlay(5)

    def test_overlay_item_matches_item_at(self, loaded_state):
        for i in range(loaded_state.item_count()):
            loaded_state.open_overlay(i)
            assert loaded_state.overlay_item() == loaded_state.item_at(i)
            loaded_state.close_overlay()

    @pytest.mark.parametrize("index", [-1, 3, 5])
    def test_bad_open_leaves_state_unchanged(self, loaded_state, index):
        loaded_state.open_overlay(2)
        with pytest.raises(IndexOutOfRange):
            loaded_state.open_overlay(index)
        assert loaded_state.overlay_state() == Open(2)

    def test_open_before_result_raises(self, qtbot):
        state = ListViewState(_StubController())
        with pytest.raises(IndexOutOfRange):
            state.open_overlay(0)
        assert state.overlay_state() == Closed()

    def test_close_is_idempotent(self, loaded_state, qtbot):
        with qtbot.assertNotEmitted(loaded_state.overlay_changed):
            loaded_state.close_overlay()
            loaded_state.close_overlay()
        assert loaded_state.overlay_state() == Closed()

    def test_open_and_close_emit_overlay_changed(self, loaded_state, qtbot):
        with qtbot.waitSignal(loaded_state.overlay_changed, timeout=500) as blocker:
            loaded_state.open_overlay(0)
        assert blocker.args == [Open(0)]

        with qtbot.waitSignal(loaded_state.overlay_changed, timeout=500) as blocker:
            loaded_state.close_overlay()
        assert blocker.args == [Closed()]


class TestRevalidate:

    def test_open_overlay_closes_when_collection_shrinks(self, movies, qtbot):
        controller = _StubController(Success(movies))
        state = ListViewState(controller)
        state.open_overlay(2)

        controller.result = Success(movies[:1])
        assert state.overlay_item() is None
        assert state.overlay_state() == Closed()

    def test_still_valid_overlay_survives(self, movies, qtbot):
        controller = _StubController(Success(movies))
        state = ListViewState(controller)
        state.open_overlay(0)

        controller.result = Success(movies[:2])
        state.revalidate()
        assert state.overlay_state() == Open(0)
