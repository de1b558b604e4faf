"""
Unit tests for the history reducer.
"""

from pixel_editor.core.editor_tools import ToolType
from pixel_editor.core.history import COALESCE_WINDOW, Action, AppState, next_state
from pixel_editor.core.picture import Edit, Picture


def fresh_state(picture=None):
    return AppState(tool=ToolType.DRAW, color="#000000", picture=picture or Picture.empty(2, 2, "#ffffff"))


def edited(state, x, color="#000000"):
    return Action(picture=state.picture.with_edits([Edit(x, 0, color)]))


class TestUndo:
    """Tests for undo actions."""

    def test_undo_on_fresh_state_is_noop(self, clock):
        state = fresh_state()
        assert next_state(state, Action(undo=True), clock) is state

    def test_undo_restores_previous_picture(self, clock):
        state = fresh_state()
        original = state.picture
        state = next_state(state, edited(state, 0), clock)
        state = next_state(state, Action(undo=True), clock)
        assert state.picture == original
        assert state.history == ()

    def test_undo_resets_timestamp(self, clock):
        state = next_state(fresh_state(), edited(fresh_state(), 0), clock)
        clock.advance(5)
        state = next_state(state, Action(undo=True), clock)
        assert state.history_timestamp == clock.now

    def test_coalesced_group_undone_at_once(self, clock):
        """Should revert all edits made within the window with one undo."""
        state = fresh_state()
        original = state.picture
        for x in range(2):
            state = next_state(state, edited(state, x), clock)
            clock.advance(0.2)
        assert len(state.history) == 1
        state = next_state(state, Action(undo=True), clock)
        assert state.picture == original
        assert len(state.history) == 0


class TestCoalescing:
    """Tests for time-windowed history snapshots."""

    def test_first_edit_pushes_history(self, clock):
        state = fresh_state()
        after = next_state(state, edited(state, 0), clock)
        assert after.history == (state.picture,)
        assert after.history_timestamp == clock.now

    def test_rapid_edits_share_one_entry(self, clock):
        state = fresh_state()
        state = next_state(state, edited(state, 0), clock)
        clock.advance(0.5)
        state = next_state(state, edited(state, 1), clock)
        assert len(state.history) == 1

    def test_edit_after_window_adds_entry(self, clock):
        """Two quick edits then one a full window later give two entries."""
        state = fresh_state()
        state = next_state(state, edited(state, 0), clock)
        clock.advance(0.3)
        state = next_state(state, edited(state, 1, "#ff0000"), clock)
        clock.advance(COALESCE_WINDOW)
        middle = state.picture
        state = next_state(state, edited(state, 0, "#00ff00"), clock)
        assert len(state.history) == 2
        assert state.history[0] == middle

    def test_exactly_one_window_later_opens_entry(self, clock):
        state = fresh_state()
        state = next_state(state, edited(state, 0), clock)
        clock.advance(COALESCE_WINDOW)
        state = next_state(state, edited(state, 1), clock)
        assert len(state.history) == 2

    def test_edits_in_window_do_not_move_timestamp(self, clock):
        state = fresh_state()
        state = next_state(state, edited(state, 0), clock)
        stamp = state.history_timestamp
        clock.advance(0.4)
        state = next_state(state, edited(state, 1), clock)
        assert state.history_timestamp == stamp

    def test_custom_window(self, clock):
        state = fresh_state()
        state = next_state(state, edited(state, 0), clock, window=0.1)
        clock.advance(0.2)
        state = next_state(state, edited(state, 1), clock, window=0.1)
        assert len(state.history) == 2

    def test_history_limit(self, clock):
        state = fresh_state()
        for i in range(5):
            state = next_state(state, edited(state, i % 2, f"#00000{i}"), clock, limit=3)
            clock.advance(2)
        assert len(state.history) == 3


class TestMerge:
    """Tests for non-picture actions."""

    def test_tool_change_leaves_history(self, clock):
        state = fresh_state()
        after = next_state(state, Action(tool=ToolType.FILL), clock)
        assert after.tool == ToolType.FILL
        assert after.history == ()
        assert after.picture is state.picture

    def test_color_change(self, clock):
        after = next_state(fresh_state(), Action(color="#ff0000"), clock)
        assert after.color == "#ff0000"
        assert after.history_timestamp == float("-inf")

    def test_empty_action_is_noop(self, clock):
        state = fresh_state()
        assert next_state(state, Action(), clock) is state

    def test_original_state_untouched(self, clock):
        state = fresh_state()
        next_state(state, edited(state, 0), clock)
        assert state.history == ()
        assert state.picture == Picture.empty(2, 2, "#ffffff")
