"""
Unit tests for layout state serialization.
"""

import json

import pytest
from ctile.changes import WindowsChanged
from ctile.layouts import CenteredColumnsLayout, CenteredPrimaryLayout, UniformColumnsLayout
from ctile.state import LayoutState, MainPaneState, MainRatioState


@pytest.mark.unit
class TestLayoutState:
    """Test state values."""

    def test_with_order_returns_self_when_unchanged(self):
        state = MainRatioState(window_order=(1, 2), main_ratio=0.4)

        assert state.with_order([1, 2]) is state

    def test_with_order_keeps_subclass_fields(self):
        state = MainRatioState(window_order=(1, 2), main_ratio=0.4)

        assert state.with_order([2, 1]) == MainRatioState((2, 1), 0.4)

    def test_to_dict_is_json_friendly(self):
        state = MainPaneState(window_order=("a", "b"), main_pane_count=2)

        data = state.to_dict()

        assert data == {
            "window_order": ["a", "b"],
            "main_pane_count": 2,
            "main_pane_ratio": 0.5,
        }
        assert json.loads(json.dumps(data)) == data

    def test_states_are_immutable(self):
        state = LayoutState()
        with pytest.raises(AttributeError):
            state.window_order = (1,)


@pytest.mark.unit
class TestRestoreState:
    """Test Layout.restore_state()."""

    def test_saved_state_restored(self):
        layout = CenteredPrimaryLayout()
        state = MainRatioState(window_order=(7, 3), main_ratio=0.65)

        restored = layout.restore_state(json.loads(json.dumps(state.to_dict())))

        assert restored == state

    def test_missing_fields_use_initial_state(self):
        layout = CenteredPrimaryLayout(main_ratio=0.3)

        restored = layout.restore_state({"window_order": [1]})

        assert restored == MainRatioState(window_order=(1,), main_ratio=0.3)

    def test_unknown_fields_ignored(self):
        layout = UniformColumnsLayout()

        restored = layout.restore_state({"window_order": [1], "main_ratio": 0.9})

        assert restored == LayoutState(window_order=(1,))

    def test_out_of_range_ratio_clamped(self):
        layout = CenteredPrimaryLayout()

        restored = layout.restore_state({"main_ratio": 0.95})

        assert restored.main_ratio == 0.80

    def test_main_pane_count_at_least_one(self):
        layout = CenteredColumnsLayout()

        restored = layout.restore_state({"main_pane_count": 0})

        assert restored.main_pane_count == 1

    def test_not_a_mapping(self):
        layout = CenteredColumnsLayout()

        assert layout.restore_state(None) == layout.initial_state

    def test_repeated_ids_keep_first_position(self):
        layout = UniformColumnsLayout()

        restored = layout.restore_state({"window_order": [1, 1, 2, 1]})

        assert restored.window_order == (1, 2)

    def test_repeated_ids_do_not_block_new_windows(self, mock_window):
        layout = CenteredPrimaryLayout()
        state = layout.restore_state({"window_order": [1, 1]})

        state = layout.update_with_change(
            WindowsChanged((mock_window(object_id=1), mock_window(object_id=2))), state
        )

        assert state.window_order == (1, 2)

    def test_unusable_ids_dropped(self):
        layout = UniformColumnsLayout()

        restored = layout.restore_state({"window_order": [[1], None, 3]})

        assert restored.window_order == (3,)

    def test_window_order_not_a_list(self):
        layout = UniformColumnsLayout()

        restored = layout.restore_state({"window_order": "abc"})

        assert restored == layout.initial_state

    @pytest.mark.parametrize("value", ["wide", None, [0.5], float("nan")])
    def test_bad_ratio_uses_initial_value(self, value):
        layout = CenteredPrimaryLayout(main_ratio=0.3)

        restored = layout.restore_state({"main_ratio": value})

        assert restored.main_ratio == 0.3

    @pytest.mark.parametrize("value", ["two", None, float("inf"), float("nan")])
    def test_bad_main_pane_count_uses_initial_value(self, value):
        layout = CenteredColumnsLayout(main_pane_count=2)

        restored = layout.restore_state({"main_pane_count": value})

        assert restored.main_pane_count == 2

    def test_fractional_main_pane_count_truncated(self):
        layout = CenteredColumnsLayout()

        restored = layout.restore_state({"main_pane_count": 2.7})

        assert restored.main_pane_count == 2
