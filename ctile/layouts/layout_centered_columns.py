"""
Centered Columns Layout

A resizable main pane of one or more columns, centered, with the remaining
windows in columns on both sides.
"""

from __future__ import annotations
import math
from dataclasses import replace
from typing import Any, Dict, List

from .layout_base import FrameAssignments, LayoutCommand, RatioLayout
from ..geometry import RatioBounds, Rect, is_number, round_half_up
from ..ordering import window_id
from ..state import LayoutState, MainPaneState


class CenteredColumnsLayout(RatioLayout):
    """
    Centered main pane with side columns.

    The first main_pane_count windows share the main pane, which is
    main_pane_ratio of the screen width (the whole width when there are no
    other windows). The remaining windows are split between the left side
    (which gets the extra one) and the right side.

    Column widths are rounded independently, so columns may overlap or leave
    gaps of up to one pixel per column.
    """

    ratio_field = "main_pane_ratio"
    ratio_bounds = RatioBounds(0.10, 1.00, 0.05)
    expand_description = "Expand main pane"
    shrink_description = "Shrink main pane"

    def __init__(self, main_pane_count: int = 1, main_pane_ratio: float = 0.5):
        if main_pane_count < 1:
            raise ValueError(
                f"Invalid main_pane_count: {main_pane_count}. Must be at least 1"
            )
        super().__init__(main_pane_ratio)
        self._initial_state = MainPaneState(
            main_pane_count=main_pane_count, main_pane_ratio=main_pane_ratio
        )

    @property
    def name(self) -> str:
        return "centered-columns"

    @property
    def initial_state(self) -> MainPaneState:
        return self._initial_state

    def _build_commands(self) -> Dict[str, LayoutCommand]:
        commands = super()._build_commands()
        commands["increase_main_count"] = LayoutCommand(
            "Increase main pane count", self.increase_main_count
        )
        commands["decrease_main_count"] = LayoutCommand(
            "Decrease main pane count", self.decrease_main_count
        )
        return commands

    def increase_main_count(self, state: MainPaneState) -> MainPaneState:
        return replace(state, main_pane_count=state.main_pane_count + 1)

    def decrease_main_count(self, state: MainPaneState) -> MainPaneState:
        return replace(state, main_pane_count=max(1, state.main_pane_count - 1))

    def restore_state(self, data: Any) -> LayoutState:
        state = super().restore_state(data)
        count = state.main_pane_count
        if not is_number(count) or not math.isfinite(count):
            count = self.initial_state.main_pane_count
        return replace(state, main_pane_count=max(1, int(count)))

    def calculate(
        self, windows: List[Any], area: Rect, state: MainPaneState
    ) -> FrameAssignments:
        n = len(windows)
        main_count = min(max(1, state.main_pane_count), n)
        secondary_count = n - main_count

        ratio = self.ratio(state) if secondary_count > 0 else 1
        main_width = round_half_up(area.width * ratio)
        main_window_width = round_half_up(main_width / main_count)
        main_x = round_half_up(area.x + (area.width - main_width) / 2)

        left_count = math.ceil(secondary_count / 2)
        right_count = secondary_count // 2
        side_width = (area.width - main_width) / 2
        left_width = round_half_up(side_width / left_count) if left_count else 0
        right_width = round_half_up(side_width / right_count) if right_count else 0

        frames: FrameAssignments = {}

        if main_window_width > 0:
            for i, win in enumerate(windows[:main_count]):
                frames[window_id(win)] = Rect(
                    main_x + main_window_width * i,
                    area.y,
                    main_window_width,
                    area.height,
                )

        if left_width > 0:
            for i, win in enumerate(windows[main_count : main_count + left_count]):
                frames[window_id(win)] = Rect(
                    area.x + left_width * i, area.y, left_width, area.height
                )

        if right_width > 0:
            right_x = main_x + main_width
            for i, win in enumerate(windows[main_count + left_count :]):
                frames[window_id(win)] = Rect(
                    right_x + right_width * i, area.y, right_width, area.height
                )

        return frames
