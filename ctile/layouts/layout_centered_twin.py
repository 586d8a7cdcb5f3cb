"""
Centered Twin Layout

Two windows side by side in the middle of the screen, the rest in columns
on both sides.
"""

from __future__ import annotations
import math
from typing import Any, List

from .layout_base import FrameAssignments, RatioLayout, tile_columns
from ..geometry import RatioBounds, Rect, round_half_up
from ..ordering import window_id
from ..state import MainRatioState


class CenteredTwinLayout(RatioLayout):
    """
    Centered twin columns layout.

    The centre region is main_ratio of the screen width and is split in two
    at the screen midpoint. Growing or shrinking the ratio moves both centre
    columns outward or inward from the midpoint. A single window fills the
    screen.
    """

    ratio_field = "main_ratio"
    ratio_bounds = RatioBounds(0.20, 0.90, 0.05)
    expand_description = "Widen the two centered panes (outward from midpoint)"
    shrink_description = "Narrow the two centered panes (inward toward midpoint)"

    def __init__(self, main_ratio: float = 0.50):
        super().__init__(main_ratio)
        self._initial_state = MainRatioState(main_ratio=main_ratio)

    @property
    def name(self) -> str:
        return "centered-twin"

    @property
    def initial_state(self) -> MainRatioState:
        return self._initial_state

    def calculate(
        self, windows: List[Any], area: Rect, state: MainRatioState
    ) -> FrameAssignments:
        n = len(windows)
        if n == 1:
            return {window_id(windows[0]): area}

        left_count = math.ceil(max(0, n - 2) / 2)
        center_left_index = min(left_count, n - 2)
        center_right_index = min(left_count + 1, n - 1)

        # Halves always add up to the full centre width
        center_width = round_half_up(area.width * self.ratio(state))
        left_half = center_width // 2
        right_half = center_width - left_half

        mid_x = round_half_up(area.x + area.width / 2)
        center_left_x = mid_x - left_half
        center_right_end = mid_x + right_half

        frames: FrameAssignments = {}
        if left_half > 0:
            frames[window_id(windows[center_left_index])] = Rect(
                center_left_x, area.y, left_half, area.height
            )
        if right_half > 0:
            frames[window_id(windows[center_right_index])] = Rect(
                mid_x, area.y, right_half, area.height
            )

        left_region = Rect(
            area.x, area.y, max(0, center_left_x - area.x), area.height
        )
        right_region = Rect(
            center_right_end,
            area.y,
            max(0, area.right - center_right_end),
            area.height,
        )
        frames.update(tile_columns(windows[:left_count], left_region))
        frames.update(tile_columns(windows[center_right_index + 1 :], right_region))
        return frames
