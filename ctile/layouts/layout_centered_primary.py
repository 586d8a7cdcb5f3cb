"""
Centered Primary Layout

One primary window in a centered column, the others in columns on both sides.
"""

from __future__ import annotations
import math
from typing import Any, List

from .layout_base import FrameAssignments, RatioLayout, tile_columns
from ..geometry import RatioBounds, Rect, round_half_up
from ..ordering import window_id
from ..state import MainRatioState


class CenteredPrimaryLayout(RatioLayout):
    """
    Centered primary columns layout.

    The primary column is main_ratio of the screen width and centered on it.
    Windows before the primary in window order fill the left side, windows
    after it fill the right side; the left side gets the extra window when
    the count is odd:

        +---+---+-----------+---+
        | 1 | 2 |     3     | 4 |
        +---+---+-----------+---+

    Side columns tile their region exactly; the last column on each side
    absorbs the rounding remainder.
    """

    ratio_field = "main_ratio"
    ratio_bounds = RatioBounds(0.20, 0.80, 0.05)
    expand_description = "Widen the centered primary"
    shrink_description = "Narrow the centered primary"

    def __init__(self, main_ratio: float = 0.40):
        super().__init__(main_ratio)
        self._initial_state = MainRatioState(main_ratio=main_ratio)

    @property
    def name(self) -> str:
        return "centered-primary"

    @property
    def initial_state(self) -> MainRatioState:
        return self._initial_state

    def calculate(
        self, windows: List[Any], area: Rect, state: MainRatioState
    ) -> FrameAssignments:
        n = len(windows)
        left_count = math.ceil(max(0, n - 1) / 2)
        primary_index = min(left_count, n - 1)

        main_width = round_half_up(area.width * self.ratio(state))
        main_x = round_half_up(area.x + (area.width - main_width) / 2)
        main_right = main_x + main_width

        frames: FrameAssignments = {}
        if main_width > 0:
            frames[window_id(windows[primary_index])] = Rect(
                main_x, area.y, main_width, area.height
            )

        left_region = Rect(area.x, area.y, max(0, main_x - area.x), area.height)
        right_region = Rect(
            main_right, area.y, max(0, area.right - main_right), area.height
        )
        frames.update(tile_columns(windows[:left_count], left_region))
        frames.update(tile_columns(windows[primary_index + 1 :], right_region))
        return frames
