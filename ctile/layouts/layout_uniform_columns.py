"""
Uniform Columns Layout

Every window gets an equal-width, full-height column.
"""

from __future__ import annotations
from typing import Any, List

from .layout_base import FrameAssignments, Layout
from ..geometry import Rect
from ..ordering import window_id
from ..state import LayoutState


class UniformColumnsLayout(Layout):
    """
    Uniform columns layout.

    Columns are screen width / N wide, left to right in window order. Widths
    are not rounded, so hosts working in whole pixels round them themselves.
    """

    def __init__(self):
        self._initial_state = LayoutState()

    @property
    def name(self) -> str:
        return "uniform-columns"

    @property
    def initial_state(self) -> LayoutState:
        return self._initial_state

    def calculate(
        self, windows: List[Any], area: Rect, state: LayoutState
    ) -> FrameAssignments:
        column_width = area.width / len(windows)
        return {
            window_id(win): Rect(
                area.x + column_width * i, area.y, column_width, area.height
            )
            for i, win in enumerate(windows)
        }
