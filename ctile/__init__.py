"""
ctile - centered tiling layouts

Window-tiling layout strategies for window managers that keep their own
window list and event loop.

This package provides:
- Geometry types (Rect, RatioBounds)
- Window-order stabilization and reconciliation
- Layout strategies (uniform columns, centered primary, centered columns,
  centered twin)
- Change events and a reducer per layout
- A LayoutManager that drives layouts from a PyPubSub event bus

Example usage:
    from ctile import CenteredPrimaryLayout, Rect, Window, WindowsChanged

    layout = CenteredPrimaryLayout()
    windows = [Window(1), Window(2), Window(3)]
    state = layout.update_with_change(WindowsChanged(tuple(windows)), layout.initial_state)
    frames = layout.get_frame_assignments(windows, Rect(0, 0, 1920, 1080), state)
"""

__version__ = "0.1.0"

from .geometry import Rect, RatioBounds, clamp, round_half_up

from .objects import Window

from .ordering import stabilize, reconcile, is_exact_swap, window_id

from .state import LayoutState, MainRatioState, MainPaneState

from .changes import (
    Change,
    WindowsChanged,
    Command,
    ResizedMain,
    HardReset,
    parse_change,
)

from .layouts import (
    FrameAssignments,
    Layout,
    LayoutCommand,
    LayoutManager,
    RatioLayout,
    Workspace,
    UniformColumnsLayout,
    CenteredPrimaryLayout,
    CenteredColumnsLayout,
    CenteredTwinLayout,
)

from .config import LayoutConfig, create_layout_manager, debug_event_logger

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Rect",
    "RatioBounds",
    "clamp",
    "round_half_up",
    # Objects
    "Window",
    # Ordering
    "stabilize",
    "reconcile",
    "is_exact_swap",
    "window_id",
    # State
    "LayoutState",
    "MainRatioState",
    "MainPaneState",
    # Changes
    "Change",
    "WindowsChanged",
    "Command",
    "ResizedMain",
    "HardReset",
    "parse_change",
    # Layouts
    "FrameAssignments",
    "Layout",
    "LayoutCommand",
    "LayoutManager",
    "RatioLayout",
    "Workspace",
    "UniformColumnsLayout",
    "CenteredPrimaryLayout",
    "CenteredColumnsLayout",
    "CenteredTwinLayout",
    # Configuration
    "LayoutConfig",
    "create_layout_manager",
    "debug_event_logger",
    # Event topics
    "topics",
]
