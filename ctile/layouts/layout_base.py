"""
Window Layout Base Classes

Provides the Layout interface and shared layout infrastructure.
"""

from __future__ import annotations
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional, Sequence

from ..changes import Command, HardReset, ResizedMain, WindowsChanged
from ..geometry import RatioBounds, Rect, is_number
from ..ordering import reconcile, stabilize, window_id
from ..state import LayoutState

FrameAssignments = Dict[Hashable, Rect]


@dataclass(frozen=True)
class LayoutCommand:
    """A named, host-invocable state transition."""

    description: str
    update_state: Callable[[LayoutState], LayoutState]


def tile_columns(windows: Sequence[Any], region: Rect) -> FrameAssignments:
    """
    Split region into equal-width columns, one per window, left to right.

    Columns are floor(width / k) wide; the last column absorbs the remainder so
    the columns tile the region exactly. An empty region places nothing.
    """
    frames: FrameAssignments = {}
    k = len(windows)
    if k == 0 or region.width <= 0:
        return frames

    col_width = math.floor(region.width / k)
    for i, win in enumerate(windows):
        width = region.width - col_width * (k - 1) if i == k - 1 else col_width
        frames[window_id(win)] = Rect(
            region.x + i * col_width, region.y, width, region.height
        )
    return frames


class Layout(ABC):
    """Abstract base class for window layouts."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name for display."""
        pass

    @property
    @abstractmethod
    def initial_state(self) -> LayoutState:
        """State used on activation and after a hard reset."""
        pass

    @property
    def commands(self) -> Dict[str, LayoutCommand]:
        """Named commands the host can bind to keys or menus."""
        return {}

    @abstractmethod
    def calculate(
        self, windows: List[Any], area: Rect, state: LayoutState
    ) -> FrameAssignments:
        """
        Calculate window frames.

        Args:
            windows: Non-empty list of windows, already in stable order
            area: Non-empty screen area to partition
            state: Current layout state (read only)

        Returns:
            Dictionary mapping window identifiers to their frames
        """
        pass

    def get_frame_assignments(
        self, windows: Sequence[Any], area: Rect, state: LayoutState
    ) -> FrameAssignments:
        """Compute a frame for every placeable window.

        Has no side effects and may be called at any time with the current state.
        """
        if not windows or area.is_empty:
            return {}
        return self.calculate(stabilize(windows, state.window_order), area, state)

    def update_with_change(self, change: Any, state: LayoutState) -> LayoutState:
        """
        Apply a change event to a state.

        Unknown or malformed changes return state unchanged.
        """
        if isinstance(change, WindowsChanged):
            if not isinstance(change.windows, (list, tuple)) or not all(
                hasattr(win, "object_id") for win in change.windows
            ):
                return state
            new_ids = [window_id(win) for win in change.windows]
            return state.with_order(reconcile(new_ids, state.window_order))

        if isinstance(change, Command):
            if not isinstance(change.command, str):
                return state
            command = self.commands.get(change.command)
            if command is None:
                return state
            return command.update_state(state)

        if isinstance(change, HardReset):
            return self.initial_state

        return self.apply_change(change, state)

    def apply_change(self, change: Any, state: LayoutState) -> LayoutState:
        """Handle layout-specific change events. Default: no-op."""
        return state

    def restore_state(self, data: Any) -> LayoutState:
        """Rebuild a state from LayoutState.to_dict() output.

        Missing or unknown fields fall back to the initial state.
        """
        if not isinstance(data, Mapping):
            return self.initial_state
        return self.initial_state.merged(data)


class RatioLayout(Layout):
    """
    Base for layouts with a resizable main region.

    The region's share of the screen width lives in the state field named by
    ratio_field and is kept within ratio_bounds by every transition.
    """

    ratio_field = "main_ratio"
    ratio_bounds = RatioBounds(0.20, 0.80, 0.05)
    expand_description = "Widen the main region"
    shrink_description = "Narrow the main region"

    def __init__(self, ratio: float):
        if not self.ratio_bounds.contains(ratio):
            raise ValueError(
                f"Invalid {self.ratio_field}: {ratio}. Must be between "
                f"{self.ratio_bounds.minimum} and {self.ratio_bounds.maximum}"
            )
        self._commands = self._build_commands()

    @property
    def commands(self) -> Dict[str, LayoutCommand]:
        return self._commands

    def _build_commands(self) -> Dict[str, LayoutCommand]:
        return {
            "expand_main": LayoutCommand(self.expand_description, self.expand_main),
            "shrink_main": LayoutCommand(self.shrink_description, self.shrink_main),
            "increase_main": LayoutCommand("Alias of expand_main", self.expand_main),
            "decrease_main": LayoutCommand("Alias of shrink_main", self.shrink_main),
        }

    def ratio(self, state: LayoutState) -> float:
        """The state's ratio, clamped in case the host handed in a raw value."""
        return self.ratio_bounds.clamp(getattr(state, self.ratio_field))

    def adjust_ratio(self, state: LayoutState, delta: float) -> LayoutState:
        value = self.ratio_bounds.clamp(getattr(state, self.ratio_field) + delta)
        return replace(state, **{self.ratio_field: value})

    def expand_main(self, state: LayoutState) -> LayoutState:
        return self.adjust_ratio(state, self.ratio_bounds.step)

    def shrink_main(self, state: LayoutState) -> LayoutState:
        return self.adjust_ratio(state, -self.ratio_bounds.step)

    def apply_change(self, change: Any, state: LayoutState) -> LayoutState:
        if isinstance(change, ResizedMain) and is_number(change.delta):
            screen_width = change.screen_width if is_number(change.screen_width) else 0
            # A zero screen width would divide by zero; use 1 instead
            return self.adjust_ratio(state, change.delta / (screen_width or 1))
        return state

    def restore_state(self, data: Any) -> LayoutState:
        state = super().restore_state(data)
        value = getattr(state, self.ratio_field)
        if not is_number(value) or math.isnan(value):
            value = getattr(self.initial_state, self.ratio_field)
        value = self.ratio_bounds.clamp(float(value))
        return replace(state, **{self.ratio_field: value})


@dataclass
class Workspace:
    """The host's current window list, as tracked by LayoutManager."""

    windows: List[Any] = field(default_factory=list)
    focused_window: Optional[Any] = None

    def add_window(self, window: Any):
        """Add a window to the workspace."""
        if window not in self.windows:
            self.windows.append(window)
            if self.focused_window is None:
                self.focused_window = window

    def remove_window(self, window: Any):
        """Remove a window from the workspace."""
        if window in self.windows:
            self.windows.remove(window)
            if self.focused_window == window:
                self.focused_window = self.windows[0] if self.windows else None

    def set_windows(self, windows: Sequence[Any]):
        """Replace the window list, keeping focus if the focused window survived."""
        self.windows = list(windows)
        if self.focused_window not in self.windows:
            self.focused_window = self.windows[0] if self.windows else None


class LayoutManager:
    """
    Drives layouts from events on the bus.

    This component subscribes to window lifecycle events and layout command
    events. It publishes STATE_CHANGED and LAYOUT_CHANGED events.

    Responsibilities:
    - Track the host's window list and focused window
    - Keep one state per layout and feed every change through the active layout
    - CMD_LAYOUT_COMMAND: Run a named command of the active layout
    - CMD_HARD_RESET: Reset the active layout's state
    - CMD_CYCLE_LAYOUT/REVERSE: Cycle through available layouts
    - CMD_SWAP_NEXT/PREV: Swap the focused window with its neighbour
    """

    def __init__(
        self,
        bus,
        layouts: Optional[List[Layout]] = None,
        default_layout: Optional[str] = None,
    ):
        self.bus = bus
        if layouts:
            self.layouts: List[Layout] = list(layouts)
        else:
            # Import here to avoid circular dependency
            from .layout_uniform_columns import UniformColumnsLayout

            self.layouts = [UniformColumnsLayout()]

        # layout name -> state; layouts never see each other's state
        self.states: Dict[str, LayoutState] = {
            layout.name: layout.initial_state for layout in self.layouts
        }
        self.workspace = Workspace()

        self.active_index = 0
        if default_layout is not None:
            names = [layout.name for layout in self.layouts]
            if default_layout not in names:
                raise ValueError(
                    f"Unknown layout: {default_layout}. Available: {', '.join(names)}"
                )
            self.active_index = names.index(default_layout)

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events LayoutManager cares about."""
        from .. import topics

        # Notification events
        self.bus.subscribe(self._on_window_created, topics.WINDOW_CREATED)
        self.bus.subscribe(self._on_window_closed, topics.WINDOW_CLOSED)
        self.bus.subscribe(self._on_window_focused, topics.WINDOW_FOCUSED)
        self.bus.subscribe(self._on_windows_changed, topics.WINDOWS_CHANGED)
        self.bus.subscribe(self._on_main_resized, topics.MAIN_RESIZED)

        # Layout command events
        self.bus.subscribe(self._on_layout_command, topics.CMD_LAYOUT_COMMAND)
        self.bus.subscribe(self._on_hard_reset, topics.CMD_HARD_RESET)
        self.bus.subscribe(self._on_cycle_layout, topics.CMD_CYCLE_LAYOUT)
        self.bus.subscribe(
            self._on_cycle_layout_reverse, topics.CMD_CYCLE_LAYOUT_REVERSE
        )
        self.bus.subscribe(self._on_swap_next, topics.CMD_SWAP_NEXT)
        self.bus.subscribe(self._on_swap_prev, topics.CMD_SWAP_PREV)

    @property
    def active_layout(self) -> Layout:
        return self.layouts[self.active_index]

    @property
    def state(self) -> LayoutState:
        """State of the active layout."""
        return self.states[self.active_layout.name]

    def update(self, change: Any) -> LayoutState:
        """Feed a change event to the active layout and store the result."""
        from .. import topics

        layout = self.active_layout
        old_state = self.states[layout.name]
        new_state = layout.update_with_change(change, old_state)
        if new_state is not old_state:
            self.states[layout.name] = new_state
            self.bus.sendMessage(
                topics.STATE_CHANGED, layout_name=layout.name, state=new_state
            )
        return new_state

    def calculate_layout(self, area: Rect) -> FrameAssignments:
        """Calculate frames for the current windows with the active layout."""
        return self.active_layout.get_frame_assignments(
            self.workspace.windows, area, self.state
        )

    def add_window(self, window: Any):
        self.workspace.add_window(window)
        self._sync_windows()

    def remove_window(self, window: Any):
        self.workspace.remove_window(window)
        self._sync_windows()

    def set_windows(self, windows: Sequence[Any]):
        self.workspace.set_windows(windows)
        self._sync_windows()

    def _sync_windows(self):
        self.update(WindowsChanged(tuple(self.workspace.windows)))

    def swap(self, direction: int):
        """Swap the focused window with its neighbour in layout order."""
        ws = self.workspace
        if ws.focused_window is None or len(ws.windows) < 2:
            return

        ordered = stabilize(ws.windows, self.state.window_order)
        idx = ordered.index(ws.focused_window)
        other = (idx + direction) % len(ordered)
        ordered[idx], ordered[other] = ordered[other], ordered[idx]

        # A single transposition is adopted by the reconciler as-is
        ws.windows = ordered
        self._sync_windows()

    def cycle_layout(self, direction: int = 1):
        """Cycle through available layouts."""
        from .. import topics

        self.active_index = (self.active_index + direction) % len(self.layouts)
        # The newly active layout may have missed window changes
        self._sync_windows()
        self.bus.sendMessage(topics.LAYOUT_CHANGED, layout_name=self.active_layout.name)

    def export_states(self) -> Dict[str, Dict[str, Any]]:
        """Serialized state of every layout, for the host to persist."""
        return {name: state.to_dict() for name, state in self.states.items()}

    def restore_states(self, data: Mapping[str, Any]):
        """Load states saved with export_states(). Unknown layouts are ignored."""
        for layout in self.layouts:
            if layout.name in data:
                self.states[layout.name] = layout.restore_state(data[layout.name])

    # Event handlers
    def _on_window_created(self, window):
        """Handle WINDOW_CREATED event."""
        self.add_window(window)

    def _on_window_closed(self, window):
        """Handle WINDOW_CLOSED event."""
        self.remove_window(window)

    def _on_window_focused(self, window):
        """Handle WINDOW_FOCUSED event. Focus never changes the tiling order."""
        if window is None or window in self.workspace.windows:
            self.workspace.focused_window = window

    def _on_windows_changed(self, windows):
        """Handle WINDOWS_CHANGED event."""
        self.set_windows(windows)

    def _on_main_resized(self, delta, screen_width):
        """Handle MAIN_RESIZED event."""
        self.update(ResizedMain(delta, screen_width))

    def _on_layout_command(self, command):
        """Handle CMD_LAYOUT_COMMAND command."""
        self.update(Command(command))

    def _on_hard_reset(self):
        """Handle CMD_HARD_RESET command."""
        self.update(HardReset())

    def _on_cycle_layout(self):
        """Handle CMD_CYCLE_LAYOUT command."""
        self.cycle_layout(direction=1)

    def _on_cycle_layout_reverse(self):
        """Handle CMD_CYCLE_LAYOUT_REVERSE command."""
        self.cycle_layout(direction=-1)

    def _on_swap_next(self):
        """Handle CMD_SWAP_NEXT command."""
        self.swap(1)

    def _on_swap_prev(self):
        """Handle CMD_SWAP_PREV command."""
        self.swap(-1)
