"""
Event Topics for ctile

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Window lifecycle events (published by the host)
WINDOW_CREATED = "window.created"
"""Published when a new window appears. Params: window"""

WINDOW_CLOSED = "window.closed"
"""Published when a window is closed/destroyed. Params: window"""

WINDOW_FOCUSED = "window.focused"
"""Published when a window receives focus. Params: window (or None)"""

# Layout notifications (published by the host)
WINDOWS_CHANGED = "layout.windows_changed"
"""Published when the host re-enumerates its windows. Params: windows"""

MAIN_RESIZED = "layout.main_resized"
"""Published when the main region is dragged. Params: delta, screen_width"""

# Layout notifications (published by LayoutManager)
STATE_CHANGED = "layout.state_changed"
"""Published when a layout's state changes. Params: layout_name, state"""

LAYOUT_CHANGED = "layout.changed"
"""Published when the active layout changes. Params: layout_name"""

# Command events (imperative - tell components to do something)
# These are triggered by user input (keybinds) or IPC commands

CMD_LAYOUT_COMMAND = "cmd.layout_command"
"""Command: Run a named command of the active layout. Params: command"""

CMD_HARD_RESET = "cmd.hard_reset"
"""Command: Reset the active layout to its initial state."""

CMD_CYCLE_LAYOUT = "cmd.cycle_layout"
"""Command: Cycle to next layout."""

CMD_CYCLE_LAYOUT_REVERSE = "cmd.cycle_layout_reverse"
"""Command: Cycle to previous layout."""

CMD_SWAP_NEXT = "cmd.swap_next"
"""Command: Swap focused window with next."""

CMD_SWAP_PREV = "cmd.swap_prev"
"""Command: Swap focused window with previous."""
