"""
Change Events

Events the host reports to a layout through Layout.update_with_change().
Anything that is not one of these classes is treated as a no-op.
"""

from __future__ import annotations
import re
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from .geometry import is_number
from .objects import Window


@dataclass(frozen=True)
class WindowsChanged:
    """The set (or host order) of visible windows changed."""

    windows: Tuple[Any, ...]


@dataclass(frozen=True)
class Command:
    """A named layout command, e.g. "expand_main"."""

    command: str


@dataclass(frozen=True)
class ResizedMain:
    """The user dragged the main region's edge by delta pixels."""

    delta: float
    screen_width: float = 0


@dataclass(frozen=True)
class HardReset:
    """Discard all state and start over from the initial state."""


Change = Union[WindowsChanged, Command, ResizedMain, HardReset]

_CAMEL_HUMP = re.compile(r"(?<=[a-z0-9])([A-Z])")


def snake_case(name: str) -> str:
    """Convert a camelCase tag such as "hardReset" to "hard_reset"."""
    return _CAMEL_HUMP.sub(r"_\1", name).lower()


def _field(data: Mapping[str, Any], name: str, default: Any = None) -> Any:
    """Look up a snake_case field, falling back to its camelCase spelling."""
    if name in data:
        return data[name]
    head, *rest = name.split("_")
    return data.get(head + "".join(part.capitalize() for part in rest), default)


def parse_change(data: Optional[Mapping[str, Any]]) -> Optional[Change]:
    """
    Build a change event from loosely typed data, e.g. a decoded JSON message.

    Windows may be given as bare identifiers or as mappings with an "id" key.
    Type tags, field names and command names are accepted in snake_case or
    camelCase ("hard_reset" or "hardReset", "screen_width" or "screenWidth").

    Returns:
        The change event, or None if data is malformed or of unknown type
    """
    if not isinstance(data, Mapping):
        return None

    change_type = data.get("type")
    if not isinstance(change_type, str):
        return None
    change_type = snake_case(change_type)

    if change_type == "windows_changed":
        windows = data.get("windows")
        if not isinstance(windows, (list, tuple)):
            return None
        parsed = []
        for item in windows:
            if isinstance(item, Mapping):
                wid = item.get("id")
                title = item.get("title", "")
                app_id = _field(item, "app_id", "")
            else:
                wid, title, app_id = item, "", ""
            # Identifiers end up as dict keys
            if wid is None or not isinstance(wid, Hashable):
                return None
            parsed.append(Window(wid, title=title, app_id=app_id))
        return WindowsChanged(tuple(parsed))

    if change_type == "command":
        command = data.get("command")
        if not isinstance(command, str):
            return None
        return Command(snake_case(command))

    if change_type == "resized_main":
        delta = data.get("delta")
        screen_width = _field(data, "screen_width", 0)
        if not is_number(delta):
            return None
        if not is_number(screen_width):
            screen_width = 0
        return ResizedMain(delta, screen_width)

    if change_type == "hard_reset":
        return HardReset()

    return None
