"""
Layout State

Per-layout state values. The host keeps one of these per layout, passes it
into every call and replaces it with whatever update_with_change() returns.
States are immutable; every transition builds a new value.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Hashable, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class LayoutState:
    """State shared by every layout: the remembered window order."""

    window_order: Tuple[Hashable, ...] = ()

    def with_order(self, order: Iterable[Hashable]) -> "LayoutState":
        """Return this state with a new window order.

        Returns self when the order is unchanged, so callers can detect no-op
        transitions with an identity check.
        """
        order = tuple(order)
        if order == self.window_order:
            return self
        return replace(self, window_order=order)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation for host persistence."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["window_order"] = list(self.window_order)
        return data

    def merged(self, data: Mapping[str, Any]) -> "LayoutState":
        """Return this state with known fields taken from data.

        Unknown keys are ignored and missing keys keep their current value.
        A window_order that is not a list keeps the current order; repeated
        identifiers keep their first position and unusable ones are dropped.
        """
        known = {f.name for f in fields(self)}
        values = {k: v for k, v in data.items() if k in known}
        if "window_order" in values:
            order = values["window_order"]
            if isinstance(order, (list, tuple)):
                values["window_order"] = tuple(
                    dict.fromkeys(
                        wid for wid in order
                        if wid is not None and isinstance(wid, Hashable)
                    )
                )
            else:
                del values["window_order"]
        return replace(self, **values)


@dataclass(frozen=True)
class MainRatioState(LayoutState):
    """State for layouts with one resizable centre region."""

    main_ratio: float = 0.5


@dataclass(frozen=True)
class MainPaneState(LayoutState):
    """State for layouts with a resizable multi-window main pane."""

    main_pane_count: int = 1
    main_pane_ratio: float = 0.5
