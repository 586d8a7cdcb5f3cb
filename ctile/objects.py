"""
Window Objects

Layouts only ever read a window's object_id, so any host object exposing one
can be passed in. Window is a minimal record for hosts that have nothing
better, and for tests.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable


@dataclass(frozen=True)
class Window:
    """A host window as seen by the layouts."""

    object_id: Hashable
    title: str = ""
    app_id: str = ""
