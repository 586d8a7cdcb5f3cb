"""
Configuration

LayoutConfig and the helper that wires a LayoutManager onto the event bus.
"""

from __future__ import annotations
import os
import time
from dataclasses import dataclass, field
from typing import List, Optional

from pubsub import pub

from .layouts import (
    CenteredColumnsLayout,
    CenteredPrimaryLayout,
    CenteredTwinLayout,
    Layout,
    LayoutManager,
    UniformColumnsLayout,
)


@dataclass
class LayoutConfig:
    """Layout host configuration."""

    # Layouts (default to all built-in layouts)
    layouts: Optional[List[Layout]] = None

    # Name of the layout active at startup (defaults to the first one)
    default_layout: Optional[str] = None

    # Print every bus event (also enabled by the CTILE_DEBUG environment variable)
    debug: bool = field(default_factory=lambda: bool(os.getenv("CTILE_DEBUG")))

    def __post_init__(self):
        """Validate layout names."""
        names = [layout.name for layout in self.get_layouts()]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate layout names: {', '.join(duplicates)}")
        if self.default_layout is not None and self.default_layout not in names:
            raise ValueError(
                f"Unknown default_layout: {self.default_layout}. "
                f"Available: {', '.join(names)}"
            )

    def get_layouts(self) -> List[Layout]:
        """Get configured layouts or default layouts."""
        if self.layouts is not None:
            return self.layouts

        return [
            UniformColumnsLayout(),
            CenteredPrimaryLayout(),
            CenteredColumnsLayout(),
            CenteredTwinLayout(),
        ]


def debug_event_logger(topic=pub.AUTO_TOPIC, **kwargs):
    """Log all events published on the event bus."""
    timestamp = time.strftime("%H:%M:%S")
    topic_name = topic.getName()
    data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
    print(f"[{timestamp}] EVENT: {topic_name} | {data_str}")


def create_layout_manager(config: Optional[LayoutConfig] = None) -> LayoutManager:
    """Create a LayoutManager on the global bus.

    Architecture:
    1. Read configuration
    2. Optionally subscribe the debug logger to every topic
    3. Create the manager - it self-subscribes to events
    """
    config = config or LayoutConfig()

    if config.debug:
        pub.subscribe(debug_event_logger, pub.ALL_TOPICS)

    return LayoutManager(
        bus=pub,
        layouts=config.get_layouts(),
        default_layout=config.default_layout,
    )
