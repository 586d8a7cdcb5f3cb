"""
Layout System

Provides window layout algorithms and management.
"""

from .layout_base import (
    FrameAssignments,
    Layout,
    LayoutCommand,
    LayoutManager,
    RatioLayout,
    Workspace,
    tile_columns,
)
from .layout_uniform_columns import UniformColumnsLayout
from .layout_centered_primary import CenteredPrimaryLayout
from .layout_centered_columns import CenteredColumnsLayout
from .layout_centered_twin import CenteredTwinLayout

__all__ = [
    # Base classes
    "FrameAssignments",
    "Layout",
    "LayoutCommand",
    "LayoutManager",
    "RatioLayout",
    "Workspace",
    "tile_columns",
    # Layout implementations
    "UniformColumnsLayout",
    "CenteredPrimaryLayout",
    "CenteredColumnsLayout",
    "CenteredTwinLayout",
]
