"""
Window Ordering

Keeps the window-to-position mapping stable across incremental changes.

Hosts report windows in whatever order they happen to enumerate them, often
most-recently-focused first. Tiling directly in that order makes windows jump
around every time focus moves. Layouts instead remember an order in their
state, update it with reconcile() when the window set changes, and apply it
with stabilize() before partitioning.
"""

from __future__ import annotations
from typing import Dict, Hashable, Iterable, List, Sequence, Tuple, TypeVar

W = TypeVar("W")


def window_id(window) -> Hashable:
    """Identifier of a host window."""
    return window.object_id


def stabilize(windows: Iterable[W], order: Sequence[Hashable]) -> List[W]:
    """
    Arrange windows according to a remembered order.

    Windows whose identifier appears in order come first, in that order.
    Windows not mentioned in order follow in their input order. Identifiers
    in order that match no window are skipped.

    Args:
        windows: Windows currently visible
        order: Remembered identifier order

    Returns:
        A permutation of windows containing each window exactly once
    """
    by_id: Dict[Hashable, W] = {}
    for window in windows:
        by_id.setdefault(window_id(window), window)

    ordered: List[W] = []
    for wid in order:
        window = by_id.pop(wid, None)
        if window is not None:
            ordered.append(window)

    # Dicts keep insertion order, so leftovers are still in input order
    ordered.extend(by_id.values())
    return ordered


def is_exact_swap(old: Sequence[Hashable], new: Sequence[Hashable]) -> bool:
    """Whether new is old with exactly two positions transposed."""
    if len(old) != len(new):
        return False
    diffs = [i for i, (a, b) in enumerate(zip(old, new)) if a != b]
    if len(diffs) != 2:
        return False
    i, j = diffs
    return old[i] == new[j] and old[j] == new[i]


def reconcile(
    new_ids: Sequence[Hashable], old_order: Sequence[Hashable]
) -> Tuple[Hashable, ...]:
    """
    Update a remembered order after the host reports a new window list.

    Args:
        new_ids: Identifiers of the windows now present, in host order
        old_order: Previously remembered order

    Returns:
        The new remembered order. If membership is unchanged, this is new_ids
        when it is a single swap of old_order (an intentional reorder) and
        old_order otherwise. If membership changed, surviving identifiers keep
        their relative order and new ones are appended in host order.
    """
    old_order = tuple(old_order)
    new_set = set(new_ids)

    if len(old_order) == len(new_ids) and all(wid in new_set for wid in old_order):
        if is_exact_swap(old_order, new_ids):
            return tuple(new_ids)
        return old_order

    reconciled = [wid for wid in old_order if wid in new_set]
    seen = set(reconciled)
    for wid in new_ids:
        if wid not in seen:
            reconciled.append(wid)
            seen.add(wid)
    return tuple(reconciled)
