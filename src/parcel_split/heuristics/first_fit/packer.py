# -*- coding: utf-8 -*-
"""
First-fit-decreasing packing by weight.

Public entry point:
    pack(items, max_weight, eps=DEFAULT_EPS) -> Partition

Rules (deterministic):
  1) Stable sort by weight, heaviest first (equal weights keep input order).
  2) Place each item into the first open bin with room for it.
  3) If no open bin has room, open a new bin holding just that item.

The packer looks at weight only. Rounding and the delivery surcharge are
applied afterwards, when the optimizer prices the grouping.

An item heavier than `max_weight` still gets a bin of its own, so the
returned partition then contains an over-weight package. Use
`oversize_items()` to detect that case before trusting the result.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence

from parcel_split.business_objects.items import Item
from parcel_split.costing.cost_model import DEFAULT_EPS
from parcel_split.planning import OpenBin, Partition


def _by_weight_desc(items: Iterable[Item]) -> List[Item]:
    # sorted() is stable: ties keep their relative input order
    return sorted(items, key=lambda it: it.weight, reverse=True)


def _first_fit(item: Item, bins: List[OpenBin], eps: float) -> bool:
    for b in bins:
        if b.place(item, eps=eps):
            return True
    return False


def pack(
    items: Sequence[Item],
    max_weight: float,
    eps: float = DEFAULT_EPS,
) -> Partition:
    """
    Group items into bins with first-fit-decreasing.

    Parameters
    ----------
    items : Sequence[Item]
        Items to pack. Empty input yields an empty partition.
    max_weight : float
        Bin capacity.
    eps : float
        Feasibility tolerance for capacity checks.

    Returns
    -------
    Partition
        Bins in opening order, items in placement order.
    """
    bins: List[OpenBin] = []
    for item in _by_weight_desc(items):
        if not _first_fit(item, bins, eps):
            b = OpenBin(capacity=max_weight)
            b.force(item)
            bins.append(b)
    return [tuple(b.items) for b in bins]


def oversize_items(
    items: Iterable[Item],
    max_weight: float,
    eps: float = DEFAULT_EPS,
) -> List[Item]:
    """Items that exceed `max_weight` on their own (input order)."""
    return [it for it in items if it.weight > max_weight + eps]
