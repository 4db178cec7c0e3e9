# -*- coding: utf-8 -*-
"""
Run-time state containers for the package-splitting pipeline.

This module defines:
  - OpenBin:       mutable bin used while greedy packing
  - ShipmentState: immutable input snapshot (items + billing params)

Notes
-----
- Business (timeless) entities live in `business_objects/`:
  * business_objects.items.Item
  * business_objects.billing.BillingParams
- Planning/runtime entities (below) are specific to executing a solve.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from parcel_split.business_objects import DEFAULT_EPS, BillingParams, Item, StateValidationError


# ----------------------------
# Runtime (mutable) container
# ----------------------------

@dataclass
class OpenBin:
    """
    Mutable bin used during greedy packing.

    Attributes
    ----------
    capacity : float
        Weight limit (max_weight of the run).
    items : list[Item]
        Items placed so far, in placement order.
    load : float
        Current total weight.
    """
    capacity: float
    items: List[Item] = field(default_factory=list)
    load: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:  # type: ignore[override]
        self.load = sum(float(it.weight) for it in self.items)

    @property
    def remaining(self) -> float:
        return self.capacity - self.load

    def can_fit(self, item: Item, eps: float = DEFAULT_EPS) -> bool:
        """Check if item weight fits (within tolerance)."""
        return float(item.weight) <= self.remaining + eps

    def place(self, item: Item, eps: float = DEFAULT_EPS) -> bool:
        """
        Attempt to place the item. Returns True if committed, False otherwise.
        No overfill is allowed (beyond eps tolerance).
        """
        if self.can_fit(item, eps=eps):
            self.force(item)
            return True
        return False

    def force(self, item: Item) -> None:
        """Place without a capacity check (used to open a bin)."""
        self.items.append(item)
        self.load += float(item.weight)


# ----------------------------
# Immutable input snapshot
# ----------------------------

@dataclass(frozen=True)
class ShipmentState:
    """
    Immutable problem input for an optimization run.

    Attributes
    ----------
    items : list[Item]
        All items to ship (each exactly once). Treat as read-only.
    params : BillingParams
        Package weight bound and billing knobs.
    """
    items: List[Item]
    params: BillingParams

    def __post_init__(self) -> None:  # type: ignore[override]
        if not isinstance(self.params, BillingParams):
            raise StateValidationError("ShipmentState.params must be a BillingParams instance.")
        for idx, it in enumerate(self.items):
            if not isinstance(it, Item):
                raise StateValidationError(f"ShipmentState.items[{idx}] is not an Item: {it!r}")

    @property
    def total_weight(self) -> float:
        return sum(float(it.weight) for it in self.items)
