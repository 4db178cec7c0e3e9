# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for the package-splitting optimizer.

Strategy selection:
  - mode: "exact" | "fast"   ("optimal" is accepted as an alias of "exact")

Exact search:
  - enumeration: "subset" | "permutation"
      * "subset"      -> every set partition generated exactly once
      * "permutation" -> permutation-then-cut; revisits each partition once per
                         consistent ordering (slow, kept for reference runs)
  - node_budget: optional cap on expanded search nodes

Greedy packing:
  - allow_oversize: keep an item heavier than max_weight alone in its own
    (over-weight) package instead of rejecting the run

Numerics:
  - eps: tolerance for weight and billing comparisons
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from parcel_split.business_objects import DEFAULT_EPS

ENUMERATIONS = ("subset", "permutation")


@dataclass(frozen=True)
class Policy:
    """
    Optimizer knobs (pure data holder).

    Attributes
    ----------
    mode : str
        Default strategy used when optimize() is called without a mode.
    enumeration : str
        Exact-search enumeration scheme: "subset" | "permutation".
    node_budget : int | None
        Max number of search nodes the exact search may expand; None = unbounded.
    allow_oversize : bool
        Fast mode only: return the greedy grouping even if an item alone
        exceeds max_weight (the result lists it in Result.oversize).
    eps : float
        Tolerance for weight and billing comparisons.
    """
    # Strategy
    mode: str = "exact"

    # Exact search
    enumeration: str = "subset"
    node_budget: Optional[int] = None

    # Greedy packing
    allow_oversize: bool = False

    # Numerics
    eps: float = DEFAULT_EPS

    def __post_init__(self) -> None:  # type: ignore[override]
        if self.enumeration not in ENUMERATIONS:
            raise ValueError(
                f"Unknown enumeration: {self.enumeration}. Expected one of: {', '.join(ENUMERATIONS)}."
            )
        if self.node_budget is not None and self.node_budget <= 0:
            raise ValueError("Policy.node_budget must be a positive integer or None.")
        if self.eps < 0:
            raise ValueError("Policy.eps must be >= 0.")
