# -*- coding: utf-8 -*-
"""
Solution and outcome models for package-splitting results.

These data classes define the shape of outputs produced by the optimizer
and consumed by the tracker/reporting layers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from parcel_split.business_objects.items import Item

# A package is an (ordered for display) group of items; a partition is the
# full list of packages covering every input item exactly once.
Package = Tuple[Item, ...]
Partition = List[Package]


@dataclass(frozen=True)
class CostInfo:
    """
    Evaluated cost of a single package.

    Attributes
    ----------
    cost : float
        Billable weight times unit cost, plus the delivery fee if surcharged.
    billable_weight : int
        Ceiling of total_weight.
    total_weight : float
        Sum of item weights.
    """
    cost: float
    billable_weight: int
    total_weight: float


@dataclass(frozen=True)
class PackageCost:
    """A package together with its cost breakdown."""
    items: Package
    info: CostInfo

    @property
    def cost(self) -> float:
        return self.info.cost

    @property
    def billable_weight(self) -> int:
        return self.info.billable_weight

    @property
    def total_weight(self) -> float:
        return self.info.total_weight

    @property
    def item_names(self) -> Tuple[str, ...]:
        return tuple(it.name for it in self.items)


@dataclass(frozen=True)
class SearchReport:
    """
    Diagnostics of one exact search.

    Attributes
    ----------
    enumeration : str
        "subset" or "permutation".
    nodes : int
        Number of expanded search nodes (candidate blocks tried).
    pruned_by_weight : int
        Branches abandoned because a block exceeded max_weight.
    pruned_by_cost : int
        Branches abandoned because the partial cost reached the incumbent.
    improvements : tuple[float, ...]
        Incumbent costs in the order they were found (strictly decreasing).
    complete : bool
        False if a node budget stopped the search before exhausting it.
    """
    enumeration: str
    nodes: int = 0
    pruned_by_weight: int = 0
    pruned_by_cost: int = 0
    improvements: Tuple[float, ...] = ()
    complete: bool = True


@dataclass(frozen=True)
class Result:
    """
    Cheapest grouping found for a run.

    Attributes
    ----------
    total_cost : float
        Sum of package costs.
    packages : tuple[PackageCost, ...]
        Chosen grouping with per-package breakdown.
    mode : str
        Strategy that produced it ("exact" | "fast").
    stats : SearchReport | None
        Exact-search diagnostics (None for the greedy strategy).
    oversize : tuple[str, ...]
        Names of items shipped in an over-weight package. Only ever
        non-empty when Policy.allow_oversize is enabled.
    """
    total_cost: float
    packages: Tuple[PackageCost, ...]
    mode: str
    stats: Optional[SearchReport] = None
    oversize: Tuple[str, ...] = field(default=())

    feasible = True

    @property
    def partition(self) -> Partition:
        return [pc.items for pc in self.packages]


@dataclass(frozen=True)
class Infeasible:
    """
    Explicit "no feasible solution" outcome.

    Attributes
    ----------
    reason : str
        "no_items" | "item_exceeds_max_weight" | "no_valid_partition" |
        "budget_exhausted" (node budget ran out before any complete grouping).
    mode : str
        Strategy that was asked.
    item_names : tuple[str, ...]
        Offending items, when the reason names any.
    stats : SearchReport | None
        Exact-search diagnostics, if a search ran.
    """
    reason: str
    mode: str
    item_names: Tuple[str, ...] = ()
    stats: Optional[SearchReport] = None

    feasible = False


Outcome = Union[Result, Infeasible]
