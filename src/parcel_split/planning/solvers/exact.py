# -*- coding: utf-8 -*-
"""
Exact partition search (branch-and-bound).

Public entry point:
    search_best(items, max_weight, cost_fn, enumeration="subset",
                node_budget=None, eps=DEFAULT_EPS) -> (Partition | None, SearchReport)

Finds the cheapest set partition of `items` in which every package weighs at
most `max_weight`. Two enumeration schemes are available:

  subset       Take the lowest-index unassigned item as anchor, try every
               subset of the other unassigned items that fits with it in one
               package, recurse on what is left. Each set partition is
               generated exactly once.

  permutation  For every ordering of the items, cut the sequence left to
               right into prefixes of length 1..remaining. The same partition
               is revisited once per ordering consistent with it, so this
               wastes work (n! orderings) without changing the answer.

Pruning, shared by both schemes:
  - weight: a package that exceeds max_weight abandons the branch;
  - cost:   a partial partition whose cost already reaches the incumbent is
            abandoned (package costs are >= 0, so partial costs only grow).

The incumbent starts at +inf, is threaded through the recursion as a return
value and lives only for one call. It is replaced only by a strictly cheaper
complete partition, so SearchReport.improvements is strictly decreasing.

Run time is exponential in the number of items. Past roughly ten items the
permutation scheme becomes impractical; pass `node_budget` to bound the work.
"""

from __future__ import annotations
import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from parcel_split.business_objects.items import Item
from parcel_split.costing.cost_model import DEFAULT_EPS, evaluate, fits
from parcel_split.planning import Package, Partition, Policy, SearchReport, ShipmentState
from parcel_split.planning.policy import ENUMERATIONS
from .base import PartitionStrategy, Proposal

logger = logging.getLogger(__name__)

CostFn = Callable[[Package], float]

# (incumbent cost, incumbent partition)
Incumbent = Tuple[float, Optional[Partition]]

_LARGE_INPUT = 10


@dataclass
class _SearchContext:
    """Per-call inputs and counters. Never shared between searches."""
    items: Sequence[Item]
    max_weight: float
    cost_fn: CostFn
    eps: float
    node_budget: Optional[int] = None
    nodes: int = 0
    pruned_by_weight: int = 0
    pruned_by_cost: int = 0
    improvements: List[float] = field(default_factory=list)
    stopped: bool = False

    def tick(self) -> bool:
        """Count one node; False once the budget is used up."""
        if self.stopped:
            return False
        if self.node_budget is not None and self.nodes >= self.node_budget:
            self.stopped = True
            return False
        self.nodes += 1
        return True

    def fits(self, weight: float) -> bool:
        return fits(weight, self.max_weight, self.eps)

    def package(self, indices: Sequence[int]) -> Package:
        return tuple(self.items[i] for i in indices)

    def complete(self, path: Partition, path_cost: float, best: Incumbent) -> Incumbent:
        if path_cost < best[0]:
            self.improvements.append(path_cost)
            logger.debug("New incumbent %.4f with %d packages", path_cost, len(path))
            return path_cost, list(path)
        return best

    def report(self, enumeration: str) -> SearchReport:
        return SearchReport(
            enumeration=enumeration,
            nodes=self.nodes,
            pruned_by_weight=self.pruned_by_weight,
            pruned_by_cost=self.pruned_by_cost,
            improvements=tuple(self.improvements),
            complete=not self.stopped,
        )


# -----------------------------
# Subset-cover enumeration
# -----------------------------

def _blocks_with(anchor: int, rest: Tuple[int, ...], ctx: _SearchContext) -> Iterator[Tuple[int, ...]]:
    """Yield every weight-valid block containing `anchor` plus a subset of `rest`."""
    w0 = float(ctx.items[anchor].weight)
    if not ctx.fits(w0):
        ctx.pruned_by_weight += 1
        return

    chosen: List[int] = [anchor]

    def extend(start: int, load: float) -> Iterator[Tuple[int, ...]]:
        yield tuple(chosen)
        for j in range(start, len(rest)):
            idx = rest[j]
            w = load + float(ctx.items[idx].weight)
            if not ctx.fits(w):
                ctx.pruned_by_weight += 1
                continue
            chosen.append(idx)
            yield from extend(j + 1, w)
            chosen.pop()

    yield from extend(0, w0)


def _search_subsets(
    remaining: Tuple[int, ...],
    path: Partition,
    path_cost: float,
    best: Incumbent,
    ctx: _SearchContext,
) -> Incumbent:
    if not remaining:
        return ctx.complete(path, path_cost, best)

    anchor, rest = remaining[0], remaining[1:]
    for block in _blocks_with(anchor, rest, ctx):
        if not ctx.tick():
            break
        pkg = ctx.package(block)
        cost = path_cost + ctx.cost_fn(pkg)
        if cost >= best[0]:
            ctx.pruned_by_cost += 1
            continue
        taken = set(block)
        left = tuple(i for i in rest if i not in taken)
        path.append(pkg)
        best = _search_subsets(left, path, cost, best, ctx)
        path.pop()
    return best


# -----------------------------
# Permutation-then-cut enumeration
# -----------------------------

def _search_cuts(
    order: Tuple[int, ...],
    start: int,
    path: Partition,
    path_cost: float,
    best: Incumbent,
    ctx: _SearchContext,
) -> Incumbent:
    if start == len(order):
        return ctx.complete(path, path_cost, best)

    load = 0.0
    for end in range(start + 1, len(order) + 1):
        if not ctx.tick():
            break
        load += float(ctx.items[order[end - 1]].weight)
        if not ctx.fits(load):
            # longer prefixes only get heavier
            ctx.pruned_by_weight += 1
            break
        pkg = ctx.package(order[start:end])
        cost = path_cost + ctx.cost_fn(pkg)
        if cost >= best[0]:
            ctx.pruned_by_cost += 1
            continue
        path.append(pkg)
        best = _search_cuts(order, end, path, cost, best, ctx)
        path.pop()
    return best


# -----------------------------
# Entry point
# -----------------------------

def search_best(
    items: Sequence[Item],
    max_weight: float,
    cost_fn: CostFn,
    *,
    enumeration: str = "subset",
    node_budget: Optional[int] = None,
    eps: float = DEFAULT_EPS,
) -> Tuple[Optional[Partition], SearchReport]:
    """
    Find the minimum-cost weight-valid partition of `items`.

    Parameters
    ----------
    items : Sequence[Item]
        Items to partition (order only affects tie-breaking between equal-cost partitions).
    max_weight : float
        Upper bound on every package's total weight.
    cost_fn : Callable[[Package], float]
        Non-negative package cost (normally cost_model.evaluate(...).cost).
    enumeration : str
        "subset" (each partition once) or "permutation" (reference scheme).
    node_budget : int | None
        Stop after expanding this many search nodes; None = exhaustive.
    eps : float
        Weight tolerance.

    Returns
    -------
    (Partition | None, SearchReport)
        The best partition, or None if `items` is empty, if no valid
        partition exists, or if the budget ran out before the first one.
    """
    if enumeration not in ENUMERATIONS:
        raise ValueError(
            f"Unknown enumeration: {enumeration}. Expected one of: {', '.join(ENUMERATIONS)}."
        )

    ctx = _SearchContext(
        items=list(items),
        max_weight=max_weight,
        cost_fn=cost_fn,
        eps=eps,
        node_budget=node_budget,
    )
    n = len(ctx.items)
    if n == 0:
        return None, ctx.report(enumeration)

    if n > _LARGE_INPUT and node_budget is None:
        logger.warning(
            "Exact search over %d items without a node budget (%s enumeration); "
            "run time grows exponentially.", n, enumeration,
        )

    best: Incumbent = (math.inf, None)
    if enumeration == "subset":
        best = _search_subsets(tuple(range(n)), [], 0.0, best, ctx)
    else:
        for order in itertools.permutations(range(n)):
            if ctx.stopped:
                break
            best = _search_cuts(order, 0, [], 0.0, best, ctx)

    report = ctx.report(enumeration)
    if not report.complete:
        logger.warning(
            "Exact search stopped after %d nodes (budget %s); result may not be optimal.",
            report.nodes, node_budget,
        )
    logger.info(
        "Exact search (%s) over %d items: %d nodes, %d weight prunes, %d cost prunes, best=%s",
        enumeration, n, report.nodes, report.pruned_by_weight, report.pruned_by_cost,
        "none" if best[1] is None else f"{best[0]:.4f}",
    )
    return best[1], report


# -----------------------------
# Strategy adapter
# -----------------------------

class ExactStrategy(PartitionStrategy):
    """Branch-and-bound over all weight-valid partitions."""
    name = "exact"

    def propose(self, state: ShipmentState, policy: Policy) -> Proposal:
        params = state.params

        def cost_fn(pkg: Package) -> float:
            return evaluate(pkg, params, eps=policy.eps).cost

        best, report = search_best(
            state.items,
            params.max_weight,
            cost_fn,
            enumeration=policy.enumeration,
            node_budget=policy.node_budget,
            eps=policy.eps,
        )
        if best is None:
            return Proposal(stats=report)
        return Proposal(partitions=[best], stats=report)
