# -*- coding: utf-8 -*-
"""
Optimizer façade: single synchronous entry point for package splitting.

Pipeline per call:
  1) Snapshot the request into an immutable ShipmentState.
  2) Reject infeasible input up front (no items, items heavier than max_weight).
  3) Dispatch to the strategy registered for `mode` ("exact" | "fast").
  4) Price every proposed partition with the cost model; keep the cheapest.
  5) Optionally hand the outcome to a Tracker for CSV artifacts.

Return:
  - Result      (total cost + per-package breakdown), or
  - Infeasible  (explicit reason; never a Result with an undefined cost).

Oversize items (heavier than max_weight on their own) make every mode
infeasible, except fast mode with Policy.allow_oversize=True: that keeps
the greedy packer's behaviour of shipping such an item alone in an
over-weight package, and lists it in Result.oversize.
"""

from __future__ import annotations
import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from parcel_split.business_objects import BillingParams, Item, StateValidationError
from parcel_split.costing.cost_model import DEFAULT_EPS, evaluate, fits
from parcel_split.heuristics.first_fit.packer import oversize_items
from parcel_split.planning import (
    Infeasible,
    Outcome,
    PackageCost,
    Partition,
    Policy,
    Result,
    ShipmentState,
)
from parcel_split.planning.solvers.base import PartitionStrategy
from parcel_split.planning.solvers.exact import ExactStrategy
from parcel_split.planning.solvers.greedy import GreedyStrategy
from .tracker import Tracker

logger = logging.getLogger(__name__)

STRATEGIES: Dict[str, PartitionStrategy] = {
    "exact": ExactStrategy(),
    "fast": GreedyStrategy(),
}

# Legacy mode names accepted from the calculator form
MODE_ALIASES: Dict[str, str] = {
    "optimal": "exact",
}


def resolve_mode(mode: str) -> str:
    key = MODE_ALIASES.get(mode, mode)
    if key not in STRATEGIES:
        raise ValueError(
            f"Unknown optimization mode: {mode}. "
            f"Expected one of: {', '.join(sorted(set(STRATEGIES) | set(MODE_ALIASES)))}."
        )
    return key


def price_partition(
    partition: Partition,
    params: BillingParams,
    eps: float,
) -> Tuple[float, Tuple[PackageCost, ...]]:
    """Total cost and per-package breakdown of one partition."""
    packages = tuple(PackageCost(items=tuple(pkg), info=evaluate(pkg, params, eps=eps)) for pkg in partition)
    return sum(pc.cost for pc in packages), packages


def optimize(
    items: Sequence[Item],
    params: BillingParams,
    mode: Optional[str] = None,
    policy: Optional[Policy] = None,
    tracker: Optional[Tracker] = None,
) -> Outcome:
    """
    Split `items` into weight-bounded packages at minimum billing cost.

    Parameters
    ----------
    items : Sequence[Item]
        Items to ship. Read-only during the run.
    params : BillingParams
        max_weight and billing knobs.
    mode : str | None
        "exact" (alias "optimal") or "fast". Defaults to policy.mode.
    policy : Policy | None
        Search/packing knobs; defaults to Policy().
    tracker : Tracker | None
        If provided, writes CSV artifacts for the outcome.

    Returns
    -------
    Result | Infeasible
    """
    if policy is None:
        policy = Policy()
    key = resolve_mode(mode if mode is not None else policy.mode)
    state = ShipmentState(items=list(items), params=params)

    outcome = _solve(state, policy, key)

    if tracker is not None:
        tracker.record(state, outcome, eps=policy.eps)
    return outcome


def _solve(state: ShipmentState, policy: Policy, mode: str) -> Outcome:
    if not state.items:
        logger.info("No items to ship; nothing to optimize.")
        return Infeasible(reason="no_items", mode=mode)

    heavy = oversize_items(state.items, state.params.max_weight, eps=policy.eps)
    heavy_names = tuple(it.name for it in heavy)
    if heavy and not (mode == "fast" and policy.allow_oversize):
        logger.info("Items heavier than max_weight=%s: %s", state.params.max_weight, ", ".join(heavy_names))
        return Infeasible(reason="item_exceeds_max_weight", mode=mode, item_names=heavy_names)

    proposal = STRATEGIES[mode].propose(state, policy)
    if not proposal.partitions:
        incomplete = proposal.stats is not None and not proposal.stats.complete
        reason = "budget_exhausted" if incomplete else "no_valid_partition"
        return Infeasible(reason=reason, mode=mode, stats=proposal.stats)

    bound = math.inf if heavy else state.params.max_weight
    best_cost = math.inf
    best_packages: Tuple[PackageCost, ...] = ()
    for partition in proposal.partitions:
        problems = check_partition(partition, state.items, bound, eps=policy.eps)
        if problems:
            raise StateValidationError(f"Strategy '{mode}' proposed an invalid partition: {'; '.join(problems)}")
        total, packages = price_partition(partition, state.params, policy.eps)
        if total < best_cost:
            best_cost, best_packages = total, packages

    if heavy:
        logger.warning(
            "Returning over-weight packages for items heavier than max_weight=%s: %s",
            state.params.max_weight, ", ".join(heavy_names),
        )

    logger.info("Mode %s: %d packages, total cost %.2f", mode, len(best_packages), best_cost)
    return Result(
        total_cost=best_cost,
        packages=best_packages,
        mode=mode,
        stats=proposal.stats,
        oversize=heavy_names,
    )


def check_partition(partition: Partition, items: Sequence[Item], max_weight: float, eps: float = DEFAULT_EPS) -> List[str]:
    """
    List invariant violations of `partition` against `items`.

    Checks that no package is empty, every package respects max_weight and the
    packages cover the input items exactly once (by identity). Returns an
    empty list for a valid partition.
    """
    problems: List[str] = []
    seen: Dict[int, int] = {}
    for idx, pkg in enumerate(partition):
        if not pkg:
            problems.append(f"package {idx} is empty")
            continue
        weight = sum(float(it.weight) for it in pkg)
        if not fits(weight, max_weight, eps):
            problems.append(f"package {idx} weighs {weight} > {max_weight}")
        for it in pkg:
            seen[id(it)] = seen.get(id(it), 0) + 1

    expected: Dict[int, int] = {}
    for it in items:
        expected[id(it)] = expected.get(id(it), 0) + 1
    if seen != expected:
        problems.append("packages do not cover the input items exactly once")
    return problems
