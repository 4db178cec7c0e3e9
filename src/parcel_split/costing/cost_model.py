# -*- coding: utf-8 -*-
"""
Package cost model shared by every partitioning strategy.

Public entry point:
    evaluate(package, params, eps=DEFAULT_EPS) -> CostInfo

Billing rules:
  - total_weight    = sum of item weights
  - billable_weight = ceil(total_weight)           (next whole unit)
  - cost            = billable_weight * unit_cost
                      + delivery_fee  iff total_weight < min_delivery_weight

`eps` absorbs floating point noise from summing weights, so 0.1 + 0.2 is
billed as 1 unit and a package summing to 3.0000000000000004 as 3.

Both boundaries move by `eps`: a total within `eps` above a whole number is
billed at that number (4.0000000005 -> 4 units), and a total within `eps`
below `min_delivery_weight` owes no fee (3.9999999995 with a threshold of 4).
Pass eps=0 for exact comparisons.
"""

from __future__ import annotations
import math
from typing import Iterable, Sequence

from parcel_split.business_objects import DEFAULT_EPS, BillingParams, Item, StateValidationError
from parcel_split.planning.solution import CostInfo


def package_weight(items: Iterable[Item]) -> float:
    return sum(float(it.weight) for it in items)


def fits(weight: float, max_weight: float, eps: float = DEFAULT_EPS) -> bool:
    """True if `weight` respects `max_weight` (within tolerance)."""
    return weight <= max_weight + eps


def billable_weight(total_weight: float, eps: float = DEFAULT_EPS) -> int:
    return max(0, math.ceil(total_weight - eps))


def surcharge_applies(total_weight: float, params: BillingParams, eps: float = DEFAULT_EPS) -> bool:
    # strict: a package weighing exactly the threshold is not surcharged
    return total_weight < params.min_delivery_weight - eps


def evaluate(
    package: Sequence[Item],
    params: BillingParams,
    eps: float = DEFAULT_EPS,
) -> CostInfo:
    """
    Price a single package.

    Parameters
    ----------
    package : Sequence[Item]
        Non-empty group of items shipped together.
    params : BillingParams
        Unit cost, delivery fee and surcharge threshold.
    eps : float
        Tolerance for rounding and threshold comparisons.

    Returns
    -------
    CostInfo
        cost, billable_weight and total_weight of the package.
    """
    if not package:
        raise StateValidationError("Cannot evaluate an empty package.")

    total = package_weight(package)
    billable = billable_weight(total, eps)
    cost = billable * float(params.unit_cost)
    if surcharge_applies(total, params, eps):
        cost += float(params.delivery_fee)
    return CostInfo(cost=cost, billable_weight=billable, total_weight=total)


def partition_cost(
    partition: Iterable[Sequence[Item]],
    params: BillingParams,
    eps: float = DEFAULT_EPS,
) -> float:
    """Sum of package costs over a whole partition."""
    return sum(evaluate(pkg, params, eps).cost for pkg in partition)
