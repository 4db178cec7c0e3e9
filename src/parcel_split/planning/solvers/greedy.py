# -*- coding: utf-8 -*-
"""
Fast strategy: a single first-fit-decreasing grouping.
"""

from __future__ import annotations

from parcel_split.heuristics.first_fit.packer import pack
from parcel_split.planning import Policy, ShipmentState
from .base import PartitionStrategy, Proposal


class GreedyStrategy(PartitionStrategy):
    """Pack by weight only; the optimizer prices the grouping afterwards."""
    name = "fast"

    def propose(self, state: ShipmentState, policy: Policy) -> Proposal:
        partition = pack(state.items, state.params.max_weight, eps=policy.eps)
        if not partition:
            return Proposal()
        return Proposal(partitions=[partition])
