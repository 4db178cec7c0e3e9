# -*- coding: utf-8 -*-
"""
Strategy interface shared by the optimizer's solvers.

A strategy turns a ShipmentState into one or more candidate partitions;
the optimizer prices the candidates and keeps the cheapest.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from parcel_split.planning import Partition, Policy, SearchReport, ShipmentState


@dataclass(frozen=True)
class Proposal:
    """
    Candidate groupings returned by a strategy.

    Attributes
    ----------
    partitions : list[Partition]
        Zero or more candidates. Empty means the strategy found nothing.
    stats : SearchReport | None
        Search diagnostics, when the strategy runs a search.
    """
    partitions: List[Partition] = field(default_factory=list)
    stats: Optional[SearchReport] = None


class PartitionStrategy(ABC):
    """
    Abstract base class for a partitioning strategy ("exact", "fast", ...).
    """
    name: str = ""

    @abstractmethod
    def propose(self, state: ShipmentState, policy: Policy) -> Proposal:
        """Produce candidate partitions for the given input."""
        raise NotImplementedError
